"""Template rendering: orchestration, page objects and resource renderers."""

from themeroute.rendering.engines import CallableResourceRenderer, Jinja2ResourceRenderer
from themeroute.rendering.renderer import TemplateRenderer
from themeroute.rendering.template import Template

__all__ = [
    "CallableResourceRenderer",
    "Jinja2ResourceRenderer",
    "Template",
    "TemplateRenderer",
]
