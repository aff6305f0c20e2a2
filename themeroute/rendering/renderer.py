"""Template rendering orchestration.

Resolve the template file through the locator, build the context, hand
both to the resource renderer. Errors from either step reach the caller
unchanged.
"""

import logging
from types import MappingProxyType
from typing import Any

from themeroute.config import ThemerouteSettings
from themeroute.core.interfaces import ResourceRenderer
from themeroute.core.types import RenderContext, ResolvedPath, TemplateIdentifier, ThemeIdentifier
from themeroute.modules import ModuleRegistry
from themeroute.rendering.engines import Jinja2ResourceRenderer
from themeroute.template_resolver import TemplateLocator

logger = logging.getLogger(__name__)


def _as_template(template: TemplateIdentifier | str) -> TemplateIdentifier:
    if isinstance(template, TemplateIdentifier):
        return template
    return TemplateIdentifier.parse(template)


class TemplateRenderer:
    """Renders templates for one configuration.

    Usage:
        renderer = TemplateRenderer(settings)
        context = renderer.new_context(username="alice")
        html = renderer.render("login:form.html", context=context)
    """

    def __init__(
        self,
        settings: ThemerouteSettings,
        locator: TemplateLocator | None = None,
        resource_renderer: ResourceRenderer | None = None,
    ):
        self.settings = settings
        if locator is None:
            modules = ModuleRegistry.from_settings(settings)
            locator = TemplateLocator(settings.get_path_value("templatedir"), modules.get_module_dir)
        self.locator = locator
        self.resource_renderer = resource_renderer or Jinja2ResourceRenderer()

    def new_context(self, **fields: Any) -> RenderContext:
        """Create a render context seeded with ``baseurlpath``."""
        context: RenderContext = {"baseurlpath": self.settings.get_base_url()}
        context.update(fields)
        return context

    def configured_theme(self) -> ThemeIdentifier:
        """Theme parsed from the configured selector."""
        return ThemeIdentifier.parse(self.settings.get_theme())

    def find_template_path(
        self,
        template: TemplateIdentifier | str,
        theme: ThemeIdentifier | None = None,
    ) -> ResolvedPath:
        """Resolve a template to an existing file.

        Args:
            template: Template identifier or ``module:name`` string
            theme: Theme to use (None = configured theme)

        Raises:
            TemplateNotFoundError: No candidate file exists
        """
        return self.locator.resolve(_as_template(template), theme or self.configured_theme())

    def render(
        self,
        template: TemplateIdentifier | str,
        theme: ThemeIdentifier | None = None,
        context: RenderContext | None = None,
    ) -> str:
        """Resolve and render a template.

        Args:
            template: Template identifier or ``module:name`` string
            theme: Theme to use (None = configured theme)
            context: Caller fields, laid over a context seeded with
                ``baseurlpath`` (caller values win)

        Returns:
            Output of the resource renderer
        """
        path = self.find_template_path(template, theme)
        context = {"baseurlpath": self.settings.get_base_url(), **(context or {})}
        logger.debug("[RENDER] Rendering %s from %s", template, path)
        return self.resource_renderer.render(path, MappingProxyType(context))
