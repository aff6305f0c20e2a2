"""Resource renderers.

A resource renderer receives an already resolved file path and a
read-only context. The locator decides which file; these decide what the
file means.
"""

import os
from collections.abc import Callable, Mapping
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Undefined, select_autoescape


class Jinja2ResourceRenderer:
    """Render resolved files as Jinja2 templates.

    The loader is rooted at the resolved file's directory, so
    ``{% include %}`` and ``{% extends %}`` work relative to it. A fresh
    environment is built per call; compiled templates are not kept
    between renders.
    """

    def __init__(self, strict: bool = False, autoescape: bool | None = None):
        """Initialize renderer.

        Args:
            strict: Raise on undefined variables instead of rendering ''
            autoescape: Force autoescaping on/off (None = by file extension)
        """
        self.strict = strict
        self.autoescape = autoescape

    def _environment(self, directory: str) -> Environment:
        autoescape = (
            select_autoescape(["html", "htm", "xml", "xhtml"])
            if self.autoescape is None
            else self.autoescape
        )
        return Environment(
            loader=FileSystemLoader(directory),
            autoescape=autoescape,
            undefined=StrictUndefined if self.strict else Undefined,
        )

    def render(self, path: str, context: Mapping[str, Any]) -> str:
        directory, filename = os.path.split(path)
        tmpl = self._environment(directory).get_template(filename)
        return tmpl.render(dict(context))


class CallableResourceRenderer:
    """Adapt a plain ``(path, context) -> str`` function."""

    def __init__(self, func: Callable[[str, Mapping[str, Any]], str]):
        self.func = func

    def render(self, path: str, context: Mapping[str, Any]) -> str:
        return self.func(path, context)
