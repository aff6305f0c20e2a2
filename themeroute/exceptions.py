"""Exceptions raised by themeroute."""

from collections.abc import Sequence


class ThemerouteError(Exception):
    """Root exception for themeroute."""


class TemplateNotFoundError(ThemerouteError, FileNotFoundError):
    """Raised when neither the primary nor the fallback candidate exists.

    Carries the requested identifier and every path that was tried,
    in search order.
    """

    def __init__(self, template: str, candidates: Sequence[str]) -> None:
        self.template = template
        self.candidates = tuple(candidates)
        tried = ", ".join(f"[{c}]" for c in self.candidates)
        super().__init__(f"Template: Could not find template file [{template}] at {tried}")


class UnknownModuleError(ThemerouteError, LookupError):
    """Raised when a module name has no directory."""

    def __init__(self, module: str) -> None:
        self.module = module
        super().__init__(f"Unknown module '{module}'")
