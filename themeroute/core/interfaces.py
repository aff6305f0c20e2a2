"""Collaborator interfaces.

The locator and renderer never depend on concrete implementations of
these. Anything with matching methods can be passed in.
"""

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

# Module name -> module root directory. Raises for unknown modules.
ModuleDirResolver = Callable[[str], str]


@runtime_checkable
class ResourceRenderer(Protocol):
    """Turns a resolved resource file plus a context into output."""

    def render(self, path: str, context: Mapping[str, Any]) -> str: ...


@runtime_checkable
class TranslationEngine(Protocol):
    """String lookup backend used by the translation facade."""

    def t(
        self,
        tag: str,
        replacements: Mapping[str, Any],
        fallback_default: bool,
        old_replacements: Mapping[str, Any],
        strip_tags: bool,
    ) -> str: ...

    def include_inline_translation(self, tag: str, translation: str | Mapping[str, str]) -> None: ...

    def get_preferred_translation(self, translations: Mapping[str, str]) -> str: ...
