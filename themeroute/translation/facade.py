"""Translation facade used by templates.

Thin pass-through to a TranslationEngine. The facade keeps no state of
its own; everything except dictionary merging is delegated.
"""

from collections.abc import Mapping
from typing import Any

from themeroute.core.interfaces import TranslationEngine
from themeroute.core.types import Dictionary


def merge_dictionaries(defaults: Dictionary, overrides: Dictionary) -> Dictionary:
    """Merge translation dictionaries, shaped by ``defaults``.

    For each key in both, the locale mappings are merged with the
    override's locales winning. Keys only in ``defaults`` pass through.
    Keys only in ``overrides`` are dropped. Neither input is modified.

    Example:
        >>> merge_dictionaries({"greet": {"en": "Hi"}}, {"greet": {"fr": "Salut"}, "bye": {"en": "Bye"}})
        {'greet': {'en': 'Hi', 'fr': 'Salut'}}
    """
    merged: Dictionary = {}
    for key, locales in defaults.items():
        if key in overrides:
            merged[key] = {**locales, **overrides[key]}
        else:
            merged[key] = dict(locales)
    return merged


class Translator:
    """Template-facing translation surface."""

    def __init__(self, engine: TranslationEngine):
        self.engine = engine

    def t(
        self,
        tag: str,
        replacements: Mapping[str, Any] | None = None,
        fallback_default: bool = True,
        old_replacements: Mapping[str, Any] | None = None,
        strip_tags: bool = False,
    ) -> str:
        """Translate a tag into the active language.

        Args:
            tag: Translation key
            replacements: Placeholder values substituted into the result
            fallback_default: Use the default language when the active
                one has no translation
            old_replacements: Legacy placeholder values
            strip_tags: Remove markup from the result

        Returns:
            Translated string, as produced by the engine
        """
        return self.engine.t(
            tag,
            replacements or {},
            fallback_default,
            old_replacements or {},
            strip_tags,
        )

    def include_inline_translation(self, tag: str, translation: str | Mapping[str, str]) -> None:
        """Make ``translation`` available for ``tag`` in this session."""
        self.engine.include_inline_translation(tag, translation)

    def get_preferred_translation(self, translations: Mapping[str, str]) -> str:
        """Pick the best entry from a locale -> string mapping."""
        return self.engine.get_preferred_translation(translations)

    @staticmethod
    def merge_dictionaries(defaults: Dictionary, overrides: Dictionary) -> Dictionary:
        """Merge dictionaries. See merge_dictionaries."""
        return merge_dictionaries(defaults, overrides)
