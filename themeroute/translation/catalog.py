"""In-memory translation engine.

Holds a Dictionary (tag -> locale -> text) loaded from JSON files. Inline
translations override the loaded catalog locale by locale; the default
language is used when the active one is missing and fallback is allowed.

Placeholders: ``%``-delimited keys are substituted literally (``%USERNAME%``);
any other key is substituted only in its ``{key}`` form.
"""

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from themeroute.core.types import Dictionary

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<[^>]*>")


class CatalogTranslationEngine:
    """Dictionary-backed TranslationEngine."""

    def __init__(
        self,
        language: str = "en",
        default_language: str = "en",
        dictionary: Dictionary | None = None,
    ):
        self.language = language
        self.default_language = default_language
        self._catalog: Dictionary = {}
        self._inline: Dictionary = {}
        if dictionary:
            self.add_dictionary(dictionary)

    def add_dictionary(self, dictionary: Dictionary) -> None:
        """Add entries to the catalog; later locales win per tag."""
        for tag, locales in dictionary.items():
            self._catalog.setdefault(tag, {}).update(locales)

    def load_json(self, path: str | Path) -> None:
        """Load a JSON dictionary file into the catalog."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        self.add_dictionary(data)
        logger.debug("[I18N] Loaded %d tags from %s", len(data), path)

    def _lookup(self, tag: str) -> dict[str, str] | None:
        """Locales for a tag; inline entries win per locale over the catalog."""
        if tag not in self._inline and tag not in self._catalog:
            return None
        return {**self._catalog.get(tag, {}), **self._inline.get(tag, {})}

    def t(
        self,
        tag: str,
        replacements: Mapping[str, Any],
        fallback_default: bool,
        old_replacements: Mapping[str, Any],
        strip_tags: bool,
    ) -> str:
        locales = self._lookup(tag)
        text = None
        if locales:
            text = locales.get(self.language)
            if text is None and fallback_default:
                text = locales.get(self.default_language)

        if text is None:
            logger.debug("[I18N] No translation for '%s' (language=%s)", tag, self.language)
            return f"not translated ({tag})"

        for key, value in {**old_replacements, **replacements}.items():
            if "%" in key:
                text = text.replace(key, str(value))
            else:
                text = text.replace("{" + key + "}", str(value))

        if strip_tags:
            text = _TAG_RE.sub("", text)
        return text

    def include_inline_translation(self, tag: str, translation: str | Mapping[str, str]) -> None:
        if isinstance(translation, str):
            translation = {self.language: translation}
        self._inline.setdefault(tag, {}).update(translation)

    def get_preferred_translation(self, translations: Mapping[str, str]) -> str:
        if self.language in translations:
            return translations[self.language]
        if self.default_language in translations:
            return translations[self.default_language]
        for text in translations.values():
            return text
        raise ValueError("Nothing to return from translation")
