"""Translation facade and reference engine."""

from themeroute.translation.catalog import CatalogTranslationEngine
from themeroute.translation.facade import Translator, merge_dictionaries

__all__ = [
    "CatalogTranslationEngine",
    "Translator",
    "merge_dictionaries",
]
