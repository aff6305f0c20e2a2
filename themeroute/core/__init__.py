"""Core types and interfaces for themeroute.

All identifiers are frozen dataclasses with attribute access.
Collaborators (translation engine, resource renderer, module lookup)
are described as protocols.
"""

from themeroute.core.interfaces import ModuleDirResolver, ResourceRenderer, TranslationEngine
from themeroute.core.types import (
    DEFAULT_MODULE,
    Dictionary,
    RenderContext,
    ResolvedPath,
    TemplateIdentifier,
    ThemeIdentifier,
    parse_identifier,
)

__all__ = [
    # Types
    "DEFAULT_MODULE",
    "Dictionary",
    "RenderContext",
    "ResolvedPath",
    "TemplateIdentifier",
    "ThemeIdentifier",
    "parse_identifier",
    # Interfaces
    "ModuleDirResolver",
    "ResourceRenderer",
    "TranslationEngine",
]
