"""Core data types for themeroute.

Identifiers are frozen dataclasses parsed once from ``module:name`` strings.
The same parser serves template identifiers and theme selectors.
"""

from dataclasses import dataclass
from typing import Any

# Sentinel module name for templates that live in the base template directory
DEFAULT_MODULE = "default"

# Type aliases
ResolvedPath = str
RenderContext = dict[str, Any]
Dictionary = dict[str, dict[str, str]]


def parse_identifier(raw: str) -> tuple[str | None, str]:
    """Split a ``module:name`` string on the first colon.

    Never fails. Without a colon the module is None and the name is the
    whole string. An empty qualifier (``":name"``) also yields None.

    Examples:
        >>> parse_identifier("mod:path/to/x")
        ('mod', 'path/to/x')
        >>> parse_identifier("path/to/x")
        (None, 'path/to/x')
    """
    module, sep, name = raw.partition(":")
    if not sep:
        return None, raw
    return (module or None), name


@dataclass(frozen=True)
class TemplateIdentifier:
    """Logical template name, optionally qualified by the owning module."""

    name: str
    module: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "TemplateIdentifier":
        module, name = parse_identifier(raw)
        return cls(name=name, module=module)

    @property
    def is_default(self) -> bool:
        """True when the template belongs to the base template directory."""
        return self.module is None or self.module == DEFAULT_MODULE

    @property
    def module_or_default(self) -> str:
        return DEFAULT_MODULE if self.module is None else self.module

    def __str__(self) -> str:
        if self.module is None:
            return self.name
        return f"{self.module}:{self.name}"


@dataclass(frozen=True)
class ThemeIdentifier:
    """Theme selector. No module means the base template directory."""

    name: str
    module: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "ThemeIdentifier":
        module, name = parse_identifier(raw)
        return cls(name=name, module=module)

    def __str__(self) -> str:
        if self.module is None:
            return self.name
        return f"{self.module}:{self.name}"
