"""themeroute - themeable, modular template resolution.

Resolves ``module:name`` template identifiers against a configured theme,
falling back from theme override to module template to the base template
directory, and renders the file found with a translation-aware context.

Usage:
    from themeroute import Template, ThemerouteSettings

    settings = ThemerouteSettings(theme_use="branding:dark")
    page = Template(settings, "login:form.html")
    page.data["username"] = "alice"
    html = page.show()
"""

from themeroute.config import ThemerouteSettings
from themeroute.core import TemplateIdentifier, ThemeIdentifier, parse_identifier
from themeroute.exceptions import TemplateNotFoundError, ThemerouteError, UnknownModuleError
from themeroute.modules import ModuleRegistry
from themeroute.rendering import (
    CallableResourceRenderer,
    Jinja2ResourceRenderer,
    Template,
    TemplateRenderer,
)
from themeroute.template_resolver import TemplateLocator
from themeroute.translation import CatalogTranslationEngine, Translator, merge_dictionaries

__all__ = [
    # Configuration
    "ThemerouteSettings",
    # Identifiers
    "TemplateIdentifier",
    "ThemeIdentifier",
    "parse_identifier",
    # Resolution
    "ModuleRegistry",
    "TemplateLocator",
    # Rendering
    "CallableResourceRenderer",
    "Jinja2ResourceRenderer",
    "Template",
    "TemplateRenderer",
    # Translation
    "CatalogTranslationEngine",
    "Translator",
    "merge_dictionaries",
    # Errors
    "TemplateNotFoundError",
    "ThemerouteError",
    "UnknownModuleError",
]
