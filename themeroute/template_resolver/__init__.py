"""Template path resolution.

Usage:
    from themeroute.template_resolver import TemplateLocator
    from themeroute.core import TemplateIdentifier, ThemeIdentifier

    locator = TemplateLocator(settings.get_path_value("templatedir"), modules.get_module_dir)
    path = locator.resolve(TemplateIdentifier.parse("login:form.html"), ThemeIdentifier.parse("default"))

Themes can override any module's template; modules can override the
base template directory. Presence on disk is the only dispatch rule.
"""

from themeroute.template_resolver.locator import TemplateLocator

__all__ = ["TemplateLocator"]
