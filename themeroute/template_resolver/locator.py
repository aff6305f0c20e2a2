"""Template path resolution with theme and module fallback.

Search order for a template ``<module>:<name>`` under theme
``<themeModule>:<themeName>``:

Primary candidate (first matching rule):
1. Theme module set:
   ``<themeModule dir>/themes/<themeName>/<module or 'default'>/<name>``
2. Template module set (not 'default'):
   ``<module dir>/templates/<name>``
3. Otherwise: ``<templatedir><name>``

Fallback candidate, when the primary file does not exist:
4. Template module set (not 'default'): ``<module dir>/templates/<name>``
5. Otherwise: ``<templatedir>/<name>``

Paths are built by string concatenation. Rule 5 keeps the extra
separator after the template directory, so it differs textually from
rule 3 even though POSIX filesystems treat both the same.

Nothing is cached: each call checks the filesystem again.
"""

import logging
import os

from themeroute.core.interfaces import ModuleDirResolver
from themeroute.core.types import ResolvedPath, TemplateIdentifier, ThemeIdentifier
from themeroute.exceptions import TemplateNotFoundError

logger = logging.getLogger(__name__)


class TemplateLocator:
    """Finds the file backing a template identifier.

    Usage:
        locator = TemplateLocator("/srv/app/templates/", registry.get_module_dir)
        path = locator.resolve(
            TemplateIdentifier.parse("login:form.html"),
            ThemeIdentifier.parse("branding:dark"),
        )
    """

    def __init__(self, template_dir: str, module_dir: ModuleDirResolver):
        """Initialize locator.

        Args:
            template_dir: Base template directory. Expected to end in '/'
                (see ThemerouteSettings.get_path_value)
            module_dir: Callable returning a module's root directory;
                its exceptions propagate to the caller
        """
        self.template_dir = template_dir
        self.module_dir = module_dir

    def primary_candidate(self, template: TemplateIdentifier, theme: ThemeIdentifier) -> str:
        """Path tried first: theme override, module template or base template."""
        if theme.module is not None:
            return (
                self.module_dir(theme.module)
                + "/themes/"
                + theme.name
                + "/"
                + template.module_or_default
                + "/"
                + template.name
            )
        if not template.is_default:
            return self.module_dir(template.module) + "/templates/" + template.name
        return self.template_dir + template.name

    def fallback_candidate(self, template: TemplateIdentifier) -> str:
        """Path tried when the primary candidate is missing."""
        if not template.is_default:
            return self.module_dir(template.module) + "/templates/" + template.name
        return self.template_dir + "/" + template.name

    def candidates(self, template: TemplateIdentifier, theme: ThemeIdentifier) -> tuple[str, str]:
        """Both candidate paths in search order, without touching the filesystem."""
        return self.primary_candidate(template, theme), self.fallback_candidate(template)

    def resolve(self, template: TemplateIdentifier, theme: ThemeIdentifier) -> ResolvedPath:
        """Return the first existing candidate for a template.

        Args:
            template: Template to find
            theme: Active theme

        Returns:
            Path of an existing regular file

        Raises:
            TemplateNotFoundError: Neither candidate exists
        """
        primary = self.primary_candidate(template, theme)
        if os.path.isfile(primary):
            return primary

        logger.debug(
            "[LOCATOR] Could not find template file [%s] at [%s] - now trying the base template",
            template,
            primary,
        )

        fallback = self.fallback_candidate(template)
        if os.path.isfile(fallback):
            return fallback

        error = TemplateNotFoundError(str(template), (primary, fallback))
        logger.critical("[LOCATOR] %s", error)
        raise error
