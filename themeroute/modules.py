"""Module directory lookup.

Modules own their own ``templates/`` and ``themes/`` directories. A
module's root is either registered explicitly or found by name under the
configured module root:

    registry = ModuleRegistry.from_settings(settings)
    registry.register("branding", "/srv/branding")
    registry.get_module_dir("branding")   # '/srv/branding'
    registry.get_module_dir("login")      # '<moduledir>/login'

``get_module_dir`` is what the locator takes as its module resolver.
"""

import logging
import os
from typing import TYPE_CHECKING

from themeroute.exceptions import UnknownModuleError

if TYPE_CHECKING:
    from themeroute.config import ThemerouteSettings

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """Maps module names to module root directories."""

    def __init__(self, root: str, modules: dict[str, str] | None = None):
        self.root = root
        self._modules: dict[str, str] = {}
        for name, path in (modules or {}).items():
            self.register(name, path)

    @classmethod
    def from_settings(cls, settings: "ThemerouteSettings") -> "ModuleRegistry":
        """Create a registry rooted at the configured module directory."""
        return cls(settings.get_path_value("moduledir"))

    def register(self, name: str, path: str | os.PathLike) -> None:
        """Register an explicit root directory for a module."""
        if name in self._modules:
            logger.warning("[MODULES] Module '%s' already registered, overwriting", name)
        self._modules[name] = os.fspath(path).rstrip("/")
        logger.debug("[MODULES] Registered module: %s -> %s", name, self._modules[name])

    def is_registered(self, name: str) -> bool:
        """Check whether a module resolves to a directory."""
        try:
            self.get_module_dir(name)
        except UnknownModuleError:
            return False
        return True

    def get_module_dir(self, name: str) -> str:
        """Get the root directory of a module.

        Raises:
            UnknownModuleError: Module is neither registered nor present
                under the module root
        """
        if name in self._modules:
            return self._modules[name]

        path = os.path.join(self.root, name)
        if os.path.isdir(path):
            return path

        raise UnknownModuleError(name)
