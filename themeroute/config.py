"""Runtime configuration.

Settings come from ``THEMEROUTE_*`` environment variables or a ``.env``
file. A settings instance is passed explicitly to the locator, module
registry and renderer; nothing reads configuration from a global.
"""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ThemerouteSettings(BaseSettings):
    """Configuration consumed by template resolution and rendering."""

    baseurlpath: str = "/"
    theme_use: str = "default"
    templatedir: str = "templates/"
    moduledir: str = "modules/"
    basedir: Path = Field(default_factory=Path.cwd)
    language_default: str = "en"

    model_config = SettingsConfigDict(
        env_prefix="THEMEROUTE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("baseurlpath")
    @classmethod
    def ensure_trailing_slash(cls, v: str) -> str:
        return v if v.endswith("/") else v + "/"

    def get_base_url(self) -> str:
        """Base URL path prepended to links inside rendered templates."""
        return self.baseurlpath

    def get_theme(self) -> str:
        """Raw theme selector, ``"<module>:<name>"`` or ``"<name>"``."""
        return self.theme_use or "default"

    def get_path_value(self, name: str) -> str:
        """Absolute directory path for a path-valued setting.

        Relative values are anchored at ``basedir``. The result always
        ends with a separator so file names can be appended directly.

        Args:
            name: Setting name ('templatedir' or 'moduledir')

        Returns:
            Absolute path ending in '/'
        """
        value = getattr(self, name)
        path = value if os.path.isabs(value) else os.path.join(str(self.basedir), value)
        return path if path.endswith("/") else path + "/"
