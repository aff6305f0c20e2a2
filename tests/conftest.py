"""Shared fixtures: an on-disk template layout."""

from pathlib import Path

import pytest

from themeroute.config import ThemerouteSettings
from themeroute.modules import ModuleRegistry
from themeroute.template_resolver import TemplateLocator


def _write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def write():
    """Create a file (and its parents) with the given content."""
    return _write


@pytest.fixture
def layout(tmp_path):
    """Empty base directory with templates/ and modules/ roots."""
    (tmp_path / "templates").mkdir()
    (tmp_path / "modules").mkdir()
    return tmp_path


@pytest.fixture
def settings(layout):
    return ThemerouteSettings(
        basedir=layout,
        baseurlpath="/app/",
        theme_use="default",
        templatedir="templates/",
        moduledir="modules/",
        _env_file=None,
    )


@pytest.fixture
def modules(settings):
    return ModuleRegistry.from_settings(settings)


@pytest.fixture
def locator(settings, modules):
    return TemplateLocator(settings.get_path_value("templatedir"), modules.get_module_dir)
