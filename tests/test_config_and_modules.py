"""Tests for settings, module lookup and logging setup."""

import logging

import pytest

from themeroute.config import ThemerouteSettings
from themeroute.exceptions import UnknownModuleError
from themeroute.modules import ModuleRegistry
from themeroute.utilities import setup_logging


class TestThemerouteSettings:
    def test_defaults(self, tmp_path):
        settings = ThemerouteSettings(basedir=tmp_path, _env_file=None)
        assert settings.get_base_url() == "/"
        assert settings.get_theme() == "default"
        assert settings.get_path_value("templatedir") == f"{tmp_path}/templates/"

    def test_base_url_gets_trailing_slash(self, tmp_path):
        settings = ThemerouteSettings(basedir=tmp_path, baseurlpath="/sso", _env_file=None)
        assert settings.get_base_url() == "/sso/"

    def test_absolute_path_value_kept(self, tmp_path):
        settings = ThemerouteSettings(basedir=tmp_path, templatedir="/srv/tpl", _env_file=None)
        assert settings.get_path_value("templatedir") == "/srv/tpl/"

    def test_empty_theme_means_default(self, tmp_path):
        settings = ThemerouteSettings(basedir=tmp_path, theme_use="", _env_file=None)
        assert settings.get_theme() == "default"

    def test_reads_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("THEMEROUTE_THEME_USE", "branding:dark")
        monkeypatch.setenv("THEMEROUTE_BASEURLPATH", "/idp/")
        settings = ThemerouteSettings(basedir=tmp_path, _env_file=None)
        assert settings.get_theme() == "branding:dark"
        assert settings.get_base_url() == "/idp/"


class TestModuleRegistry:
    def test_discovers_directory_under_root(self, layout, modules):
        (layout / "modules" / "login").mkdir()
        assert modules.get_module_dir("login") == f"{layout}/modules/login"

    def test_explicit_registration_wins(self, layout, modules, tmp_path):
        (layout / "modules" / "login").mkdir()
        modules.register("login", tmp_path / "elsewhere/")
        assert modules.get_module_dir("login") == f"{tmp_path}/elsewhere"

    def test_unknown_module(self, modules):
        with pytest.raises(UnknownModuleError) as exc_info:
            modules.get_module_dir("nosuch")
        assert exc_info.value.module == "nosuch"

    def test_file_is_not_a_module(self, layout, modules):
        (layout / "modules" / "notes.txt").write_text("x")
        with pytest.raises(UnknownModuleError):
            modules.get_module_dir("notes.txt")

    def test_is_registered(self, layout, modules):
        (layout / "modules" / "login").mkdir()
        assert modules.is_registered("login")
        assert not modules.is_registered("nosuch")

    def test_constructor_modules(self, tmp_path):
        registry = ModuleRegistry(str(tmp_path), {"core": "/srv/core"})
        assert registry.get_module_dir("core") == "/srv/core"


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_debug_lowers_component_levels(self):
        setup_logging(debug=True)
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("themeroute.template_resolver").level == logging.DEBUG

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "themeroute.log"
        setup_logging(log_file=log_file)
        logging.getLogger("themeroute").info("hello")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
