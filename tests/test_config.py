"""
Tests for settings loading and logging setup.
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from timekeep.bootstrap import AppContext, create_context
from timekeep.domain.models import DisplayPreferences
from timekeep.i18n import get_language
from timekeep.infra.config import Settings, configure_logging
from timekeep.infra.event_log import EventLog


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch) -> Path:
    """Run in an empty directory so no local config/settings.yaml or .env leaks in"""
    monkeypatch.chdir(tmp_path)
    for name in ("TIMEKEEP_CONFIG_DIR", "TIMEKEEP_APP_NAME", "TIMEKEEP_PREFERENCES"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def write_yaml(directory: Path, text: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestSettings:

    def test_defaults_without_file(self, workdir):
        settings = Settings(config_dir=workdir / "cfg")
        assert settings.preferences.language == "auto"
        assert settings.preferences.debug_logging is False
        assert settings.preferences.tick_interval_ms == 1000

    def test_yaml_preferences(self, workdir):
        write_yaml(workdir / "cfg", "language: de\ndebug_logging: true\ntick_interval_ms: 500\n")

        settings = Settings(config_dir=workdir / "cfg")

        assert settings.preferences.language == "de"
        assert settings.preferences.debug_logging is True
        assert settings.preferences.tick_interval_ms == 500

    def test_local_config_wins(self, workdir):
        write_yaml(workdir / "cfg", "language: de\n")
        write_yaml(workdir / "config", "language: en\n")

        settings = Settings(config_dir=workdir / "cfg")

        assert settings.preferences.language == "en"

    def test_config_dir_from_environment(self, workdir, monkeypatch):
        monkeypatch.setenv("TIMEKEEP_CONFIG_DIR", str(workdir / "env"))
        assert Settings().config_dir == workdir / "env"

    def test_non_mapping_yaml_is_ignored(self, workdir, caplog):
        write_yaml(workdir / "cfg", "- just\n- a list\n")

        with caplog.at_level(logging.WARNING):
            settings = Settings(config_dir=workdir / "cfg")

        assert settings.preferences.language == "auto"
        assert "expected a mapping" in caplog.text

    def test_invalid_preference_is_rejected(self, workdir):
        write_yaml(workdir / "cfg", "tick_interval_ms: 5\n")
        with pytest.raises(ValidationError):
            Settings(config_dir=workdir / "cfg")

    def test_environment_preferences_win_over_yaml(self, workdir, monkeypatch):
        write_yaml(workdir / "cfg", "language: en\ntick_interval_ms: 500\n")
        monkeypatch.setenv("TIMEKEEP_PREFERENCES", '{"language": "de"}')

        settings = Settings(config_dir=workdir / "cfg")

        assert settings.preferences.language == "de"
        assert settings.preferences.tick_interval_ms == 1000

    def test_explicit_preferences_win_over_yaml(self, workdir):
        write_yaml(workdir / "cfg", "language: en\n")

        settings = Settings(config_dir=workdir / "cfg",
                            preferences=DisplayPreferences(language="de"))

        assert settings.preferences.language == "de"

    def test_save_and_reload(self, workdir):
        settings = Settings(config_dir=workdir / "cfg")
        settings.preferences.log_level = "DEBUG"
        settings.save_preferences()

        reloaded = Settings(config_dir=workdir / "cfg")
        assert reloaded.preferences.log_level == "DEBUG"


class TestConfigureLogging:

    def test_level_from_preferences(self, workdir, restore_root_logging):
        write_yaml(workdir / "cfg", "log_level: debug\n")
        configure_logging(Settings(config_dir=workdir / "cfg"))
        assert restore_root_logging.level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, workdir, restore_root_logging):
        write_yaml(workdir / "cfg", "log_level: LOUD\n")
        configure_logging(Settings(config_dir=workdir / "cfg"))
        assert restore_root_logging.level == logging.INFO


class TestBootstrap:

    def test_create_context(self, workdir, restore_root_logging):
        write_yaml(workdir / "cfg", "language: de\ndebug_logging: true\ntick_interval_ms: 250\n")

        context = create_context(Settings(config_dir=workdir / "cfg"))

        assert isinstance(context, AppContext)
        assert isinstance(context.event_log, EventLog)
        assert context.event_log.debug_enabled is True
        assert context.ticker.timer.interval() == 250
        assert not context.load_state.is_loading
        assert get_language() == "de"
