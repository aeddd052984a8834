"""Tests for settings loading from defaults, env vars and TOML files."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from hookpoint.config import (
    ConfigurationError,
    HookSettings,
    LoggingSettings,
    Settings,
    get_settings,
)


class TestLoggingSettings:
    def test_defaults(self):
        settings = LoggingSettings()

        assert settings.level == "INFO"
        assert settings.format == "auto"
        assert settings.file is None
        assert not settings.json_logs

    def test_level_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValidationError, match="Invalid log level"):
            LoggingSettings(level="LOUD")

    def test_format_normalized(self):
        settings = LoggingSettings(format="JSON")

        assert settings.format == "json"
        assert settings.json_logs

    def test_invalid_format(self):
        with pytest.raises(ValidationError, match="Invalid log format"):
            LoggingSettings(format="xml")


class TestSettings:
    def test_defaults(self):
        settings = Settings()

        assert settings.hooks == HookSettings()
        assert settings.hooks.include_traceback is True
        assert settings.hooks.log_events is False
        assert settings.logging.level == "INFO"

    def test_env_nested_override(self, monkeypatch):
        monkeypatch.setenv("HOOKPOINT_HOOKS__LOG_EVENTS", "true")
        monkeypatch.setenv("HOOKPOINT_LOGGING__LEVEL", "warning")

        settings = Settings()

        assert settings.hooks.log_events is True
        assert settings.logging.level == "WARNING"

    def test_from_config_without_file(self):
        assert Settings.from_config() == Settings()

    def test_from_config_toml(self, tmp_path: Path):
        config = tmp_path / "custom.toml"
        config.write_text(
            '[logging]\nlevel = "debug"\nformat = "json"\n\n'
            "[hooks]\nlog_events = true\ninclude_traceback = false\n"
        )

        settings = Settings.from_config(config)

        assert settings.logging.level == "DEBUG"
        assert settings.logging.json_logs
        assert settings.hooks.log_events is True
        assert settings.hooks.include_traceback is False
        assert settings.hooks.log_registrations is False

    def test_discovers_config_in_cwd(self):
        Path("hookpoint.toml").write_text("[hooks]\nlog_registrations = true\n")

        assert Settings.from_config().hooks.log_registrations is True

    def test_dotfile_takes_precedence(self):
        Path("hookpoint.toml").write_text("[hooks]\nlog_registrations = true\n")
        Path(".hookpoint.toml").write_text("[hooks]\nlog_registrations = false\n")

        assert Settings.from_config().hooks.log_registrations is False

    def test_config_file_env_var(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "from_env.toml"
        config.write_text("[hooks]\nlog_event_data = true\n")
        monkeypatch.setenv("HOOKPOINT_CONFIG_FILE", str(config))

        assert Settings.from_config().hooks.log_event_data is True

    def test_env_wins_over_file(self, tmp_path: Path, monkeypatch):
        config = tmp_path / "config.toml"
        config.write_text('[logging]\nlevel = "DEBUG"\n')
        monkeypatch.setenv("HOOKPOINT_LOGGING__LEVEL", "ERROR")

        assert Settings.from_config(config).logging.level == "ERROR"

    def test_keyword_overrides_win(self, tmp_path: Path):
        config = tmp_path / "config.toml"
        config.write_text("[hooks]\nlog_events = true\n")

        settings = Settings.from_config(config, hooks={"log_events": False})

        assert settings.hooks.log_events is False

    def test_keyword_section_override_is_validated(self):
        settings = Settings.from_config(logging={"level": "debug", "format": "JSON"})

        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "json"
        assert settings.logging.json_logs is True

    def test_invalid_keyword_override(self):
        with pytest.raises(ConfigurationError, match="Invalid logging override"):
            Settings.from_config(logging={"level": "LOUD"})

    def test_unknown_sections_ignored(self, tmp_path: Path):
        config = tmp_path / "config.toml"
        config.write_text("[unrelated]\nvalue = 1\n")

        assert Settings.from_config(config) == Settings()

    def test_invalid_toml(self, tmp_path: Path):
        config = tmp_path / "broken.toml"
        config.write_text("[hooks\n")

        with pytest.raises(ConfigurationError, match="Invalid TOML syntax"):
            Settings.from_config(config)

    def test_invalid_value_in_file(self, tmp_path: Path):
        config = tmp_path / "config.toml"
        config.write_text('[logging]\nlevel = "LOUD"\n')

        with pytest.raises(ConfigurationError, match=r"Invalid \[logging\] section"):
            Settings.from_config(config)

    def test_unsupported_format(self, tmp_path: Path):
        config = tmp_path / "config.yaml"
        config.write_text("hooks: {}\n")

        with pytest.raises(ConfigurationError, match="Unsupported config file format"):
            Settings.from_config(config)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
