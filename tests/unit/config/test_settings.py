"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from onion_pipeline.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    PipelineSettings,
    Settings,
)


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_unset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_RATIO", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_loads_typed_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"
        assert settings.port == 9000
        assert settings.ratio == 0.25
        assert settings.allowed_origins == ["a.com", "b.com"]

    @pytest.mark.parametrize("raw,expected", [("true", True), ("1", True), ("on", True), ("no", False), ("0", False)])
    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv("APP_DEBUG", raw)
        assert EnvSettingsLoader().load(AppSettings).debug is expected

    def test_bad_int_raises_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"
        assert exc_info.value.to_dict()["detail"] == {
            "setting": "APP_PORT",
            "value": "eighty",
            "reason": "invalid literal for int() with base 10: 'eighty'",
        }

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"
        assert isinstance(exc_info.value, ConfigError)
        assert exc_info.value.to_dict()["detail"] == {"setting": "REQ_TOKEN"}


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # Registers REQ_TOKEN with monkeypatch so teardown removes what load_dotenv sets.
        monkeypatch.setenv("REQ_TOKEN", "placeholder")
        monkeypatch.delenv("REQ_TOKEN")
        env_file = tmp_path / ".env"
        env_file.write_text("REQ_TOKEN=s3cret\n")
        settings = DotenvSettingsLoader(str(env_file)).load(RequiredSettings)
        assert settings.token == "s3cret"


# ---------------------------------------------------------------------------
# PipelineSettings
# ---------------------------------------------------------------------------


class TestPipelineSettings:
    def test_defaults(self) -> None:
        settings = PipelineSettings()
        assert settings.strict is True
        assert settings.log_level == "INFO"
        assert settings.log_json is True
        assert settings.log_level_number == 20

    def test_log_level_is_normalised(self) -> None:
        assert PipelineSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            PipelineSettings(log_level="LOUD")
        assert exc_info.value.code == "invalid_setting_value"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_STRICT", "false")
        monkeypatch.setenv("PIPELINE_LOG_LEVEL", "warning")
        monkeypatch.delenv("PIPELINE_LOG_JSON", raising=False)
        settings = EnvSettingsLoader().load(PipelineSettings)
        assert settings.strict is False
        assert settings.log_level == "WARNING"

    def test_invalid_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PIPELINE_LOG_LEVEL", "chatty")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(PipelineSettings)


class TestConfigErrors:
    def test_missing_setting_serialises(self) -> None:
        err = MissingRequiredSettingError("PIPELINE_STRICT")
        assert err.to_dict() == {
            "code": "missing_required_setting",
            "message": "Required setting 'PIPELINE_STRICT' is missing",
            "detail": {"setting": "PIPELINE_STRICT"},
        }

    def test_invalid_value_serialises(self) -> None:
        err = InvalidSettingValueError("log_level", "LOUD", "unknown level")
        assert err.to_dict()["detail"] == {"setting": "log_level", "value": "LOUD", "reason": "unknown level"}
        assert (err.setting_name, err.value, err.reason) == ("log_level", "LOUD", "unknown level")
        assert str(err).startswith("invalid_setting_value: Setting 'log_level'")

    def test_loader_failure_keeps_cause(self, monkeypatch: pytest.MonkeyPatch) -> None:
        @dataclass
        class Exploding(Settings):
            _prefix: ClassVar[str] = "BOOM"

            value: str = "x"

            def _validate(self) -> None:
                raise RuntimeError("broken")

        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(Exploding)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert exc_info.value.to_dict()["cause"] == "RuntimeError: broken"
