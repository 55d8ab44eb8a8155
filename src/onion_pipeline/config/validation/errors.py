"""Config errors raised while loading or validating settings.

Each error names the offending setting in ``detail["setting"]``; the
environment-variable name when it came from a loader, the field name when
a settings dataclass rejected it.
"""
from __future__ import annotations

from typing import Any

from onion_pipeline.kernel.errors import BaseError


class ConfigError(BaseError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source provided a value for a field without a default."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing", detail={"setting": setting_name})

    @property
    def setting_name(self) -> str:
        return self.detail["setting"]


class InvalidSettingValueError(ConfigError):
    """A value was provided but cannot be used."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )

    @property
    def setting_name(self) -> str:
        return self.detail["setting"]

    @property
    def value(self) -> Any:
        return self.detail["value"]

    @property
    def reason(self) -> str:
        return self.detail["reason"]


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
