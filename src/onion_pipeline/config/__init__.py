"""Config – 12-factor settings and loaders."""

from onion_pipeline.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PipelineSettings,
    Settings,
    SettingsLoader,
)
from onion_pipeline.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PipelineSettings",
    "Settings",
    "SettingsLoader",
]
