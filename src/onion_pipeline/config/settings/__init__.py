"""Config settings – 12-factor env-based configuration."""
from onion_pipeline.config.settings.base import PipelineSettings, Settings
from onion_pipeline.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "PipelineSettings", "Settings", "SettingsLoader"]
