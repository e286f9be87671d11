"""Config settings – 12-factor env-based configuration."""
from maib_mia.config.settings.base import MiaSettings, Settings
from maib_mia.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "MiaSettings", "Settings", "SettingsLoader"]
