"""Config – 12-factor settings and loaders."""

from maib_mia.config.settings import DotenvSettingsLoader, EnvSettingsLoader, MiaSettings, Settings, SettingsLoader
from maib_mia.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MiaSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
