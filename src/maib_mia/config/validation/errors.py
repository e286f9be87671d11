"""Errors raised while loading or validating :class:`MiaSettings`."""
from __future__ import annotations

from typing import Any

from maib_mia.kernel.errors import MiaError


class ConfigError(MiaError):
    """Merchant settings could not be loaded."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A credential without a default is absent from the environment."""
    default_code = "missing_required_setting"

    def __init__(self, env_key: str, field_name: str) -> None:
        super().__init__(f"{env_key} is not set (required for '{field_name}')")
        self.env_key = env_key
        self.field_name = field_name

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        fields["env_key"] = self.env_key
        return fields


class InvalidSettingValueError(ConfigError):
    """A setting such as ``base_url`` or ``timeout`` is out of range."""
    default_code = "invalid_setting_value"

    def __init__(self, field_name: str, value: object, reason: str) -> None:
        super().__init__(f"{field_name}={value!r} {reason}")
        self.field_name = field_name
        self.value = value


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
