"""Config settings – Settings base class and MiaSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from maib_mia.application.endpoints import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SANDBOX_BASE_URL
from maib_mia.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class MiaSettings(Settings):
    """Merchant credentials and transport options.

    Loaded from ``MAIB_MIA_CLIENT_ID``, ``MAIB_MIA_CLIENT_SECRET``,
    ``MAIB_MIA_SIGNATURE_KEY``, ``MAIB_MIA_BASE_URL`` and
    ``MAIB_MIA_TIMEOUT`` by :class:`EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "MAIB_MIA"

    client_id: str
    client_secret: str
    signature_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def _validate(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise InvalidSettingValueError("base_url", self.base_url, "must be an http(s) URL")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")

    @property
    def is_sandbox(self) -> bool:
        return self.base_url.rstrip("/") == SANDBOX_BASE_URL.rstrip("/")


__all__ = ["MiaSettings", "Settings"]
