"""Remote-side errors — explicit API failures, broken envelopes, transport."""

from __future__ import annotations

from typing import Any

from maib_mia.kernel.errors.base import MiaError


class ApiError(MiaError):
    """The remote API reported failure through its ``errors`` array.

    ``errors`` holds the remote error objects verbatim
    (``errorCode`` / ``errorMessage`` / ``errorArgs``).
    """

    default_code = "api_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []
        self.status_code = status_code

    @property
    def error_codes(self) -> list[str]:
        return [str(e.get("errorCode")) for e in self.errors if e.get("errorCode") is not None]

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        fields["status_code"] = self.status_code
        fields["error_codes"] = self.error_codes
        return fields


class ProtocolError(MiaError):
    """The response did not match the expected envelope shape."""

    default_code = "protocol_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        fields["status_code"] = self.status_code
        return fields


class NetworkError(MiaError):
    """Transport-level failure (DNS, TCP, TLS, timeout)."""

    default_code = "network_error"


__all__ = ["ApiError", "NetworkError", "ProtocolError"]
