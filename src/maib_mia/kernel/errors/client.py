"""Caller-side errors — invalid input or missing credentials."""

from __future__ import annotations

from typing import Any

from maib_mia.kernel.errors.base import MiaError


class ValidationError(MiaError):
    """Input supplied by the caller does not meet validation rules.

    ``errors`` is a list of field-level failures, e.g.
    ``[{"field": "currency", "reason": "missing"}]``.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def log_fields(self) -> dict[str, Any]:
        fields = super().log_fields()
        fields["field_errors"] = self.errors
        return fields


class AuthError(MiaError):
    """Missing access token for an authenticated call."""

    default_code = "auth_error"


__all__ = ["AuthError", "ValidationError"]
