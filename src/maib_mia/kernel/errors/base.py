"""Root error class for every failure the SDK raises."""

from __future__ import annotations

from typing import Any


class MiaError(Exception):
    """Base of all maib-mia errors.

    Callers that do not care about the failure category catch this one.

    Args:
        message: Human-readable description.
        code: Short slug identifying the category (defaults to ``default_code``).
        cause: Underlying exception (httpx error, JSON decode error...).
    """

    default_code: str = "mia_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def log_fields(self) -> dict[str, Any]:
        """Key/value pairs bound to the ``mia_failure`` log event."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.cause is not None:
            fields["cause"] = repr(self.cause)
        return fields


__all__ = ["MiaError"]
