"""Kernel – framework-agnostic error hierarchy."""

from maib_mia.kernel.errors import (
    ApiError,
    AuthError,
    MiaError,
    NetworkError,
    ProtocolError,
    ValidationError,
)

__all__ = [
    "ApiError",
    "AuthError",
    "MiaError",
    "NetworkError",
    "ProtocolError",
    "ValidationError",
]
