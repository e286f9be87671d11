"""Application endpoints – operation table, base URLs, path helpers."""
from maib_mia.application.endpoints.paths import render_path, validate_required_fields
from maib_mia.application.endpoints.registry import (
    AUTH_TOKEN_PATH,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    OPERATIONS,
    SANDBOX_BASE_URL,
    Endpoint,
    Operation,
    endpoint_for,
)

__all__ = [
    "AUTH_TOKEN_PATH",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "OPERATIONS",
    "SANDBOX_BASE_URL",
    "Endpoint",
    "Operation",
    "endpoint_for",
    "render_path",
    "validate_required_fields",
]
