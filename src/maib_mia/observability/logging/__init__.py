"""Observability – structured logging helpers."""
from maib_mia.observability.logging.factory import JsonLoggerFactory, get_logger
from maib_mia.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
