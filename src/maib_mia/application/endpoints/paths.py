"""Application endpoints – path substitution and required-field checks."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from maib_mia.kernel.errors import ValidationError

__all__ = ["render_path", "validate_required_fields"]


def render_path(template: str, params: Mapping[str, Any] | None = None) -> str:
    """Replace each ``:name`` segment of *template* with ``params[name]``.

    Raises :class:`ValidationError` when an identifier is absent or blank.
    """
    params = params or {}
    segments: list[str] = []
    for segment in template.split("/"):
        if not segment.startswith(":"):
            segments.append(segment)
            continue
        name = segment[1:]
        value = params.get(name)
        if value is None or not str(value).strip():
            raise ValidationError(
                f"{name} is required",
                errors=[{"field": name, "reason": "missing"}],
            )
        segments.append(quote(str(value), safe=""))
    return "/".join(segments)


def validate_required_fields(data: Mapping[str, Any] | None, required: tuple[str, ...] | list[str]) -> None:
    """Raise :class:`ValidationError` listing every required field that is absent or None."""
    if not required:
        return
    data = data or {}
    missing = sorted(name for name in required if data.get(name) is None)
    if missing:
        raise ValidationError(
            f"Missing required fields: {', '.join(missing)}",
            errors=[{"field": name, "reason": "missing"} for name in missing],
        )
