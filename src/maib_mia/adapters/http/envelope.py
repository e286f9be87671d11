"""HTTP adapter – response envelope unwrapping.

Success::

    {"ok": true, "result": {...}}

Failure::

    {"ok": false, "errors": [{"errorCode": "...", "errorMessage": "...", "errorArgs": {...}}]}
"""
from __future__ import annotations

from typing import Any

import httpx

from maib_mia.kernel.errors import ApiError, ProtocolError

__all__ = ["format_api_errors", "unwrap_envelope", "unwrap_response"]


def format_api_errors(errors: list[Any]) -> str:
    """Join remote errors as ``"<message> (<code>); ..."``."""
    parts: list[str] = []
    for error in errors:
        if not isinstance(error, dict):
            parts.append(str(error))
            continue
        message = error.get("errorMessage") or "Unknown error"
        code = error.get("errorCode")
        parts.append(f"{message} ({code})" if code else str(message))
    return "; ".join(parts) or "Remote API reported failure"


def unwrap_envelope(data: Any, status_code: int | None = None) -> Any:
    """Return ``result`` from a success envelope or raise the matching error."""
    if not isinstance(data, dict):
        raise ProtocolError("Response body is not a JSON object", status_code=status_code)

    if data.get("ok") is True:
        if "result" not in data:
            raise ProtocolError("Success envelope is missing 'result'", status_code=status_code)
        return data["result"]

    errors = data.get("errors")
    if isinstance(errors, list):
        raise ApiError(
            format_api_errors(errors),
            errors=[e for e in errors if isinstance(e, dict)],
            status_code=status_code,
        )

    raise ProtocolError(
        "Response envelope carries neither 'ok' nor 'errors' (keys: "
        + ", ".join(sorted(str(k) for k in data))
        + ")",
        status_code=status_code,
    )


def unwrap_response(response: httpx.Response) -> Any:
    """Decode *response* as JSON and unwrap its envelope."""
    try:
        data = response.json()
    except ValueError as exc:
        raise ProtocolError(
            f"Response body is not valid JSON (HTTP {response.status_code})",
            status_code=response.status_code,
            cause=exc,
        ) from exc
    return unwrap_envelope(data, status_code=response.status_code)
