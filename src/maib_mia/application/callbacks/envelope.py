"""Application callbacks – CallbackEnvelope value object."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from maib_mia.kernel.errors import ValidationError

__all__ = ["CallbackEnvelope"]


@dataclass(frozen=True)
class CallbackEnvelope:
    """Payload POSTed by the gateway to the merchant's callback URL.

    ``result`` carries the payment / QR event fields, ``signature`` the
    base64 SHA-256 signature over them.
    """

    result: Mapping[str, Any]
    signature: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CallbackEnvelope":
        """Build an envelope from a decoded JSON body.

        Raises :class:`ValidationError` when ``result`` or ``signature`` is
        missing or has the wrong type.
        """
        if not isinstance(data, Mapping):
            raise ValidationError("Callback data must be a mapping")

        result = data.get("result")
        signature = data.get("signature")
        missing = [name for name, value in (("result", result), ("signature", signature)) if value in (None, "")]
        if missing:
            raise ValidationError(
                "Missing result or signature in callback data",
                errors=[{"field": name, "reason": "missing"} for name in missing],
            )
        if not isinstance(result, Mapping):
            raise ValidationError(
                "Callback result must be a mapping",
                errors=[{"field": "result", "reason": "not_a_mapping"}],
            )
        if not isinstance(signature, str):
            raise ValidationError(
                "Callback signature must be a string",
                errors=[{"field": "signature", "reason": "not_a_string"}],
            )

        extra = {k: v for k, v in data.items() if k not in ("result", "signature")}
        return cls(result=result, signature=signature, extra=extra)

    def to_dict(self) -> dict[str, Any]:
        return {**self.extra, "result": dict(self.result), "signature": self.signature}
