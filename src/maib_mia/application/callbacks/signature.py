"""Application callbacks – SHA-256 callback signing and verification.

The gateway signs every callback as follows:

1. drop ``result`` fields whose value is ``None``;
2. render values to strings (``amount`` and ``commission`` with exactly two
   decimals, everything else by natural conversion);
3. drop fields whose rendered value is blank;
4. order fields by lower-cased name;
5. join the values with ``:`` and append ``:<signature key>``;
6. base64-encode the SHA-256 digest of the UTF-8 bytes.

Any deviation yields a different digest, so every rule is part of the wire
contract with the gateway.
"""
from __future__ import annotations

import base64
import hashlib
import hmac
import math
import re
from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from maib_mia.application.callbacks.envelope import CallbackEnvelope
from maib_mia.kernel.errors import ValidationError

__all__ = [
    "FIXED_POINT_FIELDS",
    "CallbackSigner",
    "compute_signature",
    "verify",
]

FIXED_POINT_FIELDS: frozenset[str] = frozenset({"amount", "commission"})


# leading decimal literal accepted by the gateway's number parser
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_CENT = Decimal("0.01")


def _number_to_string(number: float) -> str:
    """Render *number* in the gateway's shortest decimal form.

    Fixed notation for exponents -7 < e < 21, otherwise ``1e-7`` / ``1.5e+21``.
    """
    if math.isnan(number):
        return "NaN"
    if number == 0:
        return "0"
    if number < 0:
        return "-" + _number_to_string(-number)
    if math.isinf(number):
        return "Infinity"

    _, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    s = "".join(map(str, digits))
    k = len(s)
    n = exponent + k

    if k <= n <= 21:
        return s + "0" * (n - k)
    if 0 < n <= 21:
        return f"{s[:n]}.{s[n:]}"
    if -6 < n <= 0:
        return "0." + "0" * -n + s
    e = n - 1
    sign = "+" if e >= 0 else "-"
    mantissa = s if k == 1 else f"{s[0]}.{s[1:]}"
    return f"{mantissa}e{sign}{abs(e)}"


def _parse_number(value: Any) -> float:
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, float):
        return value
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    match = _NUMBER_PREFIX.match(str(value).lstrip())
    return float(match.group()) if match else math.nan


def _format_fixed_point(value: Any) -> str:
    number = _parse_number(value)
    if math.isnan(number) or math.isinf(number) or abs(number) >= 1e21:
        return _number_to_string(number)
    if number == 0:
        number = 0.0
    # Decimal(float) is exact, so half cents round away from zero
    return format(Decimal(number).quantize(_CENT, rounding=ROUND_HALF_UP), "f")


def _format_natural(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value) if abs(value) < 10**21 else _number_to_string(_parse_number(value))
    if isinstance(value, float):
        return _number_to_string(value)
    return str(value)


def _render(name: str, value: Any) -> str:
    if name in FIXED_POINT_FIELDS:
        return _format_fixed_point(value)
    return _format_natural(value)


class CallbackSigner:
    """Computes and verifies callback signatures. Stateless."""

    @staticmethod
    def _require_key(signing_key: str | None) -> str:
        if not signing_key or not isinstance(signing_key, str):
            raise ValidationError(
                "Invalid signature key",
                errors=[{"field": "signing_key", "reason": "missing"}],
            )
        return signing_key

    @staticmethod
    def canonical_fields(result: Mapping[str, Any]) -> list[tuple[str, str]]:
        """Return the ``(name, rendered value)`` pairs in signing order."""
        if not isinstance(result, Mapping):
            raise ValidationError(
                "Callback result must be a mapping",
                errors=[{"field": "result", "reason": "not_a_mapping"}],
            )
        pairs: list[tuple[str, str]] = []
        for name, value in result.items():
            if value is None:
                continue
            rendered = _render(name, value)
            if rendered.strip():
                pairs.append((name, rendered))
        # raw name breaks ties between names that differ only in case
        pairs.sort(key=lambda pair: (pair[0].lower(), pair[0]))
        return pairs

    @classmethod
    def signing_string(cls, result: Mapping[str, Any], signing_key: str) -> str:
        """Return the exact string that gets hashed for *result*."""
        key = cls._require_key(signing_key)
        values = ":".join(rendered for _, rendered in cls.canonical_fields(result))
        return f"{values}:{key}"

    @classmethod
    def sign(cls, result: Mapping[str, Any], signing_key: str) -> str:
        """Return the base64 SHA-256 signature of *result*."""
        digest = hashlib.sha256(cls.signing_string(result, signing_key).encode("utf-8")).digest()
        return base64.b64encode(digest).decode("ascii")

    @classmethod
    def verify(cls, envelope: CallbackEnvelope | Mapping[str, Any], signing_key: str) -> bool:
        """Return True when the envelope's signature matches its result.

        Malformed input raises :class:`ValidationError`; a well-formed
        envelope with a wrong signature returns False.
        """
        key = cls._require_key(signing_key)
        if not isinstance(envelope, CallbackEnvelope):
            envelope = CallbackEnvelope.from_dict(envelope)
        expected = cls.sign(envelope.result, key)
        return hmac.compare_digest(expected.encode("utf-8"), envelope.signature.encode("utf-8"))


def compute_signature(result: Mapping[str, Any], signing_key: str) -> str:
    """Module-level shortcut for :meth:`CallbackSigner.sign`."""
    return CallbackSigner.sign(result, signing_key)


def verify(envelope: CallbackEnvelope | Mapping[str, Any], signing_key: str) -> bool:
    """Module-level shortcut for :meth:`CallbackSigner.verify`."""
    return CallbackSigner.verify(envelope, signing_key)
