"""Application endpoints – operation registry for the MIA QR and RTP APIs.

Paths are relative to the versioned base URL, e.g.
``https://api.maibmerchants.md/v2/``.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass

from maib_mia.kernel.errors import ValidationError

__all__ = [
    "AUTH_TOKEN_PATH",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
    "OPERATIONS",
    "SANDBOX_BASE_URL",
    "Endpoint",
    "Operation",
    "endpoint_for",
]

DEFAULT_BASE_URL = "https://api.maibmerchants.md/v2/"
SANDBOX_BASE_URL = "https://sandbox.maibmerchants.md/v2/"

# seconds
DEFAULT_TIMEOUT = 30.0

AUTH_TOKEN_PATH = "auth/token"


class Operation(str, enum.Enum):
    QR_CREATE = "qr_create"
    QR_CREATE_HYBRID = "qr_create_hybrid"
    QR_CREATE_EXTENSION = "qr_create_extension"
    QR_DETAILS = "qr_details"
    QR_CANCEL = "qr_cancel"
    QR_CANCEL_EXTENSION = "qr_cancel_extension"
    QR_LIST = "qr_list"
    TEST_PAY = "test_pay"
    PAYMENT_DETAILS = "payment_details"
    PAYMENT_REFUND = "payment_refund"
    PAYMENT_LIST = "payment_list"
    RTP_CREATE = "rtp_create"
    RTP_STATUS = "rtp_status"
    RTP_CANCEL = "rtp_cancel"
    RTP_LIST = "rtp_list"
    RTP_REFUND = "rtp_refund"
    RTP_TEST_ACCEPT = "rtp_test_accept"
    RTP_TEST_REJECT = "rtp_test_reject"


@dataclass(frozen=True)
class Endpoint:
    """HTTP method, path template and required body fields of one operation."""

    method: str
    path: str
    required_fields: tuple[str, ...] = ()


OPERATIONS: dict[Operation, Endpoint] = {
    # MIA QR
    Operation.QR_CREATE: Endpoint("POST", "mia/qr", ("type", "amountType", "currency", "description")),
    Operation.QR_CREATE_HYBRID: Endpoint("POST", "mia/qr/hybrid", ("amountType", "currency")),
    Operation.QR_CREATE_EXTENSION: Endpoint("POST", "mia/qr/:qrId/extension", ("expiresAt", "description")),
    Operation.QR_DETAILS: Endpoint("GET", "mia/qr/:qrId"),
    Operation.QR_CANCEL: Endpoint("POST", "mia/qr/:qrId/cancel"),
    Operation.QR_CANCEL_EXTENSION: Endpoint("POST", "mia/qr/:qrId/extension/cancel"),
    Operation.QR_LIST: Endpoint("GET", "mia/qr"),
    Operation.TEST_PAY: Endpoint("POST", "mia/test-pay", ("qrId", "amount", "iban", "currency", "payerName")),
    Operation.PAYMENT_DETAILS: Endpoint("GET", "mia/payments/:payId"),
    Operation.PAYMENT_REFUND: Endpoint("POST", "mia/payments/:payId/refund"),
    Operation.PAYMENT_LIST: Endpoint("GET", "mia/payments"),
    # Request to Pay
    Operation.RTP_CREATE: Endpoint("POST", "rtp", ("alias", "amount", "currency", "expiresAt", "description")),
    Operation.RTP_STATUS: Endpoint("GET", "rtp/:rtpId"),
    Operation.RTP_CANCEL: Endpoint("POST", "rtp/:rtpId/cancel"),
    Operation.RTP_LIST: Endpoint("GET", "rtp"),
    Operation.RTP_REFUND: Endpoint("POST", "rtp/:payId/refund"),
    Operation.RTP_TEST_ACCEPT: Endpoint("POST", "rtp/:rtpId/test-accept", ("amount", "currency")),
    Operation.RTP_TEST_REJECT: Endpoint("POST", "rtp/:rtpId/test-reject"),
}


def endpoint_for(operation: Operation | str) -> Endpoint:
    """Look up the :class:`Endpoint` for *operation* (enum member or its value)."""
    try:
        return OPERATIONS[Operation(operation)]
    except ValueError:
        raise ValidationError(f"Unknown operation: {operation!r}") from None
