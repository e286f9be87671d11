"""Application callbacks – envelope model and signature verification."""
from maib_mia.application.callbacks.envelope import CallbackEnvelope
from maib_mia.application.callbacks.signature import (
    FIXED_POINT_FIELDS,
    CallbackSigner,
    compute_signature,
    verify,
)

__all__ = [
    "FIXED_POINT_FIELDS",
    "CallbackEnvelope",
    "CallbackSigner",
    "compute_signature",
    "verify",
]
