"""Application – callback verification and the remote operation table."""

from maib_mia.application.callbacks import CallbackEnvelope, CallbackSigner, compute_signature, verify
from maib_mia.application.endpoints import Endpoint, Operation

__all__ = [
    "CallbackEnvelope",
    "CallbackSigner",
    "Endpoint",
    "Operation",
    "compute_signature",
    "verify",
]
