"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    MiaError
    ├── ValidationError      (client.py)
    ├── AuthError            (client.py)
    ├── ApiError             (remote.py)
    ├── ProtocolError        (remote.py)
    └── NetworkError         (remote.py)
"""

from maib_mia.kernel.errors.base import MiaError
from maib_mia.kernel.errors.client import AuthError, ValidationError
from maib_mia.kernel.errors.remote import ApiError, NetworkError, ProtocolError

__all__ = [
    "ApiError",
    "AuthError",
    "MiaError",
    "NetworkError",
    "ProtocolError",
    "ValidationError",
]
