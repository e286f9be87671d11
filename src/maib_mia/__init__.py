"""
maib_mia – client SDK for the maib MIA QR and Request to Pay APIs.

Import path convention::

    from maib_mia.adapters.http import MiaApiClient
    from maib_mia.application.callbacks import compute_signature, verify
    from maib_mia.application.endpoints import SANDBOX_BASE_URL, Operation
    from maib_mia.config import EnvSettingsLoader, MiaSettings
    from maib_mia.kernel.errors import ApiError, ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
