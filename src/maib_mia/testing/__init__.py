"""Testing support – signed callback builders.

Usage in a merchant test suite::

    from maib_mia.testing import signed_callback
"""

from maib_mia.testing.callbacks import SAMPLE_QR_RESULT, signed_callback

__all__ = ["SAMPLE_QR_RESULT", "signed_callback"]
