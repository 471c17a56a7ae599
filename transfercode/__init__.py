"""
Transfer Code Diagnostics

Classification and presentation of credential-transfer failures:
diagnostic codes, recoverability, and icon/message selection.
"""

from transfercode.diagnosis import (
    Phase,
    PresentationBundle,
    TransferError,
    TransferFailure,
    encode,
    is_recoverable,
    present,
)

__version__ = "1.0.0"

__all__ = [
    "Phase",
    "PresentationBundle",
    "TransferError",
    "TransferFailure",
    "encode",
    "is_recoverable",
    "present",
]
