"""
Error Classifier for Transfer Code Diagnosis

Classifies transfer failures along two axes, both fixed by variant:
1. Origin: client (local crypto/encoding) vs. network (remote operations)
2. Recoverability: client failures are permanent, network failures are retryable
"""

from enum import Enum

from typing_extensions import assert_never

from transfercode.diagnosis.failures import (
    Base64DecodingError,
    CannotDecodeResponse,
    CannotEncodePublicKey,
    CannotGetPublicKey,
    CreateKeyError,
    DecryptionError,
    DeleteCertificateFailed,
    GetCertificateFailed,
    LoadKeyError,
    RegisterFailed,
    SignError,
    TransferFailure,
)


class FailureOrigin(Enum):
    """Where a failure originated; the value is the diagnostic code prefix"""

    CLIENT = "C"
    NETWORK = "N"


class ErrorClassifier:
    """
    Exhaustive classifier over the transfer failure variants.

    Both methods handle every variant explicitly; an object outside the
    closed set raises AssertionError instead of falling into a default.
    """

    @staticmethod
    def classify(failure: TransferFailure) -> FailureOrigin:
        """
        Return the origin of a failure

        Examples:
            >>> ErrorClassifier.classify(CannotGetPublicKey())
            <FailureOrigin.CLIENT: 'C'>
            >>> ErrorClassifier.classify(CannotDecodeResponse(status_code=503))
            <FailureOrigin.NETWORK: 'N'>
        """
        if isinstance(
            failure,
            (
                Base64DecodingError,
                DecryptionError,
                SignError,
                LoadKeyError,
                CreateKeyError,
                CannotGetPublicKey,
                CannotEncodePublicKey,
            ),
        ):
            return FailureOrigin.CLIENT
        if isinstance(
            failure,
            (RegisterFailed, GetCertificateFailed, CannotDecodeResponse, DeleteCertificateFailed),
        ):
            return FailureOrigin.NETWORK
        assert_never(failure)

    @staticmethod
    def is_recoverable(failure: TransferFailure) -> bool:
        """
        Whether the caller may offer a retry for this failure

        Client failures are terminal, network failures are retryable.

        Args:
            failure: Transfer failure variant

        Returns:
            bool: True if the failure is transient
        """
        if isinstance(
            failure,
            (
                Base64DecodingError,
                DecryptionError,
                SignError,
                LoadKeyError,
                CreateKeyError,
                CannotGetPublicKey,
                CannotEncodePublicKey,
            ),
        ):
            return False
        if isinstance(
            failure,
            (RegisterFailed, GetCertificateFailed, CannotDecodeResponse, DeleteCertificateFailed),
        ):
            return True
        assert_never(failure)

    @staticmethod
    def get_origin_display_name(origin: FailureOrigin) -> str:
        """User-facing name of an origin, for support tooling"""
        display_names = {
            FailureOrigin.CLIENT: "On-device error",
            FailureOrigin.NETWORK: "Network/server error",
        }
        return display_names[origin]


is_recoverable = ErrorClassifier.is_recoverable
