"""
Diagnosis System for Transfer Code Failures

This package classifies failures of the credential-transfer workflow and
selects how to present them.

Components:
- failures: Closed set of transfer failure variants
- error_codes: Stable diagnostic codes for support
- error_classifier: Origin and recoverability
- connectivity: No-connectivity detection for failure causes
- presentation: Icon and message key selection per phase
- failure_analyzer: Combined diagnosis records
"""

from transfercode.diagnosis.causes import CauseError, UnderlyingError, cause_signature
from transfercode.diagnosis.connectivity import (
    ConnectivityInspector,
    DefaultConnectivityInspector,
    get_default_inspector,
    is_no_connectivity,
)
from transfercode.diagnosis.error_classifier import ErrorClassifier, FailureOrigin, is_recoverable
from transfercode.diagnosis.error_codes import cause_suffix, encode, filter_domain
from transfercode.diagnosis.failure_analyzer import FailureAnalyzer
from transfercode.diagnosis.failures import (
    FAILURE_VARIANTS,
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
    TransferError,
    TransferFailure,
)
from transfercode.diagnosis.presentation import (
    LocalizedMessage,
    Phase,
    PresentationBundle,
    present,
    select_icons,
    select_text,
)

__all__ = [
    'FAILURE_VARIANTS',
    'Base64DecodingError',
    'CannotDecodeResponse',
    'CannotEncodePublicKey',
    'CannotGetPublicKey',
    'CauseError',
    'ConnectivityInspector',
    'CreateKeyError',
    'DecryptionError',
    'DefaultConnectivityInspector',
    'DeleteCertificateFailed',
    'ErrorClassifier',
    'FailureAnalyzer',
    'FailureOrigin',
    'GetCertificateFailed',
    'LoadKeyError',
    'LocalizedMessage',
    'Phase',
    'PresentationBundle',
    'RegisterFailed',
    'SignError',
    'TransferError',
    'TransferFailure',
    'UnderlyingError',
    'cause_signature',
    'cause_suffix',
    'encode',
    'filter_domain',
    'get_default_inspector',
    'is_no_connectivity',
    'is_recoverable',
    'present',
    'select_icons',
    'select_text',
]
