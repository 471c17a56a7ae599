"""
Diagnostic codes for transfer failures.

A code has the form "<Origin>|<Tag>[<CauseSuffix>][|<Context>]" and is meant
for logs and support tickets, so it must stay stable across releases:

    C|B64                    Base64DecodingError
    C|DE|NSURLED-1009|pre    DecryptionError with cause and prefix
    C|LKE-25300              LoadKeyError with OS status
    N|CDR503                 CannotDecodeResponse

A failure with a cause always contributes "|<DOMAIN><code>", a failure
without one contributes nothing, so the field count tells the two apart.
"""

import unicodedata
from typing import Optional

from typing_extensions import assert_never

from transfercode.diagnosis.causes import Cause, cause_signature
from transfercode.diagnosis.error_classifier import ErrorClassifier
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


def _is_mnemonic_char(char: str) -> bool:
    return char.isupper() or unicodedata.category(char).startswith("P")


def filter_domain(domain: str) -> str:
    """
    Keep only uppercase letters and punctuation of an error domain, in order.

    Examples:
        >>> filter_domain("NSURLErrorDomain")
        'NSURLED'
        >>> filter_domain("com.example.Crypto-2")
        '..C-'
    """
    return "".join(char for char in domain if _is_mnemonic_char(char))


def cause_suffix(cause: Optional[Cause]) -> str:
    """
    "|<filtered domain><code>" for a cause, "" for no cause.

    Examples:
        >>> cause_suffix(None)
        ''
        >>> cause_suffix(CauseError("NSURLErrorDomain", -1009))
        '|NSURLED-1009'
    """
    if cause is None:
        return ""
    domain, code = cause_signature(cause)
    return f"|{filter_domain(domain)}{code}"


def encode(failure: TransferFailure) -> str:
    """
    Encode a failure into its diagnostic code.

    Args:
        failure: Transfer failure variant

    Returns:
        str: Pipe-delimited diagnostic code

    Raises:
        AssertionError: failure is not one of the transfer failure variants
    """
    origin = ErrorClassifier.classify(failure).value

    if isinstance(failure, Base64DecodingError):
        body = "B64"
    elif isinstance(failure, DecryptionError):
        body = f"DE{cause_suffix(failure.cause)}|{failure.prefix or ''}"
    elif isinstance(failure, SignError):
        body = f"SE{cause_suffix(failure.cause)}"
    elif isinstance(failure, LoadKeyError):
        body = f"LKE{failure.os_status if failure.os_status is not None else ''}"
    elif isinstance(failure, CreateKeyError):
        body = f"CKE{cause_suffix(failure.cause)}"
    elif isinstance(failure, CannotGetPublicKey):
        body = "CGPK"
    elif isinstance(failure, CannotEncodePublicKey):
        body = f"CEPK{cause_suffix(failure.cause)}"
    elif isinstance(failure, RegisterFailed):
        body = f"RF{cause_suffix(failure.cause)}"
    elif isinstance(failure, GetCertificateFailed):
        body = f"GCF{cause_suffix(failure.cause)}"
    elif isinstance(failure, CannotDecodeResponse):
        body = f"CDR{failure.status_code}"
    elif isinstance(failure, DeleteCertificateFailed):
        body = f"DCF{cause_suffix(failure.cause)}"
    else:
        assert_never(failure)

    return f"{origin}|{body}"
