"""
Transfer failure variants.

The credential-transfer workflow (key-pair generation, signing, device
registration, certificate retrieval and deletion) maps every failure into
exactly one of the variants below at the failure site. The set is closed:
TransferFailure is the union every consumer matches exhaustively, so a new
variant must be added there and handled in encode(), ErrorClassifier and
the presentation selectors before type checking passes again.

Variants are exceptions, so failing operations can raise them directly:

    >>> try:
    ...     raise RegisterFailed(cause=CauseError("NSURLErrorDomain", -1009))
    ... except TransferError as failure:
    ...     print(failure.error_code)
    N|RF|NSURLED-1009
"""

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional, Tuple, Type, Union

from transfercode.diagnosis.causes import Cause
from transfercode.exceptions import TransferCodeError


def _hash_key(value: Any) -> Any:
    """Unhashable payload values (e.g. a cause with value equality) hash by their type"""
    try:
        hash(value)
    except TypeError:
        return type(value)
    return value


@dataclass(eq=False)
class TransferError(TransferCodeError):
    """
    Base of all transfer failure variants.

    Instances are values: they compare and hash by (type, payload) and their
    payload cannot be reassigned after construction.
    """

    summary: ClassVar[str] = "transfer failed"

    def __post_init__(self) -> None:
        super().__init__(self.summary)
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_sealed", False) and name in self.__dataclass_fields__:
            raise AttributeError(f"{type(self).__name__}.{name} is read-only")
        super().__setattr__(name, value)

    @property
    def payload(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    @property
    def error_code(self) -> str:
        """Diagnostic code, see transfercode.diagnosis.error_codes.encode"""
        from transfercode.diagnosis.error_codes import encode

        return encode(self)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.payload == other.payload  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), tuple(_hash_key(value) for value in self.payload)))

    def __reduce__(self):
        return (type(self), self.payload)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"


# ============================================================================
# Client-side failures (local crypto / encoding)
# ============================================================================

@dataclass(eq=False)
class Base64DecodingError(TransferError):
    summary: ClassVar[str] = "malformed base64 payload"


@dataclass(eq=False)
class DecryptionError(TransferError):
    """Payload failed to decrypt; `prefix` is free-form context such as a key-usage prefix"""

    summary: ClassVar[str] = "payload failed to decrypt"

    cause: Optional[Cause] = None
    prefix: Optional[str] = None


@dataclass(eq=False)
class SignError(TransferError):
    summary: ClassVar[str] = "signing failed"

    cause: Optional[Cause] = None


@dataclass(eq=False)
class LoadKeyError(TransferError):
    """Key retrieval from secure storage failed with an OS status"""

    summary: ClassVar[str] = "key retrieval from secure storage failed"

    os_status: Optional[int] = None


@dataclass(eq=False)
class CreateKeyError(TransferError):
    summary: ClassVar[str] = "key-pair generation failed"

    cause: Optional[Cause] = None


@dataclass(eq=False)
class CannotGetPublicKey(TransferError):
    summary: ClassVar[str] = "public key unobtainable from key pair"


@dataclass(eq=False)
class CannotEncodePublicKey(TransferError):
    summary: ClassVar[str] = "public key serialization failed"

    cause: Optional[Cause] = None


# ============================================================================
# Network failures (remote operations)
# ============================================================================

@dataclass(eq=False)
class RegisterFailed(TransferError):
    summary: ClassVar[str] = "device registration failed"

    cause: Optional[Cause] = None


@dataclass(eq=False)
class GetCertificateFailed(TransferError):
    summary: ClassVar[str] = "certificate fetch failed"

    cause: Optional[Cause] = None


@dataclass(eq=False)
class CannotDecodeResponse(TransferError):
    """Server response body unparsable; `status_code` is the HTTP status of the response"""

    summary: ClassVar[str] = "server response unparsable"

    status_code: int


@dataclass(eq=False)
class DeleteCertificateFailed(TransferError):
    summary: ClassVar[str] = "certificate deletion failed"

    cause: Optional[Cause] = None


TransferFailure = Union[
    Base64DecodingError,
    DecryptionError,
    SignError,
    LoadKeyError,
    CreateKeyError,
    CannotGetPublicKey,
    CannotEncodePublicKey,
    RegisterFailed,
    GetCertificateFailed,
    CannotDecodeResponse,
    DeleteCertificateFailed,
]

FAILURE_VARIANTS: Tuple[Type[TransferError], ...] = (
    Base64DecodingError,
    DecryptionError,
    SignError,
    LoadKeyError,
    CreateKeyError,
    CannotGetPublicKey,
    CannotEncodePublicKey,
    RegisterFailed,
    GetCertificateFailed,
    CannotDecodeResponse,
    DeleteCertificateFailed,
)
