"""
Underlying causes of transfer failures.

A cause is whatever the failing collaborator handed back: a crypto library
error, a network-stack exception, a keychain status wrapped by a platform
adapter. The diagnosis layer never interprets a cause beyond its
signature, a (domain, code) pair.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple, Union, runtime_checkable


@runtime_checkable
class UnderlyingError(Protocol):
    """Opaque collaborator error with an inspectable domain and numeric code"""

    @property
    def domain(self) -> str:
        ...

    @property
    def code(self) -> int:
        ...


@dataclass(frozen=True)
class CauseError:
    """
    Plain UnderlyingError adapter.

    Platform adapters build one of these from whatever error facility they
    wrap. `no_connectivity` is an optional hint from the network stack;
    None means "not known", which the connectivity detector treats as
    "not offline" unless the domain/code say otherwise.
    """

    domain: str
    code: int
    no_connectivity: Optional[bool] = None


Cause = Union[UnderlyingError, BaseException]


def _int_attr(obj: object, name: str) -> Optional[int]:
    value = getattr(obj, name, None)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def cause_signature(cause: Cause) -> Tuple[str, int]:
    """
    Return the (domain, code) pair of a cause.

    UnderlyingError values are used as is. Any other exception is bridged:
    its class name is the domain, and its code is `errno`, else an integer
    `code` attribute, else 0.

    Examples:
        >>> cause_signature(CauseError("NSURLErrorDomain", -1009))
        ('NSURLErrorDomain', -1009)
        >>> cause_signature(ConnectionRefusedError(111, "refused"))
        ('ConnectionRefusedError', 111)
        >>> cause_signature(ValueError("bad"))
        ('ValueError', 0)
    """
    if isinstance(cause, UnderlyingError):
        return str(cause.domain), int(cause.code)

    code = _int_attr(cause, "errno")
    if code is None:
        code = _int_attr(cause, "code")
    return type(cause).__name__, code if code is not None else 0
