"""
Network-failure detection for transfer failure causes.

The decision "is this cause a lost-connectivity condition" belongs to the
network stack, so it goes through a ConnectivityInspector collaborator.
is_no_connectivity() fails closed: no cause, an unknown cause, or an
inspector that raises all count as "not offline".
"""

import errno
import socket
from functools import lru_cache
from typing import FrozenSet, Iterable, Iterator, Optional, Protocol

from loguru import logger
from pydantic import ValidationError
from pydantic_settings import SettingsError

from transfercode.config import get_settings
from transfercode.diagnosis.causes import Cause, UnderlyingError
from transfercode.exceptions import ConfigurationError

OFFLINE_ERRNOS: FrozenSet[int] = frozenset({errno.ENETUNREACH, errno.ENETDOWN, errno.EHOSTUNREACH})


class ConnectivityInspector(Protocol):
    def is_no_connectivity(self, cause: Cause) -> bool:
        ...


def _cause_chain(cause: Cause) -> Iterator[object]:
    """Yield the cause, then its __cause__ / __context__ links"""
    seen = set()
    current: Optional[object] = cause
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if isinstance(current, BaseException):
            current = current.__cause__ or current.__context__
        else:
            current = None


class DefaultConnectivityInspector:
    """
    Recognises offline signatures of URL-loading errors and the Python network stack.

    A cause is offline when any link of its exception chain is:
    - an object with a boolean `no_connectivity` hint (the hint decides)
    - an UnderlyingError in the offline domain with an offline code
    - a socket.gaierror (DNS resolution failed)
    - an OSError with errno ENETUNREACH, ENETDOWN or EHOSTUNREACH
    """

    def __init__(
        self,
        offline_domain: Optional[str] = None,
        offline_codes: Optional[Iterable[int]] = None,
    ):
        settings = get_settings()
        self.offline_domain = offline_domain if offline_domain is not None else settings.OFFLINE_ERROR_DOMAIN
        self.offline_codes = frozenset(
            offline_codes if offline_codes is not None else settings.OFFLINE_ERROR_CODES
        )

    def is_no_connectivity(self, cause: Cause) -> bool:
        for link in _cause_chain(cause):
            hint = getattr(link, "no_connectivity", None)
            if isinstance(hint, bool):
                return hint

            if isinstance(link, UnderlyingError):
                if link.domain == self.offline_domain and link.code in self.offline_codes:
                    return True
                continue

            if isinstance(link, socket.gaierror):
                return True
            if isinstance(link, OSError) and link.errno in OFFLINE_ERRNOS:
                return True

        return False


@lru_cache()
def get_default_inspector() -> DefaultConnectivityInspector:
    """Cached DefaultConnectivityInspector built from settings"""
    return DefaultConnectivityInspector()


def is_no_connectivity(
    cause: Optional[Cause],
    inspector: Optional[ConnectivityInspector] = None,
) -> bool:
    """
    Whether a cause means the device has no network connectivity

    Args:
        cause: Underlying cause of a failure (None is never offline)
        inspector: Collaborator doing the actual inspection
            (default: get_default_inspector())

    Returns:
        bool: True only when the inspector positively reports offline
    """
    if cause is None:
        return False

    if inspector is None:
        try:
            inspector = get_default_inspector()
        except (ConfigurationError, SettingsError, ValidationError) as e:
            logger.warning(
                f"[Connectivity] Default inspector unavailable, treating as online: {type(e).__name__}"
            )
            return False

    try:
        return inspector.is_no_connectivity(cause) is True
    except Exception as e:
        logger.warning(
            f"[Connectivity] {type(inspector).__name__} failed on {type(cause).__name__}, "
            f"treating as online: {type(e).__name__}"
        )
        return False
