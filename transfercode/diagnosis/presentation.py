"""
Icon and message selection for transfer failures.

The same failure surfaces in two places of the user journey:
- Phase.GENERATE: first-time transfer code creation
- Phase.UPDATE: background certificate renewal

Icons depend only on whether the failure is an offline registration or
certificate fetch. Title/body keys depend on that and on the phase. The two
selections are independent functions; present() composes them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

from typing_extensions import assert_never

from transfercode.diagnosis.connectivity import ConnectivityInspector, is_no_connectivity
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


class Phase(Enum):
    GENERATE = "generate"
    UPDATE = "update"


# Icon asset keys
ICON_ERROR = "ic-error-orange"
ICON_NO_INTERNET = "ic-nocon"
CORNER_ICON_ERROR = "corner-left-error"
CORNER_ICON_NO_INTERNET = "corner-left-no-internet"

# Localization keys
NO_INTERNET_TITLE = "wallet_transfer_code_no_internet_title"

GENERATE_ERROR_TITLE = "wallet_transfer_code_generate_error_title"
GENERATE_ERROR_TEXT = "wallet_transfer_code_generate_error_text"
GENERATE_NO_INTERNET_TEXT = "wallet_transfer_code_generate_no_internet_error_text"

UPDATE_ERROR_TITLE = "wallet_transfer_code_update_error_title"
UPDATE_ERROR_TEXT = "wallet_transfer_code_update_general_error_text"
UPDATE_NO_INTERNET_TEXT = "wallet_transfer_code_update_no_internet_error_text"


@dataclass(frozen=True)
class LocalizedMessage:
    icon: str
    corner_icon: str
    title: str
    body: str


@dataclass(frozen=True)
class PresentationBundle:
    """Asset and localization keys to render a failure"""

    icon: str
    corner_icon: str
    title: str
    body: str

    def localize(self, lookup: Callable[[str], str]) -> LocalizedMessage:
        """Resolve title/body keys through the caller's localization lookup"""
        return LocalizedMessage(
            icon=self.icon,
            corner_icon=self.corner_icon,
            title=lookup(self.title),
            body=lookup(self.body),
        )


def is_offline_failure(
    failure: TransferFailure,
    inspector: Optional[ConnectivityInspector] = None,
) -> bool:
    """
    Whether a failure is a registration or certificate fetch that failed for lack of connectivity.

    Every other variant is never offline, whatever its cause.
    """
    if isinstance(failure, (RegisterFailed, GetCertificateFailed)):
        return is_no_connectivity(failure.cause, inspector)
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
            CannotDecodeResponse,
            DeleteCertificateFailed,
        ),
    ):
        return False
    assert_never(failure)


def select_icons(
    failure: TransferFailure,
    inspector: Optional[ConnectivityInspector] = None,
    offline: Optional[bool] = None,
) -> Tuple[str, str]:
    """
    Return (icon, corner_icon) for a failure; the phase does not matter

    `offline` is a connectivity answer already obtained for this failure;
    the inspector is only asked when it is None.
    """
    if offline is None:
        offline = is_offline_failure(failure, inspector)

    if offline:
        return ICON_NO_INTERNET, CORNER_ICON_NO_INTERNET
    return ICON_ERROR, CORNER_ICON_ERROR


def select_text(
    failure: TransferFailure,
    phase: Union[Phase, str],
    inspector: Optional[ConnectivityInspector] = None,
    offline: Optional[bool] = None,
) -> Tuple[str, str]:
    """
    Return (title, body) localization keys for a failure in a phase

    `offline` works as in select_icons().

    Raises:
        ValueError: phase is not a Phase value
    """
    phase = Phase(phase)
    if offline is None:
        offline = is_offline_failure(failure, inspector)

    if phase is Phase.GENERATE:
        if offline:
            return NO_INTERNET_TITLE, GENERATE_NO_INTERNET_TEXT
        return GENERATE_ERROR_TITLE, GENERATE_ERROR_TEXT
    if phase is Phase.UPDATE:
        if offline:
            return NO_INTERNET_TITLE, UPDATE_NO_INTERNET_TEXT
        return UPDATE_ERROR_TITLE, UPDATE_ERROR_TEXT
    assert_never(phase)


def present(
    failure: TransferFailure,
    phase: Union[Phase, str],
    inspector: Optional[ConnectivityInspector] = None,
) -> PresentationBundle:
    """
    Select icon, corner icon, title and body keys for a failure

    The inspector is asked once, so icons and text always describe the same case.

    Args:
        failure: Transfer failure variant
        phase: Phase.GENERATE or Phase.UPDATE (or their string values)
        inspector: Connectivity collaborator (default: DefaultConnectivityInspector)

    Returns:
        PresentationBundle: Keys for rendering; never contains cause text

    Examples:
        >>> present(CannotGetPublicKey(), Phase.UPDATE).title
        'wallet_transfer_code_update_error_title'
    """
    offline = is_offline_failure(failure, inspector)
    icon, corner_icon = select_icons(failure, offline=offline)
    title, body = select_text(failure, phase, offline=offline)
    return PresentationBundle(icon=icon, corner_icon=corner_icon, title=title, body=body)
