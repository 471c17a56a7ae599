"""
Failure Analyzer for Transfer Code Diagnosis

Composes the diagnostic code, recoverability and presentation of a failure
into a single record for support tooling and telemetry.
"""

from typing import Any, Dict, Optional, Union

from loguru import logger

from transfercode.diagnosis.connectivity import ConnectivityInspector
from transfercode.diagnosis.error_classifier import ErrorClassifier
from transfercode.diagnosis.error_codes import encode
from transfercode.diagnosis.failures import TransferFailure
from transfercode.diagnosis.presentation import Phase, is_offline_failure, select_icons, select_text


class FailureAnalyzer:
    """
    Builds diagnosis records for transfer failures.

    Records carry keys and codes only; the raw cause text never ends up in
    a record or a log line.
    """

    @staticmethod
    def analyze(
        failure: TransferFailure,
        phase: Union[Phase, str],
        inspector: Optional[ConnectivityInspector] = None,
    ) -> Dict[str, Any]:
        """
        Analyze a transfer failure

        Args:
            failure: Transfer failure variant
            phase: Phase the failure surfaced in
            inspector: Connectivity collaborator (default: DefaultConnectivityInspector)

        Returns:
            Dict with:
                - error_code: Diagnostic code
                - origin: "C" (client) or "N" (network)
                - recoverable: Whether a retry may be offered
                - no_connectivity: Offline registration / certificate fetch
                - phase: "generate" or "update"
                - icon, corner_icon, title, body: Presentation keys

        Examples:
            >>> record = FailureAnalyzer.analyze(CannotDecodeResponse(status_code=503), "update")
            >>> record["error_code"], record["recoverable"]
            ('N|CDR503', True)
        """
        phase = Phase(phase)
        offline = is_offline_failure(failure, inspector)
        icon, corner_icon = select_icons(failure, offline=offline)
        title, body = select_text(failure, phase, offline=offline)

        return {
            "error_code": encode(failure),
            "origin": ErrorClassifier.classify(failure).value,
            "recoverable": ErrorClassifier.is_recoverable(failure),
            "no_connectivity": offline,
            "phase": phase.value,
            "icon": icon,
            "corner_icon": corner_icon,
            "title": title,
            "body": body,
        }

    @staticmethod
    def report(
        failure: TransferFailure,
        phase: Union[Phase, str],
        inspector: Optional[ConnectivityInspector] = None,
    ) -> Dict[str, Any]:
        """Analyze a failure and log the record (ERROR if permanent, WARNING if retryable)"""
        record = FailureAnalyzer.analyze(failure, phase, inspector)

        message = (
            f"[Diagnosis] {record['phase']} failed with {record['error_code']} "
            f"(recoverable={record['recoverable']}, no_connectivity={record['no_connectivity']})"
        )
        if record["recoverable"]:
            logger.warning(message)
        else:
            logger.error(message)

        return record
