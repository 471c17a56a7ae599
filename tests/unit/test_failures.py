"""
Transfer Failure Variant Tests

Closed variant set, value semantics, and exception behaviour.
"""

import copy
import pickle
from dataclasses import dataclass

import pytest

from transfercode.diagnosis import (
    FAILURE_VARIANTS,
    Base64DecodingError,
    CannotDecodeResponse,
    CauseError,
    DecryptionError,
    LoadKeyError,
    RegisterFailed,
    TransferError,
)
from transfercode.exceptions import TransferCodeError


pytestmark = pytest.mark.unit


class TestVariantSet:
    """The closed set of failure variants"""

    def test_eleven_variants(self):
        assert len(FAILURE_VARIANTS) == 11
        assert len(set(FAILURE_VARIANTS)) == 11

    def test_fixtures_cover_every_variant(self, all_failures):
        assert {type(f) for f in all_failures} == set(FAILURE_VARIANTS)

    def test_variants_are_package_exceptions(self, all_failures):
        for failure in all_failures:
            assert isinstance(failure, TransferError)
            assert isinstance(failure, TransferCodeError)

    def test_payload_defaults(self):
        failure = DecryptionError()
        assert failure.cause is None
        assert failure.prefix is None
        assert LoadKeyError().os_status is None

    def test_status_code_is_required(self):
        with pytest.raises(TypeError):
            CannotDecodeResponse()


class TestValueSemantics:
    """Variants compare and hash by type and payload"""

    def test_equal_payloads_are_equal(self, offline_cause):
        assert RegisterFailed(cause=offline_cause) == RegisterFailed(
            cause=CauseError("NSURLErrorDomain", -1009)
        )
        assert hash(LoadKeyError(os_status=-25300)) == hash(LoadKeyError(os_status=-25300))

    def test_unhashable_cause(self):
        @dataclass
        class BackendError:
            domain: str
            code: int

        first = RegisterFailed(cause=BackendError("com.example.Backend", 42))
        second = RegisterFailed(cause=BackendError("com.example.Backend", 42))

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_different_payloads_differ(self):
        assert LoadKeyError(os_status=-25300) != LoadKeyError(os_status=-34018)
        assert CannotDecodeResponse(status_code=500) != CannotDecodeResponse(status_code=503)

    def test_different_variants_differ(self, offline_cause):
        from transfercode.diagnosis import GetCertificateFailed

        assert RegisterFailed(cause=offline_cause) != GetCertificateFailed(cause=offline_cause)

    def test_payload_is_read_only(self, offline_cause):
        failure = RegisterFailed(cause=offline_cause)

        with pytest.raises(AttributeError):
            failure.cause = None

        assert failure.cause == offline_cause

    def test_usable_as_dict_key(self):
        counts = {Base64DecodingError(): 1}
        counts[Base64DecodingError()] += 1
        assert counts == {Base64DecodingError(): 2}

    def test_pickle_and_copy_preserve_value(self, crypto_cause):
        failure = DecryptionError(cause=crypto_cause, prefix="transfer")

        assert pickle.loads(pickle.dumps(failure)) == failure
        assert copy.copy(failure) == failure


class TestExceptionBehaviour:
    """Variants are raised and caught like any exception"""

    def test_raise_and_catch(self, offline_cause):
        with pytest.raises(TransferError) as exc_info:
            raise RegisterFailed(cause=offline_cause)

        assert exc_info.value.cause == offline_cause

    def test_raise_from_keeps_chain(self):
        original = ValueError("bad padding")

        with pytest.raises(DecryptionError) as exc_info:
            try:
                raise original
            except ValueError as e:
                raise DecryptionError(cause=e, prefix="transfer") from e

        assert exc_info.value.__cause__ is original

    def test_str_shows_code_and_summary(self):
        assert str(CannotDecodeResponse(status_code=503)) == "[N|CDR503] server response unparsable"
        assert str(Base64DecodingError()) == "[C|B64] malformed base64 payload"

    def test_error_code_property(self):
        assert LoadKeyError(os_status=-25300).error_code == "C|LKE-25300"
