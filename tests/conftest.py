"""
Pytest Fixtures for Transfer Code Diagnostics

Fixtures:
    - offline_cause / server_cause: URL-loading causes with and without an offline code
    - all_failures: one instance of every failure variant
    - log_messages: loguru records captured during a test
"""

import os

import pytest
from loguru import logger

from transfercode.config import get_settings
from transfercode.diagnosis import (
    Base64DecodingError,
    CannotDecodeResponse,
    CannotEncodePublicKey,
    CannotGetPublicKey,
    CauseError,
    CreateKeyError,
    DecryptionError,
    DeleteCertificateFailed,
    GetCertificateFailed,
    LoadKeyError,
    RegisterFailed,
    SignError,
)
from transfercode.diagnosis.connectivity import get_default_inspector


# ============================================================
# 1. Environment Fixtures
# ============================================================

@pytest.fixture(autouse=True)
def isolated_settings():
    """Restore environment variables and reset the Settings and inspector caches around each test"""
    original_env = os.environ.copy()
    get_settings.cache_clear()
    get_default_inspector.cache_clear()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    get_settings.cache_clear()
    get_default_inspector.cache_clear()


# ============================================================
# 2. Cause Fixtures
# ============================================================

@pytest.fixture
def offline_cause():
    """notConnectedToInternet"""
    return CauseError(domain="NSURLErrorDomain", code=-1009)


@pytest.fixture
def server_cause():
    """badServerResponse"""
    return CauseError(domain="NSURLErrorDomain", code=-1011)


@pytest.fixture
def crypto_cause():
    return CauseError(domain="CryptoKit.CryptoKitError", code=3)


# ============================================================
# 3. Failure Fixtures
# ============================================================

@pytest.fixture
def client_failures(crypto_cause):
    return [
        Base64DecodingError(),
        DecryptionError(cause=crypto_cause, prefix="transfer"),
        SignError(cause=crypto_cause),
        LoadKeyError(os_status=-25300),
        CreateKeyError(cause=crypto_cause),
        CannotGetPublicKey(),
        CannotEncodePublicKey(cause=crypto_cause),
    ]


@pytest.fixture
def network_failures(server_cause):
    return [
        RegisterFailed(cause=server_cause),
        GetCertificateFailed(cause=server_cause),
        CannotDecodeResponse(status_code=503),
        DeleteCertificateFailed(cause=server_cause),
    ]


@pytest.fixture
def all_failures(client_failures, network_failures):
    return client_failures + network_failures


# ============================================================
# 4. Logging Fixtures
# ============================================================

@pytest.fixture
def log_messages():
    """Collect loguru records as (level, message) tuples"""
    records = []
    handler_id = logger.add(
        lambda message: records.append((message.record["level"].name, message.record["message"])),
        level="DEBUG",
    )

    yield records

    logger.remove(handler_id)


# ============================================================
# 5. Pytest Configuration
# ============================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: unit tests (fast, no collaborators)"
    )
