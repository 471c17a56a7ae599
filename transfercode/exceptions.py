"""
Transfer Code Diagnostics - Package Exceptions

Base exception types shared by the whole package. Transfer failures
themselves live in transfercode.diagnosis.failures and derive from
TransferCodeError so callers can catch the package family in one place.
"""

from typing import Any, Dict, Optional


# ============================================================================
# Base Exceptions
# ============================================================================

class TransferCodeError(Exception):
    """Base exception for all transfercode errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(TransferCodeError):
    """Base exception for configuration errors"""
    pass


class InvalidConfigError(ConfigurationError):
    """Invalid configuration value"""

    def __init__(self, config_key: str, value: Any, reason: str, details: Optional[Dict[str, Any]] = None):
        self.config_key = config_key
        self.value = value
        self.reason = reason
        message = f"Invalid config '{config_key}': {reason}"
        super().__init__(message, details)
