"""
Transfer Code Diagnostics Configuration Management

Centralized configuration using Pydantic Settings for type-safe environment variable management.
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

from transfercode.exceptions import InvalidConfigError

VALID_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # ========================================
    # Logging Configuration
    # ========================================
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    LOG_FILE_PATH: Optional[str] = Field(
        default=None, description="Log file path (file sink disabled when unset)"
    )

    LOG_ROTATION: str = Field(default="1 day", description="Log rotation interval")

    LOG_RETENTION: str = Field(default="30 days", description="Log retention period")

    LOG_FORMAT: str = Field(
        default="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        description="Log format string",
    )

    # ========================================
    # Connectivity Detection
    # ========================================
    OFFLINE_ERROR_DOMAIN: str = Field(
        default="NSURLErrorDomain",
        description="Error domain whose codes are checked for offline signatures",
    )

    # notConnectedToInternet, networkConnectionLost, dnsLookupFailed,
    # internationalRoamingOff, dataNotAllowed
    OFFLINE_ERROR_CODES: List[int] = Field(
        default=[-1009, -1005, -1006, -1018, -1020],
        description="Codes in OFFLINE_ERROR_DOMAIN that mean the device is offline",
    )

    # ========================================
    # Development/Debug
    # ========================================
    DEBUG: bool = Field(default=False, description="Enable debug mode")

    TESTING: bool = Field(default=False, description="Enable testing mode")

    class Config:
        """Pydantic configuration"""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignore extra environment variables

    def validate_log_level(self) -> None:
        """Validate that LOG_LEVEL is a level loguru knows"""
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise InvalidConfigError(
                "LOG_LEVEL",
                self.LOG_LEVEL,
                f"must be one of {', '.join(VALID_LOG_LEVELS)}",
            )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    This function uses lru_cache to ensure Settings is only instantiated once.
    Subsequent calls will return the same instance.

    Returns:
        Settings: Cached settings instance

    Example:
        >>> from transfercode.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.OFFLINE_ERROR_DOMAIN)
        NSURLErrorDomain
    """
    return Settings()
