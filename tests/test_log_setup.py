"""
Logging Setup Tests
"""

import sys

import pytest
from loguru import logger

from transfercode.config import Settings
from transfercode.exceptions import InvalidConfigError
from transfercode.utils import setup_logging


@pytest.fixture
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestSetupLogging:
    """setup_logging()"""

    def test_stderr_only_by_default(self, restore_logger):
        handler_ids = setup_logging(Settings(LOG_FILE_PATH=None))
        assert len(handler_ids) == 1

    def test_file_sink(self, tmp_path, restore_logger):
        log_file = tmp_path / "transfercode.log"
        handler_ids = setup_logging(Settings(LOG_FILE_PATH=str(log_file), LOG_LEVEL="INFO"))

        logger.info("[Test] file sink works")
        logger.complete()

        assert len(handler_ids) == 2
        assert "[Test] file sink works" in log_file.read_text(encoding="utf-8")

    def test_level_filters(self, tmp_path, restore_logger):
        log_file = tmp_path / "transfercode.log"
        setup_logging(Settings(LOG_FILE_PATH=str(log_file), LOG_LEVEL="WARNING"))

        logger.info("[Test] hidden")
        logger.warning("[Test] shown")
        logger.complete()

        content = log_file.read_text(encoding="utf-8")
        assert "[Test] hidden" not in content
        assert "[Test] shown" in content

    def test_invalid_level_is_rejected(self, restore_logger):
        with pytest.raises(InvalidConfigError):
            setup_logging(Settings(LOG_LEVEL="LOUD"))
