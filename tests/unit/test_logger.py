# File: tests/unit/test_logger.py

import logging
import sys

from calsync.core.config_manager import Config
from calsync.utils.logger import setup_logger


class TestSetupLogger:

    def test_console_output_goes_to_stderr(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)

        logger = setup_logger("calsync.test_console_stream")

        streams = [h.stream for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert streams == [sys.stderr]

    def test_handlers_are_not_duplicated(self, monkeypatch):
        monkeypatch.setattr(Config, "LOG_TO_FILE", False)

        first = setup_logger("calsync.test_duplicate_handlers")
        second = setup_logger("calsync.test_duplicate_handlers")

        assert first is second
        assert len(second.handlers) == 1
