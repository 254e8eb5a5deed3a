"""Unit tests for logging setup."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import logging
from unittest.mock import patch
from mileage_tracker.utils import logger as log_module


class TestLogDir:
    def test_defaults_to_project_logs(self):
        with patch.object(log_module.settings, "LOG_DIR", None):
            assert os.path.basename(log_module.log_dir()) == "logs"

    def test_configured_dir_wins(self, tmp_path):
        with patch.object(log_module.settings, "LOG_DIR", str(tmp_path)):
            assert log_module.log_dir() == str(tmp_path)

    def test_file_handler_writes_into_configured_dir(self, tmp_path):
        target = tmp_path / "nested"
        with patch.object(log_module.settings, "LOG_DIR", str(target)):
            handler = log_module._file_handler("INFO", logging.Formatter(log_module.LOG_FORMAT))
        try:
            assert handler.baseFilename == str(target / "mileage.log")
            assert handler.backupCount == log_module.settings.LOG_BACKUP_COUNT
        finally:
            handler.close()


class TestGetLogger:
    def test_returns_named_logger(self):
        assert log_module.get_logger("mileage_tracker.test").name == "mileage_tracker.test"
