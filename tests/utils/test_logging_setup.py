"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from docwright.utils.logging_setup import setup_logging


class TestSetupLogging:
    """Test cases for setup_logging."""

    def test_rich_handler(self):
        root_logger = setup_logging("DEBUG")

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], RichHandler)

    def test_plain_handler(self):
        root_logger = setup_logging("warning", use_rich=False)

        assert root_logger.level == logging.WARNING
        assert not isinstance(root_logger.handlers[0], RichHandler)
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")
