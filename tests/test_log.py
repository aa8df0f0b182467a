"""Tests for logging setup."""

from __future__ import annotations

import io
import logging

from rich.console import Console
from rich.logging import RichHandler

from lgbm_harness.log import NATIVE_LOGGER_NAME, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_levels(self) -> None:
        """Test verbose switches to DEBUG."""
        assert configure_logging().level == logging.INFO
        assert configure_logging(verbose=True).level == logging.DEBUG

    def test_single_handler(self) -> None:
        """Test repeated calls do not stack handlers."""
        configure_logging()
        logger = configure_logging()
        assert sum(isinstance(h, RichHandler) for h in logger.handlers) == 1

    def test_module_loggers_render(self) -> None:
        """Test child loggers reach the Rich console."""
        buffer = io.StringIO()
        configure_logging(console=Console(file=buffer, width=200))
        logging.getLogger("lgbm_harness.smoke").info("hello from smoke")
        assert "hello from smoke" in buffer.getvalue()

    def test_native_logger_is_child(self) -> None:
        """Test LightGBM output shares the package handler."""
        buffer = io.StringIO()
        configure_logging(console=Console(file=buffer, width=200))
        logging.getLogger(NATIVE_LOGGER_NAME).warning("native line")
        assert "native line" in buffer.getvalue()
