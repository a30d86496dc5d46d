"""Unit tests for Credo logging configuration."""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from credo.config import LoggingConfig
from credo.logging import setup_logging, setup_logging_from_config


@pytest.fixture(autouse=True)
def _reset_credo_logger():
    """Detach handlers so log files can be cleaned up between tests."""
    yield
    logger = logging.getLogger("credo")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self) -> None:
        """Log directory is created if it doesn't exist."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_dir = Path(tmpdir) / "nested" / "logs"
            setup_logging(log_dir=log_dir, console=False)

            assert log_dir.exists()

    def test_writes_to_log_file(self) -> None:
        """Log messages are written to the file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("test message 123")

            content = (Path(tmpdir) / "credo.log").read_text()
            assert "test message 123" in content

    def test_log_format(self) -> None:
        """Log entries carry level and logger name between pipes."""
        with tempfile.TemporaryDirectory() as tmpdir:
            logger = setup_logging(log_dir=tmpdir, console=False)
            logger.info("format test")

            content = (Path(tmpdir) / "credo.log").read_text()
            assert " | INFO" in content
            assert " | credo | " in content

    def test_registry_components_share_the_file(self) -> None:
        """Loggers under credo.* write to the same file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=False)

            logging.getLogger("credo.registry.registrar").info("registrar log")
            logging.getLogger("credo.api.app").info("api log")

            content = (Path(tmpdir) / "credo.log").read_text()
            assert "registrar log" in content
            assert "credo.registry.registrar" in content
            assert "api log" in content

    def test_level_from_environment(self) -> None:
        """CREDO_LOG_LEVEL sets the level when none is passed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"CREDO_LOG_LEVEL": "WARNING"}):
                logger = setup_logging(log_dir=tmpdir, console=False)

            assert logger.level == logging.WARNING

    def test_dir_from_environment(self) -> None:
        """CREDO_LOG_DIR sets the directory when none is passed."""
        with tempfile.TemporaryDirectory() as tmpdir:
            with patch.dict(os.environ, {"CREDO_LOG_DIR": tmpdir}):
                setup_logging(console=False)

            assert (Path(tmpdir) / "credo.log").exists()

    def test_repeated_setup_does_not_duplicate_handlers(self) -> None:
        """Calling setup twice leaves one set of handlers."""
        with tempfile.TemporaryDirectory() as tmpdir:
            setup_logging(log_dir=tmpdir, console=True)
            logger = setup_logging(log_dir=tmpdir, console=True)

            assert len(logger.handlers) == 2


@pytest.mark.unit
class TestSetupLoggingFromConfig:
    """Tests for setup_logging_from_config function."""

    def test_uses_config_section(self, tmp_path: Path) -> None:
        """Directory, level and console flag come from the config."""
        log_config = LoggingConfig(dir=str(tmp_path), level="WARNING", console=False)

        logger = setup_logging_from_config(log_config)

        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert (tmp_path / "credo.log").exists()

    def test_verbose_forces_debug(self, tmp_path: Path) -> None:
        log_config = LoggingConfig(dir=str(tmp_path), level="ERROR", console=False)

        logger = setup_logging_from_config(log_config, verbose=True)

        assert logger.level == logging.DEBUG
