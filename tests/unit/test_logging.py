"""Unit tests for coursereg logging configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from coursereg import logging as coursereg_logging
from coursereg.logging import get_logger, reset_logging, resolve_level, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir)

        assert (log_dir / "coursereg.log").exists()

    def test_log_format(self, tmp_path: Path) -> None:
        """Entries carry level and logger name separated by pipes."""
        logger = setup_logging(log_dir=tmp_path)
        logger.info("format test")

        content = (tmp_path / "coursereg.log").read_text()
        assert " | INFO" in content
        assert " | coursereg | format test" in content

    def test_component_loggers_share_the_file(self, tmp_path: Path) -> None:
        """Registry and shell loggers write to the same log file."""
        setup_logging(log_dir=tmp_path)

        logging.getLogger("coursereg.registry.registry").info("registry log")
        get_logger("shell").info("shell log")

        content = (tmp_path / "coursereg.log").read_text()
        assert "coursereg.registry.registry | registry log" in content
        assert "coursereg.shell | shell log" in content

    def test_file_only_by_default(self, tmp_path: Path) -> None:
        """The shell owns the terminal, so only the file handler is attached."""
        logger = setup_logging(log_dir=tmp_path)

        assert [type(h) for h in logger.handlers] == [RotatingFileHandler]

    def test_console_opt_in(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert len(logger.handlers) == 2

    def test_log_dir_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSEREG_LOG_DIR", str(tmp_path))

        setup_logging()

        assert (tmp_path / "coursereg.log").exists()

    def test_no_duplicate_handlers_on_repeated_setup(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path)
        setup_logging(log_dir=tmp_path)

        assert len(logging.getLogger("coursereg").handlers) == 1

    def test_logs_rotate_at_max_size(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log files rotate when they reach MAX_BYTES."""
        monkeypatch.setattr(coursereg_logging, "MAX_BYTES", 500)
        logger = setup_logging(log_dir=tmp_path)

        for i in range(50):
            logger.info("Rotation test message number %d with padding data", i)

        assert (tmp_path / "coursereg.log.1").exists()


@pytest.mark.unit
class TestResolveLevel:
    """Tests for resolve_level."""

    def test_default_is_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("COURSEREG_LOG_LEVEL", raising=False)

        assert resolve_level() == logging.INFO

    def test_level_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSEREG_LOG_LEVEL", "warning")

        assert resolve_level() == logging.WARNING

    def test_unknown_env_level_falls_back_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSEREG_LOG_LEVEL", "chatty")

        assert resolve_level() == logging.INFO

    def test_verbose_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSEREG_LOG_LEVEL", "ERROR")

        assert resolve_level(verbose=True) == logging.DEBUG

    def test_env_level_filters_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COURSEREG_LOG_LEVEL", "WARNING")
        logger = setup_logging(log_dir=tmp_path)
        logger.info("should not appear")
        logger.warning("should appear")

        content = (tmp_path / "coursereg.log").read_text()
        assert "should not appear" not in content
        assert "should appear" in content


@pytest.mark.unit
class TestResetLogging:
    """Tests for reset_logging."""

    def test_detaches_and_closes_handlers(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path)
        handler = logger.handlers[0]

        reset_logging()

        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert handler.stream is None


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_prefixes_coursereg(self) -> None:
        assert get_logger("shell").name == "coursereg.shell"

    def test_get_logger_no_double_prefix(self) -> None:
        assert get_logger("coursereg.registry").name == "coursereg.registry"
