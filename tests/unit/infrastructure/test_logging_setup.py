"""Tests for structured logging setup."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from creational.config.schemas import LoggingConfig
from creational.infrastructure.logging import configure_default_logging, get_logger, setup_logging


@pytest.mark.unit
@pytest.mark.usefixtures("restore_logging")
class TestLoggingSetup:
    """Test cases for setup_logging."""

    def test_defaults_log_to_stdout(self):
        setup_logging()
        root_logger = logging.getLogger()

        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 1
        assert not isinstance(root_logger.handlers[0], RotatingFileHandler)

    def test_level_is_applied(self):
        setup_logging(LoggingConfig(level="debug"))

        assert logging.getLogger().level == logging.DEBUG

    def test_file_destination(self, tmp_path):
        log_file = tmp_path / "logs" / "app.log"
        config = LoggingConfig(destination="file", format="json", file_path=str(log_file))

        setup_logging(config)
        get_logger("tests.logging").info("hello", answer=42)
        for handler in logging.getLogger().handlers:
            handler.flush()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "hello"
        assert record["answer"] == 42
        assert record["level"] == "info"
        assert record["logger"] == "tests.logging"

    def test_both_destinations(self, tmp_path):
        config = LoggingConfig(destination="both", file_path=str(tmp_path / "app.log"))

        setup_logging(config)

        assert len(logging.getLogger().handlers) == 2

    def test_stdlib_records_are_rendered(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(LoggingConfig(destination="file", format="json", file_path=str(log_file)))

        logging.getLogger("tests.stdlib").warning("plain %s", "record")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "plain record"
        assert record["level"] == "warning"

    def test_records_below_level_are_dropped(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(LoggingConfig(level="ERROR", destination="file", file_path=str(log_file)))

        get_logger("tests.logging").info("quiet")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "quiet" not in log_file.read_text()


@pytest.mark.unit
class TestLoggingConfig:
    """Test cases for LoggingConfig validation."""

    @pytest.mark.parametrize(
        "field,value",
        [("level", "LOUD"), ("destination", "syslog"), ("format", "xml"), ("max_size_mb", 0)],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            LoggingConfig(**{field: value})


@pytest.mark.unit
@pytest.mark.usefixtures("restore_logging")
class TestDefaultLogging:
    """Test cases for logging before setup_logging runs."""

    def test_debug_records_are_not_printed(self, capsys):
        configure_default_logging()

        get_logger("tests.default").debug("should stay quiet", detail=1)
        get_logger("tests.default").info("also quiet")

        captured = capsys.readouterr()
        assert "quiet" not in captured.out
        assert "quiet" not in captured.err

    def test_records_go_through_stdlib(self, caplog):
        configure_default_logging()
        caplog.set_level(logging.WARNING, logger="tests.default")

        get_logger("tests.default").warning("disk nearly full", percent=95)

        record = next(r for r in caplog.records if r.name == "tests.default")
        assert record.levelno == logging.WARNING
        assert "disk nearly full" in record.getMessage()
        assert "percent=95" in record.getMessage()
