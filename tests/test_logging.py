"""Tests for the logging helpers."""

import io
import logging

import pytest

from canvas_converter.utils import log_exception, reset_logging, setup_logging
from canvas_converter.utils.logging import LogFormatter


@pytest.fixture
def stream():
    yield io.StringIO()
    reset_logging()
    reset_logging('css')


class TestSetupLogging:
    """setup_logging"""

    def test_library_installs_no_handlers_on_import(self):
        import canvas_converter  # noqa: F401
        handlers = logging.getLogger('canvas_converter').handlers
        assert all(isinstance(handler, logging.NullHandler) for handler in handlers)

    def test_console_output(self, stream):
        logger = setup_logging(stream=stream, colored=False)
        logger.info("converter ready")
        assert "[INFO] canvas_converter: converter ready" in stream.getvalue()

    def test_console_level(self, stream):
        logger = setup_logging(console_level="WARNING", stream=stream, colored=False)
        logger.info("hidden")
        logger.warning("shown")
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_component_logger(self, stream):
        logger = setup_logging(component='css', stream=stream, colored=False)
        assert logger.name == 'canvas_converter.css'

    def test_idempotent(self, stream):
        first = setup_logging(stream=stream, colored=False)
        second = setup_logging(stream=stream, colored=False)
        assert first is second
        assert len([h for h in first.handlers if not isinstance(h, logging.NullHandler)]) == 1

    def test_module_debug_messages_reach_configured_logger(self, stream):
        setup_logging(console_level="DEBUG", stream=stream, colored=False)
        from canvas_converter.css import parse_size
        assert parse_size('10foo') is None
        assert "10foo" in stream.getvalue()

    def test_file_output(self, stream, tmp_path):
        log_file = tmp_path / "logs" / "converter.log"
        logger = setup_logging(log_file=str(log_file), console_level="ERROR", stream=stream, colored=False)
        logger.debug("detailed message")
        for handler in logger.handlers:
            handler.flush()
        assert "detailed message" in log_file.read_text()
        assert "detailed message" not in stream.getvalue()


class TestLogFormatter:
    """LogFormatter"""

    def _record(self, level):
        return logging.LogRecord('canvas_converter', level, __file__, 1, "message", None, None)

    def test_plain(self):
        formatter = LogFormatter(colored=False, fmt="[%(levelname)s] %(message)s")
        assert formatter.format(self._record(logging.INFO)) == "[INFO] message"

    def test_colored(self, monkeypatch):
        monkeypatch.setattr('sys.platform', 'linux')
        formatter = LogFormatter(colored=True, fmt="[%(levelname)s] %(message)s")
        formatted = formatter.format(self._record(logging.ERROR))
        assert LogFormatter.LEVEL_COLORS['ERROR'] in formatted
        assert formatted.endswith("message")


class TestLogException:
    """log_exception"""

    def test_logs_message_and_traceback(self, caplog):
        logger = logging.getLogger('canvas_converter.tests')
        try:
            raise ValueError("bad value")
        except ValueError as e:
            log_exception(logger, e, "Conversion failed")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "Conversion failed: bad value"
        assert record.exc_info[0] is ValueError
