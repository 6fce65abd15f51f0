"""
Tests for logging configuration.
"""

import io
import json
import logging
import sys

import pytest

from geodoc import parse_text
from geodoc.core.config import settings
from geodoc.core.logging_config import (
    LIBRARY_LOGGER_NAME,
    JSONFormatter,
    get_log_level,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def restore_library_logger():
    """Undo setup_logging changes to the geodoc logger after each test."""
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers = library_logger.handlers[:]
    level = library_logger.level
    propagate = library_logger.propagate
    yield
    for handler in library_logger.handlers:
        if handler not in handlers:
            handler.close()
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="geodoc.core.document",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg="Parsing GeoJSON %s document",
        args=("Feature",),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:
    """Tests for resolving log levels."""

    def test_level_names(self):
        """Test log level name conversion."""
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("info") == logging.INFO
        assert get_log_level("Warning") == logging.WARNING
        assert get_log_level("ERROR") == logging.ERROR
        assert get_log_level("invalid") == logging.INFO  # Default

    def test_level_from_settings(self, monkeypatch):
        """Test the configured level is used when none is passed."""
        monkeypatch.setattr(settings, "log_level", "ERROR")
        assert get_log_level() == logging.ERROR

    @pytest.mark.parametrize(
        "environment,level",
        [("development", logging.DEBUG), ("production", logging.WARNING)],
    )
    def test_level_from_environment(self, monkeypatch, environment, level):
        """Test the environment picks the level when none is configured."""
        monkeypatch.setattr(settings, "log_level", None)
        monkeypatch.setattr(settings, "environment", environment)
        assert get_log_level() == level


class TestGetLogger:
    """Tests for module loggers."""

    def test_module_name_kept(self):
        """Test geodoc module names map to their standard loggers."""
        assert get_logger("geodoc.core.document") is logging.getLogger("geodoc.core.document")

    def test_library_logger(self):
        """Test the library logger itself is returned as is."""
        assert get_logger("geodoc") is logging.getLogger("geodoc")

    def test_other_names_nested(self):
        """Test other names are placed under the geodoc logger."""
        assert get_logger("scripts.convert").name == "geodoc.scripts.convert"


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_text_output(self):
        """Test records are written to the given stream."""
        stream = io.StringIO()
        setup_logging(log_level="DEBUG", stream=stream)

        parse_text('{"type": "Point", "coordinates": [1, 2]}')

        output = stream.getvalue()
        assert "DEBUG - " in output
        assert "geodoc.core.document" in output
        assert "Parsing GeoJSON Point document" in output

    def test_json_output(self):
        """Test records are written as JSON with the document type."""
        stream = io.StringIO()
        setup_logging(log_level="DEBUG", json_logs=True, stream=stream)

        parse_text('{"type": "FeatureCollection", "features": []}')

        records = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert {
            "level": "DEBUG",
            "logger": "geodoc.core.document",
            "message": "Parsing GeoJSON FeatureCollection document",
            "document_type": "FeatureCollection",
        }.items() <= records[0].items()

    def test_level_filters(self):
        """Test records below the level are dropped."""
        stream = io.StringIO()
        setup_logging(log_level="WARNING", stream=stream)

        parse_text('{"type": "Point", "coordinates": [1, 2]}')

        assert stream.getvalue() == ""

    def test_repeated_setup_replaces_handler(self):
        """Test calling setup twice leaves one handler."""
        setup_logging(log_level="INFO", stream=io.StringIO())
        library_logger = setup_logging(log_level="INFO", stream=io.StringIO())

        assert library_logger is logging.getLogger("geodoc")
        assert len(library_logger.handlers) == 1
        assert library_logger.propagate is False

    def test_root_logger_untouched(self):
        """Test setup only configures the geodoc logger."""
        root_logger = logging.getLogger()
        handlers = root_logger.handlers[:]
        level = root_logger.level

        setup_logging(log_level="DEBUG", stream=io.StringIO())

        assert root_logger.handlers == handlers
        assert root_logger.level == level


class TestJSONFormatter:
    """Tests for the JSON formatter."""

    def test_fields(self):
        """Test records are written as JSON."""
        output = json.loads(JSONFormatter().format(make_record()))

        assert output["level"] == "DEBUG"
        assert output["logger"] == "geodoc.core.document"
        assert output["message"] == "Parsing GeoJSON Feature document"
        assert "document_type" not in output

    def test_document_type(self):
        """Test the document type extra is included."""
        output = json.loads(JSONFormatter().format(make_record(document_type="Feature")))
        assert output["document_type"] == "Feature"

    def test_exception(self):
        """Test exception text is included."""
        try:
            raise ValueError("bad")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        output = json.loads(JSONFormatter().format(record))
        assert "ValueError: bad" in output["exception"]


class TestLibraryLogging:
    """Tests for records emitted by geodoc itself."""

    def test_dispatch_is_logged(self, caplog):
        """Test document classification emits a debug record."""
        with caplog.at_level(logging.DEBUG, logger="geodoc.core.document"):
            parse_text('{"type": "Point", "coordinates": [1, 2]}')

        assert "Parsing GeoJSON Point document" in caplog.text
        assert caplog.records[-1].document_type == "Point"

    def test_failures_are_not_logged(self, caplog):
        """Test failures are raised, not logged."""
        with caplog.at_level(logging.DEBUG, logger="geodoc"):
            with pytest.raises(Exception):
                parse_text('{"type": "NotAType"}')

        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
