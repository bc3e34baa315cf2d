import io
import json

import pytest

from recordkeep.logging import LoggingSettings, LogLevel, RecordkeepLogger, get_logger


@pytest.fixture
def stream() -> io.StringIO:
    return io.StringIO()


def make_logger(stream, **overrides) -> RecordkeepLogger:
    options = {"include_timestamp": False, "console_enabled": True, **overrides}
    settings = LoggingSettings(**options)
    return RecordkeepLogger("recordkeep.test.logger", level="DEBUG", settings=settings, stream=stream)


def test_logs_message_with_context(stream):
    logger = make_logger(stream)
    logger.info("Stored record", id=4)
    assert stream.getvalue().strip() == "Stored record [INFO] id=4"


def test_level_filters_messages(stream):
    logger = make_logger(stream)
    logger.set_level(LogLevel.WARNING)
    logger.info("hidden")
    logger.warning("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_bind_adds_context_to_new_logger(stream):
    logger = make_logger(stream).bind(app="warehouse")
    logger.debug("hello")
    assert "app=warehouse" in stream.getvalue()


def test_context_manager_scopes_values(stream):
    logger = make_logger(stream)
    with logger.context(request="r1"):
        logger.info("inside")
    logger.info("outside")
    lines = stream.getvalue().splitlines()
    assert "request=r1" in lines[0]
    assert "request" not in lines[1]


def test_json_format(stream):
    logger = make_logger(stream, json_format=True)
    logger.error("Failed", path="x.json")
    data = json.loads(stream.getvalue())
    assert data["message"] == "Failed"
    assert data["level"] == "ERROR"
    assert data["path"] == "x.json"


def test_exception_includes_traceback(stream):
    logger = make_logger(stream)
    try:
        raise ValueError("boom")
    except ValueError:
        logger.exception("Crashed")
    output = stream.getvalue()
    assert "Crashed" in output
    assert "ValueError: boom" in output


def test_console_disabled_emits_nothing(stream):
    logger = make_logger(stream, console_enabled=False)
    logger.critical("nobody hears this")
    assert stream.getvalue() == ""


def test_file_output(tmp_path):
    log_file = tmp_path / "app.log"
    settings = LoggingSettings(console_enabled=False, file_enabled=True, file_path=str(log_file))
    logger = RecordkeepLogger("recordkeep.test.file", settings=settings)
    logger.warning("to file")
    assert "to file" in log_file.read_text()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("RECORDKEEP_LOGGING_LEVEL", "debug")
    monkeypatch.setenv("RECORDKEEP_LOGGING_JSON_FORMAT", "true")
    settings = LoggingSettings.load()
    assert settings.level == "DEBUG"
    assert settings.json_format is True


def test_invalid_level_rejected():
    with pytest.raises(ValueError):
        LoggingSettings(level="LOUD")


def test_get_logger_level_override(stream):
    settings = LoggingSettings(console_enabled=True, include_timestamp=False)
    logger = get_logger(
        "recordkeep.test.factory", level=LogLevel.ERROR, settings=settings, stream=stream
    )
    logger.warning("quiet")
    logger.error("loud")
    assert "quiet" not in stream.getvalue()
    assert "loud" in stream.getvalue()


def test_log_level_helpers():
    assert LogLevel.from_string("info") is LogLevel.INFO
    assert LogLevel.ERROR.to_stdlib_level() == 40
    with pytest.raises(ValueError):
        LogLevel.from_string("verbose")
