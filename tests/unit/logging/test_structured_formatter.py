import json
import logging

from recordkeep.logging import StructuredFormatter, log_context


def make_record(msg: str = "msg", **context) -> logging.LogRecord:
    record = logging.LogRecord(
        name="recordkeep.test", level=logging.INFO, pathname="", lineno=0, msg=msg, args=(), exc_info=None
    )
    if context:
        record.recordkeep_context = context
    return record


def test_structured_formatter_json():
    fmt = StructuredFormatter(json_format=True, include_timestamp=False, include_level=False)
    formatted = fmt.format(make_record("msg", id=3))
    data = json.loads(formatted)
    assert data["message"] == "msg"
    assert data["id"] == 3
    assert "level" not in data


def test_structured_formatter_plain():
    fmt = StructuredFormatter(json_format=False, include_timestamp=True, include_level=True)
    formatted = fmt.format(make_record("plain"))
    assert "plain" in formatted
    assert "[INFO]" in formatted


def test_plain_context_rendering():
    fmt = StructuredFormatter(include_timestamp=False, include_level=False)
    formatted = fmt.format(make_record("saved", path="/tmp/a b.json", count=2))
    assert formatted == 'saved path="/tmp/a b.json" count=2'


def test_log_context_applies_to_every_record():
    fmt = StructuredFormatter(include_timestamp=False, include_level=False)
    with log_context(session="s1"):
        assert fmt.format(make_record("inside")) == "inside session=s1"
    assert fmt.format(make_record("outside")) == "outside"
