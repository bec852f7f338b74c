import json
import logging

from profile_service.infrastructure.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("profile_service.requests", logging.INFO, __file__, 1, "Request completed", None, None)
    record.method = "GET"
    record.status_code = 200
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "Request completed"
    assert out["level"] == "INFO"
    assert out["method"] == "GET"
    assert out["status_code"] == 200
    assert "path" not in out


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    previous_level = root.level
    try:
        setup_logging("debug", "text")
        setup_logging("debug", "json")
        ours = [h for h in root.handlers if getattr(h, "_profile_service", False)]
        assert len(ours) == 1
        assert isinstance(ours[0].formatter, JSONFormatter)
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous_level)
