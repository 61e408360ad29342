import json
import logging

from app.core.logging_config import JSONFormatter


def _record(**extra):
    record = logging.LogRecord("app.test", logging.ERROR, __file__, 1, "falhou %s", ("x",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_record_as_json():
    line = json.loads(JSONFormatter("databricks-relay").format(_record()))
    assert line["severity"] == "ERROR"
    assert line["message"] == "falhou x"
    assert line["service.name"] == "databricks-relay"
    assert "http.status_code" not in line


def test_merges_relay_attributes():
    record = _record(relay_attributes={"http.status_code": 404})
    line = json.loads(JSONFormatter("databricks-relay").format(record))
    assert line["http.status_code"] == 404
