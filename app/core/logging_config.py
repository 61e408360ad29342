"""JSON-lines logging for the relay container.

Every record is emitted as one JSON object so the hosting platform's log
collector can index severity and service name without parsing free text.
"""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "severity": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "service.name": self.service_name,
        }

        if hasattr(record, "relay_attributes"):
            log_dict.update(record.relay_attributes)

        if record.exc_info:
            log_dict["error.type"] = record.exc_info[0].__name__
            log_dict["error.message"] = str(record.exc_info[1])

        return json.dumps(log_dict, ensure_ascii=False, default=str)


def configure_logging(service_name: str, level: str = "INFO") -> logging.Logger:
    """Install the JSON handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter(service_name))

    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers = [handler]

    return root
