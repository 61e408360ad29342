"""Total accessors over the loosely typed downstream document.

The serving endpoint answers with arbitrary JSON: null, a mapping, a list or
a bare primitive. These helpers never raise; a missing or mistyped field
reads as ``None`` or as an empty container.
"""

import json
from typing import Any, Dict, List, Optional


def is_present(value: Any) -> bool:
    """Truthiness used for fallbacks: containers always count, even empty."""
    if isinstance(value, (dict, list)):
        return True
    if isinstance(value, float) and value != value:
        return False
    return bool(value)


def as_mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def get_field(document: Any, key: str) -> Optional[Any]:
    if isinstance(document, dict):
        return document.get(key)
    return None


def to_json(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)


def to_text(value: Any) -> str:
    """Render a JSON value the way it reads in a reply line."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(to_text(item) for item in value)
    if isinstance(value, dict):
        return to_json(value)
    return str(value)
