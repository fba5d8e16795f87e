"""Tolerant JSON parsing.

API bodies may be HTML error pages, empty strings or JSON of the wrong
shape. `try_parse_object` returns a success flag instead of raising, so
callers treat "not JSON" and "JSON but not an object" the same way.
"""

from __future__ import annotations

import json
from typing import Any


def try_parse_object(text: str) -> tuple[dict[str, Any], bool]:
    """Parse `text` as a JSON object; `({}, False)` if it is anything else."""

    try:
        value = json.loads(text)
    except (TypeError, ValueError, RecursionError):
        return {}, False
    if not isinstance(value, dict):
        return {}, False
    return value, True


def dump_json(value: object) -> str:
    """Compact, stable JSON rendering of a raw payload for diagnostics."""

    try:
        return json.dumps(value, ensure_ascii=False, sort_keys=True)
    except (TypeError, ValueError):
        return repr(value)
