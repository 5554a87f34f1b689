import json
from typing import Any


def as_array(value: Any) -> list[Any]:
    """Return ``value`` in JSON-array form.

    Array roots pass through untouched; objects and scalars become a single-element array.
    """
    if isinstance(value, list):
        return value
    return [value]


def render_array(value: Any) -> bytes:
    """Serialize ``value`` as a compact UTF-8 JSON array."""
    return json.dumps(as_array(value), ensure_ascii=False, allow_nan=False, separators=(",", ":")).encode("utf-8")
