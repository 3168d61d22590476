"""
JSON codec for the store file.

Works on plain mappings so the encoding can be exercised without the
Employee type.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from .errors import DecodeError, WriteError


def decode(data: bytes) -> list[dict[str, Any]]:
    try:
        payload = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Store file is not valid JSON: {exc}", exc) from exc
    if not isinstance(payload, list):
        raise DecodeError(f"Store file must hold a JSON array, got {type(payload).__name__}")
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DecodeError(f"Entry {index} is not a JSON object")
    return payload


def encode(records: Sequence[Mapping[str, Any]], pretty: bool = True) -> bytes:
    try:
        text = json.dumps(list(records), ensure_ascii=False, indent=2 if pretty else None)
    except (TypeError, ValueError) as exc:
        raise WriteError(f"Could not encode records: {exc}", exc) from exc
    return text.encode("utf-8")
