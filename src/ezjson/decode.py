"""Decode JSON text into a generic value tree with lossless numbers."""

from __future__ import annotations

import json

from .errors import JsonDecodeError
from .runtime.logging import get_logger
from .values import JsonNumber, JsonValue


def _reject_constant(name: str) -> JsonValue:
    raise ValueError(f"{name} is not valid JSON")


def _decode(content: str | bytes | bytearray) -> JsonValue:
    get_logger().debug("ezjson: decoding %d bytes/chars", len(content))
    try:
        return json.loads(
            content,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(exc.msg, exc.lineno, exc.colno) from exc
    except UnicodeDecodeError as exc:
        raise JsonDecodeError(f"cannot decode input as {exc.encoding}") from exc
    except ValueError as exc:
        raise JsonDecodeError(str(exc)) from exc
    except RecursionError as exc:
        raise JsonDecodeError("maximum nesting depth exceeded") from exc


def decode_bytes(content: bytes | bytearray) -> JsonValue:
    """Decode a JSON document from bytes (UTF-8, -16 or -32)."""
    if not isinstance(content, (bytes, bytearray)):
        raise TypeError(f"decode_bytes expects bytes, got {type(content).__name__}")
    return _decode(content)


def decode_string(content: str) -> JsonValue:
    """Decode a JSON document from a string."""
    if not isinstance(content, str):
        raise TypeError(f"decode_string expects str, got {type(content).__name__}")
    return _decode(content)


__all__ = ["decode_bytes", "decode_string"]
