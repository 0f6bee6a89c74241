"""Walk a decoded document along a sequence of keys."""

from __future__ import annotations

from collections.abc import Mapping

from .config import EZJSON_CONFIG
from .errors import KeyLookupError, NullValueError
from .path import ArrayIndex, Key, LookupOptions, ObjectKey, parse_keys
from .runtime.logging import get_logger
from .values import JsonValue, ValueKind, kind_of


def _is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def _has_kind(value: object, expected: ValueKind) -> bool:
    try:
        return kind_of(value) is expected
    except TypeError:
        # foreign objects in a hand-built tree match no kind
        return False


def _fail(msg: str, index: int, key: str) -> KeyLookupError:
    get_logger().debug(
        "ezjson: lookup failed: %s for key %r (@ index %d)", msg, key, index
    )
    return KeyLookupError(msg, index, key)


def get_property_with_type(
    document: JsonValue,
    expected_type: ValueKind | str | None,
    *keys: Key,
    options: LookupOptions | None = None,
) -> JsonValue:
    """Return the value found in ``document`` by following ``keys``.

    Each key is a string (object property), an integer (array index) or an
    ``Option``; options must come before the actual keys. When
    ``expected_type`` is given, a non-null result must be of that kind.
    JSON null is accepted for every kind unless ``ERROR_ON_NULL`` is set, in
    which case ``NullValueError`` is raised.

    Raises ``KeyLookupError`` when a key cannot be followed or the result has
    the wrong kind.
    """
    expected = ValueKind(expected_type) if expected_type is not None else None
    if options is None:
        options = EZJSON_CONFIG.default_lookup_options()
    path = parse_keys(keys, options)

    current: object = document
    for index, segment in path.segments:
        match segment:
            case ArrayIndex(position=position):
                if not _is_array(current):
                    raise _fail("no array found", index, str(segment))
                if position < 0 or position >= len(current):
                    raise _fail("array index out of bounds", index, str(segment))
                current = current[position]
            case ObjectKey(name=name):
                if not isinstance(current, Mapping):
                    raise _fail("no object found", index, name)
                if name not in current:
                    raise _fail("object property not found", index, name)
                current = current[name]

    last_index, last_key = path.last
    if current is None:
        if path.options.error_on_null:
            get_logger().debug("ezjson: null value for key %r", last_key)
            raise NullValueError(last_key)
        return None

    if expected is not None and not _has_kind(current, expected):
        raise _fail(f"property is not of type {expected.value}", last_index, last_key)

    return current


__all__ = ["get_property_with_type"]
