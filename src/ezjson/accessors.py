"""Typed accessors for values nested in a decoded document.

Every accessor takes the document followed by the keys to follow: strings
for object properties, integers for array indices, optionally preceded by
``Option`` flags. A JSON null yields the zero value of the accessor's type
unless ``ERROR_ON_NULL`` is given.
"""

from __future__ import annotations

from typing import Any, cast

from .path import Key, LookupOptions
from .resolver import get_property_with_type
from .values import JsonNumber, JsonValue, ValueKind


def get_property(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> JsonValue:
    """Return whatever value is found, without a type check."""
    return get_property_with_type(document, None, *keys, options=options)


def get_array(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> list[JsonValue]:
    value = get_property_with_type(document, ValueKind.ARRAY, *keys, options=options)
    if value is None:
        return []
    return cast(list[JsonValue], value)


def get_object(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> dict[str, JsonValue]:
    value = get_property_with_type(document, ValueKind.OBJECT, *keys, options=options)
    if value is None:
        return {}
    return cast(dict[str, JsonValue], value)


def get_number(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> JsonNumber:
    """Return a number in its lossless textual form."""
    value = get_property_with_type(document, ValueKind.NUMBER, *keys, options=options)
    if value is None:
        return JsonNumber("0")
    return JsonNumber.from_value(cast(Any, value))


def get_int(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> int:
    """Return a number as a signed 64-bit integer.

    Raises ``NumberConversionError`` for fractions, exponents and values out
    of range.
    """
    return get_number(document, *keys, options=options).to_int()


def get_float(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> float:
    return get_number(document, *keys, options=options).to_float()


def get_string(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> str:
    value = get_property_with_type(document, ValueKind.STRING, *keys, options=options)
    if value is None:
        return ""
    return cast(str, value)


def get_bool(
    document: JsonValue, *keys: Key, options: LookupOptions | None = None
) -> bool:
    value = get_property_with_type(document, ValueKind.BOOLEAN, *keys, options=options)
    if value is None:
        return False
    return cast(bool, value)


__all__ = [
    "get_array",
    "get_bool",
    "get_float",
    "get_int",
    "get_number",
    "get_object",
    "get_property",
    "get_string",
]
