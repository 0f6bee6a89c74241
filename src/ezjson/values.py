"""Generic value tree produced by the decoder.

A decoded document is built from plain Python containers plus
:class:`JsonNumber`, which keeps the original number text so integer and
float conversions stay exact until a caller asks for one.
"""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from .errors import NumberConversionError

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


@dataclass(frozen=True, slots=True)
class JsonNumber:
    """A JSON number kept in its textual form."""

    text: str

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_value(cls, value: JsonNumber | int | float) -> JsonNumber:
        """Wrap a native Python number, e.g. from ``json.loads`` output."""
        match value:
            case JsonNumber():
                return value
            case bool():
                raise TypeError(f"expected a number, got {type(value).__name__}")
            case int():
                return cls(str(value))
            case float():
                if not math.isfinite(value):
                    raise NumberConversionError(
                        repr(value), "JSON number", "not finite"
                    )
                return cls(repr(value))
            case _:
                raise TypeError(f"expected a number, got {type(value).__name__}")

    def to_int(self) -> int:
        """Return the number as a signed 64-bit integer."""
        if _INT_RE.fullmatch(self.text) is None:
            raise NumberConversionError(self.text, "int64", "invalid syntax")
        # int() refuses very long digit strings, none of which fit anyway
        if len(self.text.lstrip("+-").lstrip("0")) > 19:
            raise NumberConversionError(self.text, "int64", "value out of range")
        value = int(self.text)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise NumberConversionError(self.text, "int64", "value out of range")
        return value

    def to_float(self) -> float:
        """Return the number as a 64-bit float."""
        if _FLOAT_RE.fullmatch(self.text) is None:
            raise NumberConversionError(self.text, "float64", "invalid syntax")
        value = float(self.text)
        if math.isinf(value):
            raise NumberConversionError(self.text, "float64", "value out of range")
        return value


JsonScalar: TypeAlias = str | JsonNumber | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]


class ValueKind(str, enum.Enum):
    NULL = "null"
    BOOLEAN = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: object) -> ValueKind:
    """Classify ``value`` as one of the JSON value kinds.

    Native ``int``/``float`` count as numbers and tuples as arrays, so trees
    built by the standard ``json`` module can be queried as well. Anything
    else raises ``TypeError``.
    """
    match value:
        case None:
            return ValueKind.NULL
        case bool():
            return ValueKind.BOOLEAN
        case JsonNumber() | int() | float():
            return ValueKind.NUMBER
        case str():
            return ValueKind.STRING
        case list() | tuple():
            return ValueKind.ARRAY
        case Mapping():
            return ValueKind.OBJECT
        case _:
            raise TypeError(f"not a JSON value: {type(value).__name__}")


__all__ = ["JsonNumber", "JsonScalar", "JsonValue", "ValueKind", "kind_of"]
