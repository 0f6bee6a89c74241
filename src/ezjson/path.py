"""Key sequences for nested lookups."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict

from .errors import KeyLookupError


class Option(enum.Enum):
    """Flags that change how a lookup behaves.

    Options can be mixed into a key sequence but must precede every object
    key and array index.
    """

    ERROR_ON_NULL = 1


ERROR_ON_NULL = Option.ERROR_ON_NULL


class LookupOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    error_on_null: bool = False

    def with_option(self, option: Option) -> LookupOptions:
        match option:
            case Option.ERROR_ON_NULL:
                return self.model_copy(update={"error_on_null": True})


@dataclass(frozen=True, slots=True)
class ObjectKey:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class ArrayIndex:
    position: int

    def __str__(self) -> str:
        return str(self.position)


PathSegment: TypeAlias = ObjectKey | ArrayIndex
Key: TypeAlias = str | int | Option | ObjectKey | ArrayIndex


@dataclass(frozen=True)
class LookupPath:
    """A validated key sequence.

    ``segments`` pairs each navigational segment with its position in the
    original key sequence so errors point at what the caller passed.
    """

    segments: tuple[tuple[int, PathSegment], ...]
    options: LookupOptions

    @property
    def last(self) -> tuple[int, str]:
        """Position and string form of the last segment, ``(-1, "")`` if none."""
        if not self.segments:
            return -1, ""
        index, segment = self.segments[-1]
        return index, str(segment)


def _to_segment(key: object) -> PathSegment | None:
    match key:
        case ObjectKey() | ArrayIndex():
            return key
        case bool():
            return None
        case str():
            return ObjectKey(key)
        case int():
            return ArrayIndex(key)
        case _:
            return None


def parse_keys(
    keys: Iterable[object], options: LookupOptions | None = None
) -> LookupPath:
    """Split ``keys`` into navigational segments and options.

    Raises ``KeyLookupError`` for an option that follows a key and for keys
    that are neither a string, an integer nor an ``Option``.
    """
    resolved = options if options is not None else LookupOptions()
    segments: list[tuple[int, PathSegment]] = []
    for index, key in enumerate(keys):
        if isinstance(key, Option):
            if segments:
                raise KeyLookupError(
                    "options must be specified before the actual keys", index, key.name
                )
            resolved = resolved.with_option(key)
            continue
        segment = _to_segment(key)
        if segment is None:
            raise KeyLookupError("not an index or key", index, repr(key))
        segments.append((index, segment))
    return LookupPath(segments=tuple(segments), options=resolved)


__all__ = [
    "ERROR_ON_NULL",
    "ArrayIndex",
    "Key",
    "LookupOptions",
    "LookupPath",
    "ObjectKey",
    "Option",
    "PathSegment",
    "parse_keys",
]
