from __future__ import annotations


class EzjsonError(Exception):
    """Base class for all errors raised by ezjson."""


class KeyLookupError(EzjsonError, LookupError):
    """A key in a sequence of (nested) keys could not be resolved.

    ``index`` is the position of the key in the sequence (options included)
    and ``key`` its string form. Type mismatches on the resolved value are
    reported against the last navigational key.
    """

    def __init__(self, msg: str, index: int, key: str) -> None:
        self.msg = msg
        self.index = index
        self.key = key
        super().__init__(f"{msg} for key {key} (@ index {index})")

    def __reduce__(self):
        return (type(self), (self.msg, self.index, self.key))


class NullValueError(EzjsonError):
    """The resolved value is null and ``error_on_null`` was requested."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"value is null for key {key}")

    def __reduce__(self):
        return (type(self), (self.key,))


class NumberConversionError(EzjsonError, ValueError):
    """A JSON number cannot be represented as the requested numeric type."""

    def __init__(self, number: str, target: str, reason: str) -> None:
        self.number = number
        self.target = target
        self.reason = reason
        super().__init__(f"cannot convert number {number!r} to {target}: {reason}")

    def __reduce__(self):
        return (type(self), (self.number, self.target, self.reason))


class JsonDecodeError(EzjsonError, ValueError):
    """Raised when input is not a single valid JSON document."""

    def __init__(self, msg: str, lineno: int | None = None, colno: int | None = None):
        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        if lineno is not None and colno is not None:
            super().__init__(f"invalid JSON: {msg} (line {lineno} column {colno})")
        else:
            super().__init__(f"invalid JSON: {msg}")

    def __reduce__(self):
        return (type(self), (self.msg, self.lineno, self.colno))


__all__ = [
    "EzjsonError",
    "JsonDecodeError",
    "KeyLookupError",
    "NullValueError",
    "NumberConversionError",
]
