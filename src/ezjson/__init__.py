"""
ezjson: read values out of arbitrary JSON without declaring a schema.

This package uses a src-layout. Import the package as `ezjson`.
"""

from importlib.metadata import version

__version__ = version("ezjson")

from .accessors import (
    get_array,
    get_bool,
    get_float,
    get_int,
    get_number,
    get_object,
    get_property,
    get_string,
)
from .config import EZJSON_CONFIG, EzjsonConfig
from .decode import decode_bytes, decode_string
from .errors import (
    EzjsonError,
    JsonDecodeError,
    KeyLookupError,
    NullValueError,
    NumberConversionError,
)
from .path import ERROR_ON_NULL, LookupOptions, Option
from .resolver import get_property_with_type
from .runtime import configure_logging, get_logger, load_env
from .values import JsonNumber, JsonValue, ValueKind, kind_of

__all__ = [
    "__version__",
    "ERROR_ON_NULL",
    "EZJSON_CONFIG",
    "EzjsonConfig",
    "EzjsonError",
    "JsonDecodeError",
    "JsonNumber",
    "JsonValue",
    "KeyLookupError",
    "LookupOptions",
    "NullValueError",
    "NumberConversionError",
    "Option",
    "ValueKind",
    "configure_logging",
    "decode_bytes",
    "decode_string",
    "get_array",
    "get_bool",
    "get_float",
    "get_int",
    "get_logger",
    "get_number",
    "get_object",
    "get_property",
    "get_property_with_type",
    "get_string",
    "kind_of",
    "load_env",
]
