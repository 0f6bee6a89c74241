import logging
import os

from .path import LookupOptions

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name, default).strip().upper()
    if not isinstance(logging.getLevelNamesMapping().get(raw), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return raw


class EzjsonConfig:
    """Process-wide settings, read from ``EZJSON_*`` environment variables."""

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        self.log_level = _env_log_level("EZJSON_LOG_LEVEL", "WARNING")
        self.rich_logging = _env_flag("EZJSON_RICH_LOGGING", True)
        self.error_on_null = _env_flag("EZJSON_ERROR_ON_NULL", False)

    def default_lookup_options(self) -> LookupOptions:
        return LookupOptions(error_on_null=self.error_on_null)


EZJSON_CONFIG = EzjsonConfig()


__all__ = ["EZJSON_CONFIG", "EzjsonConfig"]
