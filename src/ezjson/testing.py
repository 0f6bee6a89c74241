from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import EZJSON_CONFIG


@dataclass(frozen=True)
class _EzjsonConfigSnapshot:
    log_level: str
    rich_logging: bool
    error_on_null: bool

    @classmethod
    def capture(cls) -> "_EzjsonConfigSnapshot":
        return cls(
            log_level=EZJSON_CONFIG.log_level,
            rich_logging=EZJSON_CONFIG.rich_logging,
            error_on_null=EZJSON_CONFIG.error_on_null,
        )

    def restore(self) -> None:
        EZJSON_CONFIG.log_level = self.log_level
        EZJSON_CONFIG.rich_logging = self.rich_logging
        EZJSON_CONFIG.error_on_null = self.error_on_null


def _apply_test_config() -> None:
    EZJSON_CONFIG.log_level = "DEBUG"
    EZJSON_CONFIG.rich_logging = True
    EZJSON_CONFIG.error_on_null = False


@contextmanager
def ezjson_test_env() -> Generator[None, None, None]:
    """Run with default settings, restoring the previous config afterwards."""
    snapshot = _EzjsonConfigSnapshot.capture()
    _apply_test_config()
    try:
        yield
    finally:
        snapshot.restore()


@pytest.fixture()
def ezjson_config() -> Generator[object, None, None]:
    """Expose ``EZJSON_CONFIG`` for a test and undo any changes to it."""
    with ezjson_test_env():
        yield EZJSON_CONFIG
