from .env import load_env
from .logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "load_env"]
