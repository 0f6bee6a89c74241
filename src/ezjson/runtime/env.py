from pathlib import Path

from dotenv import load_dotenv

from ..config import EZJSON_CONFIG


def load_env(dotenv_path: str | Path | None = None, *, override: bool = False) -> bool:
    """Load ``EZJSON_*`` settings from a ``.env`` file and refresh the config.

    Returns whether any variable was set, as reported by python-dotenv.
    """
    loaded = load_dotenv(dotenv_path=dotenv_path, override=override)
    EZJSON_CONFIG.reload()
    return loaded


__all__ = ["load_env"]
