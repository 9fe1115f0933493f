"""Runtime settings for xorscope.

Values come from three layers, later ones winning:

- built-in defaults
- an optional JSON settings file (``XORSCOPE_SETTINGS`` or the per-user
  data directory)
- environment variables, after a ``.env`` file has been loaded

Nothing here is required for the library functions; the CLI reads the log
level and the default worker count from it.
"""

from __future__ import annotations

import json
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_APP_NAME = "xorscope"
_SETTINGS_FILE = "settings.json"

DEFAULTS: Dict[str, Any] = {
    "log_level": "WARNING",
    "workers": 1,
}

_ENV_KEYS = {
    "log_level": "XORSCOPE_LOG_LEVEL",
    "workers": "XORSCOPE_WORKERS",
}


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    workers: int = 1


def _get_user_data_dir() -> Path:
    """Return a platform-appropriate per-user data directory for the app."""
    system = platform.system()
    home = Path.home()
    if system == "Windows":
        appdata = os.getenv("APPDATA")
        if appdata:
            return Path(appdata) / _APP_NAME
        return home / f".{_APP_NAME}"
    if system == "Darwin":
        return home / "Library" / "Application Support" / _APP_NAME
    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / _APP_NAME
    return home / ".local" / "share" / _APP_NAME


def settings_path() -> Path:
    override = os.getenv("XORSCOPE_SETTINGS")
    if override:
        return Path(override).expanduser()
    return _get_user_data_dir() / _SETTINGS_FILE


def _read_settings_file(p: Path) -> Dict[str, Any]:
    if not p.exists():
        return {}
    try:
        with p.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file %s: %s", p, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring settings file %s: not a JSON object", p)
        return {}
    return data


def _coerce_workers(value: Any) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        logger.warning("invalid workers value %r, using 1", value)
        return 1
    return max(1, n)


def load_settings(path: Optional[Path] = None) -> Settings:
    load_dotenv()
    raw: Dict[str, Any] = dict(DEFAULTS)
    file_values = _read_settings_file(path or settings_path())
    raw.update({k: v for k, v in file_values.items() if k in DEFAULTS})
    for key, env in _ENV_KEYS.items():
        val = os.getenv(env)
        if val:
            raw[key] = val
    return Settings(
        log_level=str(raw["log_level"]).upper(),
        workers=_coerce_workers(raw["workers"]),
    )


def get_setting(key: str, default: Optional[Any] = None) -> Any:
    return getattr(load_settings(), key, default)
