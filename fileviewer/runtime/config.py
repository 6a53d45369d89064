"""Read-only JSON preferences.

Supplies startup defaults (gutter, colours, logging). Viewer state is never
written back. All access is defensive: malformed or missing config falls
back safely to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir, user_log_dir

from ..render.highlight import DEFAULT_STYLE
from ..viewer.state import DEFAULT_LINE_NUMBER_MARGIN

APP_NAME = "fileviewer"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "fv.log"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_PATH = Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ViewerConfig:
    show_line_numbers: bool = True
    line_number_margin: int = DEFAULT_LINE_NUMBER_MARGIN
    style: str = DEFAULT_STYLE
    theme: str | None = None
    no_color: bool = False
    log_level: str | None = None


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _load_positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def _load_name(data: dict[str, object], key: str) -> str | None:
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _load_log_level(data: dict[str, object]) -> str | None:
    name = _load_name(data, "log_level")
    if name is None or name.upper() not in _LOG_LEVELS:
        return None
    return name.upper()


def load_viewer_config() -> ViewerConfig:
    """Build a ``ViewerConfig`` from the config file, field by field."""
    data = load_config()
    return ViewerConfig(
        show_line_numbers=_load_bool(data, "show_line_numbers", True),
        line_number_margin=_load_positive_int(data, "line_number_margin", DEFAULT_LINE_NUMBER_MARGIN),
        style=_load_name(data, "style") or DEFAULT_STYLE,
        theme=_load_name(data, "theme"),
        no_color=_load_bool(data, "no_color", False),
        log_level=_load_log_level(data),
    )


def configure_logging(config: ViewerConfig) -> None:
    """Attach a file handler to the package logger when a level is configured.

    Logs never go to stderr, which would corrupt the full-screen display.
    """
    if config.log_level is None:
        return
    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(LOG_PATH, encoding="utf-8")
    except OSError:
        return
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger(APP_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(config.log_level)
