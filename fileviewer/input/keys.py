"""Abstract key tokens produced by ``read_key`` and consumed by the viewer."""

from __future__ import annotations

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
HOME = "HOME"
END = "END"
CTRL_HOME = "CTRL_HOME"
CTRL_END = "CTRL_END"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
CTRL_L = "CTRL_L"
CTRL_T = "CTRL_T"
CTRL_C = "CTRL_C"
CTRL_G = "CTRL_G"
ESC = "ESC"
BACKSPACE = "BACKSPACE"
ENTER = "ENTER"
ENTER_CR = "ENTER_CR"
ENTER_LF = "ENTER_LF"
TAB = "TAB"
UNKNOWN = "UNKNOWN"


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character token."""
    return len(key) == 1 and key.isprintable()
