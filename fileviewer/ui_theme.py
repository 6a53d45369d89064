"""UI theme definitions and selection helpers.

Themes are UI-only ANSI palettes (gutter/matches/status). Syntax highlighting
style for document text remains a separate setting.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    gutter: str
    gutter_match: str
    match_start: str
    match_end: str
    status: str
    status_prompt: str


# Match markers only toggle reverse video, so syntax colours continue past a match.
DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    gutter="\033[38;5;30m",
    gutter_match="\033[38;5;51m",
    match_start="\033[7m",
    match_end="\033[27m",
    status="\033[7;38;5;79m",
    status_prompt="\033[27;38;5;136m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    gutter="\033[2;38;5;31m",
    gutter_match="\033[1;38;5;45m",
    match_start="\033[7m",
    match_end="\033[27m",
    status="\033[7;38;5;39m",
    status_prompt="\033[27;38;5;153m",
)

# Colour-free: matches and the status row still stand out via reverse video.
PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    gutter="",
    gutter_match="",
    match_start="\033[7m",
    match_end="\033[27m",
    status="\033[7m",
    status_prompt="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "normalize_theme_name",
    "resolve_theme",
]
