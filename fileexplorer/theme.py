"""Theme definitions and lookup helpers for File Explorer."""

from dataclasses import dataclass
import curses

from .constants import (
    C_BACKGROUND,
    C_ERROR,
    C_FM_DIR,
    C_FM_SELECTED,
    C_PATH,
    C_SCROLLBAR,
    C_STATUS,
    C_WIN_BODY,
    C_WIN_BORDER,
    C_WIN_TITLE,
)

# Test doubles may expose only a subset of color constants.
for _name, _fallback in {
    "COLOR_BLACK": 0,
    "COLOR_RED": 1,
    "COLOR_GREEN": 2,
    "COLOR_YELLOW": 3,
    "COLOR_BLUE": 4,
    "COLOR_CYAN": 6,
    "COLOR_WHITE": 7,
}.items():
    if not hasattr(curses, _name):
        setattr(curses, _name, _fallback)

DEFAULT_THEME = "classic"

ROLE_TO_PAIR_ID = {
    "background": C_BACKGROUND,
    "window_border": C_WIN_BORDER,
    "window_title": C_WIN_TITLE,
    "window_body": C_WIN_BODY,
    "path": C_PATH,
    "error": C_ERROR,
    "file_selected": C_FM_SELECTED,
    "file_directory": C_FM_DIR,
    "status": C_STATUS,
    "scrollbar": C_SCROLLBAR,
}


def _mk_pairs(fg_bg):
    return {
        "background": fg_bg[0],
        "window_border": fg_bg[1],
        "window_title": fg_bg[2],
        "window_body": fg_bg[3],
        "path": fg_bg[4],
        "error": fg_bg[5],
        "file_selected": fg_bg[6],
        "file_directory": fg_bg[7],
        "status": fg_bg[8],
        "scrollbar": fg_bg[3],
    }


@dataclass(frozen=True)
class Theme:
    """Semantic theme definition."""

    key: str
    label: str
    pairs: dict[str, tuple[int, int]]


THEMES = {
    "classic": Theme(
        key="classic",
        label="Classic",
        pairs=_mk_pairs(
            (
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_BLUE, curses.COLOR_WHITE),
                (curses.COLOR_RED, curses.COLOR_WHITE),
                (curses.COLOR_WHITE, curses.COLOR_BLUE),
                (curses.COLOR_BLUE, curses.COLOR_WHITE),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
            )
        ),
    ),
    "midnight": Theme(
        key="midnight",
        label="Midnight",
        pairs=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_YELLOW, curses.COLOR_BLACK),
                (curses.COLOR_RED, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_YELLOW),
                (curses.COLOR_CYAN, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_CYAN),
            )
        ),
    ),
    "mono": Theme(
        key="mono",
        label="Monochrome",
        pairs=_mk_pairs(
            (
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
                (curses.COLOR_WHITE, curses.COLOR_BLACK),
                (curses.COLOR_BLACK, curses.COLOR_WHITE),
            )
        ),
    ),
}


def list_themes():
    """Return themes in menu order."""
    return list(THEMES.values())


def get_theme(key):
    """Return theme by key, falling back to the default theme."""
    if not key:
        return THEMES[DEFAULT_THEME]
    return THEMES.get(str(key).strip().lower(), THEMES[DEFAULT_THEME])
