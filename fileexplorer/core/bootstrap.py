"""Terminal bootstrap helpers for File Explorer startup and cleanup."""

import curses

from ..constants import INPUT_TIMEOUT_MS


def configure_terminal(stdscr, timeout_ms=INPUT_TIMEOUT_MS):
    """Apply core curses terminal setup."""
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    curses.noecho()
    curses.cbreak()
    stdscr.keypad(True)
    stdscr.nodelay(False)
    stdscr.timeout(timeout_ms)


def enable_mouse_support():
    """Enable curses mouse mask and SGR tracking modes."""
    curses.mousemask(
        curses.ALL_MOUSE_EVENTS
        | curses.REPORT_MOUSE_POSITION
    )
    # Report double clicks ourselves when the terminal does not.
    curses.mouseinterval(0)
    print('\033[?1000h', end='', flush=True)
    print('\033[?1006h', end='', flush=True)


def disable_mouse_support():
    """Restore terminal mouse tracking modes."""
    print('\033[?1000l', end='', flush=True)
    print('\033[?1006l', end='', flush=True)
