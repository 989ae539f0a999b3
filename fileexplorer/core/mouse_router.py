"""Mouse event routing helpers for File Explorer."""

import curses
import time

from ..constants import DEFAULT_DOUBLE_CLICK_INTERVAL


def _is_button1_click_event(bstate):
    return bool(
        bstate
        & (
            getattr(curses, 'BUTTON1_CLICKED', 0)
            | getattr(curses, 'BUTTON1_PRESSED', 0)
        )
    )


def is_row_double_click(app, row_idx, bstate):
    """Detect double-click on a listing row with a time-based fallback."""
    if bstate & getattr(curses, 'BUTTON1_DOUBLE_CLICKED', 0):
        return True

    if not _is_button1_click_event(bstate):
        return False

    now = time.monotonic()
    last_idx = getattr(app, '_last_row_click_idx', None)
    last_ts = float(getattr(app, '_last_row_click_ts', 0.0) or 0.0)
    interval = float(getattr(app, 'double_click_interval', DEFAULT_DOUBLE_CLICK_INTERVAL)
                     or DEFAULT_DOUBLE_CLICK_INTERVAL)
    is_double = (last_idx == row_idx) and ((now - last_ts) <= interval)
    app._last_row_click_idx = None if is_double else row_idx
    app._last_row_click_ts = now
    return is_double


def handle_mouse_event(app, event):
    """Route one curses mouse event to the browser window."""
    _, mx, my, _, bstate = event
    win = app.window

    if bstate & getattr(curses, 'BUTTON4_PRESSED', 0):
        return win.handle_scroll('up')
    if bstate & getattr(curses, 'BUTTON5_PRESSED', 0x200000):
        return win.handle_scroll('down')

    double_flag = getattr(curses, 'BUTTON1_DOUBLE_CLICKED', 0)
    if not (bstate & double_flag) and not _is_button1_click_event(bstate):
        return None
    if not win.contains(mx, my):
        return None

    row_idx = win.row_at(mx, my)
    if row_idx < 0:
        return None
    double = is_row_double_click(app, row_idx, bstate)
    return win.handle_click(mx, my, bstate, double=double)
