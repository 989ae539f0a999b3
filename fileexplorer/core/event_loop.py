"""Main loop helpers for File Explorer."""

import curses

from ..constants import MIN_TERM_HEIGHT, MIN_TERM_WIDTH
from ..utils import safe_addstr


def draw_frame(app):
    """Render a full frame before reading input."""
    app.stdscr.erase()
    height, width = app.stdscr.getmaxyx()
    if height < MIN_TERM_HEIGHT or width < MIN_TERM_WIDTH:
        safe_addstr(
            app.stdscr, 0, 0,
            f'Terminal too small ({width}x{height}); need {MIN_TERM_WIDTH}x{MIN_TERM_HEIGHT}',
        )
    else:
        app.window.draw(app.stdscr)
    app.stdscr.noutrefresh()
    curses.doupdate()


def read_input_key(stdscr):
    """Read one key from curses, returning None on timeout/no input."""
    try:
        return stdscr.get_wch()
    except curses.error:
        return None


def dispatch_input(app, key):
    """Dispatch one normalized input event."""
    if key is None:
        return

    if isinstance(key, int) and key == curses.KEY_MOUSE:
        try:
            event = curses.getmouse()
        except curses.error:
            return
        app.handle_mouse(event)
        return

    if isinstance(key, int) and key == curses.KEY_RESIZE:
        curses.update_lines_cols()
        app.handle_resize()
        return

    app.handle_key(key)


def run_app_loop(app):
    """Run apply/draw/input loop with terminal cleanup on exit.

    Each pass first applies the navigation queued by the previous input, so
    the listing is never mutated while a frame is being drawn.
    """
    try:
        while app.running:
            app.tick()
            draw_frame(app)
            key = read_input_key(app.stdscr)
            dispatch_input(app, key)
    finally:
        app.cleanup()
