"""
Base Window Class.
"""
import curses

from ..utils import safe_addstr, draw_box, theme_attr


class Window:
    """A framed window with a title bar and content area."""

    def __init__(self, title, x, y, w, h, unicode_borders=True):
        self.title = title
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.unicode_borders = unicode_borders
        self.scroll_offset = 0
        self.visible = True

    def body_rect(self):
        """Return inner content area (x, y, w, h)."""
        bx = self.x + 1
        by = self.y + 1
        bw = self.w - 2
        bh = self.h - 2
        return (bx, by, max(0, bw), max(0, bh))

    def contains(self, mx, my):
        """Check if point is within window bounds."""
        return (self.x <= mx < self.x + self.w and
                self.y <= my < self.y + self.h)

    def resize(self, x, y, w, h):
        self.x, self.y, self.w, self.h = x, y, w, h

    def draw_frame(self, stdscr):
        """Draw window frame: border and title. Returns body_attr."""
        if not self.visible:
            return 0

        border_attr = theme_attr('window_border')
        title_attr = theme_attr('window_title') | curses.A_BOLD
        body_attr = theme_attr('window_body')

        draw_box(stdscr, self.y, self.x, self.h, self.w, border_attr,
                 unicode_borders=self.unicode_borders)
        safe_addstr(stdscr, self.y, self.x + 2, f' {self.title} ', title_attr)

        bx, by, bw, bh = self.body_rect()
        for i in range(bh):
            safe_addstr(stdscr, by + i, bx, ' ' * bw, body_attr)
        return body_attr

    def draw_scrollbar(self, stdscr, top, height, total):
        """Draw a vertical scrollbar on the right edge of the body."""
        if total <= height or height <= 0:
            return
        bx, _, bw, _ = self.body_rect()
        sb_x = bx + bw - 1
        thumb_pos = int(self.scroll_offset / max(1, total - height) * (height - 1))
        thumb, track = ('█', '░') if self.unicode_borders else ('#', ':')
        for i in range(height):
            ch = thumb if i == thumb_pos else track
            safe_addstr(stdscr, top + i, sb_x, ch, theme_attr('scrollbar'))

    def draw(self, stdscr):
        """Draw the window."""
        self.draw_frame(stdscr)

    def handle_click(self, mx, my, bstate=None):
        """Default click handler for basic windows."""
        return None

    def handle_key(self, key):
        """Default key handler."""
        return None

    def handle_scroll(self, direction, steps=1):
        """Default scroll handler used by mouse wheel routing."""
        return None
