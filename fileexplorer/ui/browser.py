"""
File Explorer browser window: renders a NavigationState and turns keys and
clicks into actions.
"""
import curses
import os

from ..constants import (
    DIR_ICON,
    DIR_ICON_ASCII,
    FILE_ICON,
    FILE_ICON_ASCII,
    HEADER_LINES,
    MODIFIED_COLUMN_WIDTH,
    SIZE_COLUMN_WIDTH,
    STATUS_HINTS,
)
from ..core.actions import ActionResult, ActionType, AppAction
from ..core.listing import parent_entry, parent_of
from ..utils import fit_text_to_cells, normalize_key_code, safe_addstr, theme_attr
from .window import Window

KEY_F5 = getattr(curses, 'KEY_F5', -1)
KEY_F10 = getattr(curses, 'KEY_F10', -1)
ENTER_KEYS = (10, 13, getattr(curses, 'KEY_ENTER', 343))
BACKSPACE_KEYS = (8, 127, getattr(curses, 'KEY_BACKSPACE', 263), getattr(curses, 'KEY_LEFT', 260))
QUIT_KEYS = (27, ord('q'), ord('Q'), KEY_F10)
REFRESH_KEYS = (ord('r'), ord('R'), KEY_F5)


class BrowserWindow(Window):
    """Single-pane directory browser over a NavigationState."""

    BASE_TITLE = 'File Explorer'

    def __init__(self, state, x, y, w, h, use_unicode=True):
        super().__init__(self.BASE_TITLE, x, y, w, h, unicode_borders=use_unicode)
        self.state = state
        self.use_unicode = use_unicode
        self.selected_index = 0
        self._shown_location = None

    # --- Geometry ---

    def list_top(self):
        _, by, _, _ = self.body_rect()
        return by + HEADER_LINES

    def list_height(self):
        _, _, _, bh = self.body_rect()
        # Header rows plus the status row.
        return max(0, bh - HEADER_LINES - 1)

    # --- Selection ---

    def entries(self):
        return self.state.current_listing()

    def selected_entry(self):
        entries = self.entries()
        if 0 <= self.selected_index < len(entries):
            return entries[self.selected_index]
        return None

    def sync(self):
        """Reset or restore the selection after the location changed."""
        location = self.state.current_location()
        entries = self.entries()
        if location != self._shown_location:
            previous = self._shown_location
            self._shown_location = location
            self.selected_index = 0
            self.scroll_offset = 0
            if previous and parent_of(previous) == location:
                for idx, entry in enumerate(entries):
                    if not entry.is_parent and entry.path == previous:
                        self.selected_index = idx
                        break
        if entries:
            self.selected_index = max(0, min(self.selected_index, len(entries) - 1))
        else:
            self.selected_index = 0
        self._update_title()
        self._ensure_visible()

    def _update_title(self):
        location = self.state.current_location()
        basename = os.path.basename(location.rstrip(os.sep)) or location
        count = len([e for e in self.entries() if not e.is_parent])
        self.title = f'{self.BASE_TITLE} - {basename} ({count} items)'

    def _ensure_visible(self):
        """Ensure the selected index is within the visible scroll area."""
        display_h = self.list_height()
        if display_h <= 0:
            return
        if self.selected_index < self.scroll_offset:
            self.scroll_offset = self.selected_index
        elif self.selected_index >= self.scroll_offset + display_h:
            self.scroll_offset = self.selected_index - display_h + 1

    def move_selection(self, delta):
        entries = self.entries()
        if not entries:
            return
        self.selected_index = max(0, min(len(entries) - 1, self.selected_index + delta))
        self._ensure_visible()

    # --- Rendering ---

    def _marker(self, entry):
        if self.use_unicode:
            return DIR_ICON if entry.is_dir else FILE_ICON
        return DIR_ICON_ASCII if entry.is_dir else FILE_ICON_ASCII

    def row_text(self, entry, width):
        """Compose one listing row: marker and name left, metadata right."""
        size, modified = self.state.entry_info(entry)
        right = f'{size:>{SIZE_COLUMN_WIDTH}}  {modified:<{MODIFIED_COLUMN_WIDTH}}'
        name_w = width - len(right) - 1
        if name_w < 12:
            return fit_text_to_cells(f' {self._marker(entry)} {entry.name}', width)
        left = fit_text_to_cells(f' {self._marker(entry)} {entry.name}', name_w)
        return left + ' ' + right

    def draw(self, stdscr):
        if not self.visible:
            return
        self.sync()
        body_attr = self.draw_frame(stdscr)
        bx, by, bw, bh = self.body_rect()
        if bw <= 0 or bh <= 0:
            return

        location = self.state.current_location()
        safe_addstr(stdscr, by, bx, fit_text_to_cells(f' Current path: {location}', bw), theme_attr('path'))

        error = self.state.current_error()
        if error:
            safe_addstr(stdscr, by + 1, bx, fit_text_to_cells(f' {error}', bw), theme_attr('error') | curses.A_BOLD)
        else:
            sep = '─' if self.use_unicode else '-'
            safe_addstr(stdscr, by + 1, bx, sep * bw, body_attr)

        entries = self.entries()
        top = self.list_top()
        height = self.list_height()
        row_w = bw - 1 if len(entries) > height else bw
        for k in range(height):
            idx = self.scroll_offset + k
            if idx >= len(entries):
                break
            entry = entries[idx]
            if idx == self.selected_index:
                attr = theme_attr('file_selected')
            elif entry.is_dir:
                attr = theme_attr('file_directory')
            else:
                attr = body_attr
            safe_addstr(stdscr, top + k, bx, self.row_text(entry, row_w), attr)

        if not error and not [e for e in entries if not e.is_parent]:
            placeholder_row = len(entries) - self.scroll_offset
            if 0 <= placeholder_row < height:
                safe_addstr(stdscr, top + placeholder_row, bx, '  (empty directory)', body_attr)

        self.draw_scrollbar(stdscr, top, height, len(entries))
        safe_addstr(stdscr, by + bh - 1, bx, fit_text_to_cells(STATUS_HINTS, bw), theme_attr('status'))

    # --- Input ---

    def _entry_action(self, entry, open_files=True):
        if entry is None:
            return None
        if entry.is_dir:
            return ActionResult(ActionType.NAVIGATE, entry)
        if open_files:
            return ActionResult(ActionType.OPEN_FILE, entry)
        return None

    def handle_key(self, key):
        key_code = normalize_key_code(key)
        if key_code is None:
            return None
        page = max(1, self.list_height() - 1)

        if key_code == curses.KEY_UP:
            self.move_selection(-1)
        elif key_code == curses.KEY_DOWN:
            self.move_selection(1)
        elif key_code == curses.KEY_PPAGE:
            self.move_selection(-page)
        elif key_code == curses.KEY_NPAGE:
            self.move_selection(page)
        elif key_code == curses.KEY_HOME:
            self.move_selection(-len(self.entries()))
        elif key_code == curses.KEY_END:
            self.move_selection(len(self.entries()))
        elif key_code in ENTER_KEYS:
            return self._entry_action(self.selected_entry())
        elif key_code in BACKSPACE_KEYS:
            return ActionResult(ActionType.NAVIGATE, parent_entry(self.state.current_location()))
        elif key_code in REFRESH_KEYS:
            return ActionResult(ActionType.REFRESH)
        elif key_code in QUIT_KEYS:
            return ActionResult(ActionType.EXECUTE, AppAction.EXIT)
        return None

    def row_at(self, mx, my):
        """Return listing index under the pointer, or -1."""
        bx, _, bw, _ = self.body_rect()
        if not (bx <= mx < bx + bw):
            return -1
        row = my - self.list_top()
        if not (0 <= row < self.list_height()):
            return -1
        idx = self.scroll_offset + row
        if idx < len(self.entries()):
            return idx
        return -1

    def handle_click(self, mx, my, bstate=None, double=False):
        """Select the clicked row; directories navigate, files open on double click."""
        idx = self.row_at(mx, my)
        if idx < 0:
            return None
        self.selected_index = idx
        entry = self.entries()[idx]
        return self._entry_action(entry, open_files=double)

    def handle_scroll(self, direction, steps=3):
        # Wheel moves the selection so the next frame keeps it in view.
        self.move_selection(-steps if direction == 'up' else steps)
        return None
