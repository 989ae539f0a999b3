import importlib
import sys
import unittest
from pathlib import Path
from unittest import mock

from _support import FakeScreen, make_fake_curses, make_repo_tmpdir, populate

_MODULES = (
    "fileexplorer.constants",
    "fileexplorer.theme",
    "fileexplorer.utils",
    "fileexplorer.ui.window",
    "fileexplorer.ui.browser",
)


class BrowserWindowTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls._prev_curses = sys.modules.get("curses")
        sys.modules["curses"] = make_fake_curses()
        for mod_name in _MODULES:
            sys.modules.pop(mod_name, None)

        cls.browser = importlib.import_module("fileexplorer.ui.browser")
        cls.curses = sys.modules["curses"]
        from fileexplorer.core.actions import ActionType, AppAction
        from fileexplorer.core.navigation import NavigationState
        cls.ActionType = ActionType
        cls.AppAction = AppAction
        cls.NavigationState = NavigationState

    @classmethod
    def tearDownClass(cls):
        for mod_name in _MODULES:
            sys.modules.pop(mod_name, None)
        if cls._prev_curses is not None:
            sys.modules["curses"] = cls._prev_curses
        else:
            sys.modules.pop("curses", None)

    def setUp(self):
        self._tmp = make_repo_tmpdir("_tmp_browser_")
        self.root = Path(self._tmp.name).resolve()
        populate(self.root, dirs=["a", "b"], files=["c.txt", "z.txt"])
        (self.root / "c.txt").write_bytes(b"x" * 2048)
        self.launcher = mock.Mock()
        self.state = self.NavigationState(str(self.root), launcher=self.launcher)
        self.state.refresh()

    def tearDown(self):
        self._tmp.cleanup()

    def _window(self, use_unicode=False, h=24):
        win = self.browser.BrowserWindow(self.state, 0, 0, 80, h, use_unicode=use_unicode)
        win.sync()
        return win

    def _select(self, win, name):
        win.selected_index = next(i for i, e in enumerate(win.entries()) if e.name == name)

    def test_draw_renders_path_rows_and_metadata(self):
        win = self._window()
        screen = FakeScreen(24, 80)

        win.draw(screen)

        self.assertIn("Current path: ", screen.row(1))
        top = win.list_top()
        self.assertIn("[D] ..", screen.row(top))
        self.assertIn("[D] a", screen.row(top + 1))
        self.assertIn("[D] b", screen.row(top + 2))
        self.assertIn("[F] c.txt", screen.row(top + 3))
        self.assertIn("2.0 KB", screen.row(top + 3))
        self.assertIn("<DIR>", screen.row(top + 1))
        self.assertIn("[F] z.txt", screen.row(top + 4))
        self.assertIn("(4 items)", win.title)

    def test_draw_shows_error_line(self):
        self.state.report_error("Error reading directory: gone")
        win = self._window()
        screen = FakeScreen(24, 80)
        win.draw(screen)
        self.assertIn("Error reading directory: gone", screen.row(2))

    def test_draw_shows_empty_placeholder(self):
        empty = self.root / "a"
        self.state.navigate(next(e for e in self.state.current_listing() if e.name == "a"))
        win = self._window()
        screen = FakeScreen(24, 80)
        win.draw(screen)
        self.assertEqual(self.state.current_location(), str(empty))
        self.assertIn("(empty directory)", screen.text())

    def test_unicode_marker_for_directories(self):
        win = self._window(use_unicode=True)
        parent = win.entries()[0]
        self.assertIn(self.browser.DIR_ICON, win.row_text(parent, 78))

    def test_unicode_marker_for_files(self):
        win = self._window(use_unicode=True)
        entry = next(e for e in win.entries() if e.name == "c.txt")
        self.assertIn(f"{self.browser.FILE_ICON} c.txt", win.row_text(entry, 78))

    def test_enter_on_directory_requests_navigation(self):
        win = self._window()
        self._select(win, "a")
        result = win.handle_key(10)
        self.assertEqual(result.type, self.ActionType.NAVIGATE)
        self.assertEqual(result.payload.name, "a")

    def test_enter_on_file_requests_open(self):
        win = self._window()
        self._select(win, "z.txt")
        result = win.handle_key(self.curses.KEY_ENTER)
        self.assertEqual(result.type, self.ActionType.OPEN_FILE)
        self.assertEqual(result.payload.name, "z.txt")

    def test_backspace_requests_parent(self):
        win = self._window()
        result = win.handle_key(self.curses.KEY_BACKSPACE)
        self.assertEqual(result.type, self.ActionType.NAVIGATE)
        self.assertTrue(result.payload.is_parent)

    def test_refresh_and_quit_keys(self):
        win = self._window()
        self.assertEqual(win.handle_key("r").type, self.ActionType.REFRESH)
        self.assertEqual(win.handle_key(self.curses.KEY_F5).type, self.ActionType.REFRESH)
        quit_result = win.handle_key("q")
        self.assertEqual(quit_result.type, self.ActionType.EXECUTE)
        self.assertEqual(quit_result.payload, self.AppAction.EXIT)

    def test_arrow_and_paging_keys_clamp_selection(self):
        win = self._window()
        self.assertIsNone(win.handle_key(self.curses.KEY_UP))
        self.assertEqual(win.selected_index, 0)
        win.handle_key(self.curses.KEY_DOWN)
        self.assertEqual(win.selected_index, 1)
        win.handle_key(self.curses.KEY_END)
        self.assertEqual(win.selected_index, len(win.entries()) - 1)
        win.handle_key(self.curses.KEY_NPAGE)
        self.assertEqual(win.selected_index, len(win.entries()) - 1)
        win.handle_key(self.curses.KEY_HOME)
        self.assertEqual(win.selected_index, 0)

    def test_selection_scrolls_into_view_on_small_window(self):
        win = self._window(h=7)
        self.assertEqual(win.list_height(), 2)
        win.handle_key(self.curses.KEY_END)
        self.assertEqual(win.scroll_offset, len(win.entries()) - 2)

    def test_click_directory_row_navigates(self):
        win = self._window()
        result = win.handle_click(5, win.list_top() + 1)
        self.assertEqual(result.type, self.ActionType.NAVIGATE)
        self.assertEqual(result.payload.name, "a")
        self.assertEqual(win.selected_index, 1)

    def test_single_click_file_only_selects(self):
        win = self._window()
        self.assertIsNone(win.handle_click(5, win.list_top() + 3))
        self.assertEqual(win.selected_entry().name, "c.txt")

    def test_double_click_file_opens(self):
        win = self._window()
        result = win.handle_click(5, win.list_top() + 4, double=True)
        self.assertEqual(result.type, self.ActionType.OPEN_FILE)
        self.assertEqual(result.payload.name, "z.txt")

    def test_click_outside_listing_is_ignored(self):
        win = self._window()
        self.assertIsNone(win.handle_click(5, 1))
        self.assertIsNone(win.handle_click(5, win.list_top() + 10))
        self.assertEqual(win.row_at(0, win.list_top()), -1)

    def test_sync_reselects_directory_after_going_up(self):
        win = self._window()
        self.state.navigate(next(e for e in self.state.current_listing() if e.name == "b"))
        win.sync()
        self.assertEqual(win.selected_index, 0)

        self.state.navigate(win.entries()[0])
        win.sync()

        self.assertEqual(win.selected_entry().name, "b")

    def test_sync_clamps_selection_when_listing_shrinks(self):
        win = self._window()
        win.selected_index = 4
        (self.root / "z.txt").unlink()
        self.state.refresh()
        win.sync()
        self.assertEqual(win.selected_entry().name, "c.txt")

    def test_scroll_moves_selection(self):
        win = self._window()
        win.handle_scroll("down")
        self.assertEqual(win.selected_index, 3)
        win.handle_scroll("up", steps=1)
        self.assertEqual(win.selected_index, 2)


if __name__ == "__main__":
    unittest.main()
