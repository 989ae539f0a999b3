"""
Main File Explorer application class.
"""
import logging

from ..constants import DEFAULT_DOUBLE_CLICK_INTERVAL
from ..theme import get_theme
from ..ui.browser import BrowserWindow
from ..utils import check_unicode_support, init_colors
from .actions import ActionResult, ActionType, AppAction
from .bootstrap import configure_terminal, disable_mouse_support, enable_mouse_support
from .config import load_config
from .event_loop import run_app_loop
from .mouse_router import handle_mouse_event
from .navigation import NavigationState

LOGGER = logging.getLogger(__name__)


class FileExplorer:
    """Owns the terminal, one NavigationState and the browser window."""

    def __init__(self, stdscr, state=None, config=None):
        self.stdscr = stdscr
        self.running = True
        self.config = config if config is not None else load_config()
        self.use_unicode = check_unicode_support() and not self.config.ascii_only
        self.theme = get_theme(self.config.theme)
        self.state = state if state is not None else NavigationState()
        self.double_click_interval = DEFAULT_DOUBLE_CLICK_INTERVAL
        self._last_row_click_idx = None
        self._last_row_click_ts = 0.0

        configure_terminal(stdscr)
        enable_mouse_support()
        init_colors(self.theme)

        h, w = stdscr.getmaxyx()
        self.window = BrowserWindow(self.state, 0, 0, w, h, use_unicode=self.use_unicode)
        self.state.refresh()
        LOGGER.debug('Started in %s', self.state.current_location())

    def tick(self):
        """Apply the queued navigation, if any, before the next frame."""
        location = self.state.current_location()
        self.state.apply_pending()
        if self.state.current_location() != location:
            # Row indices now refer to a different listing.
            self._last_row_click_idx = None
        if self.state.take_repaint():
            self.stdscr.clearok(True)

    def dispatch_result(self, result):
        """Handle ActionResult returned by window handlers."""
        if not isinstance(result, ActionResult):
            return

        LOGGER.debug('Dispatching window result: type=%s payload=%r', result.type, result.payload)

        if result.type == ActionType.NAVIGATE and result.payload is not None:
            self.state.request_navigation(result.payload)
        elif result.type == ActionType.OPEN_FILE and result.payload is not None:
            self.state.activate(result.payload)
        elif result.type == ActionType.REFRESH:
            self.state.refresh()
        elif result.type == ActionType.ERROR:
            self.state.report_error(result.payload)
        elif result.type == ActionType.EXECUTE and result.payload == AppAction.EXIT:
            self.running = False

    def handle_key(self, key):
        self.dispatch_result(self.window.handle_key(key))

    def handle_mouse(self, event):
        self.dispatch_result(handle_mouse_event(self, event))

    def handle_resize(self):
        h, w = self.stdscr.getmaxyx()
        self.window.resize(0, 0, w, h)

    def cleanup(self):
        self.state.clear()
        disable_mouse_support()

    def run(self):
        """Main event loop."""
        return run_app_loop(self)
