"""
Navigation state: current location, its sorted listing and the last error.
"""
import logging
import os

from .actions import ActionResult, ActionType
from .errors import LaunchFailure, ReadFailure
from .formatting import display_info
from .launcher import open_with_default_handler
from .listing import list_entries, parent_of, sort_entries

LOGGER = logging.getLogger(__name__)


def _initial_location():
    try:
        return os.getcwd()
    except OSError:
        # Working directory was removed before startup.
        return os.path.abspath(os.sep)


class NavigationState:
    """Owns Location, Listing and ErrorState for one browser.

    All mutation happens on the UI thread through navigate, refresh and
    activate. Each call runs to completion before the next one is accepted.
    Failures at the filesystem or OS boundary are stored as a single message
    and never raised to the caller.
    """

    def __init__(self, start_path=None, launcher=None):
        location = start_path if start_path is not None else _initial_location()
        self._location = os.path.abspath(location)
        self._listing = ()
        self._error = None
        self._pending = None
        self._launcher = launcher or open_with_default_handler
        self.needs_repaint = False

    # --- Read side, polled by the UI every frame ---

    def current_location(self):
        return self._location

    def current_listing(self):
        return self._listing

    def current_error(self):
        return self._error

    def entry_info(self, entry):
        """Return (size_label, modified_label) for a listing row."""
        return display_info(entry)

    # --- Operations ---

    def refresh(self):
        """Re-read Location; keep the previous listing if the read fails."""
        try:
            entries = list_entries(self._location)
        except ReadFailure as exc:
            LOGGER.debug('Refresh of %s failed: %s', self._location, exc.message)
            self._error = exc.message
            return ActionResult(ActionType.ERROR, exc.message)
        self._listing = tuple(sort_entries(entries))
        self._error = None
        return None

    def navigate(self, target):
        """Move into target when it is the parent marker or a live directory.

        Files and entries that vanished since the last refresh are declined
        silently.
        """
        if target.is_parent:
            parent = parent_of(self._location)
            if parent is None:
                LOGGER.debug('Already at root %s; ignoring parent request', self._location)
                return None
            return self._enter(parent)

        path = os.path.abspath(target.path)
        LOGGER.debug('Attempting to navigate to %s (is_dir=%s)', path, os.path.isdir(path))
        if not os.path.isdir(path):
            LOGGER.debug('Not navigating: %s is not a directory', path)
            return None
        return self._enter(path)

    def _enter(self, path):
        self._location = path
        self.needs_repaint = True
        error = self.refresh()
        LOGGER.debug('Navigated to %s', path)
        return error or ActionResult(ActionType.REFRESH)

    def activate(self, entry):
        """Ask the OS to open a file entry; other kinds are ignored."""
        if entry is None or not entry.is_file:
            return None
        try:
            self._launcher(entry.path)
        except LaunchFailure as exc:
            LOGGER.debug('Launch of %s failed: %s', entry.path, exc.message)
            self._error = exc.message
            return ActionResult(ActionType.ERROR, exc.message)
        return None

    def report_error(self, message):
        """Replace the outstanding error message."""
        self._error = str(message) if message else None

    # --- One-slot command queue ---

    def request_navigation(self, target):
        """Queue target for the next tick; a newer request replaces it."""
        self._pending = target

    def has_pending(self):
        return self._pending is not None

    def apply_pending(self):
        """Take the queued navigation target, if any, and apply it."""
        target, self._pending = self._pending, None
        if target is None:
            return None
        return self.navigate(target)

    def take_repaint(self):
        """Return and clear the repaint-requested flag."""
        flag, self.needs_repaint = self.needs_repaint, False
        return flag

    def clear(self):
        """Drop listing, error and pending command on shutdown."""
        self._listing = ()
        self._error = None
        self._pending = None
