"""
Typed action contract used by the browser window to talk to the app.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ActionType(str, Enum):
    """Supported action kinds exchanged with the app dispatcher."""

    NAVIGATE = "navigate"
    OPEN_FILE = "open_file"
    REFRESH = "refresh"
    ERROR = "error"
    EXECUTE = "execute"


class AppAction(str, Enum):
    """Application-level actions used by keys and dispatchers."""

    EXIT = "exit"
    REFRESH = "refresh"
    PARENT = "parent"


@dataclass(frozen=True)
class ActionResult:
    """Action message emitted by window handlers."""

    type: ActionType
    payload: Any = None
