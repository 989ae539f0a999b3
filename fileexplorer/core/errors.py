"""Error types raised at the filesystem and OS boundaries."""


class ExplorerError(Exception):
    """Base class for File Explorer failures shown to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ReadFailure(ExplorerError):
    """Raised when a directory cannot be enumerated."""


class LaunchFailure(ExplorerError):
    """Raised when the OS cannot open a file with its default handler."""
