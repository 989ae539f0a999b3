"""
Directory listing: entry classification, enumeration and ordering.
"""
import logging
import os
from dataclasses import dataclass
from enum import Enum

from .errors import ReadFailure

LOGGER = logging.getLogger(__name__)

PARENT_NAME = '..'


class EntryKind(str, Enum):
    """Classification tag for one listing row."""

    DIRECTORY = "directory"
    FILE = "file"
    PARENT = "parent"


@dataclass(frozen=True)
class Entry:
    """One row of a directory listing."""

    path: str
    kind: EntryKind

    @property
    def name(self):
        if self.kind == EntryKind.PARENT:
            return PARENT_NAME
        return os.path.basename(self.path.rstrip(os.sep)) or self.path

    @property
    def is_parent(self):
        return self.kind == EntryKind.PARENT

    @property
    def is_dir(self):
        """Directory-class rows: real directories and the parent marker."""
        return self.kind in (EntryKind.DIRECTORY, EntryKind.PARENT)

    @property
    def is_file(self):
        return self.kind == EntryKind.FILE


def parent_of(location):
    """Return parent directory of location, or None at a filesystem root."""
    parent = os.path.dirname(location)
    if not parent or parent == location:
        return None
    return parent


def parent_entry(location):
    """Build the synthetic entry meaning "go up one level"."""
    return Entry(os.path.join(location, PARENT_NAME), EntryKind.PARENT)


def list_entries(location):
    """Enumerate direct children of location.

    Prepends the parent marker unless location is a filesystem root. Children
    that disappear while the directory is being read are skipped.

    Raises:
        ReadFailure: the directory could not be enumerated.
    """
    try:
        names = os.listdir(location)
    except OSError as exc:
        LOGGER.debug('Listing failed for %s: %s', location, exc)
        raise ReadFailure(f'Error reading directory: {exc}') from exc

    entries = []
    if parent_of(location) is not None:
        entries.append(parent_entry(location))

    for name in names:
        full_path = os.path.join(location, name)
        if os.path.isdir(full_path):
            entries.append(Entry(full_path, EntryKind.DIRECTORY))
        elif os.path.lexists(full_path):
            entries.append(Entry(full_path, EntryKind.FILE))
        else:
            LOGGER.debug('Skipping vanished entry %s', full_path)
    return entries


def _sort_key(entry):
    # Parent marker first, then directories, then files; ordinal name order.
    return (not entry.is_parent, not entry.is_dir, entry.name)


def sort_entries(entries):
    """Return entries ordered directories-first, then by file name."""
    return sorted(entries, key=_sort_key)
