"""
Human-readable size and timestamp labels for listing rows.
"""
import os
import stat
from datetime import datetime

DIR_MARKER = '<DIR>'
SIZE_UNITS = ('B', 'KB', 'MB', 'GB', 'TB', 'PB')
TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def format_size(is_directory, byte_length):
    """Return '<DIR>' for directories, otherwise a base-1024 size label."""
    if is_directory:
        return DIR_MARKER
    if byte_length is None:
        return ''
    size = max(0, int(byte_length))
    if size < 1024:
        return f'{size} B'
    value = float(size)
    unit = 0
    # Promote once the one-decimal label would read 1024.0.
    while round(value, 1) >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f'{value:.1f} {SIZE_UNITS[unit]}'


def format_modified(timestamp):
    """Render a POSIX timestamp as local 'YYYY-MM-DD HH:MM:SS', or ''."""
    if timestamp is None:
        return ''
    try:
        return datetime.fromtimestamp(timestamp).strftime(TIMESTAMP_FORMAT)
    except (OverflowError, OSError, TypeError, ValueError):
        return ''


def display_info(entry):
    """Return (size_label, modified_label) for entry from the live filesystem."""
    if entry.is_parent:
        return DIR_MARKER, ''
    try:
        st = os.stat(entry.path)
    except OSError:
        return '', ''
    return (
        format_size(stat.S_ISDIR(st.st_mode), st.st_size),
        format_modified(st.st_mtime),
    )
