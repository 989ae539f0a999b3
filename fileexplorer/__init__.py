"""Terminal file explorer: browse directories and open files."""

__version__ = '0.1.0'
