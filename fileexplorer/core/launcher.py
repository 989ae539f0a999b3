"""
Open files with the operating system's default application.
"""
from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys

from .errors import LaunchFailure

LOGGER = logging.getLogger(__name__)

# Handles of spawned helpers that may still be running.
_RUNNING = []


def default_handler_command(path: str, platform: str | None = None) -> list[str]:
    """Return the argv that asks the current platform to open path."""
    platform = sys.platform if platform is None else platform
    if platform.startswith('win'):
        # Empty title argument so quoted paths are not taken as window title.
        return ['cmd', '/C', 'start', '', path]
    if platform == 'darwin':
        return ['open', path]
    return ['xdg-open', path]


def open_with_default_handler(path) -> None:
    """Spawn the default handler for path without waiting for it.

    Raises:
        LaunchFailure: the platform helper is missing or could not be spawned.
    """
    command = default_handler_command(os.fspath(path))
    if shutil.which(command[0]) is None:
        LOGGER.debug('Default handler helper %r is not on PATH', command[0])
        raise LaunchFailure(f'Failed to open file: {command[0]} not found')

    popen_kwargs = {
        'stdin': subprocess.DEVNULL,
        'stdout': subprocess.DEVNULL,
        'stderr': subprocess.DEVNULL,
    }
    if os.name == 'posix':
        popen_kwargs['start_new_session'] = True
    try:
        process = subprocess.Popen(command, **popen_kwargs)
    except OSError as exc:
        LOGGER.debug('Spawning %r failed: %s', command, exc)
        raise LaunchFailure(f'Failed to open file: {exc}') from exc
    _reap_finished()
    _RUNNING.append(process)
    LOGGER.debug('Launched %r', command)


def _reap_finished():
    """Forget helpers that have exited; poll() also collects their status."""
    _RUNNING[:] = [proc for proc in _RUNNING if proc.poll() is None]
