"""
Entry point for File Explorer.
"""
import argparse
import curses
import locale
import logging
import os
import tempfile
import traceback

from . import __version__
from .core.app import FileExplorer

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def configure_logging(environ=None):
    """Enable debug logging to a file when FILEEXPLORER_DEBUG is set."""
    env = os.environ if environ is None else environ
    if not env.get('FILEEXPLORER_DEBUG'):
        return None
    log_path = env.get('FILEEXPLORER_LOG') or os.path.join(
        tempfile.gettempdir(), 'fileexplorer-debug.log'
    )
    # curses owns the terminal, so records go to a file.
    logging.basicConfig(
        level=logging.DEBUG,
        filename=log_path,
        format='[%(levelname)s] %(name)s: %(message)s',
    )
    return log_path


def main(stdscr):
    app = FileExplorer(stdscr)
    app.run()


def run():
    """Run File Explorer and return process exit code."""
    try:
        curses.wrapper(main)
        return 0
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        # Top-level crash guard is intentionally broad to restore terminal state.
        try:
            curses.endwin()
        except curses.error:
            pass
        print(f'\nError: {e}')
        traceback.print_exc()
        return 1


def build_parser():
    parser = argparse.ArgumentParser(
        prog='fileexplorer',
        description='Browse directories and open files with their default application.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main_cli(argv=None):
    """Console script entrypoint."""
    build_parser().parse_args(argv)
    configure_logging()
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
