"""Read-only user preferences for the File Explorer UI."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

from ..theme import DEFAULT_THEME, THEMES

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """User-facing UI configuration. Never written back to disk."""

    theme: str = DEFAULT_THEME
    ascii_only: bool = False


def default_config_path() -> Path:
    """Return default config path (~/.config/fileexplorer/config.toml)."""
    return Path.home() / ".config" / "fileexplorer" / "config.toml"


def _coerce_bool(value, default=False):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lower = value.strip().lower()
        if lower in ("1", "true", "yes", "on"):
            return True
        if lower in ("0", "false", "no", "off"):
            return False
    return default


def _normalize_config(raw: dict) -> AppConfig:
    ui = raw.get("ui", raw)
    if not isinstance(ui, dict):
        ui = {}

    theme = str(ui.get("theme", DEFAULT_THEME)).strip().lower() or DEFAULT_THEME
    if theme not in THEMES:
        LOGGER.debug("Unknown theme %r, using %r", theme, DEFAULT_THEME)
        theme = DEFAULT_THEME

    ascii_only = _coerce_bool(ui.get("ascii_only"), default=False)
    return AppConfig(theme=theme, ascii_only=ascii_only)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from TOML file; return defaults when missing/invalid."""
    cfg_path = Path(path) if path is not None else default_config_path()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError:
        return AppConfig()
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        LOGGER.debug("Ignoring invalid config %s: %s", cfg_path, exc)
        return AppConfig()
    return _normalize_config(raw)
