"""
Persisted UI preferences (currently just the colour theme).

Stored as a small JSON file in a per-user data directory. Passwords are
never written here.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

THEMES = ("light", "dark")
DEFAULT_SETTINGS = {"theme": "light"}

SETTINGS_ENV = "CSPGEN_SETTINGS"


def _default_settings_path() -> Path:
    """
    OS-specific, user-local location for the settings file.
    """
    override = os.getenv(SETTINGS_ENV)
    if override:
        return Path(override)

    if os.name == "nt":
        base = os.getenv("APPDATA")
        base_path = Path(base) if base else Path.home() / "AppData" / "Roaming"
    else:
        base = os.getenv("XDG_DATA_HOME")
        base_path = Path(base) if base else Path.home() / ".local" / "share"

    return base_path / "cspgen" / "settings.json"


class SettingsStore:
    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path else _default_settings_path()

    def load(self) -> dict:
        """
        Read settings from disk, merged over the defaults.
        A missing or unreadable file yields the defaults.
        """
        settings = dict(DEFAULT_SETTINGS)
        if not self.path.exists():
            return settings

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            return settings

        if isinstance(data, dict):
            settings.update(data)
        else:
            logger.warning("Ignoring malformed settings file %s", self.path)
        return settings

    def save(self, settings: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings, indent=2), encoding="utf-8")
        logger.debug("Settings saved to %s", self.path)

    # --- theme ---

    def load_theme(self) -> str:
        theme = self.load().get("theme")
        if theme not in THEMES:
            logger.warning("Unknown theme %r in settings, using default.", theme)
            return DEFAULT_SETTINGS["theme"]
        return theme

    def save_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme {theme!r}; expected one of {THEMES}")
        settings = self.load()
        settings["theme"] = theme
        self.save(settings)

    def toggle_theme(self) -> str:
        """Switch light <-> dark, persist and return the new theme."""
        new_theme = "light" if self.load_theme() == "dark" else "dark"
        self.save_theme(new_theme)
        return new_theme
