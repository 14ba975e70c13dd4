# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Persistent application configuration for Cubeconf.

Application preferences (window state, logging) are stored as a JSON file in
the OS-appropriate config directory.  The emulator settings themselves live
next to it in INI files::

    <config dir>/settings.json              app preferences
    <config dir>/Config/Dolphin.ini         global emulator settings
    <config dir>/GameSettings/<id>.ini      per-game overrides

:func:`open_store` returns the store the settings window edits.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from PySide6.QtCore import QStandardPaths

from cubeconf.settings.store import IniSettingsStore, LayeredSettingsStore

log = logging.getLogger(__name__)


# -- Locations -------------------------------------------------------------

_APP_DIR_NAME = "Cubeconf"
_CONFIG_FILE  = "settings.json"
_GLOBAL_INI   = Path("Config") / "Dolphin.ini"
_GAME_INI_DIR = "GameSettings"
_SHADER_DIR  = "Shaders"


def _config_dir() -> Path:
    """Return (and create) the per-user config directory."""
    base = QStandardPaths.writableLocation(
        QStandardPaths.StandardLocation.GenericConfigLocation,
    )
    path = Path(base) / _APP_DIR_NAME
    path.mkdir(parents=True, exist_ok=True)
    return path


def global_settings_path() -> Path:
    return _config_dir() / _GLOBAL_INI


def shader_dir() -> Path:
    """Directory scanned for post-processing shaders."""
    return _config_dir() / _SHADER_DIR


def game_settings_path(content_id: str) -> Path:
    """Return the override file for *content_id*.

    Raises :class:`ValueError` for an empty id or one that would escape the
    GameSettings directory.
    """
    if not content_id or content_id in (".", "..") or any(c in content_id for c in "/\\"):
        raise ValueError(f"invalid content id: {content_id!r}")
    return _config_dir() / _GAME_INI_DIR / f"{content_id}.ini"


def open_store(content_id: str = "") -> IniSettingsStore | LayeredSettingsStore:
    """Load the store for the global profile, or for one game's profile.

    A game profile reads its own overrides first and falls back to the
    global file; edits made through it land in the game's file only.
    """
    base = IniSettingsStore.load(global_settings_path())
    if not content_id:
        return base
    overlay = IniSettingsStore.load(game_settings_path(content_id))
    log.debug("Opened game profile %s over %s", overlay.path, base.path)
    return LayeredSettingsStore(base, overlay)


# -- App config ------------------------------------------------------------

@dataclass
class Config:
    """Application preferences.  Serialises to / from JSON."""

    # Window
    start_maximized: bool = False
    window_width: int = 720
    window_height: int = 640
    show_descriptions: bool = True

    # Navigation
    last_menu: str = "config"          # serialized MenuTag
    last_content_id: str = ""          # empty = global profile

    # Debug
    debug_logging: bool = False
    debug_log_level: str = "WARNING"   # DEBUG / INFO / WARNING / ERROR

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def load(cls) -> Config:
        """Load from disk, returning defaults if the file is missing or bad.

        Unknown keys in the JSON (left over from older versions) are
        silently ignored so that adding or removing Config fields never
        causes a crash.
        """
        path = _config_dir() / _CONFIG_FILE
        if not path.exists():
            return cls()
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
            known = {f.name for f in fields(cls)}
            return cls(**{k: v for k, v in raw.items() if k in known})
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            log.warning("Ignoring unreadable %s: %s", path, exc)
            return cls()

    def save(self) -> None:
        """Write current settings to disk."""
        path = _config_dir() / _CONFIG_FILE
        path.write_text(
            json.dumps(asdict(self), indent=2, ensure_ascii=False),
            encoding="utf-8",
        )
