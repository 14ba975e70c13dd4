# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Section/key addressed settings storage.

The assembly engine only needs :class:`SettingsStore` (two read methods).
The concrete stores here back it with a dict, an INI file, or a per-game
INI layered over the global one.

Sections and keys are used exactly as given.  The engine namespaces keys
itself (``InputA_2``, ``PadType0``), so any case folding or trimming here
would make a value written under one spelling unreadable under the other.
"""

from __future__ import annotations

import configparser
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol, Union, runtime_checkable

log = logging.getLogger(__name__)

Value = Union[bool, int, float, str]


@runtime_checkable
class SettingsStore(Protocol):
    def get_value(self, section: str, key: str) -> Value | None: ...

    def section_exists(self, section: str) -> bool: ...


# ── Text encoding (INI values are text) ─────────────────────────────────

def encode_value(value: Value) -> str:
    if isinstance(value, bool):
        return "True" if value else "False"
    return str(value)


# ── In-memory store ──────────────────────────────────────────────────────

class MemorySettingsStore:
    """Dict-backed store.  ``{section: {key: value}}``."""

    def __init__(self, data: dict[str, dict[str, Value]] | None = None) -> None:
        self._data: dict[str, dict[str, Value]] = {
            section: dict(values) for section, values in (data or {}).items()
        }

    def get_value(self, section: str, key: str) -> Value | None:
        return self._data.get(section, {}).get(key)

    def section_exists(self, section: str) -> bool:
        return section in self._data

    def set_value(self, section: str, key: str, value: Value) -> None:
        self._data.setdefault(section, {})[key] = value

    def remove_value(self, section: str, key: str) -> None:
        values = self._data.get(section)
        if values is not None:
            values.pop(key, None)

    def to_dict(self) -> dict[str, dict[str, Value]]:
        return {section: dict(values) for section, values in self._data.items()}


# ── INI file store ───────────────────────────────────────────────────────

class IniSettingsStore:
    """Store backed by one INI file.

    Values come back as the text in the file; callers convert them.  Text
    such as ``007`` or ``1e3`` must survive a read unchanged.

    A missing file loads as an empty store; :meth:`save` creates it.  Writes
    go through a temp file and rename so a crash never leaves a truncated
    config behind.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._parser = self._new_parser()

    @staticmethod
    def _new_parser() -> configparser.RawConfigParser:
        parser = configparser.RawConfigParser(interpolation=None)
        parser.optionxform = str  # type: ignore[assignment]  # preserve case
        return parser

    @classmethod
    def load(cls, path: str | Path) -> IniSettingsStore:
        """Read *path* into a new store.

        Raises :class:`configparser.Error` if the file exists but is not
        valid INI.
        """
        store = cls(path)
        if store.path.exists():
            store._parser.read(str(store.path), encoding="utf-8")
            log.debug(
                "Loaded %d sections from %s",
                len(store._parser.sections()), store.path,
            )
        else:
            log.debug("No settings file at %s, starting empty", store.path)
        return store

    def get_value(self, section: str, key: str) -> Value | None:
        if not self._parser.has_section(section):
            return None
        if not self._parser.has_option(section, key):
            return None
        return self._parser.get(section, key)

    def section_exists(self, section: str) -> bool:
        return self._parser.has_section(section)

    def set_value(self, section: str, key: str, value: Value) -> None:
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, encode_value(value))

    def remove_value(self, section: str, key: str) -> None:
        if self._parser.has_section(section):
            self._parser.remove_option(section, key)

    def save(self) -> None:
        """Write the store back to :attr:`path` atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            suffix=".ini", dir=str(self.path.parent), prefix=".tmp_settings_"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                self._parser.write(fh)
            Path(tmp).replace(self.path)
        except BaseException:
            try:
                os.unlink(tmp)
            except OSError:
                pass
            raise
        log.debug("Wrote settings to %s", self.path)


# ── Layered store (per-game over global) ─────────────────────────────────

class LayeredSettingsStore:
    """Reads *overlay* first and falls back to *base*; writes go to *overlay*.

    Used for per-game profiles: the game's INI overrides the global one, and
    edits made while a game profile is open never touch the global file.
    """

    def __init__(self, base: SettingsStore, overlay) -> None:
        self.base = base
        self.overlay = overlay

    def get_value(self, section: str, key: str) -> Value | None:
        value = self.overlay.get_value(section, key)
        if value is not None:
            return value
        return self.base.get_value(section, key)

    def section_exists(self, section: str) -> bool:
        return self.overlay.section_exists(section) or self.base.section_exists(section)

    def set_value(self, section: str, key: str, value: Value) -> None:
        self.overlay.set_value(section, key, value)

    def remove_value(self, section: str, key: str) -> None:
        self.overlay.remove_value(section, key)

    def save(self) -> None:
        self.overlay.save()
