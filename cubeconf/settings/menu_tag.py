# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Identities of the navigable settings menus.

A :class:`MenuTag` is a wire name plus an integer subtype (``-1`` when the
menu is not per-instance).  Only the string form crosses a navigation
boundary::

    config            -> MenuTag.CONFIG
    gcpad|2           -> MenuTag.GCPAD_3
    wiimote           -> MenuTag.WIIMOTE     (the remote list)
    wiimote|4         -> MenuTag.WIIMOTE_1   (first remote's bindings)
"""

from __future__ import annotations

import re
from enum import Enum

from .errors import MenuTagFormatError, MenuTagLookupError

NO_SUBTYPE = -1
_SEPARATOR = "|"
_SUBTYPE_RE = re.compile(r"[+-]?[0-9]+")


class MenuTag(Enum):
    """Closed registry of (wire name, subtype) pairs."""

    CONFIG = ("config", NO_SUBTYPE)
    CONFIG_GENERAL = ("config_general", NO_SUBTYPE)
    CONFIG_INTERFACE = ("config_interface", NO_SUBTYPE)
    CONFIG_GAME_CUBE = ("config_gamecube", NO_SUBTYPE)
    CONFIG_WII = ("config_wii", NO_SUBTYPE)
    CONTROLLER = ("controller", NO_SUBTYPE)
    GCPAD_TYPE = ("gc_pad_type", NO_SUBTYPE)
    WIIMOTE = ("wiimote", NO_SUBTYPE)
    GCPAD_1 = ("gcpad", 0)
    GCPAD_2 = ("gcpad", 1)
    GCPAD_3 = ("gcpad", 2)
    GCPAD_4 = ("gcpad", 3)
    WIIMOTE_1 = ("wiimote", 4)
    WIIMOTE_2 = ("wiimote", 5)
    WIIMOTE_3 = ("wiimote", 6)
    WIIMOTE_4 = ("wiimote", 7)
    GRAPHICS = ("graphics", NO_SUBTYPE)
    ENHANCEMENTS = ("enhancements", NO_SUBTYPE)
    HACKS = ("hacks", NO_SUBTYPE)
    DEBUG = ("debug", NO_SUBTYPE)
    GPU_DRIVERS = ("gpu_drivers", NO_SUBTYPE)

    def __init__(self, tag: str, subtype: int) -> None:
        self.tag = tag
        self.subtype = subtype

    def __str__(self) -> str:
        return serialize(self)

    @property
    def has_subtype(self) -> bool:
        return self.subtype != NO_SUBTYPE

    @classmethod
    def gc_pad(cls, port: int) -> MenuTag:
        """Return the bindings menu for GameCube controller *port* (0-3)."""
        return resolve("gcpad", port)

    @classmethod
    def wiimote(cls, slot: int) -> MenuTag:
        """Return the bindings menu for Wii Remote *slot* (4-7)."""
        return resolve("wiimote", slot)


_BY_PAIR: dict[tuple[str, int], MenuTag] = {(t.tag, t.subtype): t for t in MenuTag}


def serialize(tag: MenuTag) -> str:
    """Return the wire form of *tag*: ``name`` or ``name|subtype``."""
    if tag.subtype != NO_SUBTYPE:
        return f"{tag.tag}{_SEPARATOR}{tag.subtype}"
    return tag.tag


def resolve(name: str, subtype: int = NO_SUBTYPE) -> MenuTag:
    """Look up the registered tag for *name* and *subtype*.

    Raises :class:`MenuTagLookupError` when the pair is not registered.  A
    miss means a navigation link points at a menu that does not exist, so it
    is never papered over with a default.
    """
    try:
        return _BY_PAIR[(name, subtype)]
    except KeyError:
        raise MenuTagLookupError(
            f"tag not registered for this subtype: {name!r}|{subtype}"
        ) from None


def parse(value: str | None) -> MenuTag | None:
    """Parse a serialized tag.

    Returns ``None`` for ``None`` or ``""`` ("no menu requested").  Raises
    :class:`MenuTagFormatError` if the subtype segment is not an integer and
    :class:`MenuTagLookupError` if the pair is not registered.
    """
    if not value:
        return None

    name, sep, raw_subtype = value.partition(_SEPARATOR)
    subtype = NO_SUBTYPE
    if sep:
        if not _SUBTYPE_RE.fullmatch(raw_subtype):
            raise MenuTagFormatError(
                f"menu tag subtype is not an integer: {value!r}"
            )
        subtype = int(raw_subtype)
    return resolve(name, subtype)
