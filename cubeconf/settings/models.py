# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Typed setting descriptors.

Each descriptor is one row of a settings menu: what kind of control it is,
which ``(section, key)`` of the store it is bound to, its label and
description ids, its default, and the value the store held when the menu was
assembled.  Descriptors are immutable snapshots; changing a value goes back
through the store, never through a descriptor.

Every kind is its own frozen dataclass.  Rendering code dispatches on
:attr:`kind` (or on the class) rather than on virtual methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .errors import DescriptorValidationError
from .menu_tag import MenuTag


class SettingKind(Enum):
    HEADER = "header"
    TOGGLE = "toggle"
    SINGLE_CHOICE = "single_choice"
    STRING_SINGLE_CHOICE = "string_single_choice"
    SLIDER = "slider"
    INPUT_BINDING = "input_binding"
    RUMBLE_BINDING = "rumble_binding"
    SUBMENU = "submenu"


# ── Validation helpers ───────────────────────────────────────────────────

def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _require(condition: bool, message: str) -> None:
    if not condition:
        raise DescriptorValidationError(message)


def _freeze_choices(item) -> None:
    labels = tuple(item.choice_labels)
    values = tuple(item.choice_values)
    _require(
        len(labels) == len(values),
        f"{item.key!r}: {len(labels)} choice labels but {len(values)} values",
    )
    object.__setattr__(item, "choice_labels", labels)
    object.__setattr__(item, "choice_values", values)


# ── Descriptor kinds ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class HeaderSetting:
    """Non-interactive group title.  Carries no key and is never written."""
    label_id: str
    description_id: str | None = None

    kind: ClassVar[SettingKind] = SettingKind.HEADER
    key: ClassVar[None] = None
    section: ClassVar[None] = None
    default_value: ClassVar[None] = None
    current_value: ClassVar[None] = None


@dataclass(frozen=True)
class CheckBoxSetting:
    key: str
    section: str
    label_id: str
    description_id: str | None = None
    default_value: bool = False
    current_value: bool | None = None

    kind: ClassVar[SettingKind] = SettingKind.TOGGLE

    def __post_init__(self) -> None:
        _require(
            isinstance(self.default_value, bool),
            f"{self.key!r}: toggle default must be a bool, got {self.default_value!r}",
        )

    @property
    def is_checked(self) -> bool:
        return self.default_value if self.current_value is None else self.current_value


@dataclass(frozen=True)
class SingleChoiceSetting:
    """Choice whose stored value is an integer.

    *menu_tag*, when set, names a menu that configures the chosen item in
    more detail (e.g. the bindings of one controller port).
    """
    key: str
    section: str
    label_id: str
    description_id: str | None = None
    choice_labels: tuple[str, ...] = ()
    choice_values: tuple[int, ...] = ()
    default_value: int = 0
    current_value: int | None = None
    menu_tag: MenuTag | None = None

    kind: ClassVar[SettingKind] = SettingKind.SINGLE_CHOICE

    def __post_init__(self) -> None:
        _freeze_choices(self)
        _require(
            _is_int(self.default_value),
            f"{self.key!r}: choice default must be an int, got {self.default_value!r}",
        )
        _require(
            all(_is_int(v) for v in self.choice_values),
            f"{self.key!r}: choice values must be ints",
        )
        _require(
            self.menu_tag is None or isinstance(self.menu_tag, MenuTag),
            f"{self.key!r}: menu_tag must be a MenuTag, got {self.menu_tag!r}",
        )

    @property
    def selected_value(self) -> int:
        return self.default_value if self.current_value is None else self.current_value

    def selected_index(self) -> int:
        """Index of the selected value in :attr:`choice_values`, or -1."""
        try:
            return self.choice_values.index(self.selected_value)
        except ValueError:
            return -1


@dataclass(frozen=True)
class StringSingleChoiceSetting:
    """Choice whose stored value is the chosen string itself."""
    key: str
    section: str
    label_id: str
    description_id: str | None = None
    choice_labels: tuple[str, ...] = ()
    choice_values: tuple[str, ...] = ()
    default_value: str = ""
    current_value: str | None = None

    kind: ClassVar[SettingKind] = SettingKind.STRING_SINGLE_CHOICE

    def __post_init__(self) -> None:
        _freeze_choices(self)
        _require(
            isinstance(self.default_value, str),
            f"{self.key!r}: choice default must be a str, got {self.default_value!r}",
        )

    @property
    def selected_value(self) -> str:
        return self.default_value if self.current_value is None else self.current_value

    def selected_index(self) -> int:
        try:
            return self.choice_values.index(self.selected_value)
        except ValueError:
            return -1


@dataclass(frozen=True)
class SliderSetting:
    key: str
    section: str
    label_id: str
    description_id: str | None = None
    min_value: int | float = 0
    max_value: int | float = 100
    default_value: int | float = 0
    units: str = ""
    step: int | float = 1
    current_value: int | float | None = None

    kind: ClassVar[SettingKind] = SettingKind.SLIDER

    def __post_init__(self) -> None:
        for name in ("min_value", "max_value", "default_value", "step"):
            value = getattr(self, name)
            _require(_is_number(value), f"{self.key!r}: {name} must be a number, got {value!r}")
        _require(
            self.min_value <= self.max_value,
            f"{self.key!r}: min {self.min_value} is above max {self.max_value}",
        )
        _require(
            self.min_value <= self.default_value <= self.max_value,
            f"{self.key!r}: default {self.default_value} outside "
            f"[{self.min_value}, {self.max_value}]",
        )
        _require(self.step > 0, f"{self.key!r}: step must be positive, got {self.step}")

    @property
    def selected_value(self) -> int | float:
        return self.default_value if self.current_value is None else self.current_value


@dataclass(frozen=True)
class InputBindingSetting:
    """Physical input bound to one emulated button or axis direction."""
    key: str
    section: str
    label_id: str
    current_value: str | None = None
    description_id: str | None = None
    default_value: str = ""

    kind: ClassVar[SettingKind] = SettingKind.INPUT_BINDING


@dataclass(frozen=True)
class RumbleBindingSetting:
    """Physical device that receives the emulated controller's rumble."""
    key: str
    section: str
    label_id: str
    current_value: str | None = None
    description_id: str | None = None
    default_value: str = ""

    kind: ClassVar[SettingKind] = SettingKind.RUMBLE_BINDING


@dataclass(frozen=True)
class SubmenuSetting:
    label_id: str
    menu_tag: MenuTag
    description_id: str | None = None

    kind: ClassVar[SettingKind] = SettingKind.SUBMENU
    key: ClassVar[None] = None
    section: ClassVar[None] = None
    default_value: ClassVar[None] = None
    current_value: ClassVar[None] = None

    def __post_init__(self) -> None:
        _require(
            isinstance(self.menu_tag, MenuTag),
            f"submenu {self.label_id!r} must target a MenuTag, got {self.menu_tag!r}",
        )


SettingItem = Union[
    HeaderSetting,
    CheckBoxSetting,
    SingleChoiceSetting,
    StringSingleChoiceSetting,
    SliderSetting,
    InputBindingSetting,
    RumbleBindingSetting,
    SubmenuSetting,
]

# Kinds whose rows are bound to a store key.
BOUND_KINDS: frozenset[SettingKind] = frozenset(
    k for k in SettingKind if k not in (SettingKind.HEADER, SettingKind.SUBMENU)
)
