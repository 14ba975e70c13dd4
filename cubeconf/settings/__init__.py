"""Settings schema and menu list assembly for Cubeconf.

Resolve a :class:`MenuTag` (from an enum member or its serialized form),
build a :class:`SettingsContext` around a store, and call :func:`assemble`
to get the ordered rows of that menu.  Everything here is pure Python with
no Qt dependency.
"""

from .assembler import CONTAINER_TAGS, assemble, controller_mode, video_backend_index
from .context import Architecture, ControllerMode, PlatformInfo, SettingsContext
from .errors import (
    DescriptorValidationError,
    MenuTagFormatError,
    MenuTagLookupError,
    SettingsError,
)
from .keys import indexed_label, key_for
from .labels import text_for
from .menu_tag import MenuTag, parse, resolve, serialize
from .models import (
    CheckBoxSetting,
    HeaderSetting,
    InputBindingSetting,
    RumbleBindingSetting,
    SettingItem,
    SettingKind,
    SingleChoiceSetting,
    SliderSetting,
    StringSingleChoiceSetting,
    SubmenuSetting,
)
from .store import (
    IniSettingsStore,
    LayeredSettingsStore,
    MemorySettingsStore,
    SettingsStore,
)

__all__ = [
    "Architecture",
    "CONTAINER_TAGS",
    "CheckBoxSetting",
    "ControllerMode",
    "DescriptorValidationError",
    "HeaderSetting",
    "IniSettingsStore",
    "InputBindingSetting",
    "LayeredSettingsStore",
    "MemorySettingsStore",
    "MenuTag",
    "MenuTagFormatError",
    "MenuTagLookupError",
    "PlatformInfo",
    "RumbleBindingSetting",
    "SettingItem",
    "SettingKind",
    "SettingsContext",
    "SettingsError",
    "SettingsStore",
    "SingleChoiceSetting",
    "SliderSetting",
    "StringSingleChoiceSetting",
    "SubmenuSetting",
    "assemble",
    "controller_mode",
    "indexed_label",
    "key_for",
    "parse",
    "resolve",
    "serialize",
    "text_for",
]
