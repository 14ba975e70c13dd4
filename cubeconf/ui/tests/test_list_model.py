"""Tests for the Qt list model over assembled menus."""

import pytest
from PySide6.QtCore import QCoreApplication, Qt

from cubeconf.settings.assembler import assemble
from cubeconf.settings.context import PlatformInfo, SettingsContext
from cubeconf.settings.menu_tag import MenuTag
from cubeconf.settings.models import (
    CheckBoxSetting,
    HeaderSetting,
    InputBindingSetting,
    SettingKind,
    SingleChoiceSetting,
    SliderSetting,
)
from cubeconf.settings.store import MemorySettingsStore
from cubeconf.ui.list_model import (
    DescriptorRole,
    KindRole,
    SettingsListModel,
    ValueTextRole,
    value_text,
)


@pytest.fixture(scope="module")
def qt_core_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class TestValueText:
    def test_toggle(self) -> None:
        assert value_text(CheckBoxSetting("K", "S", "l", default_value=True)) == "On"
        assert value_text(CheckBoxSetting("K", "S", "l", current_value=False)) == "Off"

    def test_choice_label(self) -> None:
        item = SingleChoiceSetting("K", "S", "l", choice_labels=("Off", "On"),
                                   choice_values=(0, 1), current_value=1)
        assert value_text(item) == "On"

    def test_choice_value_not_in_list(self) -> None:
        item = SingleChoiceSetting("K", "S", "l", choice_labels=("Off",),
                                   choice_values=(0,), current_value=7)
        assert value_text(item) == "7"

    def test_slider_units(self) -> None:
        item = SliderSetting("K", "S", "l", max_value=200, default_value=100,
                             units="%", current_value=150.0)
        assert value_text(item) == "150%"

    def test_binding(self) -> None:
        assert value_text(InputBindingSetting("K", "S", "l")) == ""
        assert value_text(InputBindingSetting("K", "S", "l", "Button 1")) == "Button 1"

    def test_header(self) -> None:
        assert value_text(HeaderSetting("other")) == ""


class TestSettingsListModel:
    def test_one_row_per_descriptor(self, qt_core_app) -> None:
        items = assemble(MenuTag.HACKS, SettingsContext(MemorySettingsStore()))
        model = SettingsListModel()
        model.set_items(items)
        assert model.rowCount() == len(items)
        for row, item in enumerate(items):
            assert model.data(model.index(row), DescriptorRole) is item

    def test_display_text(self, qt_core_app) -> None:
        model = SettingsListModel()
        model.set_items([CheckBoxSetting("CPUThread", "Core", "dual_core", default_value=True)])
        index = model.index(0)
        assert model.data(index, Qt.ItemDataRole.DisplayRole) == "Enable Dual Core    On"
        assert model.data(index, ValueTextRole) == "On"
        assert model.data(index, KindRole) is SettingKind.TOGGLE

    def test_tooltip_from_description(self, qt_core_app) -> None:
        model = SettingsListModel()
        model.set_items([CheckBoxSetting("CPUThread", "Core", "dual_core", "dual_core_description")])
        tip = model.data(model.index(0), Qt.ItemDataRole.ToolTipRole)
        assert tip.startswith("Split emulation")

    def test_headers_not_selectable(self, qt_core_app) -> None:
        model = SettingsListModel()
        model.set_items([HeaderSetting("other"), CheckBoxSetting("K", "S", "vi_skip")])
        assert not model.flags(model.index(0)) & Qt.ItemFlag.ItemIsSelectable
        assert model.flags(model.index(1)) & Qt.ItemFlag.ItemIsSelectable

    def test_reset_replaces_rows(self, qt_core_app) -> None:
        ctx = SettingsContext(MemorySettingsStore(), PlatformInfo())
        model = SettingsListModel()
        model.set_items(assemble(MenuTag.CONFIG, ctx))
        model.set_items(assemble(MenuTag.CONTROLLER, ctx))
        assert model.rowCount() == 2
        assert model.item(5) is None
