"""Tests for the settings window's store writes and titles."""

import pytest

from cubeconf.settings.assembler import assemble, controller_mode
from cubeconf.settings.context import ControllerMode, SettingsContext
from cubeconf.settings.menu_tag import MenuTag
from cubeconf.settings.models import CheckBoxSetting, HeaderSetting, SubmenuSetting
from cubeconf.settings.store import MemorySettingsStore
from cubeconf.ui.settings_window import menu_title, write_value


class TestWriteValue:
    def test_writes_to_bound_key(self) -> None:
        store = MemorySettingsStore()
        write_value(store, CheckBoxSetting("MMU", "Core", "mmu_enable"), True)
        assert store.get_value("Core", "MMU") is True

    @pytest.mark.parametrize("item", [
        HeaderSetting("other"),
        SubmenuSetting("graphics_submenu", MenuTag.GRAPHICS),
    ])
    def test_unbound_rows_rejected(self, item) -> None:
        with pytest.raises(TypeError):
            write_value(MemorySettingsStore(), item, True)

    def test_read_back_by_assembly(self) -> None:
        store = MemorySettingsStore()
        ctx = SettingsContext(store, content_id="GALE01")
        port_type = assemble(MenuTag.GCPAD_TYPE, ctx)[1]
        write_value(store, port_type, 12)

        assert controller_mode(ctx, 1) is ControllerMode.ADAPTER
        rows = assemble(port_type.menu_tag, ctx)
        assert [r.key for r in rows] == ["PadAdapterRumble1", "PadSimulateKonga1"]


class TestMenuTitle:
    def test_fixed_title(self) -> None:
        assert menu_title(MenuTag.HACKS) == "Hacks"

    def test_port_title(self) -> None:
        assert menu_title(MenuTag.GCPAD_2) == "GameCube Controller 2"

    def test_remote_title(self) -> None:
        assert menu_title(MenuTag.WIIMOTE_1) == "Wii Remote 1"

    def test_every_tag_has_title(self) -> None:
        for tag in MenuTag:
            assert menu_title(tag)
