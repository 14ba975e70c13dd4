"""Tests for per-slot key namespacing."""

import pytest

from cubeconf.settings import keys
from cubeconf.settings.context import SettingsContext
from cubeconf.settings.keys import indexed_label, key_for
from cubeconf.settings.store import MemorySettingsStore


@pytest.fixture
def global_ctx() -> SettingsContext:
    return SettingsContext(MemorySettingsStore())


@pytest.fixture
def game_ctx() -> SettingsContext:
    return SettingsContext(MemorySettingsStore(), content_id="GALE01")


class TestKeyForGlobal:
    def test_pad_type(self, global_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCPAD_TYPE, 2, global_ctx) == ("Core", "SIDevice2")

    def test_binding(self, global_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCBIND_A, 2, global_ctx) == ("Bindings", "InputA_2")

    def test_adapter_toggle(self, global_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCADAPTER_RUMBLE, 0, global_ctx) == ("Core", "AdapterRumble0")

    def test_remote_slot(self, global_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_WIIMOTE_TYPE, 4, global_ctx) == ("Core", "WiimoteSource4")


class TestKeyForGame:
    def test_pad_type(self, game_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCPAD_TYPE, 2, game_ctx) == ("Controls", "PadType2")

    def test_binding(self, game_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCBIND_A, 2, game_ctx) == ("Controls", "GameInputA_2")

    def test_bongos(self, game_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_GCADAPTER_BONGOS, 3, game_ctx) == ("Controls", "PadSimulateKonga3")

    def test_remote_type_counts_from_zero(self, game_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_WIIMOTE_TYPE, 4, game_ctx) == ("Controls", "WiimoteType0")
        assert key_for(keys.KEY_WIIMOTE_TYPE, 7, game_ctx) == ("Controls", "WiimoteType3")

    def test_remote_type_needs_remote_slot(self, game_ctx: SettingsContext) -> None:
        with pytest.raises(ValueError):
            key_for(keys.KEY_WIIMOTE_TYPE, 3, game_ctx)

    def test_remote_binding_keeps_slot(self, game_ctx: SettingsContext) -> None:
        assert key_for(keys.KEY_WIIBIND_A, 5, game_ctx) == ("Controls", "GameWiimoteA_5")


class TestKeyForErrors:
    def test_unknown_base_key(self, global_ctx: SettingsContext) -> None:
        with pytest.raises(KeyError):
            key_for(keys.KEY_DUAL_CORE, 0, global_ctx)

    @pytest.mark.parametrize("slot", [-1, 8])
    def test_slot_out_of_range(self, global_ctx: SettingsContext, slot: int) -> None:
        with pytest.raises(ValueError):
            key_for(keys.KEY_GCPAD_TYPE, slot, global_ctx)


class TestSlots:
    def test_port_and_remote_keys_never_collide(self, global_ctx: SettingsContext) -> None:
        pad = {key_for(keys.KEY_EMU_RUMBLE, p, global_ctx) for p in keys.GC_PORTS}
        remote = {key_for(keys.KEY_EMU_RUMBLE, s, global_ctx) for s in keys.WIIMOTE_SLOTS}
        assert len(pad) == 4
        assert len(remote) == 4
        assert not pad & remote

    def test_every_indexed_key_has_both_forms(
        self, global_ctx: SettingsContext, game_ctx: SettingsContext,
    ) -> None:
        for base, entry in keys.INDEXED_KEYS.items():
            g_section, g_key = key_for(base, 5, global_ctx)
            c_section, c_key = key_for(base, 5, game_ctx)
            assert g_key.endswith("5")
            assert c_key.endswith(str(5 - entry.game_slot_offset))
            assert c_section == keys.SECTION_CONTROLS
            assert g_section in (keys.SECTION_INI_CORE, keys.SECTION_BINDINGS)


class TestIndexedLabel:
    def test_controller(self) -> None:
        assert indexed_label("controller", 3) == "controller_3"

    def test_wiimote(self) -> None:
        assert indexed_label("wiimote", 4) == "wiimote_4"
