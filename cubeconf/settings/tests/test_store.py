"""Tests for the settings store implementations."""

import configparser
from pathlib import Path

import pytest

from cubeconf.settings.store import (
    IniSettingsStore,
    LayeredSettingsStore,
    MemorySettingsStore,
    SettingsStore,
    encode_value,
)


SAMPLE_INI = """\
[Core]
CPUThread = False
GFXBackend = Vulkan
Overclock = 1.5
SIDevice0 = 6

[Bindings]
InputA_0 = Button 1
"""


class TestEncodeValue:
    def test_encode(self) -> None:
        assert encode_value(True) == "True"
        assert encode_value(12) == "12"


class TestMemorySettingsStore:
    def test_protocol(self) -> None:
        assert isinstance(MemorySettingsStore(), SettingsStore)

    def test_get_missing(self) -> None:
        store = MemorySettingsStore({"Core": {}})
        assert store.section_exists("Core")
        assert store.get_value("Core", "CPUThread") is None
        assert store.get_value("Nope", "CPUThread") is None

    def test_set_and_remove(self) -> None:
        store = MemorySettingsStore()
        store.set_value("Core", "MMU", True)
        assert store.get_value("Core", "MMU") is True
        store.remove_value("Core", "MMU")
        assert store.get_value("Core", "MMU") is None

    def test_input_is_copied(self) -> None:
        data = {"Core": {"MMU": True}}
        store = MemorySettingsStore(data)
        store.set_value("Core", "MMU", False)
        assert data["Core"]["MMU"] is True


class TestIniSettingsStore:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = IniSettingsStore.load(tmp_path / "missing.ini")
        assert not store.section_exists("Core")
        assert store.get_value("Core", "CPUThread") is None

    def test_reads_text_as_stored(self, tmp_path: Path) -> None:
        path = tmp_path / "Dolphin.ini"
        path.write_text(SAMPLE_INI, encoding="utf-8")

        store = IniSettingsStore.load(path)
        assert store.get_value("Core", "CPUThread") == "False"
        assert store.get_value("Core", "GFXBackend") == "Vulkan"
        assert store.get_value("Core", "Overclock") == "1.5"
        assert store.get_value("Core", "SIDevice0") == "6"
        assert store.get_value("Bindings", "InputA_0") == "Button 1"

    def test_keys_are_case_sensitive(self, tmp_path: Path) -> None:
        path = tmp_path / "Dolphin.ini"
        path.write_text(SAMPLE_INI, encoding="utf-8")

        store = IniSettingsStore.load(path)
        assert store.get_value("Core", "cputhread") is None

    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "Config" / "Dolphin.ini"
        store = IniSettingsStore.load(path)
        store.set_value("Settings", "wideScreenHack", True)
        store.set_value("Core", "SIDevice2", 12)
        store.save()

        assert path.exists()
        assert "wideScreenHack = True" in path.read_text(encoding="utf-8")

        again = IniSettingsStore.load(path)
        assert again.get_value("Settings", "wideScreenHack") == "True"
        assert again.get_value("Core", "SIDevice2") == "12"

    @pytest.mark.parametrize("text", ["007", "1e3", "0x10", "1_000", "-0"])
    def test_number_like_text_survives(self, tmp_path: Path, text: str) -> None:
        path = tmp_path / "Dolphin.ini"
        store = IniSettingsStore.load(path)
        store.set_value("Bindings", "InputA_0", text)
        store.save()
        assert IniSettingsStore.load(path).get_value("Bindings", "InputA_0") == text

    def test_save_leaves_no_temp_files(self, tmp_path: Path) -> None:
        store = IniSettingsStore.load(tmp_path / "a.ini")
        store.set_value("Core", "MMU", False)
        store.save()
        assert [p.name for p in tmp_path.iterdir()] == ["a.ini"]

    def test_remove_value(self, tmp_path: Path) -> None:
        store = IniSettingsStore.load(tmp_path / "a.ini")
        store.set_value("Core", "MMU", True)
        store.remove_value("Core", "MMU")
        store.remove_value("Nope", "MMU")
        assert store.get_value("Core", "MMU") is None

    def test_malformed_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.ini"
        path.write_text("no section header\n", encoding="utf-8")
        with pytest.raises(configparser.Error):
            IniSettingsStore.load(path)


class TestLayeredSettingsStore:
    def _layers(self) -> tuple[MemorySettingsStore, MemorySettingsStore]:
        base = MemorySettingsStore({"Core": {"MMU": False, "CPUThread": True}})
        overlay = MemorySettingsStore({"Core": {"MMU": True}})
        return base, overlay

    def test_overlay_wins(self) -> None:
        base, overlay = self._layers()
        layered = LayeredSettingsStore(base, overlay)
        assert layered.get_value("Core", "MMU") is True

    def test_falls_back_to_base(self) -> None:
        base, overlay = self._layers()
        layered = LayeredSettingsStore(base, overlay)
        assert layered.get_value("Core", "CPUThread") is True

    def test_section_exists_in_either(self) -> None:
        base = MemorySettingsStore({"Core": {}})
        overlay = MemorySettingsStore({"Controls": {}})
        layered = LayeredSettingsStore(base, overlay)
        assert layered.section_exists("Core")
        assert layered.section_exists("Controls")
        assert not layered.section_exists("DSP")

    def test_writes_go_to_overlay(self) -> None:
        base, overlay = self._layers()
        layered = LayeredSettingsStore(base, overlay)
        layered.set_value("Core", "CPUThread", False)
        assert base.get_value("Core", "CPUThread") is True
        assert overlay.get_value("Core", "CPUThread") is False

    def test_save_writes_overlay_file(self, tmp_path: Path) -> None:
        base = IniSettingsStore.load(tmp_path / "Dolphin.ini")
        overlay = IniSettingsStore.load(tmp_path / "GALE01.ini")
        layered = LayeredSettingsStore(base, overlay)
        layered.set_value("Controls", "PadType0", 12)
        layered.save()
        assert (tmp_path / "GALE01.ini").exists()
        assert not (tmp_path / "Dolphin.ini").exists()
