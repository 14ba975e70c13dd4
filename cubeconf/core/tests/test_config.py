"""Tests for the application config and settings file locations."""

import json
from pathlib import Path

import pytest

from cubeconf.core import config as config_mod
from cubeconf.core.config import (
    Config,
    game_settings_path,
    global_settings_path,
    open_store,
)
from cubeconf.settings.store import IniSettingsStore, LayeredSettingsStore


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setattr(config_mod, "_config_dir", lambda: tmp_path)
    return tmp_path


class TestConfig:
    def test_missing_file_gives_defaults(self) -> None:
        assert Config.load() == Config()

    def test_round_trip(self) -> None:
        cfg = Config(last_menu="gcpad|1", debug_logging=True, window_width=900)
        cfg.save()
        assert Config.load() == cfg

    def test_unknown_keys_ignored(self, config_dir: Path) -> None:
        (config_dir / "settings.json").write_text(
            json.dumps({"last_menu": "hacks", "removed_option": 3}), encoding="utf-8",
        )
        assert Config.load().last_menu == "hacks"

    def test_corrupt_file_gives_defaults(self, config_dir: Path) -> None:
        (config_dir / "settings.json").write_text("{not json", encoding="utf-8")
        assert Config.load() == Config()

    def test_non_object_gives_defaults(self, config_dir: Path) -> None:
        (config_dir / "settings.json").write_text("[1, 2]", encoding="utf-8")
        assert Config.load() == Config()


class TestSettingsPaths:
    def test_global_path(self, config_dir: Path) -> None:
        assert global_settings_path() == config_dir / "Config" / "Dolphin.ini"

    def test_game_path(self, config_dir: Path) -> None:
        assert game_settings_path("GALE01") == config_dir / "GameSettings" / "GALE01.ini"

    @pytest.mark.parametrize("bad", ["", "..", "a/b", "a\\b"])
    def test_game_path_rejects_bad_ids(self, bad: str) -> None:
        with pytest.raises(ValueError):
            game_settings_path(bad)


class TestOpenStore:
    def test_global_store(self) -> None:
        assert isinstance(open_store(), IniSettingsStore)

    def test_game_store_layers_over_global(self, config_dir: Path) -> None:
        glob = IniSettingsStore.load(global_settings_path())
        glob.set_value("Core", "CPUThread", True)
        glob.set_value("Core", "MMU", False)
        glob.save()

        store = open_store("GALE01")
        assert isinstance(store, LayeredSettingsStore)
        store.set_value("Core", "MMU", True)
        store.save()

        assert store.get_value("Core", "CPUThread") is True
        assert store.get_value("Core", "MMU") is True
        assert IniSettingsStore.load(global_settings_path()).get_value("Core", "MMU") is False
        game_file = config_dir / "GameSettings" / "GALE01.ini"
        assert "MMU = True" in game_file.read_text(encoding="utf-8")
