"""Tests for host capability detection."""

from pathlib import Path

import pytest

from cubeconf.core import platform_info
from cubeconf.core.platform_info import (
    audio_backends,
    detect_architecture,
    detect_platform,
    find_shaders,
)
from cubeconf.settings.context import Architecture


class TestDetectArchitecture:
    @pytest.mark.parametrize("machine", ["arm64", "aarch64", "ARM64"])
    def test_arm(self, machine: str) -> None:
        assert detect_architecture(machine) is Architecture.ARM64

    @pytest.mark.parametrize("machine", ["x86_64", "AMD64", ""])
    def test_other(self, machine: str) -> None:
        assert detect_architecture(machine) is Architecture.X86_64


class TestAudioBackends:
    def test_linux_extras(self) -> None:
        backends = audio_backends("linux")
        assert backends[0] == "Cubeb"
        assert "Pulse" in backends

    def test_windows_extras(self) -> None:
        assert "WASAPI (Exclusive Mode)" in audio_backends("win32")

    def test_unknown_platform_gets_common_set(self) -> None:
        assert audio_backends("sunos5") == ("Cubeb", "OpenAL", "No Audio Output")


class TestFindShaders:
    def test_missing_dir(self, tmp_path: Path) -> None:
        assert find_shaders(tmp_path / "Shaders") == ()
        assert find_shaders(None) == ()

    def test_lists_glsl_stems_sorted(self, tmp_path: Path) -> None:
        for name in ("sepia.glsl", "crt.glsl", "readme.txt"):
            (tmp_path / name).write_text("", encoding="utf-8")
        (tmp_path / "sub.glsl").mkdir()
        assert find_shaders(tmp_path) == ("crt", "sepia")


class TestDetectPlatform:
    def test_desktop_snapshot(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(platform_info.platform, "machine", lambda: "aarch64")
        (tmp_path / "crt.glsl").write_text("", encoding="utf-8")

        info = detect_platform(tmp_path)
        assert info.architecture is Architecture.ARM64
        assert info.post_processing_shaders == ("crt",)
        assert info.default_audio_backend in info.audio_backends
        assert not info.supports_cutout
        assert not info.supports_custom_driver_loading
