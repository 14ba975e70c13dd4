# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Build a :class:`PlatformInfo` snapshot for the running desktop host."""

from __future__ import annotations

import logging
import platform
import sys
from pathlib import Path

from cubeconf.settings.context import Architecture, PlatformInfo

log = logging.getLogger(__name__)

_ARM64_MACHINES = {"arm64", "aarch64", "armv8", "armv8l"}

# Desktop windows never draw into a display cutout.
_DESKTOP_OS_TIER = 0

_DEFAULT_AUDIO_BACKEND = "Cubeb"
_COMMON_AUDIO_BACKENDS = ("Cubeb", "OpenAL", "No Audio Output")
_PLATFORM_AUDIO_BACKENDS: dict[str, tuple[str, ...]] = {
    "win32": ("WASAPI (Exclusive Mode)",),
    "linux": ("Pulse", "ALSA"),
}

SHADER_SUFFIX = ".glsl"


def detect_architecture(machine: str | None = None) -> Architecture:
    machine = (machine if machine is not None else platform.machine()).lower()
    return Architecture.ARM64 if machine in _ARM64_MACHINES else Architecture.X86_64


def audio_backends(sys_platform: str | None = None) -> tuple[str, ...]:
    key = sys_platform or sys.platform
    if key.startswith("linux"):
        key = "linux"
    return _COMMON_AUDIO_BACKENDS + _PLATFORM_AUDIO_BACKENDS.get(key, ())


def find_shaders(shader_dir: Path | None) -> tuple[str, ...]:
    """Return the sorted names of the post-processing shaders in *shader_dir*."""
    if shader_dir is None or not shader_dir.is_dir():
        return ()
    return tuple(sorted(p.stem for p in shader_dir.glob(f"*{SHADER_SUFFIX}") if p.is_file()))


def detect_platform(shader_dir: Path | None = None) -> PlatformInfo:
    info = PlatformInfo(
        os_version_tier=_DESKTOP_OS_TIER,
        architecture=detect_architecture(),
        default_audio_backend=_DEFAULT_AUDIO_BACKEND,
        audio_backends=audio_backends(),
        post_processing_shaders=find_shaders(shader_dir),
    )
    log.debug("Detected platform: %s", info)
    return info
