# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Inputs that make menu assembly deterministic."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .store import SettingsStore

# First OS version tier that can draw into the display cutout.
CUTOUT_MIN_OS_TIER = 28


class Architecture(Enum):
    ARM64 = "arm64"
    X86_64 = "x86_64"


class ControllerMode(Enum):
    """How a GameCube controller port is driven."""
    BINDINGS = "bindings"   # emulated pad, mapped per button
    ADAPTER = "adapter"     # real pad through a USB adapter


@dataclass(frozen=True)
class PlatformInfo:
    """Snapshot of host capabilities consulted while assembling menus."""
    os_version_tier: int = 0
    architecture: Architecture = Architecture.X86_64
    default_cpu_core: int | None = None
    default_audio_backend: str = ""
    audio_backends: tuple[str, ...] = ()
    post_processing_shaders: tuple[str, ...] = ()
    supports_custom_driver_loading: bool = False
    has_gpu_driver: bool = False

    @property
    def supports_cutout(self) -> bool:
        return self.os_version_tier >= CUTOUT_MIN_OS_TIER


@dataclass(frozen=True)
class SettingsContext:
    """Everything a menu routine may read besides the tag itself.

    *content_id* is empty for the global profile and the game id for a
    per-game override profile.  *controller_mode*, when set, forces the shape
    of GameCube controller menus; otherwise it is derived from the stored
    port type.
    """
    store: SettingsStore
    platform: PlatformInfo = PlatformInfo()
    content_id: str = ""
    controller_mode: ControllerMode | None = None

    @property
    def is_global(self) -> bool:
        return not self.content_id
