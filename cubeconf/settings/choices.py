# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Fixed choice lists used by single-choice descriptors.

Each list is a ``(labels, values)`` pair; labels are display text, values
are what the store holds.
"""

from __future__ import annotations

from typing import NamedTuple


class ChoiceList(NamedTuple):
    labels: tuple[str, ...]
    values: tuple


# -- CPU core --------------------------------------------------------------

CPU_CORE_INTERPRETER = 0
CPU_CORE_JIT64 = 1
CPU_CORE_JITARM64 = 4
CPU_CORE_CACHED_INTERPRETER = 5

EMU_CORES_ARM64 = ChoiceList(
    ("Interpreter (slowest)", "Cached Interpreter (slower)", "JIT Arm64 (recommended)"),
    (CPU_CORE_INTERPRETER, CPU_CORE_CACHED_INTERPRETER, CPU_CORE_JITARM64),
)
EMU_CORES_GENERIC = ChoiceList(
    ("Interpreter (slowest)", "Cached Interpreter (slower)", "JIT x86-64 (recommended)"),
    (CPU_CORE_INTERPRETER, CPU_CORE_CACHED_INTERPRETER, CPU_CORE_JIT64),
)

# -- Video backend ---------------------------------------------------------
# Order matters: the stored legacy backend name maps to these indices.

VIDEO_BACKEND_NAMES: tuple[str, ...] = ("OGL", "Vulkan", "Software Renderer", "Null")
VIDEO_BACKENDS = ChoiceList(
    ("OpenGL", "Vulkan", "Software Renderer", "Null"),
    (0, 1, 2, 3),
)

# -- Interface -------------------------------------------------------------

DESIGN_SYSTEM_DEFAULT = 2
DESIGNS = ChoiceList(("Light", "Dark", "System default"), (0, 1, DESIGN_SYSTEM_DEFAULT))

# -- Peripherals -----------------------------------------------------------

GCPAD_DISABLED = 0
GCPAD_EMULATED = 6
GCPAD_ADAPTER = 12

GCPAD_TYPES = ChoiceList(
    ("Disabled", "Emulated", "GameCube Adapter"),
    (GCPAD_DISABLED, GCPAD_EMULATED, GCPAD_ADAPTER),
)
WIIMOTE_TYPES = ChoiceList(
    ("Disabled", "Emulated", "Real Wii Remote"),
    (0, 1, 2),
)

# -- GameCube system -------------------------------------------------------

GAME_CUBE_LANGUAGES = ChoiceList(
    ("English", "German", "French", "Spanish", "Italian", "Dutch"),
    (0, 1, 2, 3, 4, 5),
)

EXI_DEVICE_NONE = 255
EXI_DEVICE_GCI_FOLDER = 8

SLOT_DEVICES = ChoiceList(
    ("Nothing", "Dummy", "Memory Card", "GCI Folder"),
    (EXI_DEVICE_NONE, 0, 1, EXI_DEVICE_GCI_FOLDER),
)
SERIAL_DEVICES = ChoiceList(
    ("Nothing", "Dummy", "Broadband Adapter (TAP)", "Broadband Adapter (XLink Kai)"),
    (EXI_DEVICE_NONE, 0, 10, 11),
)

# -- Wii system ------------------------------------------------------------

WII_LANGUAGES = ChoiceList(
    (
        "Japanese", "English", "German", "French", "Spanish",
        "Italian", "Dutch", "Simplified Chinese", "Traditional Chinese", "Korean",
    ),
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9),
)

# -- Graphics --------------------------------------------------------------

SHADER_COMPILATION_MODES = ChoiceList(
    ("Specialized (Default)", "Exclusive Ubershaders", "Hybrid Ubershaders", "Skip Drawing"),
    (0, 1, 2, 3),
)
ASPECT_RATIOS = ChoiceList(
    ("Auto", "Force 16:9", "Force 4:3", "Stretch to Window"),
    (0, 1, 2, 3),
)
FSAA_MODES = ChoiceList(("1x", "2x", "4x", "8x"), (1, 2, 4, 8))
ANISOTROPIC_FILTERING = ChoiceList(("1x", "2x", "4x", "8x", "16x"), (0, 1, 2, 3, 4))
TEXTURE_CACHE_ACCURACY = ChoiceList(("Fast", "Medium", "Safe"), (128, 512, 0))

# First entry of the post-processing shader list.
SHADER_OFF_LABEL = "Off"
SHADER_OFF_VALUE = ""
