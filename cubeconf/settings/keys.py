# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Store sections, keys, and the namespacing of per-slot peripheral keys.

Peripheral settings repeat once per slot.  Their keys are a base key with the
slot index appended, and where they live depends on the profile::

    global profile    Core/SIDevice2          Bindings/InputA_2
    per-game profile  Controls/PadType2       Controls/GameInputA_2

:func:`key_for` is the only place this rule is applied, so the key used to
read a value during assembly is always the key used to write it back.
"""

from __future__ import annotations

from typing import NamedTuple

from .context import SettingsContext

# -- Sections --------------------------------------------------------------

SECTION_INI_CORE = "Core"
SECTION_INI_DSP = "DSP"
SECTION_INI_INTERFACE = "Interface"
SECTION_GFX_SETTINGS = "Settings"
SECTION_GFX_ENHANCEMENTS = "Enhancements"
SECTION_GFX_HACKS = "Hacks"
SECTION_GFX_HARDWARE = "Hardware"
SECTION_DEBUG = "Debug"
SECTION_WII_IPL = "IPL"
SECTION_BINDINGS = "Bindings"
SECTION_CONTROLS = "Controls"

# -- General ---------------------------------------------------------------

KEY_CPU_CORE = "CPUCore"
KEY_DUAL_CORE = "CPUThread"
KEY_OVERCLOCK_ENABLE = "OverclockEnable"
KEY_OVERCLOCK_PERCENT = "Overclock"
KEY_SPEED_LIMIT = "EmulationSpeed"
KEY_SYNC_ON_SKIP_IDLE = "SyncOnSkipIdle"
KEY_MMU = "MMU"
KEY_FAST_DISC_SPEED = "FastDiscSpeed"
KEY_JIT_FOLLOW_BRANCH = "JITFollowBranch"
KEY_OVERRIDE_REGION_SETTINGS = "OverrideRegionSettings"
KEY_AUTO_DISC_CHANGE = "AutoDiscChange"
KEY_AUDIO_STRETCH = "AudioStretch"
KEY_AUDIO_STRETCH_MAX_LATENCY = "AudioStretchMaxLatency"
KEY_AUDIO_BACKEND = "Backend"
KEY_ENABLE_CHEATS = "EnableCheats"
KEY_RAM_OVERRIDE_ENABLE = "RAMOverrideEnable"
KEY_MEM1_SIZE = "MEM1Size"
KEY_MEM2_SIZE = "MEM2Size"
KEY_VIDEO_BACKEND = "GFXBackend"            # legacy: backend name
KEY_VIDEO_BACKEND_INDEX = "VideoBackend"    # backend ordinal

# -- Interface -------------------------------------------------------------

KEY_EXPAND_TO_CUTOUT_AREA = "ExpandToCutoutArea"
KEY_DESIGN = "Design"
KEY_USE_PANIC_HANDLERS = "UsePanicHandlers"
KEY_OSD_MESSAGES = "OnScreenDisplayMessages"
KEY_BUILTIN_TITLE_DATABASE = "UseBuiltinTitleDatabase"
KEY_SYSTEM_BACK = "SystemBack"

# -- GameCube / Wii system -------------------------------------------------

KEY_GAME_CUBE_LANGUAGE = "SelectedLanguage"
KEY_SLOT_A_DEVICE = "SlotA"
KEY_SLOT_B_DEVICE = "SlotB"
KEY_SERIAL_PORT_1 = "SerialPort1"
KEY_WIIMOTE_SCAN = "WiimoteContinuousScanning"
KEY_WIIMOTE_SPEAKER = "WiimoteEnableSpeaker"
KEY_WII_SD_CARD = "WiiSDCard"
KEY_SYSCONF_SCREENSAVER = "SSV"
KEY_SYSCONF_LANGUAGE = "LNG"
KEY_SYSCONF_WIDESCREEN = "AR"
KEY_SYSCONF_PROGRESSIVE_SCAN = "PGS"
KEY_SYSCONF_PAL60 = "E60"

# -- Graphics --------------------------------------------------------------

KEY_SHOW_FPS = "ShowFPS"
KEY_SHADER_COMPILATION_MODE = "ShaderCompilationMode"
KEY_WAIT_FOR_SHADERS = "WaitForShadersBeforeStarting"
KEY_ASPECT_RATIO = "AspectRatio"
KEY_DISPLAY_SCALE = "DisplayScale"
KEY_BACKEND_MULTITHREADING = "BackendMultithreading"
KEY_VSYNC = "VSync"

# -- Enhancements ----------------------------------------------------------

KEY_INTERNAL_RES = "InternalResolution"
KEY_FSAA = "MSAA"
KEY_ANISOTROPY = "MaxAnisotropy"
KEY_POST_SHADER = "PostProcessingShader"
KEY_HIRES_TEXTURES = "HiresTextures"
KEY_CACHE_HIRES_TEXTURES = "CacheHiresTextures"
KEY_PER_PIXEL = "EnablePixelLighting"
KEY_FORCE_FILTERING = "ForceFiltering"
KEY_DISABLE_FOG = "DisableFog"
KEY_DISABLE_COPY_FILTER = "DisableCopyFilter"
KEY_ARBITRARY_MIPMAP_DETECTION = "ArbitraryMipmapDetection"
KEY_WIDE_SCREEN_HACK = "wideScreenHack"
KEY_FORCE_24_BIT_COLOR = "ForceTrueColor"

# -- Hacks -----------------------------------------------------------------

KEY_SKIP_EFB = "EFBAccessEnable"
KEY_IGNORE_FORMAT = "EFBEmulateFormatChanges"
KEY_EFB_TEXTURE = "EFBToTextureEnable"
KEY_DEFER_EFB_COPIES = "DeferEFBCopies"
KEY_EFB_DEFER_INVALIDATION = "EFBAccessDeferInvalidation"
KEY_SCALED_EFB = "EFBScaledCopy"
KEY_TEXCACHE_ACCURACY = "SafeTextureCacheColorSamples"
KEY_GPU_TEXTURE_DECODING = "EnableGPUTextureDecoding"
KEY_XFB_TEXTURE = "XFBToTextureEnable"
KEY_IMMEDIATE_XFB = "ImmediateXFBEnable"
KEY_SKIP_DUPLICATE_XFBS = "SkipDuplicateXFBs"
KEY_APPROX_LOGIC_OP_WITH_BLENDING = "ApproximateLogicOpWithBlending"
KEY_VI_SKIP = "VISkip"
KEY_SAVE_TEXTURE_CACHE_TO_STATE = "SaveTextureCacheToState"
KEY_FAST_DEPTH = "FastDepthCalc"
KEY_TMEM_CACHE_EMULATION = "EnableTMEMCacheEmulation"

# -- Debug -----------------------------------------------------------------

KEY_DEBUG_JITOFF = "JitOff"
KEY_DEBUG_JITLOADSTOREOFF = "JitLoadStoreOff"
KEY_DEBUG_JITLOADSTOREFLOATINGPOINTOFF = "JitLoadStoreFloatingOff"
KEY_DEBUG_JITLOADSTOREPAIREDOFF = "JitLoadStorePairedOff"
KEY_DEBUG_JITFLOATINGPOINTOFF = "JitFloatingPointOff"
KEY_DEBUG_JITINTEGEROFF = "JitIntegerOff"
KEY_DEBUG_JITPAIREDOFF = "JitPairedOff"
KEY_DEBUG_JITSYSTEMREGISTEROFF = "JitSystemRegistersOff"
KEY_DEBUG_JITBRANCHOFF = "JitBranchOff"
KEY_DEBUG_JITREGISTERCACHEOFF = "JitRegisterCacheOff"

# -- Per-slot base keys (slot index is appended) ---------------------------

KEY_GCPAD_TYPE = "SIDevice"
KEY_WIIMOTE_TYPE = "WiimoteSource"
KEY_GCADAPTER_RUMBLE = "AdapterRumble"
KEY_GCADAPTER_BONGOS = "SimulateKonga"
KEY_EMU_RUMBLE = "EmuRumble"

KEY_GCBIND_A = "InputA_"
KEY_GCBIND_B = "InputB_"
KEY_GCBIND_X = "InputX_"
KEY_GCBIND_Y = "InputY_"
KEY_GCBIND_Z = "InputZ_"
KEY_GCBIND_START = "InputStart_"
KEY_GCBIND_CONTROL_UP = "MainUp_"
KEY_GCBIND_CONTROL_DOWN = "MainDown_"
KEY_GCBIND_CONTROL_LEFT = "MainLeft_"
KEY_GCBIND_CONTROL_RIGHT = "MainRight_"
KEY_GCBIND_C_UP = "CStickUp_"
KEY_GCBIND_C_DOWN = "CStickDown_"
KEY_GCBIND_C_LEFT = "CStickLeft_"
KEY_GCBIND_C_RIGHT = "CStickRight_"
KEY_GCBIND_TRIGGER_L = "InputL_"
KEY_GCBIND_TRIGGER_R = "InputR_"
KEY_GCBIND_TRIGGER_L_ANALOG = "InputL_Analog_"
KEY_GCBIND_TRIGGER_R_ANALOG = "InputR_Analog_"
KEY_GCBIND_DPAD_UP = "DPadUp_"
KEY_GCBIND_DPAD_DOWN = "DPadDown_"
KEY_GCBIND_DPAD_LEFT = "DPadLeft_"
KEY_GCBIND_DPAD_RIGHT = "DPadRight_"

KEY_WIIBIND_A = "WiimoteA_"
KEY_WIIBIND_B = "WiimoteB_"
KEY_WIIBIND_1 = "Wiimote1_"
KEY_WIIBIND_2 = "Wiimote2_"
KEY_WIIBIND_PLUS = "WiimotePlus_"
KEY_WIIBIND_MINUS = "WiimoteMinus_"
KEY_WIIBIND_HOME = "WiimoteHome_"
KEY_WIIBIND_IR_UP = "WiimoteIRUp_"
KEY_WIIBIND_IR_DOWN = "WiimoteIRDown_"
KEY_WIIBIND_IR_LEFT = "WiimoteIRLeft_"
KEY_WIIBIND_IR_RIGHT = "WiimoteIRRight_"
KEY_WIIBIND_SHAKE_X = "WiimoteShakeX_"
KEY_WIIBIND_SHAKE_Y = "WiimoteShakeY_"
KEY_WIIBIND_SHAKE_Z = "WiimoteShakeZ_"
KEY_WIIBIND_TILT_FORWARD = "WiimoteTiltForward_"
KEY_WIIBIND_TILT_BACKWARD = "WiimoteTiltBackward_"
KEY_WIIBIND_TILT_LEFT = "WiimoteTiltLeft_"
KEY_WIIBIND_TILT_RIGHT = "WiimoteTiltRight_"

GC_PORTS = range(0, 4)
WIIMOTE_SLOTS = range(4, 8)
_MAX_SLOT = 7


class IndexedKey(NamedTuple):
    """Where one per-slot base key lives in each kind of profile."""
    global_section: str
    game_key: str
    # Subtracted from the slot in per-game keys (remote types are WiimoteType0-3).
    game_slot_offset: int = 0


_BINDING_KEYS = (
    KEY_EMU_RUMBLE,
    KEY_GCBIND_A, KEY_GCBIND_B, KEY_GCBIND_X, KEY_GCBIND_Y, KEY_GCBIND_Z,
    KEY_GCBIND_START,
    KEY_GCBIND_CONTROL_UP, KEY_GCBIND_CONTROL_DOWN,
    KEY_GCBIND_CONTROL_LEFT, KEY_GCBIND_CONTROL_RIGHT,
    KEY_GCBIND_C_UP, KEY_GCBIND_C_DOWN, KEY_GCBIND_C_LEFT, KEY_GCBIND_C_RIGHT,
    KEY_GCBIND_TRIGGER_L, KEY_GCBIND_TRIGGER_R,
    KEY_GCBIND_TRIGGER_L_ANALOG, KEY_GCBIND_TRIGGER_R_ANALOG,
    KEY_GCBIND_DPAD_UP, KEY_GCBIND_DPAD_DOWN,
    KEY_GCBIND_DPAD_LEFT, KEY_GCBIND_DPAD_RIGHT,
    KEY_WIIBIND_A, KEY_WIIBIND_B, KEY_WIIBIND_1, KEY_WIIBIND_2,
    KEY_WIIBIND_PLUS, KEY_WIIBIND_MINUS, KEY_WIIBIND_HOME,
    KEY_WIIBIND_IR_UP, KEY_WIIBIND_IR_DOWN, KEY_WIIBIND_IR_LEFT, KEY_WIIBIND_IR_RIGHT,
    KEY_WIIBIND_SHAKE_X, KEY_WIIBIND_SHAKE_Y, KEY_WIIBIND_SHAKE_Z,
    KEY_WIIBIND_TILT_FORWARD, KEY_WIIBIND_TILT_BACKWARD,
    KEY_WIIBIND_TILT_LEFT, KEY_WIIBIND_TILT_RIGHT,
)

INDEXED_KEYS: dict[str, IndexedKey] = {
    KEY_GCPAD_TYPE: IndexedKey(SECTION_INI_CORE, "PadType"),
    KEY_WIIMOTE_TYPE: IndexedKey(SECTION_INI_CORE, "WiimoteType", game_slot_offset=4),
    KEY_GCADAPTER_RUMBLE: IndexedKey(SECTION_INI_CORE, "PadAdapterRumble"),
    KEY_GCADAPTER_BONGOS: IndexedKey(SECTION_INI_CORE, "PadSimulateKonga"),
    **{base: IndexedKey(SECTION_BINDINGS, f"Game{base}") for base in _BINDING_KEYS},
}


def key_for(base_key: str, slot: int, context: SettingsContext) -> tuple[str, str]:
    """Return the ``(section, key)`` that holds *base_key* for *slot*.

    Raises :class:`KeyError` for a base key that is not per-slot and
    :class:`ValueError` for a slot outside 0-7.
    """
    if not 0 <= slot <= _MAX_SLOT:
        raise ValueError(f"peripheral slot must be 0-{_MAX_SLOT}, got {slot}")
    try:
        entry = INDEXED_KEYS[base_key]
    except KeyError:
        raise KeyError(f"{base_key!r} is not a per-slot key") from None

    if context.is_global:
        return entry.global_section, f"{base_key}{slot}"
    game_slot = slot - entry.game_slot_offset
    if game_slot < 0:
        raise ValueError(f"{base_key!r} has no slot {slot}")
    return SECTION_CONTROLS, f"{entry.game_key}{game_slot}"


def indexed_label(base_label: str, index: int) -> str:
    """Return the label id of the *index*-th peripheral, e.g. ``controller_2``."""
    return f"{base_label}_{index}"
