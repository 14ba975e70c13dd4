# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Build the ordered list of setting descriptors shown by a menu.

:func:`assemble` dispatches on the :class:`MenuTag` to exactly one routine.
Routines read current values through the store, decide which rows exist for
the given context (profile, platform capabilities, peripheral slot) and
append fresh descriptors.  Nothing is cached between calls.

Absent sections, absent keys and stored values of the wrong type are all
"never configured": the row gets ``current_value=None`` and the UI shows the
default.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from . import choices
from . import keys as k
from .context import Architecture, ControllerMode, SettingsContext
from .keys import indexed_label, key_for
from .menu_tag import MenuTag
from .models import (
    CheckBoxSetting,
    HeaderSetting,
    InputBindingSetting,
    RumbleBindingSetting,
    SettingItem,
    SingleChoiceSetting,
    SliderSetting,
    StringSingleChoiceSetting,
    SubmenuSetting,
)
from .store import SettingsStore, Value, encode_value

log = logging.getLogger(__name__)


# ── Store reads ──────────────────────────────────────────────────────────

class _StoreReader:
    """Typed, forgiving reads for one assembly call."""

    def __init__(self, store: SettingsStore) -> None:
        self._store = store
        self._missing_sections: set[str] = set()

    def _raw(self, section: str, key: str) -> Value | None:
        if section in self._missing_sections:
            return None
        if not self._store.section_exists(section):
            log.debug("Section [%s] not configured, using defaults", section)
            self._missing_sections.add(section)
            return None
        return self._store.get_value(section, key)

    def read_bool(self, section: str, key: str) -> bool | None:
        value = self._raw(section, key)
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.lower() in ("true", "false", "1", "0"):
            return value.lower() in ("true", "1")
        log.debug("Ignoring non-boolean %s/%s=%r", section, key, value)
        return None

    def read_int(self, section: str, key: str) -> int | None:
        value = self._raw(section, key)
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        log.debug("Ignoring non-integer %s/%s=%r", section, key, value)
        return None

    def read_number(self, section: str, key: str) -> int | float | None:
        value = self._raw(section, key)
        if value is None:
            return None
        if isinstance(value, str):
            try:
                value = int(value)
            except ValueError:
                try:
                    value = float(value)
                except ValueError:
                    pass
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        # nan and inf cannot be shown on a slider
        if isinstance(value, float) and math.isfinite(value):
            return value
        log.debug("Ignoring non-numeric %s/%s=%r", section, key, value)
        return None

    def read_str(self, section: str, key: str) -> str | None:
        value = self._raw(section, key)
        if value is None:
            return None
        return encode_value(value)


# ── Derived defaults ─────────────────────────────────────────────────────

def video_backend_index(store: SettingsStore) -> int:
    """Map the stored legacy backend name to its ordinal in the chooser.

    Absent keys and unrecognised names fall back to 0 (OpenGL).
    """
    name = store.get_value(k.SECTION_INI_CORE, k.KEY_VIDEO_BACKEND)
    if isinstance(name, str) and name in choices.VIDEO_BACKEND_NAMES:
        return choices.VIDEO_BACKEND_NAMES.index(name)
    if name is not None:
        log.debug("Unknown video backend %r, falling back to index 0", name)
    return 0


def controller_mode(context: SettingsContext, port: int) -> ControllerMode:
    """Return how GameCube *port* is driven.

    An explicit ``context.controller_mode`` wins; otherwise a port whose
    stored type is "GameCube Adapter" uses the adapter menu and every other
    port uses the bindings menu.
    """
    if context.controller_mode is not None:
        return context.controller_mode
    section, key = key_for(k.KEY_GCPAD_TYPE, port, context)
    if _StoreReader(context.store).read_int(section, key) == choices.GCPAD_ADAPTER:
        return ControllerMode.ADAPTER
    return ControllerMode.BINDINGS


def _cpu_core_defaults(context: SettingsContext) -> tuple[choices.ChoiceList, int]:
    if context.platform.architecture is Architecture.ARM64:
        emu_cores, default = choices.EMU_CORES_ARM64, choices.CPU_CORE_JITARM64
    else:
        emu_cores, default = choices.EMU_CORES_GENERIC, choices.CPU_CORE_JIT64
    if context.platform.default_cpu_core is not None:
        default = context.platform.default_cpu_core
    return emu_cores, default


# ── Small row builders ───────────────────────────────────────────────────

def _check_box(
    rd: _StoreReader, key: str, section: str, label: str,
    description: str | None, default: bool,
) -> CheckBoxSetting:
    return CheckBoxSetting(
        key, section, label, description, default, rd.read_bool(section, key),
    )


def _choice(
    rd: _StoreReader, key: str, section: str, label: str,
    description: str | None, entries: choices.ChoiceList, default: int,
    menu_tag: MenuTag | None = None,
) -> SingleChoiceSetting:
    return SingleChoiceSetting(
        key, section, label, description,
        choice_labels=entries.labels,
        choice_values=entries.values,
        default_value=default,
        current_value=rd.read_int(section, key),
        menu_tag=menu_tag,
    )


def _slider(
    rd: _StoreReader, key: str, section: str, label: str,
    description: str | None, max_value: int, units: str, default: int,
) -> SliderSetting:
    return SliderSetting(
        key, section, label, description,
        min_value=0,
        max_value=max_value,
        default_value=default,
        units=units,
        current_value=rd.read_number(section, key),
    )


def _binding(
    rd: _StoreReader, ctx: SettingsContext, base_key: str, slot: int, label: str,
) -> InputBindingSetting:
    section, key = key_for(base_key, slot, ctx)
    return InputBindingSetting(key, section, label, rd.read_str(section, key))


def _rumble(rd: _StoreReader, ctx: SettingsContext, slot: int) -> RumbleBindingSetting:
    section, key = key_for(k.KEY_EMU_RUMBLE, slot, ctx)
    return RumbleBindingSetting(
        key, section, "emulation_control_rumble", rd.read_str(section, key),
    )


# ── Menu routines ────────────────────────────────────────────────────────

Routine = Callable[[list, MenuTag, SettingsContext, _StoreReader], None]


def _add_config_settings(sl, tag, ctx, rd) -> None:
    sl.append(SubmenuSetting("general_submenu", MenuTag.CONFIG_GENERAL))
    sl.append(SubmenuSetting("interface_submenu", MenuTag.CONFIG_INTERFACE))
    sl.append(SubmenuSetting("controller_submenu", MenuTag.CONTROLLER))
    sl.append(SubmenuSetting("graphics_submenu", MenuTag.GRAPHICS))
    sl.append(SubmenuSetting("enhancements_submenu", MenuTag.ENHANCEMENTS))
    sl.append(SubmenuSetting("hacks_submenu", MenuTag.HACKS))
    sl.append(SubmenuSetting("gamecube_submenu", MenuTag.CONFIG_GAME_CUBE))
    sl.append(SubmenuSetting("wii_submenu", MenuTag.CONFIG_WII))
    sl.append(SubmenuSetting("debug_submenu", MenuTag.DEBUG))


def _add_general_settings(sl, tag, ctx, rd) -> None:
    core = k.SECTION_INI_CORE

    emu_cores, default_cpu_core = _cpu_core_defaults(ctx)
    sl.append(_choice(rd, k.KEY_CPU_CORE, core, "cpu_core", None, emu_cores, default_cpu_core))
    sl.append(_choice(
        rd, k.KEY_VIDEO_BACKEND_INDEX, core, "video_backend", None,
        choices.VIDEO_BACKENDS, video_backend_index(ctx.store),
    ))
    sl.append(_check_box(rd, k.KEY_DUAL_CORE, core, "dual_core", "dual_core_description", True))
    sl.append(_check_box(
        rd, k.KEY_OVERCLOCK_ENABLE, core, "overclock_enable",
        "overclock_enable_description", False,
    ))
    sl.append(_slider(
        rd, k.KEY_OVERCLOCK_PERCENT, core, "overclock_title",
        "overclock_title_description", 400, "%", 100,
    ))
    sl.append(_slider(rd, k.KEY_SPEED_LIMIT, core, "speed_limit", None, 200, "%", 100))
    sl.append(_check_box(
        rd, k.KEY_SYNC_ON_SKIP_IDLE, core, "sync_on_skip_idle",
        "sync_on_skip_idle_description", True,
    ))
    sl.append(_check_box(rd, k.KEY_MMU, core, "mmu_enable", "mmu_enable_description", False))
    sl.append(_check_box(
        rd, k.KEY_FAST_DISC_SPEED, core, "fast_disc_speed",
        "fast_disc_speed_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_JIT_FOLLOW_BRANCH, core, "jit_follow_branch",
        "jit_follow_branch_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_OVERRIDE_REGION_SETTINGS, core, "override_region_settings", None, False,
    ))
    sl.append(_check_box(
        rd, k.KEY_VSYNC, k.SECTION_GFX_HARDWARE, "vsync", "vsync_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_ENABLE_CHEATS, core, "enable_cheats", "enable_cheats_description", False,
    ))
    sl.append(_check_box(rd, k.KEY_AUTO_DISC_CHANGE, core, "auto_disc_change", None, False))
    sl.append(_check_box(
        rd, k.KEY_AUDIO_STRETCH, core, "audio_stretch", "audio_stretch_description", False,
    ))
    sl.append(_slider(
        rd, k.KEY_AUDIO_STRETCH_MAX_LATENCY, core, "audio_stretch_max_latency",
        "audio_stretch_max_latency_description", 300, "", 80,
    ))

    # Backend names are both the labels and the stored values.
    backends = tuple(ctx.platform.audio_backends)
    sl.append(StringSingleChoiceSetting(
        k.KEY_AUDIO_BACKEND, k.SECTION_INI_DSP, "audio_backend", None,
        choice_labels=backends,
        choice_values=backends,
        default_value=ctx.platform.default_audio_backend,
        current_value=rd.read_str(k.SECTION_INI_DSP, k.KEY_AUDIO_BACKEND),
    ))

    sl.append(HeaderSetting("memory_override"))
    sl.append(_check_box(
        rd, k.KEY_RAM_OVERRIDE_ENABLE, core, "enable_memory_size_override",
        "enable_memory_size_override_description", False,
    ))
    sl.append(_slider(rd, k.KEY_MEM1_SIZE, core, "main_mem1_size", None, 64, "MB", 24))
    sl.append(_slider(rd, k.KEY_MEM2_SIZE, core, "main_mem2_size", None, 128, "MB", 64))


def _add_interface_settings(sl, tag, ctx, rd) -> None:
    ui = k.SECTION_INI_INTERFACE

    if ctx.platform.supports_cutout:
        sl.append(_check_box(
            rd, k.KEY_EXPAND_TO_CUTOUT_AREA, ui, "expand_to_cutout_area",
            "expand_to_cutout_area_description", False,
        ))
    if ctx.is_global:
        sl.append(_choice(
            rd, k.KEY_DESIGN, ui, "design", None,
            choices.DESIGNS, choices.DESIGN_SYSTEM_DEFAULT,
        ))
    sl.append(_check_box(
        rd, k.KEY_USE_PANIC_HANDLERS, ui, "panic_handlers", "panic_handlers_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_OSD_MESSAGES, ui, "osd_messages", "osd_messages_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_BUILTIN_TITLE_DATABASE, ui, "use_builtin_title_database", None, True,
    ))
    sl.append(InputBindingSetting(
        k.KEY_SYSTEM_BACK, ui, "system_back", rd.read_str(ui, k.KEY_SYSTEM_BACK),
    ))


def _add_game_cube_settings(sl, tag, ctx, rd) -> None:
    core = k.SECTION_INI_CORE
    sl.append(_choice(
        rd, k.KEY_GAME_CUBE_LANGUAGE, core, "gamecube_system_language", None,
        choices.GAME_CUBE_LANGUAGES, 0,
    ))
    sl.append(_choice(
        rd, k.KEY_SLOT_A_DEVICE, core, "slot_a_device", None,
        choices.SLOT_DEVICES, choices.EXI_DEVICE_GCI_FOLDER,
    ))
    sl.append(_choice(
        rd, k.KEY_SLOT_B_DEVICE, core, "slot_b_device", None,
        choices.SLOT_DEVICES, choices.EXI_DEVICE_NONE,
    ))
    sl.append(_choice(
        rd, k.KEY_SERIAL_PORT_1, core, "serial_port_1", None,
        choices.SERIAL_DEVICES, choices.EXI_DEVICE_NONE,
    ))


def _add_wii_settings(sl, tag, ctx, rd) -> None:
    core = k.SECTION_INI_CORE
    sl.append(_check_box(
        rd, k.KEY_WIIMOTE_SCAN, core, "wiimote_scanning", "wiimote_scanning_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_WIIMOTE_SPEAKER, core, "wiimote_speaker", "wiimote_speaker_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_WII_SD_CARD, core, "wii_sd_card", "wii_sd_card_description", False,
    ))

    ipl = k.SECTION_WII_IPL
    sl.append(_check_box(rd, k.KEY_SYSCONF_SCREENSAVER, ipl, "sysconf_screensaver", None, False))
    sl.append(_choice(
        rd, k.KEY_SYSCONF_LANGUAGE, ipl, "sysconf_language", None, choices.WII_LANGUAGES, 0,
    ))
    sl.append(_check_box(rd, k.KEY_SYSCONF_WIDESCREEN, ipl, "sysconf_widescreen", None, True))
    sl.append(_check_box(
        rd, k.KEY_SYSCONF_PROGRESSIVE_SCAN, ipl, "sysconf_progressive_scan", None, True,
    ))
    sl.append(_check_box(rd, k.KEY_SYSCONF_PAL60, ipl, "sysconf_pal60", None, True))


def _add_controller_settings(sl, tag, ctx, rd) -> None:
    sl.append(SubmenuSetting("gcpad_type_submenu", MenuTag.GCPAD_TYPE))
    sl.append(SubmenuSetting("wiimote_submenu", MenuTag.WIIMOTE))


def _add_gcpad_type_settings(sl, tag, ctx, rd) -> None:
    for port in k.GC_PORTS:
        section, key = key_for(k.KEY_GCPAD_TYPE, port, ctx)
        sl.append(_choice(
            rd, key, section, indexed_label("controller", port), None,
            choices.GCPAD_TYPES, choices.GCPAD_DISABLED,
            menu_tag=MenuTag.gc_pad(port),
        ))


def _add_wiimote_type_settings(sl, tag, ctx, rd) -> None:
    for slot in k.WIIMOTE_SLOTS:
        section, key = key_for(k.KEY_WIIMOTE_TYPE, slot, ctx)
        sl.append(_choice(
            rd, key, section, indexed_label("wiimote", slot), None,
            choices.WIIMOTE_TYPES, 0,
            menu_tag=MenuTag.wiimote(slot),
        ))


_GCPAD_BINDING_GROUPS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("generic_buttons", (
        (k.KEY_GCBIND_A, "button_a"),
        (k.KEY_GCBIND_B, "button_b"),
        (k.KEY_GCBIND_X, "button_x"),
        (k.KEY_GCBIND_Y, "button_y"),
        (k.KEY_GCBIND_Z, "button_z"),
        (k.KEY_GCBIND_START, "button_start"),
    )),
    ("controller_control", (
        (k.KEY_GCBIND_CONTROL_UP, "generic_up"),
        (k.KEY_GCBIND_CONTROL_DOWN, "generic_down"),
        (k.KEY_GCBIND_CONTROL_LEFT, "generic_left"),
        (k.KEY_GCBIND_CONTROL_RIGHT, "generic_right"),
    )),
    ("controller_c", (
        (k.KEY_GCBIND_C_UP, "generic_up"),
        (k.KEY_GCBIND_C_DOWN, "generic_down"),
        (k.KEY_GCBIND_C_LEFT, "generic_left"),
        (k.KEY_GCBIND_C_RIGHT, "generic_right"),
    )),
    ("controller_trig", (
        (k.KEY_GCBIND_TRIGGER_L, "trigger_left"),
        (k.KEY_GCBIND_TRIGGER_R, "trigger_right"),
        (k.KEY_GCBIND_TRIGGER_L_ANALOG, "trigger_left_analog"),
        (k.KEY_GCBIND_TRIGGER_R_ANALOG, "trigger_right_analog"),
    )),
    ("controller_dpad", (
        (k.KEY_GCBIND_DPAD_UP, "generic_up"),
        (k.KEY_GCBIND_DPAD_DOWN, "generic_down"),
        (k.KEY_GCBIND_DPAD_LEFT, "generic_left"),
        (k.KEY_GCBIND_DPAD_RIGHT, "generic_right"),
    )),
)

_WIIMOTE_BINDING_GROUPS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    ("generic_buttons", (
        (k.KEY_WIIBIND_A, "button_a"),
        (k.KEY_WIIBIND_B, "button_b"),
        (k.KEY_WIIBIND_1, "button_one"),
        (k.KEY_WIIBIND_2, "button_two"),
        (k.KEY_WIIBIND_PLUS, "button_plus"),
        (k.KEY_WIIBIND_MINUS, "button_minus"),
        (k.KEY_WIIBIND_HOME, "button_home"),
    )),
    ("wiimote_ir", (
        (k.KEY_WIIBIND_IR_UP, "generic_up"),
        (k.KEY_WIIBIND_IR_DOWN, "generic_down"),
        (k.KEY_WIIBIND_IR_LEFT, "generic_left"),
        (k.KEY_WIIBIND_IR_RIGHT, "generic_right"),
    )),
    ("wiimote_shake", (
        (k.KEY_WIIBIND_SHAKE_X, "shake_x"),
        (k.KEY_WIIBIND_SHAKE_Y, "shake_y"),
        (k.KEY_WIIBIND_SHAKE_Z, "shake_z"),
    )),
    ("wiimote_tilt", (
        (k.KEY_WIIBIND_TILT_FORWARD, "generic_forward"),
        (k.KEY_WIIBIND_TILT_BACKWARD, "generic_backward"),
        (k.KEY_WIIBIND_TILT_LEFT, "generic_left"),
        (k.KEY_WIIBIND_TILT_RIGHT, "generic_right"),
    )),
)


def _add_binding_groups(sl, ctx, rd, slot: int, groups) -> None:
    for header, bindings in groups:
        sl.append(HeaderSetting(header))
        for base_key, label in bindings:
            sl.append(_binding(rd, ctx, base_key, slot, label))
    sl.append(HeaderSetting("emulation_control_rumble"))
    sl.append(_rumble(rd, ctx, slot))


def _add_gcpad_settings(sl, tag, ctx, rd) -> None:
    port = tag.subtype
    if controller_mode(ctx, port) is ControllerMode.BINDINGS:
        _add_binding_groups(sl, ctx, rd, port, _GCPAD_BINDING_GROUPS)
        return

    section, key = key_for(k.KEY_GCADAPTER_RUMBLE, port, ctx)
    sl.append(_check_box(
        rd, key, section, "gc_adapter_rumble", "gc_adapter_rumble_description", False,
    ))
    section, key = key_for(k.KEY_GCADAPTER_BONGOS, port, ctx)
    sl.append(_check_box(
        rd, key, section, "gc_adapter_bongos", "gc_adapter_bongos_description", False,
    ))


def _add_wiimote_settings(sl, tag, ctx, rd) -> None:
    _add_binding_groups(sl, ctx, rd, tag.subtype, _WIIMOTE_BINDING_GROUPS)


def _add_graphics_settings(sl, tag, ctx, rd) -> None:
    gfx = k.SECTION_GFX_SETTINGS

    sl.append(_check_box(rd, k.KEY_SHOW_FPS, gfx, "show_fps", "show_fps_description", False))
    sl.append(_choice(
        rd, k.KEY_SHADER_COMPILATION_MODE, gfx, "shader_compilation_mode",
        "shader_compilation_mode_description", choices.SHADER_COMPILATION_MODES, 0,
    ))
    sl.append(_check_box(
        rd, k.KEY_WAIT_FOR_SHADERS, gfx, "wait_for_shaders", "wait_for_shaders_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_BACKEND_MULTITHREADING, gfx, "backend_multithreading",
        "backend_multithreading_description", True,
    ))
    platform = ctx.platform
    if platform.has_gpu_driver and ctx.is_global and platform.supports_custom_driver_loading:
        sl.append(SubmenuSetting("gpu_driver_submenu", MenuTag.GPU_DRIVERS))
    sl.append(_choice(
        rd, k.KEY_ASPECT_RATIO, gfx, "aspect_ratio", None, choices.ASPECT_RATIOS, 0,
    ))
    sl.append(_slider(rd, k.KEY_DISPLAY_SCALE, gfx, "setting_display_scale", None, 200, "%", 100))


def _add_enhancement_settings(sl, tag, ctx, rd) -> None:
    gfx = k.SECTION_GFX_SETTINGS
    enh = k.SECTION_GFX_ENHANCEMENTS

    sl.append(_slider(
        rd, k.KEY_INTERNAL_RES, gfx, "internal_resolution",
        "internal_resolution_description", 400, "x", 100,
    ))
    sl.append(_choice(
        rd, k.KEY_FSAA, gfx, "FSAA", "FSAA_description", choices.FSAA_MODES, 1,
    ))
    sl.append(_choice(
        rd, k.KEY_ANISOTROPY, enh, "anisotropic_filtering",
        "anisotropic_filtering_description", choices.ANISOTROPIC_FILTERING, 0,
    ))

    shaders = tuple(ctx.platform.post_processing_shaders)
    sl.append(StringSingleChoiceSetting(
        k.KEY_POST_SHADER, enh, "post_processing_shader", None,
        choice_labels=(choices.SHADER_OFF_LABEL, *shaders),
        choice_values=(choices.SHADER_OFF_VALUE, *shaders),
        default_value=choices.SHADER_OFF_VALUE,
        current_value=rd.read_str(enh, k.KEY_POST_SHADER),
    ))

    sl.append(_check_box(
        rd, k.KEY_HIRES_TEXTURES, gfx, "load_custom_texture",
        "load_custom_texture_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_CACHE_HIRES_TEXTURES, gfx, "cache_custom_texture",
        "cache_custom_texture_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_SCALED_EFB, k.SECTION_GFX_HACKS, "scaled_efb_copy",
        "scaled_efb_copy_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_PER_PIXEL, gfx, "per_pixel_lighting", "per_pixel_lighting_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_FORCE_FILTERING, enh, "force_texture_filtering",
        "force_texture_filtering_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_FORCE_24_BIT_COLOR, enh, "force_24bit_color",
        "force_24bit_color_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_DISABLE_FOG, gfx, "disable_fog", "disable_fog_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_DISABLE_COPY_FILTER, enh, "disable_copy_filter",
        "disable_copy_filter_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_ARBITRARY_MIPMAP_DETECTION, enh, "arbitrary_mipmap_detection",
        "arbitrary_mipmap_detection_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_WIDE_SCREEN_HACK, gfx, "wide_screen_hack", "wide_screen_hack_description", False,
    ))


def _add_hack_settings(sl, tag, ctx, rd) -> None:
    gfx = k.SECTION_GFX_SETTINGS
    hacks = k.SECTION_GFX_HACKS

    sl.append(HeaderSetting("embedded_frame_buffer"))
    sl.append(_check_box(
        rd, k.KEY_SKIP_EFB, hacks, "skip_efb_access", "skip_efb_access_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_IGNORE_FORMAT, hacks, "ignore_format_changes",
        "ignore_format_changes_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_EFB_TEXTURE, hacks, "efb_copy_method", "efb_copy_method_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_DEFER_EFB_COPIES, hacks, "defer_efb_copies",
        "defer_efb_copies_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_EFB_DEFER_INVALIDATION, hacks, "efb_defer_invalidation",
        "efb_defer_invalidation_description", False,
    ))

    sl.append(HeaderSetting("texture_cache"))
    sl.append(_choice(
        rd, k.KEY_TEXCACHE_ACCURACY, gfx, "texture_cache_accuracy",
        "texture_cache_accuracy_description", choices.TEXTURE_CACHE_ACCURACY, 128,
    ))
    sl.append(_check_box(
        rd, k.KEY_GPU_TEXTURE_DECODING, gfx, "gpu_texture_decoding",
        "gpu_texture_decoding_description", False,
    ))

    sl.append(HeaderSetting("external_frame_buffer"))
    sl.append(_check_box(
        rd, k.KEY_XFB_TEXTURE, hacks, "xfb_copy_method", "xfb_copy_method_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_IMMEDIATE_XFB, hacks, "immediate_xfb", "immediate_xfb_description", False,
    ))
    sl.append(_check_box(
        rd, k.KEY_SKIP_DUPLICATE_XFBS, hacks, "skip_duplicate_xfbs",
        "skip_duplicate_xfbs_description", True,
    ))

    sl.append(HeaderSetting("other"))
    sl.append(_check_box(
        rd, k.KEY_APPROX_LOGIC_OP_WITH_BLENDING, hacks, "approx_logic_op_with_blending",
        "approx_logic_op_with_blending_description", False,
    ))
    sl.append(_check_box(rd, k.KEY_VI_SKIP, hacks, "vi_skip", "vi_skip_description", False))
    sl.append(_check_box(
        rd, k.KEY_SAVE_TEXTURE_CACHE_TO_STATE, gfx, "texture_cache_to_state",
        "texture_cache_to_state_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_FAST_DEPTH, gfx, "fast_depth_calculation",
        "fast_depth_calculation_description", True,
    ))
    sl.append(_check_box(
        rd, k.KEY_TMEM_CACHE_EMULATION, hacks, "tmem_cache_emulation",
        "tmem_cache_emulation_description", True,
    ))


_DEBUG_TOGGLES: tuple[tuple[str, str], ...] = (
    (k.KEY_DEBUG_JITOFF, "debug_jitoff"),
    (k.KEY_DEBUG_JITLOADSTOREOFF, "debug_jitloadstoreoff"),
    (k.KEY_DEBUG_JITLOADSTOREFLOATINGPOINTOFF, "debug_jitloadstorefloatingoff"),
    (k.KEY_DEBUG_JITLOADSTOREPAIREDOFF, "debug_jitloadstorepairedoff"),
    (k.KEY_DEBUG_JITFLOATINGPOINTOFF, "debug_jitfloatingpointoff"),
    (k.KEY_DEBUG_JITINTEGEROFF, "debug_jitintegeroff"),
    (k.KEY_DEBUG_JITPAIREDOFF, "debug_jitpairedoff"),
    (k.KEY_DEBUG_JITSYSTEMREGISTEROFF, "debug_jitsystemregistersoff"),
    (k.KEY_DEBUG_JITBRANCHOFF, "debug_jitbranchoff"),
    (k.KEY_DEBUG_JITREGISTERCACHEOFF, "debug_jitregistercacheoff"),
)


def _add_debug_settings(sl, tag, ctx, rd) -> None:
    sl.append(HeaderSetting("debug_warning"))
    for key, label in _DEBUG_TOGGLES:
        sl.append(_check_box(rd, key, k.SECTION_DEBUG, label, None, False))


# ── Dispatch ─────────────────────────────────────────────────────────────

_ROUTINES: dict[MenuTag, Routine] = {
    MenuTag.CONFIG: _add_config_settings,
    MenuTag.CONFIG_GENERAL: _add_general_settings,
    MenuTag.CONFIG_INTERFACE: _add_interface_settings,
    MenuTag.CONFIG_GAME_CUBE: _add_game_cube_settings,
    MenuTag.CONFIG_WII: _add_wii_settings,
    MenuTag.CONTROLLER: _add_controller_settings,
    MenuTag.GCPAD_TYPE: _add_gcpad_type_settings,
    MenuTag.WIIMOTE: _add_wiimote_type_settings,
    MenuTag.GCPAD_1: _add_gcpad_settings,
    MenuTag.GCPAD_2: _add_gcpad_settings,
    MenuTag.GCPAD_3: _add_gcpad_settings,
    MenuTag.GCPAD_4: _add_gcpad_settings,
    MenuTag.WIIMOTE_1: _add_wiimote_settings,
    MenuTag.WIIMOTE_2: _add_wiimote_settings,
    MenuTag.WIIMOTE_3: _add_wiimote_settings,
    MenuTag.WIIMOTE_4: _add_wiimote_settings,
    MenuTag.GRAPHICS: _add_graphics_settings,
    MenuTag.ENHANCEMENTS: _add_enhancement_settings,
    MenuTag.HACKS: _add_hack_settings,
    MenuTag.DEBUG: _add_debug_settings,
}

# Tags that open a screen of their own rather than a settings list.
CONTAINER_TAGS: frozenset[MenuTag] = frozenset({MenuTag.GPU_DRIVERS})


def _check_dispatch_table() -> None:
    unhandled = set(MenuTag) - set(_ROUTINES) - CONTAINER_TAGS
    if unhandled:
        names = ", ".join(sorted(t.name for t in unhandled))
        raise RuntimeError(f"MenuTag members without an assembly routine: {names}")
    both = CONTAINER_TAGS & set(_ROUTINES)
    if both:
        names = ", ".join(sorted(t.name for t in both))
        raise RuntimeError(f"MenuTag members both routed and containers: {names}")


_check_dispatch_table()


def assemble(tag: MenuTag, context: SettingsContext) -> list[SettingItem] | None:
    """Return the rows of menu *tag* for *context*, in display order.

    Returns ``None`` for container tags that do not show a settings list.
    """
    routine = _ROUTINES.get(tag)
    if routine is None:
        log.debug("%s is not a settings list", tag)
        return None

    items: list[SettingItem] = []
    routine(items, tag, context, _StoreReader(context.store))
    log.debug("Assembled %d rows for %s", len(items), tag)
    return items
