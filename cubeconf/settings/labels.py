# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Label and description ids with their English text.

The assembly engine only ever emits ids; the UI resolves them here.
Peripheral labels are contiguous (``controller_0`` .. ``controller_3``,
``wiimote_4`` .. ``wiimote_7``) so they can be addressed as base plus index.
"""

from __future__ import annotations

LABELS: dict[str, str] = {
    # Submenus
    "general_submenu": "General",
    "interface_submenu": "Interface",
    "controller_submenu": "Controllers",
    "graphics_submenu": "Graphics",
    "enhancements_submenu": "Enhancements",
    "hacks_submenu": "Hacks",
    "gamecube_submenu": "GameCube",
    "wii_submenu": "Wii",
    "debug_submenu": "Debug",
    "gpu_driver_submenu": "GPU Driver",
    "gcpad_type_submenu": "GameCube Controllers",
    "wiimote_submenu": "Wii Remotes",

    # General
    "cpu_core": "CPU Core",
    "dual_core": "Enable Dual Core",
    "dual_core_description": "Split emulation across two threads for a large speed boost.",
    "overclock_enable": "Override Emulated CPU Clock Speed",
    "overclock_enable_description": "Runs the emulated CPU faster or slower than normal.",
    "overclock_title": "Emulated CPU Clock Speed",
    "overclock_title_description": "Percentage of the console's native clock speed.",
    "speed_limit": "Speed Limit",
    "sync_on_skip_idle": "Synchronize GPU thread on idle skipping",
    "sync_on_skip_idle_description": "Avoids random freezes in Dual Core mode.",
    "mmu_enable": "Enable MMU",
    "mmu_enable_description": "Emulates the memory management unit. Needed by a few games.",
    "fast_disc_speed": "Speed up Disc Transfer Rate",
    "fast_disc_speed_description": "Shortens loading times but may break some games.",
    "jit_follow_branch": "JIT Follow Branch",
    "jit_follow_branch_description": "Follows branches while compiling blocks.",
    "override_region_settings": "Allow Mismatched Region Settings",
    "vsync": "VSync",
    "vsync_description": "Waits for vertical blanks to prevent tearing.",
    "enable_cheats": "Enable Cheats",
    "enable_cheats_description": "Enables Action Replay and Gecko codes.",
    "auto_disc_change": "Change Discs Automatically",
    "audio_stretch": "Audio Stretching",
    "audio_stretch_description": "Stretches audio to match emulation speed.",
    "audio_stretch_max_latency": "Audio Buffer Size",
    "audio_stretch_max_latency_description": "Maximum latency of the stretching buffer.",
    "audio_backend": "Audio Backend",
    "video_backend": "Video Backend",
    "memory_override": "Memory Override",
    "enable_memory_size_override": "Enable Emulated Memory Size Override",
    "enable_memory_size_override_description": "Adjusts the amount of RAM in the emulated console.",
    "main_mem1_size": "MEM1 Size",
    "main_mem2_size": "MEM2 Size",

    # Interface
    "expand_to_cutout_area": "Expand to Cutout Area",
    "expand_to_cutout_area_description": "Draws over the display cutout.",
    "design": "Theme",
    "panic_handlers": "Use Panic Handlers",
    "panic_handlers_description": "Shows a message box when a serious error occurs.",
    "osd_messages": "Show On-Screen Display Messages",
    "osd_messages_description": "Shows messages such as memory card writes.",
    "use_builtin_title_database": "Use Built-In Database of Game Names",
    "system_back": "System Back Button",

    # GameCube / Wii system
    "gamecube_system_language": "System Language",
    "slot_a_device": "GameCube Slot A Device",
    "slot_b_device": "GameCube Slot B Device",
    "serial_port_1": "GameCube Serial Port 1",
    "wiimote_scanning": "Continuous Scanning",
    "wiimote_scanning_description": "Keeps looking for connected Wii Remotes.",
    "wiimote_speaker": "Wii Remote Speaker",
    "wiimote_speaker_description": "Plays Wii Remote speaker audio.",
    "wii_sd_card": "Insert SD Card",
    "wii_sd_card_description": "Inserts the virtual SD card into the Wii.",
    "sysconf_screensaver": "Wii Screensaver",
    "sysconf_language": "Wii System Language",
    "sysconf_widescreen": "Use Widescreen",
    "sysconf_progressive_scan": "Use Progressive Scan",
    "sysconf_pal60": "Use PAL60 Mode",

    # Graphics
    "show_fps": "Show FPS",
    "show_fps_description": "Shows the number of frames rendered per second.",
    "shader_compilation_mode": "Shader Compilation Mode",
    "shader_compilation_mode_description": "How shaders are compiled when first needed.",
    "wait_for_shaders": "Compile Shaders Before Starting",
    "wait_for_shaders_description": "Blocks startup until all shaders are compiled.",
    "backend_multithreading": "Backend Multithreading",
    "backend_multithreading_description": "Builds command buffers on a worker thread.",
    "aspect_ratio": "Aspect Ratio",
    "setting_display_scale": "Display Scale",

    # Enhancements
    "internal_resolution": "Internal Resolution",
    "internal_resolution_description": "Renders at a multiple of the native resolution.",
    "FSAA": "Anti-Aliasing",
    "FSAA_description": "Smooths jagged polygon edges.",
    "anisotropic_filtering": "Anisotropic Filtering",
    "anisotropic_filtering_description": "Sharpens textures viewed at oblique angles.",
    "post_processing_shader": "Post-Processing Effect",
    "load_custom_texture": "Load Custom Textures",
    "load_custom_texture_description": "Loads textures from the Load/Textures folder.",
    "cache_custom_texture": "Prefetch Custom Textures",
    "cache_custom_texture_description": "Loads all custom textures into memory at boot.",
    "scaled_efb_copy": "Scaled EFB Copy",
    "scaled_efb_copy_description": "Keeps EFB copies at the internal resolution.",
    "per_pixel_lighting": "Per-Pixel Lighting",
    "per_pixel_lighting_description": "Calculates lighting per pixel instead of per vertex.",
    "force_texture_filtering": "Force Texture Filtering",
    "force_texture_filtering_description": "Filters all textures, including pixel art.",
    "force_24bit_color": "Force 24-Bit Color",
    "force_24bit_color_description": "Removes banding from 18-bit framebuffers.",
    "disable_fog": "Disable Fog",
    "disable_fog_description": "Removes distance fog.",
    "disable_copy_filter": "Disable Copy Filter",
    "disable_copy_filter_description": "Skips the deflicker filter on EFB copies.",
    "arbitrary_mipmap_detection": "Arbitrary Mipmap Detection",
    "arbitrary_mipmap_detection_description": "Detects mipmaps that are not simple downscales.",
    "wide_screen_hack": "Widescreen Hack",
    "wide_screen_hack_description": "Forces a 16:9 perspective in 4:3 games.",

    # Hacks
    "embedded_frame_buffer": "Embedded Frame Buffer",
    "skip_efb_access": "Skip EFB Access from CPU",
    "skip_efb_access_description": "Ignores CPU reads and writes of the EFB.",
    "ignore_format_changes": "Ignore Format Changes",
    "ignore_format_changes_description": "Ignores EFB pixel format changes.",
    "efb_copy_method": "Store EFB Copies to Texture Only",
    "efb_copy_method_description": "Skips copying the EFB back to RAM.",
    "defer_efb_copies": "Defer EFB Copies to RAM",
    "defer_efb_copies_description": "Delays RAM copies until the CPU needs them.",
    "efb_defer_invalidation": "Defer EFB Cache Invalidation",
    "efb_defer_invalidation_description": "Delays invalidation of the EFB access cache.",
    "texture_cache": "Texture Cache",
    "texture_cache_accuracy": "Texture Cache Accuracy",
    "texture_cache_accuracy_description": "How thoroughly texture changes are checked.",
    "gpu_texture_decoding": "GPU Texture Decoding",
    "gpu_texture_decoding_description": "Decodes textures on the GPU.",
    "external_frame_buffer": "External Frame Buffer",
    "xfb_copy_method": "Store XFB Copies to Texture Only",
    "xfb_copy_method_description": "Skips copying the XFB back to RAM.",
    "immediate_xfb": "Immediately Present XFB",
    "immediate_xfb_description": "Shows the XFB as soon as it is created.",
    "skip_duplicate_xfbs": "Skip Presenting Duplicate Frames",
    "skip_duplicate_xfbs_description": "Does not present frames that did not change.",
    "other": "Other",
    "approx_logic_op_with_blending": "Approximate Logic Operations",
    "approx_logic_op_with_blending_description": "Emulates logic ops with blending.",
    "vi_skip": "VBI Skip",
    "vi_skip_description": "Skips vertical blank interrupts when lagging.",
    "texture_cache_to_state": "Save Texture Cache to State",
    "texture_cache_to_state_description": "Includes the texture cache in save states.",
    "fast_depth_calculation": "Fast Depth Calculation",
    "fast_depth_calculation_description": "Uses a less accurate depth algorithm.",
    "tmem_cache_emulation": "Texture Memory Cache Emulation",
    "tmem_cache_emulation_description": "Emulates the GPU's texture memory cache.",

    # Debug
    "debug_warning": "Warning: these settings will slow emulation down",
    "debug_jitoff": "Jit Disabled",
    "debug_jitloadstoreoff": "Jit Load Store Disabled",
    "debug_jitloadstorefloatingoff": "Jit Load Store Floating Disabled",
    "debug_jitloadstorepairedoff": "Jit Load Store Paired Disabled",
    "debug_jitfloatingpointoff": "Jit Floating Point Disabled",
    "debug_jitintegeroff": "Jit Integer Disabled",
    "debug_jitpairedoff": "Jit Paired Disabled",
    "debug_jitsystemregistersoff": "Jit System Registers Disabled",
    "debug_jitbranchoff": "Jit Branch Disabled",
    "debug_jitregistercacheoff": "Jit Register Cache Disabled",

    # Peripheral slots
    "controller_0": "GameCube Controller 1",
    "controller_1": "GameCube Controller 2",
    "controller_2": "GameCube Controller 3",
    "controller_3": "GameCube Controller 4",
    "wiimote_4": "Wii Remote 1",
    "wiimote_5": "Wii Remote 2",
    "wiimote_6": "Wii Remote 3",
    "wiimote_7": "Wii Remote 4",

    # Bindings
    "generic_buttons": "Buttons",
    "button_a": "A",
    "button_b": "B",
    "button_x": "X",
    "button_y": "Y",
    "button_z": "Z",
    "button_start": "Start",
    "button_one": "1",
    "button_two": "2",
    "button_plus": "+",
    "button_minus": "-",
    "button_home": "Home",
    "controller_control": "Control Stick",
    "controller_c": "C Stick",
    "controller_trig": "Triggers",
    "controller_dpad": "D-Pad",
    "generic_up": "Up",
    "generic_down": "Down",
    "generic_left": "Left",
    "generic_right": "Right",
    "generic_forward": "Forward",
    "generic_backward": "Backward",
    "trigger_left": "L",
    "trigger_right": "R",
    "trigger_left_analog": "L-Analog",
    "trigger_right_analog": "R-Analog",
    "wiimote_ir": "IR",
    "wiimote_shake": "Shake",
    "wiimote_tilt": "Tilt",
    "shake_x": "X",
    "shake_y": "Y",
    "shake_z": "Z",
    "emulation_control_rumble": "Rumble",
    "gc_adapter_rumble": "Enable Vibration",
    "gc_adapter_rumble_description": "Enables rumble on the adapter port.",
    "gc_adapter_bongos": "Simulate DK Bongos",
    "gc_adapter_bongos_description": "Treats the adapter port as DK Bongos.",
}


def text_for(label_id: str | None) -> str:
    """Return the display text for *label_id*, or the id itself if unknown."""
    if not label_id:
        return ""
    return LABELS.get(label_id, label_id)
