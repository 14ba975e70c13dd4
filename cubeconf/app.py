# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

import logging

from PySide6.QtWidgets import QApplication

from cubeconf.core.config import Config, open_store, shader_dir
from cubeconf.core.platform_info import detect_platform
from cubeconf.settings.context import SettingsContext
from cubeconf.settings.errors import SettingsError
from cubeconf.settings.menu_tag import parse
from cubeconf.ui.settings_window import SettingsWindow

log = logging.getLogger(__name__)


def _start_menu(requested: str | None, cfg: Config) -> str:
    """Pick the menu to open: the explicit request, else the last one used."""
    if requested:
        return requested
    try:
        if parse(cfg.last_menu) is not None:
            return cfg.last_menu
    except SettingsError:
        log.info("Ignoring stale last menu %r", cfg.last_menu)
    return "config"


class CubeconfApp:
    """Top-level application controller for Cubeconf."""

    def __init__(self, argv: list[str], content_id: str = "", menu: str | None = None):
        self._qt = QApplication(argv)
        self._qt.setApplicationName("Cubeconf")
        self._qt.setOrganizationName("Cubeconf")

        cfg = Config.load()
        self._cfg = cfg
        platform = detect_platform(shader_dir())
        context = SettingsContext(
            store=open_store(content_id),
            platform=platform,
            content_id=content_id,
        )
        self._window = SettingsWindow(context, _start_menu(menu, cfg), cfg)

    def run(self) -> int:
        """Show the settings window and enter the Qt event loop."""
        if self._cfg.start_maximized:
            self._window.showMaximized()
        else:
            self._window.show()
        return self._qt.exec()
