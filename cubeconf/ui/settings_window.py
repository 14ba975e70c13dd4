# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Settings window for Cubeconf.

Layout
------
A header row (back button, menu title, configure button) above a single
list of setting rows.  Activating a row follows a submenu link, flips a
toggle, or prompts for a new value.  Every edit is written through the
store, saved to disk, and the menu is re-assembled so that rows which
depend on the edited value (e.g. a controller port switched to the USB
adapter) update immediately.

Menus are addressed by their serialized tag; the back stack holds strings.
"""

from __future__ import annotations

import dataclasses
import logging

from PySide6.QtCore import QModelIndex
from PySide6.QtWidgets import (
    QHBoxLayout, QLabel, QListView, QMainWindow, QPushButton, QVBoxLayout, QWidget,
)

from cubeconf.core.config import Config
from cubeconf.settings.assembler import assemble
from cubeconf.settings.context import SettingsContext
from cubeconf.settings.labels import text_for
from cubeconf.settings.menu_tag import MenuTag, parse, serialize
from cubeconf.settings.models import BOUND_KINDS, SettingItem, SettingKind
from cubeconf.ui import dialogs
from cubeconf.ui.list_model import SettingsListModel

log = logging.getLogger(__name__)

_MENU_TITLES: dict[MenuTag, str] = {
    MenuTag.CONFIG: "Settings",
    MenuTag.CONFIG_GENERAL: "General",
    MenuTag.CONFIG_INTERFACE: "Interface",
    MenuTag.CONFIG_GAME_CUBE: "GameCube",
    MenuTag.CONFIG_WII: "Wii",
    MenuTag.CONTROLLER: "Controllers",
    MenuTag.GCPAD_TYPE: "GameCube Controllers",
    MenuTag.WIIMOTE: "Wii Remotes",
    MenuTag.GRAPHICS: "Graphics",
    MenuTag.ENHANCEMENTS: "Enhancements",
    MenuTag.HACKS: "Hacks",
    MenuTag.DEBUG: "Debug",
    MenuTag.GPU_DRIVERS: "GPU Drivers",
}


def menu_title(tag: MenuTag) -> str:
    if tag in _MENU_TITLES:
        return _MENU_TITLES[tag]
    if tag.tag == "gcpad":
        return text_for(f"controller_{tag.subtype}")
    return text_for(f"wiimote_{tag.subtype}")


def write_value(store, item: SettingItem, value) -> None:
    """Store *value* under the row's ``(section, key)``.

    Raises :class:`TypeError` for rows that are not bound to a key.
    """
    if item.kind not in BOUND_KINDS:
        raise TypeError(f"{item.kind.value} rows are not bound to a store key")
    store.set_value(item.section, item.key, value)
    log.debug("Set %s/%s = %r", item.section, item.key, value)


class SettingsWindow(QMainWindow):
    """Single-list settings browser."""

    def __init__(
        self,
        context: SettingsContext,
        start_menu: str = "config",
        config: Config | None = None,
        parent=None,
    ):
        super().__init__(parent)
        self._ctx = context
        self._cfg = config or Config()
        self._history: list[str] = []

        title = "Cubeconf"
        if not context.is_global:
            title += f" - {context.content_id}"
        self.setWindowTitle(title)
        self.resize(self._cfg.window_width, self._cfg.window_height)

        self._build_ui()
        if not self.navigate(start_menu):
            self.navigate(serialize(MenuTag.CONFIG))

    # ------------------------------------------------------------------
    # Build UI
    # ------------------------------------------------------------------

    def _build_ui(self):
        central = QWidget()
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)

        header = QHBoxLayout()
        self._btn_back = QPushButton("Back")
        self._btn_back.clicked.connect(self.go_back)
        header.addWidget(self._btn_back)

        self._lbl_title = QLabel()
        self._lbl_title.setObjectName("sectionLabel")
        header.addWidget(self._lbl_title, 1)

        self._btn_configure = QPushButton("Configure")
        self._btn_configure.setEnabled(False)
        self._btn_configure.clicked.connect(self._on_configure)
        header.addWidget(self._btn_configure)
        root.addLayout(header)

        self._model = SettingsListModel(self)
        self._list = QListView()
        self._list.setModel(self._model)
        self._list.setUniformItemSizes(False)
        self._list.activated.connect(self._on_activated)
        self._list.selectionModel().currentChanged.connect(self._on_current_changed)
        root.addWidget(self._list, 1)

        self._lbl_description = QLabel()
        self._lbl_description.setWordWrap(True)
        self._lbl_description.setVisible(self._cfg.show_descriptions)
        root.addWidget(self._lbl_description)

        self.setCentralWidget(central)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def current_menu(self) -> str:
        return self._history[-1] if self._history else ""

    def navigate(self, serialized: str) -> bool:
        """Open the menu named by *serialized*.  Returns False if it has no list."""
        tag = parse(serialized)
        if tag is None:
            return False
        items = assemble(tag, self._ctx)
        if items is None:
            dialogs.information(
                self, menu_title(tag), "This screen is not available in the desktop frontend.",
            )
            return False
        self._history.append(serialize(tag))
        self._show(tag, items)
        return True

    def go_back(self) -> None:
        if len(self._history) < 2:
            return
        self._history.pop()
        self.refresh()

    def refresh(self) -> None:
        """Re-assemble the current menu from the store."""
        tag = parse(self.current_menu)
        if tag is None:
            return
        row = self._list.currentIndex().row()
        self._show(tag, assemble(tag, self._ctx) or [])
        if 0 <= row < self._model.rowCount():
            self._list.setCurrentIndex(self._model.index(row))

    def _show(self, tag: MenuTag, items: list[SettingItem]) -> None:
        self._model.set_items(items)
        self._lbl_title.setText(menu_title(tag))
        self._btn_back.setEnabled(len(self._history) > 1)
        self._btn_configure.setEnabled(False)
        self._lbl_description.clear()

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_current_changed(self, current: QModelIndex, _previous: QModelIndex) -> None:
        item = self._model.item(current.row())
        has_link = getattr(item, "menu_tag", None) is not None and item.kind is not SettingKind.SUBMENU
        self._btn_configure.setEnabled(has_link)
        self._lbl_description.setText(text_for(item.description_id) if item else "")

    def _on_configure(self) -> None:
        item = self._model.item(self._list.currentIndex().row())
        if item is not None and getattr(item, "menu_tag", None) is not None:
            self.navigate(serialize(item.menu_tag))

    def _on_activated(self, index: QModelIndex) -> None:
        item = self._model.item(index.row())
        if item is None or item.kind is SettingKind.HEADER:
            return
        if item.kind is SettingKind.SUBMENU:
            self.navigate(serialize(item.menu_tag))
            return

        if item.kind is SettingKind.TOGGLE:
            value = not item.is_checked
        else:
            value = dialogs.prompt_value(self, item)
            if value is None:
                return
        self._commit(item, value)

    def _commit(self, item: SettingItem, value) -> None:
        write_value(self._ctx.store, item, value)
        try:
            self._ctx.store.save()
        except OSError as exc:
            log.error("Could not save settings: %s", exc)
            dialogs.warning(self, "Settings", f"Could not save settings:\n{exc}")
        self.refresh()

    # ------------------------------------------------------------------
    # Close
    # ------------------------------------------------------------------

    def closeEvent(self, event) -> None:
        cfg = dataclasses.replace(
            self._cfg,
            last_menu=self.current_menu or self._cfg.last_menu,
            last_content_id=self._ctx.content_id,
            window_width=self.width(),
            window_height=self.height(),
        )
        try:
            cfg.save()
        except OSError as exc:
            log.warning("Could not save app config: %s", exc)
        super().closeEvent(event)
