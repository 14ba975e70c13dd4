# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Qt list model over one assembled settings menu.

The model only displays what :func:`cubeconf.settings.assemble` produced.
It never decides which rows exist; a refresh means re-assembling the menu
and calling :meth:`SettingsListModel.set_items` again.
"""

from __future__ import annotations

from PySide6.QtCore import QAbstractListModel, QModelIndex, Qt
from PySide6.QtGui import QFont

from cubeconf.settings.labels import text_for
from cubeconf.settings.models import SettingItem, SettingKind

DescriptorRole = Qt.ItemDataRole.UserRole + 1
KindRole       = Qt.ItemDataRole.UserRole + 2
ValueTextRole  = Qt.ItemDataRole.UserRole + 3


def value_text(item: SettingItem) -> str:
    """Short human-readable form of the row's effective value."""
    kind = item.kind
    if kind is SettingKind.TOGGLE:
        return "On" if item.is_checked else "Off"
    if kind in (SettingKind.SINGLE_CHOICE, SettingKind.STRING_SINGLE_CHOICE):
        index = item.selected_index()
        if index < 0:
            return str(item.selected_value)
        return item.choice_labels[index]
    if kind is SettingKind.SLIDER:
        value = item.selected_value
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return f"{value}{item.units}"
    if kind in (SettingKind.INPUT_BINDING, SettingKind.RUMBLE_BINDING):
        return item.current_value or ""
    return ""


class SettingsListModel(QAbstractListModel):
    """One row per setting descriptor."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._items: list[SettingItem] = []

    def set_items(self, items: list[SettingItem]) -> None:
        self.beginResetModel()
        self._items = list(items)
        self.endResetModel()

    def item(self, row: int) -> SettingItem | None:
        if 0 <= row < len(self._items):
            return self._items[row]
        return None

    # -- QAbstractListModel ------------------------------------------------

    def rowCount(self, parent: QModelIndex = QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._items)

    def data(self, index: QModelIndex, role: int = Qt.ItemDataRole.DisplayRole):
        item = self.item(index.row()) if index.isValid() else None
        if item is None:
            return None

        if role == Qt.ItemDataRole.DisplayRole:
            label = text_for(item.label_id)
            value = value_text(item)
            return f"{label}    {value}" if value else label
        if role == Qt.ItemDataRole.ToolTipRole:
            return text_for(item.description_id) or None
        if role == DescriptorRole:
            return item
        if role == KindRole:
            return item.kind
        if role == ValueTextRole:
            return value_text(item)
        if role == Qt.ItemDataRole.FontRole and item.kind is SettingKind.HEADER:
            font = QFont()
            font.setBold(True)
            return font
        return None

    def flags(self, index: QModelIndex) -> Qt.ItemFlag:
        item = self.item(index.row()) if index.isValid() else None
        if item is None:
            return Qt.ItemFlag.NoItemFlags
        if item.kind is SettingKind.HEADER:
            return Qt.ItemFlag.ItemIsEnabled
        return Qt.ItemFlag.ItemIsEnabled | Qt.ItemFlag.ItemIsSelectable
