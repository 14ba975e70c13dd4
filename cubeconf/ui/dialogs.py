# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""
Small modal prompts used by the settings window.

Message boxes are created with ``Icon.NoIcon`` and the icon pixmap restored
from the style, which keeps Windows from playing its system beep.  The value
prompts wrap :class:`QInputDialog` and return ``None`` when cancelled.
"""

from __future__ import annotations

from PySide6.QtWidgets import QApplication, QInputDialog, QMessageBox, QStyle

from cubeconf.settings.labels import text_for
from cubeconf.settings.models import SettingItem, SettingKind


def _message(parent, std_pixmap: QStyle.StandardPixmap, title: str, text: str) -> None:
    box = QMessageBox(parent)
    box.setIcon(QMessageBox.Icon.NoIcon)
    box.setWindowTitle(title)
    box.setText(text)
    box.setIconPixmap(QApplication.style().standardIcon(std_pixmap).pixmap(32, 32))
    box.setStandardButtons(QMessageBox.StandardButton.Ok)
    box.exec()


def information(parent, title: str, text: str) -> None:
    _message(parent, QStyle.StandardPixmap.SP_MessageBoxInformation, title, text)


def warning(parent, title: str, text: str) -> None:
    _message(parent, QStyle.StandardPixmap.SP_MessageBoxWarning, title, text)


def prompt_value(parent, item: SettingItem):
    """Ask the user for a new value for *item*.

    Returns the value to store, or ``None`` if the dialog was cancelled.
    Toggles, headers and submenus have no prompt.
    """
    title = text_for(item.label_id)
    hint = text_for(item.description_id)

    if item.kind in (SettingKind.SINGLE_CHOICE, SettingKind.STRING_SINGLE_CHOICE):
        current = max(item.selected_index(), 0)
        label, ok = QInputDialog.getItem(
            parent, title, hint, list(item.choice_labels), current, False,
        )
        if not ok:
            return None
        return item.choice_values[item.choice_labels.index(label)]

    if item.kind is SettingKind.SLIDER:
        value = item.selected_value
        if all(isinstance(v, int) for v in (item.min_value, item.max_value, item.step)):
            result, ok = QInputDialog.getInt(
                parent, title, hint, int(value),
                item.min_value, item.max_value, item.step,
            )
        else:
            result, ok = QInputDialog.getDouble(
                parent, title, hint, float(value),
                float(item.min_value), float(item.max_value), 2,
            )
        return result if ok else None

    if item.kind in (SettingKind.INPUT_BINDING, SettingKind.RUMBLE_BINDING):
        text, ok = QInputDialog.getText(parent, title, hint, text=item.current_value or "")
        return text if ok else None

    return None
