# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

"""Exceptions raised by the settings schema.

All of them indicate a broken static definition (a dead navigation link or a
malformed descriptor) rather than bad user data, so callers are expected to
let them propagate.
"""

from __future__ import annotations


class SettingsError(Exception):
    """Base class for settings-schema errors."""


class MenuTagFormatError(SettingsError, ValueError):
    """A serialized menu tag has a subtype segment that is not an integer."""


class MenuTagLookupError(SettingsError, LookupError):
    """A (name, subtype) pair is not in the menu tag registry."""


class DescriptorValidationError(SettingsError, ValueError):
    """A setting descriptor was constructed with inconsistent fields."""
