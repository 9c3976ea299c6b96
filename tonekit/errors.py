# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Error types raised by tonekit.

Degenerate inputs (no pixels, no colors, no accessible shade) are not
errors: the affected functions return an empty tuple or None instead.
"""

from __future__ import annotations


class TonekitError(Exception):
    """Base class for all tonekit errors."""


class InvalidColorFormat(TonekitError, ValueError):
    """A color string is not a 3- or 6-digit hex value."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid hex color {value!r}: expected 3 or 6 hex digits, "
            f"with or without a leading '#'"
        )


class ImageDecodeFailure(TonekitError):
    """An image source could not be opened or decoded."""
