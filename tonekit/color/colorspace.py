# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Hex / RGB boundary conversions and sRGB transfer functions.

Hex strings enter the pipeline here: every public function that takes a
hex color goes through normalize_hex(), so malformed input fails fast with
InvalidColorFormat instead of propagating a wrong color downstream.

Perceptual conversions (HCT) live in tonekit.color.hct.
"""

from __future__ import annotations

import math
import re
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tonekit.errors import InvalidColorFormat
from tonekit.schema import RgbColor


RgbLike = Union[RgbColor, Sequence[int]]

_HEX_RE = re.compile(r"#?([0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")


# =============================================================================
# Hex parsing
# =============================================================================


def normalize_hex(value: str) -> str:
    """
    Canonicalize a hex color string.

    Accepts 3- or 6-digit hex, with or without a leading '#', in any case.
    3-digit values are expanded by doubling each digit. Surrounding
    whitespace is not allowed.

    Args:
        value: Hex string like "#5c6356", "5C6356" or "#FFF"

    Returns:
        Canonical hex string like "#5C6356"

    Raises:
        InvalidColorFormat: If value is not a 3/6-digit hex string
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)
    match = _HEX_RE.fullmatch(value)
    if not match:
        raise InvalidColorFormat(value)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits.upper()}"


def is_valid_hex(value: object) -> bool:
    """True if value is a 3- or 6-digit hex string (with or without '#')."""
    return isinstance(value, str) and _HEX_RE.fullmatch(value) is not None


def hex_to_rgb(hex_color: str) -> RgbColor:
    """Parse a hex string into 8-bit RGB channels."""
    digits = normalize_hex(hex_color)[1:]
    return RgbColor(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def rgb_to_hex(rgb: RgbLike) -> str:
    """
    Format 8-bit RGB as a canonical hex string.

    Args:
        rgb: RgbColor or an (r, g, b) sequence of ints in [0, 255]
    """
    return as_rgb(rgb).hex


def as_rgb(rgb: RgbLike) -> RgbColor:
    """Coerce an (r, g, b) sequence to RgbColor."""
    if isinstance(rgb, RgbColor):
        return rgb
    r, g, b = (int(v) for v in rgb)
    return RgbColor(r=r, g=g, b=b)


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB [0,1].

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB [0,1] to sRGB values [0,1].

    Inverse of srgb_to_linear. Output is not clipped; out-of-gamut inputs
    map outside [0, 1].
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    return np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )


# =============================================================================
# Rounding
# =============================================================================


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with 0.5 going up, not to even (``round(2.5) == 2``)."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


# =============================================================================
# WCAG luminance
# =============================================================================


def get_luminance(hex_color: str) -> float:
    """
    WCAG 2.x relative luminance of a color, in [0, 1].

    Uses the WCAG transfer threshold (0.03928) and ITU-R BT.709
    coefficients 0.2126 / 0.7152 / 0.0722.
    """
    rgb = hex_to_rgb(hex_color)
    channels = np.array(rgb.to_tuple(), dtype=np.float64) / 255.0
    linear = np.where(
        channels <= 0.03928,
        channels / 12.92,
        np.power((channels + 0.055) / 1.055, 2.4),
    )
    return float(0.2126 * linear[0] + 0.7152 * linear[1] + 0.0722 * linear[2])
