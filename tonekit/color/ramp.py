# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Tonal ramp generation.

A ramp is the seed's hue and chroma rendered at eleven fixed HCT tones
(Material 3 style). Because tone is CIE L*, equal key steps read as equal
lightness steps for every hue. Requests above the sRGB gamut at a given
tone fall back to the most chromatic in-gamut color, so light and dark
ends of vivid ramps carry less chroma than the seed.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from tonekit.color.colorspace import normalize_hex
from tonekit.color.hct import hct_to_hex, hex_to_hct
from tonekit.schema import (
    SCALE_KEYS,
    ColorPalette,
    ColorScale,
    HarmonyColor,
    HarmonyType,
    SurfaceColors,
)
from tonekit.schema.color import HarmonyTypeLike

logger = logging.getLogger(__name__)


# Scale key → HCT tone
TONE_MAP: dict[int, float] = {
    50: 98,
    100: 95,
    200: 90,
    300: 80,
    400: 70,
    500: 60,
    600: 50,
    700: 40,
    800: 30,
    900: 20,
    950: 10,
}

# Brand ramps keep more chroma in the tints than a flat ramp would;
# full seed chroma at 500/600.
BRAND_CHROMA_MULTIPLIERS: dict[int, float] = {
    50: 0.3,
    100: 0.5,
    200: 0.7,
    300: 0.85,
    400: 0.95,
    500: 1.0,
    600: 1.0,
    700: 0.95,
    800: 0.9,
    900: 0.85,
    950: 0.8,
}

NEUTRAL_CHROMA_FACTOR = 0.05
NEUTRAL_MAX_CHROMA = 6.0

ERROR_SEED = "#DC2626"
WARNING_SEED = "#F59E0B"
SUCCESS_SEED = "#10B981"

# Harmony -> (name, hue offset) in output order; None marks the seed itself
HARMONY_OFFSETS: dict[HarmonyType, tuple[tuple[str, Optional[float]], ...]] = {
    HarmonyType.COMPLEMENTARY: (("primary", None), ("complementary", 180.0)),
    HarmonyType.ANALOGOUS: (("analogous-1", -30.0), ("primary", None), ("analogous-2", 30.0)),
    HarmonyType.TRIADIC: (("primary", None), ("triadic-1", 120.0), ("triadic-2", 240.0)),
    HarmonyType.SPLIT_COMPLEMENTARY: (("primary", None), ("split-1", 150.0), ("split-2", 210.0)),
}


def _build_scale(hue: float, chroma_for: Callable[[int], float]) -> ColorScale:
    return ColorScale(shades=tuple(
        hct_to_hex((hue, chroma_for(key), TONE_MAP[key])) for key in SCALE_KEYS
    ))


def generate_color_ramp(seed: str) -> ColorScale:
    """
    Generate an 11-step ramp at the seed's hue and chroma.

    Args:
        seed: Hex color (3/6 digits, '#' optional)

    Returns:
        ColorScale with tones 98 (key 50) down to 10 (key 950)

    Raises:
        InvalidColorFormat: If seed is not a valid hex color
    """
    hct = hex_to_hct(seed)
    logger.debug(f"Ramp for {seed}: h={hct.h:.1f} c={hct.c:.1f} t={hct.t:.1f}")
    return _build_scale(hct.h, lambda key: hct.c)


def generate_brand_color_ramp(seed: str) -> ColorScale:
    """Ramp with per-step chroma multipliers (see BRAND_CHROMA_MULTIPLIERS)."""
    hct = hex_to_hct(seed)
    return _build_scale(hct.h, lambda key: hct.c * BRAND_CHROMA_MULTIPLIERS[key])


def generate_neutral_ramp(seed: str) -> ColorScale:
    """
    Near-gray ramp tinted with the seed's hue.

    Chroma is min(seed chroma * 0.05, 6) at every step: warm seeds give a
    warm gray, cool seeds a cool gray.
    """
    hct = hex_to_hct(seed)
    chroma = min(hct.c * NEUTRAL_CHROMA_FACTOR, NEUTRAL_MAX_CHROMA)
    return _build_scale(hct.h, lambda key: chroma)


def generate_error_ramp() -> ColorScale:
    return generate_color_ramp(ERROR_SEED)


def generate_warning_ramp() -> ColorScale:
    return generate_color_ramp(WARNING_SEED)


def generate_success_ramp() -> ColorScale:
    return generate_color_ramp(SUCCESS_SEED)


def generate_color_palette(
    primary: str,
    secondary: Optional[str] = None,
    tertiary: Optional[str] = None,
) -> ColorPalette:
    """
    Build the full ramp set for a primary seed.

    Missing secondary/tertiary seeds are derived from the primary by
    rotating hue +120° (chroma x0.8) and +240° (chroma x0.6) at the
    primary's tone.

    Args:
        primary: Primary seed hex. Gets the brand ramp; also tints the
                 neutral ramp.
        secondary: Optional secondary seed hex
        tertiary: Optional tertiary seed hex
    """
    hct = hex_to_hct(primary)
    if secondary is None:
        secondary = hct_to_hex(((hct.h + 120.0) % 360.0, hct.c * 0.8, hct.t))
    if tertiary is None:
        tertiary = hct_to_hex(((hct.h + 240.0) % 360.0, hct.c * 0.6, hct.t))

    return ColorPalette(
        primary=generate_brand_color_ramp(primary),
        secondary=generate_color_ramp(secondary),
        tertiary=generate_color_ramp(tertiary),
        neutral=generate_neutral_ramp(primary),
        error=generate_error_ramp(),
        warning=generate_warning_ramp(),
        success=generate_success_ramp(),
    )


def generate_surface_colors(neutral: ColorScale, is_dark: bool = False) -> SurfaceColors:
    """Material 3 surface roles picked from a neutral ramp."""
    if is_dark:
        return SurfaceColors(
            surface=neutral[950],
            surface_dim=neutral[950],
            surface_bright=neutral[800],
            surface_container_lowest=neutral[950],
            surface_container_low=neutral[900],
            surface_container=neutral[900],
            surface_container_high=neutral[800],
            surface_container_highest=neutral[700],
        )
    return SurfaceColors(
        surface=neutral[50],
        surface_dim=neutral[100],
        surface_bright=neutral[50],
        surface_container_lowest="#FFFFFF",
        surface_container_low=neutral[50],
        surface_container=neutral[100],
        surface_container_high=neutral[200],
        surface_container_highest=neutral[300],
    )


def _as_harmony(harmony: HarmonyTypeLike) -> HarmonyType:
    try:
        return HarmonyType(harmony)
    except ValueError:
        names = ", ".join(h.value for h in HarmonyType)
        raise ValueError(f"Unknown harmony {harmony!r}; expected one of: {names}") from None


def suggest_palette(primary: str, harmony: HarmonyTypeLike) -> tuple[HarmonyColor, ...]:
    """
    Suggest harmony colors for a primary color.

    Companion colors keep the primary's chroma and tone and rotate its HCT
    hue: complementary +180°, analogous ±30°, triadic +120°/+240°,
    split-complementary +150°/+210°. The primary itself is returned
    unchanged (canonicalized).

    Args:
        primary: Hex color (3/6 digits, '#' optional)
        harmony: HarmonyType or its value ("complementary", "analogous",
                 "triadic", "split-complementary")

    Raises:
        InvalidColorFormat: If primary is not a valid hex color
        ValueError: If harmony is unknown
    """
    harmony = _as_harmony(harmony)
    hct = hex_to_hct(primary)

    colors = []
    for name, offset in HARMONY_OFFSETS[harmony]:
        if offset is None:
            colors.append(HarmonyColor(name=name, hex=normalize_hex(primary), hue=hct.h))
            continue
        hue = (hct.h + offset) % 360.0
        colors.append(HarmonyColor(name=name, hex=hct_to_hex((hue, hct.c, hct.t)), hue=hue))

    logger.debug(f"{harmony.value} harmony for {primary}: {[c.hex for c in colors]}")
    return tuple(colors)
