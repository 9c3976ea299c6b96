# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Schema definitions for the color pipeline.

All types in this module are immutable (frozen dataclasses).
Every "update" to a color, ramp or theme is a new value computed
from its inputs.
"""

from tonekit.schema.color import (
    SCALE_KEYS,
    AccessibilityReport,
    AccessibleShade,
    AutoTextColor,
    ColorBlindnessInfo,
    ColorBlindnessReport,
    ColorBlindnessType,
    ColorPair,
    ColorPalette,
    ColorAnalysis,
    ColorScale,
    ContrastResult,
    ExtractedColor,
    HarmonyColor,
    HarmonyType,
    HctColor,
    RgbColor,
    SemanticTokens,
    SurfaceColors,
    ThemePalette,
    WCAGLevel,
)

__all__ = [
    # Core color types
    "HctColor",
    "RgbColor",
    "ExtractedColor",
    # Ramps
    "SCALE_KEYS",
    "ColorScale",
    "ColorPalette",
    "SurfaceColors",
    "HarmonyType",
    "HarmonyColor",
    # Themes
    "SemanticTokens",
    "ThemePalette",
    # Accessibility
    "WCAGLevel",
    "ContrastResult",
    "AccessibilityReport",
    "AutoTextColor",
    "AccessibleShade",
    "ColorAnalysis",
    # Color vision deficiency
    "ColorBlindnessType",
    "ColorBlindnessInfo",
    "ColorPair",
    "ColorBlindnessReport",
]
