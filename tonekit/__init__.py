# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Tonekit -- HCT color toolkit for design systems.

Turns a seed color (or the dominant colors of an image) into perceptually
even tonal ramps, light/dark themes, WCAG contrast audits and color vision
deficiency checks, and exports them as design tokens.

Quick start::

    from tonekit import generate_theme_palette, export_theme

    palette = generate_theme_palette("#6750A4")
    palette.color_scale[500]          # '#...'
    export_theme(palette, "css")      # :root { --primary: ...; }
    export_theme(palette, "tailwind") # tailwind.config.js source
"""

from __future__ import annotations

__version__ = "1.0.0"

from tonekit.color import (
    extract_colors_from_image,
    generate_color_ramp,
    generate_theme_palette,
    get_contrast_ratio,
    get_wcag_level,
    hct_to_hex,
    hex_to_hct,
    select_primary_color,
    simulate_color_blindness,
)
from tonekit.errors import ImageDecodeFailure, InvalidColorFormat, TonekitError
from tonekit.export import ExportFormat, export_theme, export_theme_as_css
from tonekit.schema import (
    ColorBlindnessType,
    ColorScale,
    ContrastResult,
    ExtractedColor,
    HctColor,
    ThemePalette,
    WCAGLevel,
)

__all__ = [
    # Core API
    "extract_colors_from_image",
    "select_primary_color",
    "generate_color_ramp",
    "generate_theme_palette",
    "get_contrast_ratio",
    "get_wcag_level",
    "simulate_color_blindness",
    "hex_to_hct",
    "hct_to_hex",
    "export_theme",
    "export_theme_as_css",
    # Types (commonly needed)
    "HctColor",
    "ExtractedColor",
    "ColorScale",
    "ThemePalette",
    "ContrastResult",
    "WCAGLevel",
    "ColorBlindnessType",
    "ExportFormat",
    # Errors
    "TonekitError",
    "InvalidColorFormat",
    "ImageDecodeFailure",
    # Version
    "__version__",
]
