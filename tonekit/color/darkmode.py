# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Light/dark theme composition.

The dark ramp is the light ramp relabeled end-for-end (50↔950, 100↔900,
..., 500 unchanged); no tones are recomputed, so every light shade has an
exact partner in dark mode. Background, text and status roles are fixed
neutrals; surface and primary roles come from the ramps.
"""

from __future__ import annotations

import logging

from tonekit.color.ramp import generate_color_ramp
from tonekit.schema import ColorScale, SemanticTokens, ThemePalette

logger = logging.getLogger(__name__)


def generate_dark_color_scale(scale: ColorScale) -> ColorScale:
    """
    Relabel a ramp for dark mode.

    Self-inverse: applying it twice returns the original scale.
    """
    return ColorScale(shades=scale.shades[::-1])


def generate_light_semantic_tokens(scale: ColorScale) -> SemanticTokens:
    return SemanticTokens(
        background="#FFFFFF",
        background_alt="#FAFAFA",
        surface="#FFFFFF",
        surface_alt=scale[50],
        surface_hover=scale[100],
        border="#E5E5E5",
        border_alt=scale[200],
        text_primary="#1A1A1A",
        text_secondary="#666666",
        text_muted="#999999",
        text_inverse="#FFFFFF",
        primary=scale[500],
        primary_hover=scale[600],
        primary_active=scale[700],
        on_primary="#FFFFFF",
        success="#10B981",
        warning="#F59E0B",
        error="#EF4444",
        info="#3B82F6",
    )


def generate_dark_semantic_tokens(dark_scale: ColorScale) -> SemanticTokens:
    """
    Dark theme roles.

    Primary is dark_scale[400] with 300/200 for hover/active; on the
    relabeled scale, hover and active step toward the lighter end.
    Status colors are brighter variants of the light ones.
    """
    return SemanticTokens(
        background="#0A0A0A",
        background_alt="#111111",
        surface="#1A1A1A",
        surface_alt="#222222",
        surface_hover="#2A2A2A",
        border="#333333",
        border_alt="#444444",
        text_primary="#FFFFFF",
        text_secondary="#A0A0A0",
        text_muted="#666666",
        text_inverse="#1A1A1A",
        primary=dark_scale[400],
        primary_hover=dark_scale[300],
        primary_active=dark_scale[200],
        on_primary="#1A1A1A",
        success="#34D399",
        warning="#FBBF24",
        error="#F87171",
        info="#60A5FA",
    )


def generate_theme_palette(seed: str) -> ThemePalette:
    """
    Build a light/dark theme from one seed color.

    Args:
        seed: Hex color (3/6 digits, '#' optional)

    Raises:
        InvalidColorFormat: If seed is not a valid hex color
    """
    color_scale = generate_color_ramp(seed)
    dark_color_scale = generate_dark_color_scale(color_scale)
    logger.debug(f"Theme for {seed}: primary {color_scale[500]} / {dark_color_scale[400]}")

    return ThemePalette(
        light=generate_light_semantic_tokens(color_scale),
        dark=generate_dark_semantic_tokens(dark_color_scale),
        color_scale=color_scale,
        dark_color_scale=dark_color_scale,
    )
