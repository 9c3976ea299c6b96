# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
WCAG 2.1 contrast evaluation.

Thresholds (normal text / large text):
- AA: 4.5:1 / 3:1
- AAA: 7:1 / 4.5:1

Large text is 18pt+, or 14pt+ bold.
"""

from __future__ import annotations

from typing import Mapping, Optional

from tonekit.color.colorspace import get_luminance, normalize_hex, round_half_up
from tonekit.color.hct import hex_to_hct
from tonekit.schema import (
    AccessibilityReport,
    AccessibleShade,
    AutoTextColor,
    ColorAnalysis,
    ContrastResult,
    WCAGLevel,
)
from tonekit.schema.color import WCAGLevelLike


AA_RATIO = 4.5
AAA_RATIO = 7.0
AA_LARGE_RATIO = 3.0
AAA_LARGE_RATIO = 4.5

WHITE = "#FFFFFF"
BLACK = "#000000"

SUGGEST_LARGE_TEXT_ONLY = "Usable for large text only (18pt+ or 14pt bold)"
SUGGEST_TOO_LOW = "Contrast ratio is too low. Choose a darker or lighter color"
SUGGEST_RAISE_FOR_AAA = "Raise the contrast ratio to 7:1 or higher for AAA"

_TARGET_RATIOS = {WCAGLevel.AA: AA_RATIO, WCAGLevel.AAA: AAA_RATIO}


def get_relative_luminance(hex_color: str) -> float:
    """WCAG relative luminance in [0, 1]."""
    return get_luminance(hex_color)


def get_contrast_ratio(foreground: str, background: str) -> float:
    """
    WCAG contrast ratio, in [1, 21].

    (lighter + 0.05) / (darker + 0.05); symmetric in its arguments.
    """
    l1 = get_luminance(foreground)
    l2 = get_luminance(background)
    return (max(l1, l2) + 0.05) / (min(l1, l2) + 0.05)


def get_wcag_level(ratio: float) -> ContrastResult:
    """
    Classify a contrast ratio.

    The pass flags are checked independently against their own thresholds;
    level is the best normal-text grade reached.
    """
    if ratio >= AAA_RATIO:
        level = WCAGLevel.AAA
    elif ratio >= AA_RATIO:
        level = WCAGLevel.AA
    elif ratio >= AA_LARGE_RATIO:
        level = WCAGLevel.AA_LARGE
    else:
        level = WCAGLevel.FAIL

    return ContrastResult(
        ratio=ratio,
        level=level,
        pass_aa=ratio >= AA_RATIO,
        pass_aaa=ratio >= AAA_RATIO,
        pass_aa_large=ratio >= AA_LARGE_RATIO,
        pass_aaa_large=ratio >= AAA_LARGE_RATIO,
    )


def get_accessibility_report(foreground: str, background: str) -> AccessibilityReport:
    """Contrast of a text/background pair with suggestions for missed levels."""
    foreground = normalize_hex(foreground)
    background = normalize_hex(background)
    contrast = get_wcag_level(get_contrast_ratio(foreground, background))

    suggestions = []
    if not contrast.pass_aa:
        if contrast.pass_aa_large:
            suggestions.append(SUGGEST_LARGE_TEXT_ONLY)
        else:
            suggestions.append(SUGGEST_TOO_LOW)
    elif not contrast.pass_aaa:
        suggestions.append(SUGGEST_RAISE_FOR_AAA)

    return AccessibilityReport(
        foreground=foreground,
        background=background,
        contrast=contrast,
        suggestions=tuple(suggestions),
    )


def generate_accessibility_matrix(
    scale: Mapping[int, str],
) -> dict[int, dict[int, ContrastResult]]:
    """
    Contrast of every shade against every other shade of a scale.

    Returns:
        matrix[fg_key][bg_key] → ContrastResult, keys in scale order.
        The diagonal is 1:1.
    """
    luminance = {key: get_luminance(color) for key, color in scale.items()}
    matrix: dict[int, dict[int, ContrastResult]] = {}
    for fg, l_fg in luminance.items():
        matrix[fg] = {}
        for bg, l_bg in luminance.items():
            ratio = (max(l_fg, l_bg) + 0.05) / (min(l_fg, l_bg) + 0.05)
            matrix[fg][bg] = get_wcag_level(ratio)
    return matrix


def get_auto_text_color(background: str) -> AutoTextColor:
    """Pure white or black text, whichever contrasts more (black on ties)."""
    white_ratio = get_contrast_ratio(WHITE, background)
    black_ratio = get_contrast_ratio(BLACK, background)

    if white_ratio > black_ratio:
        recommended, ratio = WHITE, white_ratio
    else:
        recommended, ratio = BLACK, black_ratio
    return AutoTextColor(
        recommended=recommended,
        ratio=ratio,
        level=get_wcag_level(ratio).level,
    )


def _target_ratio(target_level: WCAGLevelLike) -> float:
    try:
        level = WCAGLevel(target_level)
    except ValueError:
        level = None
    if level not in _TARGET_RATIOS:
        raise ValueError(f"target_level must be 'AA' or 'AAA', got {target_level!r}")
    return _TARGET_RATIOS[level]


def find_accessible_shade(
    scale: Mapping[int, str],
    background: str,
    target_level: WCAGLevelLike = WCAGLevel.AA,
) -> Optional[AccessibleShade]:
    """
    Find the least extreme shade that still clears a contrast target.

    Of all shades reaching the target ratio against background (4.5 for
    AA, 7 for AAA), returns the one with the lowest ratio: the color
    closest to the background that is still readable.

    Returns:
        AccessibleShade, or None if no shade passes
    """
    min_ratio = _target_ratio(target_level)
    passing = [
        AccessibleShade(shade=int(key), color=color, ratio=get_contrast_ratio(color, background))
        for key, color in scale.items()
    ]
    passing = [shade for shade in passing if shade.ratio >= min_ratio]
    if not passing:
        return None
    return min(passing, key=lambda shade: shade.ratio)


def _text_grade(ratio: float) -> WCAGLevel:
    """AA / AA-Large / Fail for text at this ratio (AAA is not graded)."""
    if ratio >= AA_RATIO:
        return WCAGLevel.AA
    if ratio >= AA_LARGE_RATIO:
        return WCAGLevel.AA_LARGE
    return WCAGLevel.FAIL


def analyze_color(hex_color: str) -> ColorAnalysis:
    """
    Summarize a color for display.

    Reports rounded HCT, WCAG relative luminance, contrast against pure
    white and pure black, a text grade for each, and the text color
    (white or black) with the higher contrast.

    Raises:
        InvalidColorFormat: If hex_color is not a valid hex color
    """
    hex_color = normalize_hex(hex_color)
    hct = hex_to_hct(hex_color)
    luminance = get_luminance(hex_color)
    with_white = get_contrast_ratio(WHITE, hex_color)
    with_black = get_contrast_ratio(BLACK, hex_color)

    return ColorAnalysis(
        hex=hex_color,
        hue=int(round_half_up(hct.h)),
        chroma=int(round_half_up(hct.c)),
        tone=int(round_half_up(hct.t)),
        luminance=round_half_up(luminance, 2),
        contrast_with_white=round_half_up(with_white, 2),
        contrast_with_black=round_half_up(with_black, 2),
        text_on_white=_text_grade(with_white),
        text_on_black=_text_grade(with_black),
        recommended_text_color=WHITE if with_white > with_black else BLACK,
    )
