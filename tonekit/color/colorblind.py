# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Color vision deficiency simulation.

Each vision model is a fixed 3x3 matrix applied directly to 8-bit sRGB
channel values (not linearized). The matrices are the widely used
published approximations; they are constants, not derived.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from tonekit.color.colorspace import hex_to_rgb, normalize_hex
from tonekit.schema import (
    ColorBlindnessInfo,
    ColorBlindnessReport,
    ColorBlindnessType,
    ColorPair,
    ColorScale,
)
from tonekit.schema.color import ColorBlindnessTypeLike


DEFAULT_DISTINGUISHABLE_THRESHOLD = 30.0

SIMULATION_MATRICES: dict[ColorBlindnessType, np.ndarray] = {
    ColorBlindnessType.NORMAL: np.eye(3),
    ColorBlindnessType.PROTANOPIA: np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    ColorBlindnessType.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    ColorBlindnessType.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    ColorBlindnessType.PROTANOMALY: np.array([
        [0.817, 0.183, 0.0],
        [0.333, 0.667, 0.0],
        [0.0, 0.125, 0.875],
    ]),
    ColorBlindnessType.DEUTERANOMALY: np.array([
        [0.8, 0.2, 0.0],
        [0.258, 0.742, 0.0],
        [0.0, 0.142, 0.858],
    ]),
    ColorBlindnessType.TRITANOMALY: np.array([
        [0.967, 0.033, 0.0],
        [0.0, 0.733, 0.267],
        [0.0, 0.183, 0.817],
    ]),
    ColorBlindnessType.ACHROMATOPSIA: np.array([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
    ColorBlindnessType.ACHROMATOMALY: np.array([
        [0.618, 0.320, 0.062],
        [0.163, 0.775, 0.062],
        [0.163, 0.320, 0.516],
    ]),
}

COLOR_BLINDNESS_TYPES: tuple[ColorBlindnessInfo, ...] = (
    ColorBlindnessInfo(
        type=ColorBlindnessType.NORMAL,
        name="Normal vision",
        description="Typical color vision",
        prevalence="~92%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.PROTANOPIA,
        name="Protanopia",
        description="Cannot perceive red",
        prevalence="~1.3%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.DEUTERANOPIA,
        name="Deuteranopia",
        description="Cannot perceive green",
        prevalence="~1.2%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.TRITANOPIA,
        name="Tritanopia",
        description="Cannot perceive blue",
        prevalence="~0.001%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.PROTANOMALY,
        name="Protanomaly",
        description="Weakened red perception",
        prevalence="~1.3%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.DEUTERANOMALY,
        name="Deuteranomaly",
        description="Weakened green perception (most common)",
        prevalence="~5%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.TRITANOMALY,
        name="Tritanomaly",
        description="Weakened blue perception",
        prevalence="~0.0001%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.ACHROMATOPSIA,
        name="Achromatopsia",
        description="Sees all colors as shades of gray",
        prevalence="~0.003%",
    ),
    ColorBlindnessInfo(
        type=ColorBlindnessType.ACHROMATOMALY,
        name="Achromatomaly",
        description="Very weak color perception",
        prevalence="~0.001%",
    ),
)


def _as_type(cvd_type: ColorBlindnessTypeLike) -> ColorBlindnessType:
    try:
        return ColorBlindnessType(cvd_type)
    except ValueError:
        names = ", ".join(t.value for t in ColorBlindnessType)
        raise ValueError(f"Unknown color blindness type {cvd_type!r}; expected one of: {names}") from None


def _simulate_rgb(hex_color: str, cvd_type: ColorBlindnessType) -> np.ndarray:
    rgb = np.array(hex_to_rgb(hex_color).to_tuple(), dtype=np.float64)
    simulated = SIMULATION_MATRICES[cvd_type] @ rgb
    # Half-up rounding, then clamp to 8-bit
    return np.clip(np.floor(simulated + 0.5), 0, 255).astype(int)


def simulate_color_blindness(hex_color: str, cvd_type: ColorBlindnessTypeLike) -> str:
    """
    Simulate how a color appears under a vision deficiency.

    Args:
        hex_color: Hex color (3/6 digits, '#' optional)
        cvd_type: ColorBlindnessType or its string value ("protanopia", ...)

    Returns:
        Canonical hex of the simulated color. "normal" returns the input
        unchanged (canonicalized).

    Raises:
        InvalidColorFormat: If hex_color is not a valid hex color
        ValueError: If cvd_type is unknown
    """
    cvd_type = _as_type(cvd_type)
    if cvd_type is ColorBlindnessType.NORMAL:
        return normalize_hex(hex_color)
    r, g, b = _simulate_rgb(hex_color, cvd_type)
    return f"#{int(r):02X}{int(g):02X}{int(b):02X}"


def simulate_color_scale(scale: ColorScale, cvd_type: ColorBlindnessTypeLike) -> ColorScale:
    """Simulate every shade of a scale."""
    return ColorScale(shades=tuple(simulate_color_blindness(c, cvd_type) for c in scale.shades))


def get_all_simulations(hex_color: str) -> dict[ColorBlindnessType, str]:
    """Simulated hex under every vision model, NORMAL included."""
    return {t: simulate_color_blindness(hex_color, t) for t in ColorBlindnessType}


def are_colors_distinguishable(
    hex1: str,
    hex2: str,
    cvd_type: ColorBlindnessTypeLike,
    threshold: float = DEFAULT_DISTINGUISHABLE_THRESHOLD,
) -> bool:
    """
    True if two colors stay at least `threshold` apart (Euclidean RGB)
    after simulation.
    """
    cvd_type = _as_type(cvd_type)
    sim1 = hex_to_rgb(simulate_color_blindness(hex1, cvd_type)).to_tuple()
    sim2 = hex_to_rgb(simulate_color_blindness(hex2, cvd_type)).to_tuple()
    distance = float(np.linalg.norm(np.subtract(sim1, sim2)))
    return distance >= threshold


def generate_accessibility_report(
    colors: Sequence[str],
    threshold: float = DEFAULT_DISTINGUISHABLE_THRESHOLD,
) -> tuple[ColorBlindnessReport, ...]:
    """
    Find palette pairs that collapse together for each vision deficiency.

    Every non-normal vision model gets a report (possibly with no issues).
    Each unordered pair (i < j) is checked once, in input order.
    """
    palette = [normalize_hex(c) for c in colors]
    reports = []
    for info in COLOR_BLINDNESS_TYPES:
        if info.type is ColorBlindnessType.NORMAL:
            continue
        issues = tuple(
            ColorPair(color1=palette[i], color2=palette[j])
            for i in range(len(palette))
            for j in range(i + 1, len(palette))
            if not are_colors_distinguishable(palette[i], palette[j], info.type, threshold)
        )
        reports.append(ColorBlindnessReport(type=info.type, name=info.name, issues=issues))
    return tuple(reports)


def get_color_blindness_info(cvd_type: ColorBlindnessTypeLike) -> ColorBlindnessInfo:
    cvd_type = _as_type(cvd_type)
    return next(info for info in COLOR_BLINDNESS_TYPES if info.type is cvd_type)
