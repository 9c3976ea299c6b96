# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
HCT (Hue, Chroma, Tone) color space.

Forward chain: sRGB → Linear RGB → XYZ → CAM16 (hue, chroma) + CIE L* (tone)
Inverse: HCT solver. Newton iteration on CAM16 lightness J finds the exact
color when the request is in gamut; otherwise the sRGB cube is bisected
along the plane of constant Y to find the most chromatic color with the
requested hue and tone.

References:
- CAM16: Li et al., "Comprehensive color solutions: CAM16, CAT16, and CAM16-UCS" (2017)
- HCT: Material Color Utilities (Google), HctSolver

The forward path is vectorized NumPy; the inverse is scalar (it is only
ever called a handful of times per ramp).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Union

import numpy as np
from numpy.typing import NDArray

from tonekit.color.colorspace import (
    RgbLike,
    as_rgb,
    hex_to_rgb,
    linear_to_srgb,
    normalize_hex,
    srgb_to_linear,
)
from tonekit.schema import HctColor, RgbColor


HctLike = Union[HctColor, tuple[float, float, float]]


# =============================================================================
# Constants
# =============================================================================

# Linear sRGB (0-100) to CIE XYZ (D65)
_SRGB_TO_XYZ = np.array([
    [0.41233895, 0.35762064, 0.18051042],
    [0.2126, 0.7152, 0.0722],
    [0.01932141, 0.11916382, 0.95034478],
], dtype=np.float64)

# CIE XYZ to CAM16 cone space (M16)
_XYZ_TO_CAM16RGB = np.array([
    [0.401288, 0.650173, -0.051461],
    [-0.250268, 1.204414, 0.045854],
    [-0.002079, 0.048952, 0.953127],
], dtype=np.float64)

_WHITE_POINT_D65 = np.array([95.047, 100.0, 108.883], dtype=np.float64)

# Y row of _SRGB_TO_XYZ: luminance of linear RGB
_Y_FROM_LINRGB = _SRGB_TO_XYZ[1]

# CIE L* constants
_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


# =============================================================================
# CIE L* ↔ Y
# =============================================================================


def lstar_from_y(y: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert relative luminance Y [0, 100] to CIE L* [0, 100].

    L* is the tone channel of HCT.
    """
    ratio = np.asarray(y, dtype=np.float64) / 100.0
    f = np.where(ratio > _EPSILON, np.cbrt(ratio), (_KAPPA * ratio + 16.0) / 116.0)
    return 116.0 * f - 16.0


def y_from_lstar(lstar: float) -> float:
    """Convert CIE L* [0, 100] to relative luminance Y [0, 100]."""
    ft = (lstar + 16.0) / 116.0
    ft3 = ft * ft * ft
    if ft3 > _EPSILON:
        return 100.0 * ft3
    return 100.0 * (116.0 * ft - 16.0) / _KAPPA


# =============================================================================
# Viewing conditions
# =============================================================================


@dataclass(frozen=True)
class ViewingConditions:
    """
    CAM16 viewing-condition parameters.

    Derived once from the environment (white point, adapting luminance,
    background lightness, surround). See DEFAULT_VIEWING_CONDITIONS.
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: NDArray[np.float64]
    fl: float
    fl_root: float
    z: float

    @classmethod
    def make(
        cls,
        white_point: NDArray[np.float64] = _WHITE_POINT_D65,
        adapting_luminance: float = 200.0 / math.pi * y_from_lstar(50.0) / 100.0,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> ViewingConditions:
        """
        Compute viewing conditions.

        Defaults are the sRGB reference environment used by Material
        Design: D65, a gray-world adapting luminance of ~11.7 cd/m²,
        mid-gray background, average surround.
        """
        background_lstar = max(0.1, background_lstar)
        rgb_w = _XYZ_TO_CAM16RGB @ white_point

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = 0.59 + (0.69 - 0.59) * ((f - 0.9) * 10.0)
        else:
            c = 0.525 + (0.59 - 0.525) * ((f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = min(max(d, 0.0), 1.0)

        rgb_d = d * (100.0 / rgb_w) + 1.0 - d

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k ** 4
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)

        rgb_a_factors = np.power(fl * rgb_d * rgb_w / 100.0, 0.42)
        rgb_a = 400.0 * rgb_a_factors / (rgb_a_factors + 27.13)
        aw = float(2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=nbb,
            c=c,
            nc=f,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )


DEFAULT_VIEWING_CONDITIONS = ViewingConditions.make()

_VC = DEFAULT_VIEWING_CONDITIONS

# Linear RGB (0-100) to adapted, discounted cone responses, and back.
# These fold the white-point adaptation and luminance scaling into one matrix.
_SCALED_DISCOUNT_FROM_LINRGB = (
    (_VC.fl / 100.0) * _VC.rgb_d[:, np.newaxis] * (_XYZ_TO_CAM16RGB @ _SRGB_TO_XYZ)
)
_LINRGB_FROM_SCALED_DISCOUNT = np.linalg.inv(_SCALED_DISCOUNT_FROM_LINRGB)

# Linear-RGB values (0-100) halfway between consecutive 8-bit sRGB codes
_CRITICAL_PLANES = srgb_to_linear((np.arange(255, dtype=np.float64) + 0.5) / 255.0) * 100.0


# =============================================================================
# Forward: sRGB → HCT
# =============================================================================


def linear_rgb_to_hct(linrgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to HCT.

    Args:
        linrgb: Array of shape (..., 3) with linear RGB values [0, 100]

    Returns:
        Array of shape (..., 3) with (hue, chroma, tone).
        Hue is in degrees [0, 360); tone is clamped to [0, 100].
    """
    linrgb = np.asarray(linrgb, dtype=np.float64)

    xyz = np.einsum('...j,ij->...i', linrgb, _SRGB_TO_XYZ)
    scaled = np.einsum('...j,ij->...i', linrgb, _SCALED_DISCOUNT_FROM_LINRGB)

    # Post-adaptation nonlinear compression
    af = np.power(np.abs(scaled), 0.42)
    rgb_a = np.sign(scaled) * 400.0 * af / (af + 27.13)
    r_a = rgb_a[..., 0]
    g_a = rgb_a[..., 1]
    b_a = rgb_a[..., 2]

    # Opponent dimensions
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    u = (20.0 * r_a + 20.0 * g_a + 21.0 * b_a) / 20.0
    p2 = (40.0 * r_a + 20.0 * g_a + b_a) / 20.0

    hue = np.degrees(np.arctan2(b, a)) % 360.0
    # x % 360 can round up to exactly 360 for tiny negative x
    hue = np.where(hue >= 360.0, 0.0, hue)

    ac = np.maximum(p2 * _VC.nbb, 0.0)
    j = 100.0 * np.power(ac / _VC.aw, _VC.c * _VC.z)

    hue_prime = np.where(hue < 20.14, hue + 360.0, hue)
    e_hue = 0.25 * (np.cos(np.radians(hue_prime) + 2.0) + 3.8)
    p1 = 50000.0 / 13.0 * e_hue * _VC.nc * _VC.ncb
    t = p1 * np.hypot(a, b) / (u + 0.305)
    alpha = np.power(t, 0.9) * math.pow(1.64 - math.pow(0.29, _VC.n), 0.73)
    chroma = alpha * np.sqrt(j / 100.0)

    tone = np.clip(lstar_from_y(xyz[..., 1]), 0.0, 100.0)

    return np.stack([hue, chroma, tone], axis=-1)


def srgb_uint8_to_hct(pixels: NDArray[np.uint8]) -> NDArray[np.float64]:
    """
    Convert uint8 sRGB pixels [0,255] to HCT.

    Args:
        pixels: Array of shape (..., 3) with uint8 sRGB values [0, 255]

    Returns:
        Array of shape (..., 3) with (hue, chroma, tone)
    """
    srgb = np.asarray(pixels, dtype=np.float64) / 255.0
    return linear_rgb_to_hct(srgb_to_linear(srgb) * 100.0)


def rgb_to_hct(rgb: RgbLike) -> HctColor:
    """Convert an 8-bit RGB color to HCT."""
    h, c, t = srgb_uint8_to_hct(np.array(as_rgb(rgb).to_tuple()))
    return HctColor(h=float(h), c=float(c), t=float(t))


def hex_to_hct(hex_color: str) -> HctColor:
    """
    Convert a hex color to HCT.

    Raises:
        InvalidColorFormat: If hex_color is not a 3/6-digit hex string
    """
    return rgb_to_hct(hex_to_rgb(hex_color))


# =============================================================================
# Inverse: HCT → sRGB (solver)
# =============================================================================


def _sanitize_radians(angle: float) -> float:
    return (angle + math.pi * 8.0) % (math.pi * 2.0)


def _true_delinearized(component: float) -> float:
    """Linear [0, 100] to unrounded 8-bit sRGB [0, 255]."""
    return float(linear_to_srgb(component / 100.0)) * 255.0


def _linrgb_to_rgb(linrgb: NDArray[np.float64]) -> RgbColor:
    srgb = np.clip(linear_to_srgb(linrgb / 100.0), 0.0, 1.0)
    r, g, b = np.floor(srgb * 255.0 + 0.5).astype(int)
    return RgbColor(r=int(r), g=int(g), b=int(b))


def _gray_from_lstar(lstar: float) -> RgbColor:
    y = y_from_lstar(lstar)
    return _linrgb_to_rgb(np.array([y, y, y], dtype=np.float64))


def _chromatic_adaptation(component: NDArray[np.float64]) -> NDArray[np.float64]:
    af = np.power(np.abs(component), 0.42)
    return np.sign(component) * 400.0 * af / (af + 27.13)


def _inverse_chromatic_adaptation(adapted: NDArray[np.float64]) -> NDArray[np.float64]:
    adapted_abs = np.abs(adapted)
    base = np.maximum(0.0, 27.13 * adapted_abs / (400.0 - adapted_abs))
    return np.sign(adapted) * np.power(base, 1.0 / 0.42)


def _hue_of(linrgb: NDArray[np.float64]) -> float:
    """CAM16 hue angle (radians) of a linear RGB color."""
    r_a, g_a, b_a = _chromatic_adaptation(_SCALED_DISCOUNT_FROM_LINRGB @ linrgb)
    a = (11.0 * r_a - 12.0 * g_a + b_a) / 11.0
    b = (r_a + g_a - 2.0 * b_a) / 9.0
    return math.atan2(b, a)


def _are_in_cyclic_order(a: float, b: float, c: float) -> bool:
    return _sanitize_radians(b - a) < _sanitize_radians(c - a)


def _nth_vertex(y: float, n: int) -> NDArray[np.float64] | None:
    """
    Intersection of the plane of luminance y with the n-th edge of the RGB cube.

    Returns None when the intersection falls outside the cube.
    """
    k_r, k_g, k_b = _Y_FROM_LINRGB
    coord_a = 0.0 if n % 4 <= 1 else 100.0
    coord_b = 0.0 if n % 2 == 0 else 100.0
    if n < 4:
        g, b = coord_a, coord_b
        r = (y - g * k_g - b * k_b) / k_r
        vertex = (r, g, b)
        free = r
    elif n < 8:
        b, r = coord_a, coord_b
        g = (y - r * k_r - b * k_b) / k_g
        vertex = (r, g, b)
        free = g
    else:
        r, g = coord_a, coord_b
        b = (y - r * k_r - g * k_g) / k_b
        vertex = (r, g, b)
        free = b
    if 0.0 <= free <= 100.0:
        return np.array(vertex, dtype=np.float64)
    return None


def _bisect_to_segment(y: float, target_hue: float) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Find the edge of the constant-Y polygon that the target hue crosses."""
    left: NDArray[np.float64] | None = None
    right: NDArray[np.float64] | None = None
    left_hue = 0.0
    right_hue = 0.0
    uncut = True

    for n in range(12):
        mid = _nth_vertex(y, n)
        if mid is None:
            continue
        mid_hue = _hue_of(mid)
        if left is None:
            left = right = mid
            left_hue = right_hue = mid_hue
            continue
        if uncut or _are_in_cyclic_order(left_hue, mid_hue, right_hue):
            uncut = False
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                right_hue = mid_hue
            else:
                left = mid
                left_hue = mid_hue

    return left, right


def _bisect_to_limit(y: float, target_hue: float) -> NDArray[np.float64]:
    """Most chromatic in-gamut linear RGB color with luminance y and the target hue."""
    left, right = _bisect_to_segment(y, target_hue)
    left_hue = _hue_of(left)

    for axis in range(3):
        if left[axis] == right[axis]:
            continue
        if left[axis] < right[axis]:
            l_plane = math.floor(_true_delinearized(left[axis]) - 0.5)
            r_plane = math.ceil(_true_delinearized(right[axis]) - 0.5)
        else:
            l_plane = math.ceil(_true_delinearized(left[axis]) - 0.5)
            r_plane = math.floor(_true_delinearized(right[axis]) - 0.5)

        for _ in range(8):
            if abs(r_plane - l_plane) <= 1:
                break
            m_plane = math.floor((l_plane + r_plane) / 2.0)
            coordinate = _CRITICAL_PLANES[m_plane]
            t = (coordinate - left[axis]) / (right[axis] - left[axis])
            mid = left + (right - left) * t
            mid_hue = _hue_of(mid)
            if _are_in_cyclic_order(left_hue, target_hue, mid_hue):
                right = mid
                r_plane = m_plane
            else:
                left = mid
                left_hue = mid_hue
                l_plane = m_plane

    return (left + right) / 2.0


def _find_result_by_j(hue_radians: float, chroma: float, y: float) -> RgbColor | None:
    """
    Solve for the exact color by Newton iteration on J.

    Returns None if the requested color is outside the sRGB gamut.
    """
    # Initial estimate of J
    j = math.sqrt(y) * 11.0

    t_inner_coeff = 1.0 / math.pow(1.64 - math.pow(0.29, _VC.n), 0.73)
    e_hue = 0.25 * (math.cos(hue_radians + 2.0) + 3.8)
    p1 = e_hue * (50000.0 / 13.0) * _VC.nc * _VC.ncb
    h_sin = math.sin(hue_radians)
    h_cos = math.cos(hue_radians)

    for iteration in range(5):
        j_normalized = j / 100.0
        alpha = 0.0 if chroma == 0.0 or j == 0.0 else chroma / math.sqrt(j_normalized)
        t = math.pow(alpha * t_inner_coeff, 1.0 / 0.9)
        ac = _VC.aw * math.pow(j_normalized, 1.0 / _VC.c / _VC.z)
        p2 = ac / _VC.nbb
        gamma = 23.0 * (p2 + 0.305) * t / (23.0 * p1 + 11.0 * t * h_cos + 108.0 * t * h_sin)
        a = gamma * h_cos
        b = gamma * h_sin
        rgb_a = np.array([
            (460.0 * p2 + 451.0 * a + 288.0 * b) / 1403.0,
            (460.0 * p2 - 891.0 * a - 261.0 * b) / 1403.0,
            (460.0 * p2 - 220.0 * a - 6300.0 * b) / 1403.0,
        ])
        linrgb = _LINRGB_FROM_SCALED_DISCOUNT @ _inverse_chromatic_adaptation(rgb_a)
        if np.any(linrgb < 0.0):
            return None

        fnj = float(_Y_FROM_LINRGB @ linrgb)
        if fnj <= 0.0:
            return None
        if iteration == 4 or abs(fnj - y) < 0.002:
            if np.any(linrgb > 100.01):
                return None
            return _linrgb_to_rgb(linrgb)
        # Newton step, approximating fn'(j) as 2 * fn(j) / j
        j = j - (fnj - y) * j / (2.0 * fnj)

    return None


def solve_to_rgb(hue: float, chroma: float, tone: float) -> RgbColor:
    """
    Find the sRGB color for an HCT request.

    If the requested chroma is not reachable at this hue and tone, returns
    the most chromatic in-gamut color with the same hue and tone.

    Args:
        hue: Hue in degrees (any value; wrapped into [0, 360))
        chroma: Requested chroma (>= 0)
        tone: Tone [0, 100]
    """
    if chroma < 0.0001 or tone < 0.0001 or tone > 99.9999:
        return _gray_from_lstar(min(max(tone, 0.0), 100.0))

    hue_radians = math.radians(hue % 360.0)
    y = y_from_lstar(tone)

    exact = _find_result_by_j(hue_radians, chroma, y)
    if exact is not None:
        return exact
    return _linrgb_to_rgb(_bisect_to_limit(y, hue_radians))


def _as_hct_tuple(hct: HctLike) -> tuple[float, float, float]:
    if isinstance(hct, HctColor):
        return hct.h, hct.c, hct.t
    h, c, t = hct
    return float(h), float(c), float(t)


def hct_to_rgb(hct: HctLike) -> RgbColor:
    """Convert HCT to the nearest in-gamut 8-bit RGB color."""
    return solve_to_rgb(*_as_hct_tuple(hct))


def hct_to_hex(hct: HctLike) -> str:
    """
    Convert HCT to a canonical hex string.

    Chroma beyond the sRGB gamut is reduced implicitly; hue and tone are
    kept.
    """
    return hct_to_rgb(hct).hex


# =============================================================================
# Channel adjustments
# =============================================================================


def adjust_tone(hex_color: str, target_tone: float) -> str:
    """Replace the tone of a color (clamped to [0, 100]), keeping hue and chroma."""
    hct = hex_to_hct(hex_color)
    return hct_to_hex((hct.h, hct.c, min(max(target_tone, 0.0), 100.0)))


def adjust_chroma(hex_color: str, target_chroma: float) -> str:
    """Replace the chroma of a color (clamped to >= 0), keeping hue and tone."""
    hct = hex_to_hct(hex_color)
    return hct_to_hex((hct.h, max(target_chroma, 0.0), hct.t))


def is_light_color(hex_color: str) -> bool:
    """True if the color's tone is above 50."""
    return hex_to_hct(hex_color).t > 50.0


def hue_distance(a: float, b: float) -> float:
    """Shortest angular distance between two hues, in degrees [0, 180]."""
    d = abs(a - b) % 360.0
    return min(d, 360.0 - d)


__all__ = [
    "DEFAULT_VIEWING_CONDITIONS",
    "ViewingConditions",
    "adjust_chroma",
    "adjust_tone",
    "hct_to_hex",
    "hct_to_rgb",
    "hex_to_hct",
    "hue_distance",
    "is_light_color",
    "linear_rgb_to_hct",
    "lstar_from_y",
    "normalize_hex",
    "rgb_to_hct",
    "solve_to_rgb",
    "srgb_uint8_to_hct",
    "y_from_lstar",
]
