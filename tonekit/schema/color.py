# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Value types for the tonekit color pipeline.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same seed color → same ramp, same theme
- Serializable: Every type round-trips through to_dict()/from_dict()

HCT Color Space:
- H (Hue): 0-360 degrees, CAM16 hue angle
- C (Chroma): 0 = gray, ~120+ for the most vivid sRGB colors
- T (Tone): 0 = black, 100 = white (CIE L*)

Hex strings stored on these types are canonical: a leading '#' followed
by six upper-case hex digits.
"""

from __future__ import annotations

import numbers
import re
from collections.abc import Iterator, Mapping
from dataclasses import asdict, dataclass, fields
from enum import Enum
from typing import Union


_CANONICAL_HEX_RE = re.compile(r"^#[0-9A-F]{6}$")


def _check_hex(value: str, what: str) -> None:
    if not isinstance(value, str) or not _CANONICAL_HEX_RE.match(value):
        raise ValueError(f"{what} must be a canonical '#RRGGBB' hex string, got {value!r}")


# =============================================================================
# Core Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class HctColor:
    """
    A single color in HCT (Hue, Chroma, Tone) space.

    This is the canonical representation for all color manipulation in
    tonekit. Hue and chroma come from the CAM16 appearance model, tone is
    CIE L*, so equal tone steps read as equal lightness steps.

    Attributes:
        h: Hue in degrees [0, 360)
        c: Chroma (>= 0). Requests above what sRGB can show at a given
           hue/tone are mapped to the most chromatic in-gamut color.
        t: Tone [0, 100]
    """
    h: float
    c: float
    t: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.h < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.h}")
        if self.c < 0.0:
            raise ValueError(f"Chroma must be >= 0, got {self.c}")
        if not 0.0 <= self.t <= 100.0:
            raise ValueError(f"Tone must be 0-100, got {self.t}")

    @property
    def hex(self) -> str:
        """Hex of the nearest in-gamut sRGB color."""
        from tonekit.color.hct import hct_to_hex
        return hct_to_hex(self)

    def to_dict(self) -> dict:
        return {"h": self.h, "c": self.c, "t": self.t}

    @classmethod
    def from_dict(cls, data: dict) -> HctColor:
        return cls(h=data["h"], c=data["c"], t=data["t"])


@dataclass(frozen=True, slots=True)
class RgbColor:
    """8-bit sRGB device color. Only used at the pixel/hex boundary."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b}

    @classmethod
    def from_dict(cls, data: dict) -> RgbColor:
        return cls(r=data["r"], g=data["g"], b=data["b"])


@dataclass(frozen=True, slots=True)
class ExtractedColor:
    """
    One dominant color found by clustering an image.

    Attributes:
        hex: Canonical hex of the cluster centroid
        rgb: Cluster centroid (component-wise rounded mean)
        hct: HCT values of the centroid
        percentage: Share of sampled pixels assigned to this cluster (0-100)
    """
    hex: str
    rgb: RgbColor
    hct: HctColor
    percentage: float

    def __post_init__(self) -> None:
        _check_hex(self.hex, "hex")
        if not 0.0 <= self.percentage <= 100.0:
            raise ValueError(f"Percentage must be 0-100, got {self.percentage}")

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "rgb": self.rgb.to_dict(),
            "hct": self.hct.to_dict(),
            "percentage": self.percentage,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ExtractedColor:
        return cls(
            hex=data["hex"],
            rgb=RgbColor.from_dict(data["rgb"]),
            hct=HctColor.from_dict(data["hct"]),
            percentage=data["percentage"],
        )


# =============================================================================
# Color Scale
# =============================================================================

# Ordered lightest (50) to darkest (950)
SCALE_KEYS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)

ScaleKey = Union[int, str]


@dataclass(frozen=True, slots=True)
class ColorScale(Mapping):
    """
    An 11-step tonal ramp keyed by SCALE_KEYS.

    Behaves as a read-only mapping from scale key to hex string. Keys may
    be looked up as ints or numeric strings (``scale[500]``,
    ``scale["500"]``); iteration always yields the int keys in order.

    Attributes:
        shades: Hex strings in SCALE_KEYS order
    """
    shades: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.shades) != len(SCALE_KEYS):
            raise ValueError(
                f"ColorScale needs {len(SCALE_KEYS)} shades, got {len(self.shades)}"
            )
        for key, value in zip(SCALE_KEYS, self.shades):
            _check_hex(value, f"shade {key}")

    def __getitem__(self, key: ScaleKey) -> str:
        # Only exact scale keys: 500 or "500", never 500.7 or "500.0"
        if isinstance(key, str) and key.isascii() and key.isdigit():
            number = int(key)
        elif isinstance(key, numbers.Integral) and not isinstance(key, bool):
            number = int(key)
        else:
            raise KeyError(key)
        if number not in SCALE_KEYS:
            raise KeyError(key)
        return self.shades[SCALE_KEYS.index(number)]

    def __iter__(self) -> Iterator[int]:
        return iter(SCALE_KEYS)

    def __len__(self) -> int:
        return len(SCALE_KEYS)

    def to_dict(self) -> dict[str, str]:
        """Serialize with string keys (JSON object keys)."""
        return {str(k): v for k, v in zip(SCALE_KEYS, self.shades)}

    @classmethod
    def from_dict(cls, data: Mapping) -> ColorScale:
        """Build from a mapping keyed by int or numeric-string scale keys."""
        normalized = {int(k): v for k, v in data.items()}
        missing = [k for k in SCALE_KEYS if k not in normalized]
        extra = sorted(set(normalized) - set(SCALE_KEYS))
        if missing or extra:
            raise ValueError(
                f"ColorScale keys must be {SCALE_KEYS}; "
                f"missing={missing}, unexpected={extra}"
            )
        return cls(shades=tuple(normalized[k] for k in SCALE_KEYS))


# =============================================================================
# Theme Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class SemanticTokens:
    """
    Named UI color roles for one theme (light or dark).

    Background and text roles are fixed neutrals; surface and primary
    roles come from the seed's color scale; status roles are fixed,
    brand-independent constants.
    """
    # Background
    background: str
    background_alt: str
    # Surface
    surface: str
    surface_alt: str
    surface_hover: str
    # Border
    border: str
    border_alt: str
    # Text
    text_primary: str
    text_secondary: str
    text_muted: str
    text_inverse: str
    # Primary
    primary: str
    primary_hover: str
    primary_active: str
    on_primary: str
    # Status
    success: str
    warning: str
    error: str
    info: str

    def __post_init__(self) -> None:
        for f in fields(self):
            _check_hex(getattr(self, f.name), f.name)

    def items(self) -> tuple[tuple[str, str], ...]:
        """(role, hex) pairs in declaration order."""
        return tuple((f.name, getattr(self, f.name)) for f in fields(self))

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> SemanticTokens:
        return cls(**{f.name: data[f.name] for f in fields(cls)})


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """
    A complete light/dark theme derived from one seed color.

    Attributes:
        light: Light theme roles
        dark: Dark theme roles
        color_scale: Tonal ramp of the seed
        dark_color_scale: color_scale relabeled for dark mode (50↔950, ...)
    """
    light: SemanticTokens
    dark: SemanticTokens
    color_scale: ColorScale
    dark_color_scale: ColorScale

    def to_dict(self) -> dict:
        return {
            "light": self.light.to_dict(),
            "dark": self.dark.to_dict(),
            "color_scale": self.color_scale.to_dict(),
            "dark_color_scale": self.dark_color_scale.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> ThemePalette:
        return cls(
            light=SemanticTokens.from_dict(data["light"]),
            dark=SemanticTokens.from_dict(data["dark"]),
            color_scale=ColorScale.from_dict(data["color_scale"]),
            dark_color_scale=ColorScale.from_dict(data["dark_color_scale"]),
        )


@dataclass(frozen=True, slots=True)
class ColorPalette:
    """Full set of ramps built around one primary seed."""
    primary: ColorScale
    secondary: ColorScale
    tertiary: ColorScale
    neutral: ColorScale
    error: ColorScale
    warning: ColorScale
    success: ColorScale

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name).to_dict() for f in fields(self)}


@dataclass(frozen=True, slots=True)
class SurfaceColors:
    """Material 3 surface roles taken from a neutral ramp."""
    surface: str
    surface_dim: str
    surface_bright: str
    surface_container_lowest: str
    surface_container_low: str
    surface_container: str
    surface_container_high: str
    surface_container_highest: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class HarmonyType(Enum):
    """Hue relationships for suggest_palette."""

    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    SPLIT_COMPLEMENTARY = "split-complementary"


@dataclass(frozen=True, slots=True)
class HarmonyColor:
    """
    One entry of a harmony palette.

    Attributes:
        name: Role in the harmony ("primary", "complementary", "triadic-1", ...)
        hex: Canonical hex
        hue: Requested HCT hue in degrees [0, 360)
    """
    name: str
    hex: str
    hue: float

    def __post_init__(self) -> None:
        _check_hex(self.hex, "hex")
        if not 0.0 <= self.hue < 360.0:
            raise ValueError(f"Hue must be 0-360, got {self.hue}")

    def to_dict(self) -> dict:
        return {"name": self.name, "hex": self.hex, "hue": self.hue}


# =============================================================================
# Accessibility Types
# =============================================================================


class WCAGLevel(Enum):
    """WCAG 2.1 contrast level for normal-size text."""

    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA-Large"
    FAIL = "Fail"


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    WCAG classification of a contrast ratio.

    The pass flags are independent threshold checks, not derived from
    level: AA-large needs 3:1, AA and AAA-large need 4.5:1, AAA needs 7:1.
    """
    ratio: float
    level: WCAGLevel
    pass_aa: bool
    pass_aaa: bool
    pass_aa_large: bool
    pass_aaa_large: bool

    def __post_init__(self) -> None:
        if self.ratio < 1.0 - 1e-9:
            raise ValueError(f"Contrast ratio must be >= 1, got {self.ratio}")

    @property
    def ratio_text(self) -> str:
        """Ratio formatted as e.g. '4.50:1'."""
        return f"{self.ratio:.2f}:1"

    def to_dict(self) -> dict:
        return {
            "ratio": self.ratio,
            "ratio_text": self.ratio_text,
            "level": self.level.value,
            "pass_aa": self.pass_aa,
            "pass_aaa": self.pass_aaa,
            "pass_aa_large": self.pass_aa_large,
            "pass_aaa_large": self.pass_aaa_large,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ContrastResult:
        return cls(
            ratio=data["ratio"],
            level=WCAGLevel(data["level"]),
            pass_aa=data["pass_aa"],
            pass_aaa=data["pass_aaa"],
            pass_aa_large=data["pass_aa_large"],
            pass_aaa_large=data["pass_aaa_large"],
        )


@dataclass(frozen=True, slots=True)
class AccessibilityReport:
    """Contrast of one foreground/background pair plus advice."""
    foreground: str
    background: str
    contrast: ContrastResult
    suggestions: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "foreground": self.foreground,
            "background": self.background,
            "contrast": self.contrast.to_dict(),
            "suggestions": list(self.suggestions),
        }


@dataclass(frozen=True, slots=True)
class AutoTextColor:
    """Pure black or white text, whichever contrasts more with a background."""
    recommended: str
    ratio: float
    level: WCAGLevel

    def to_dict(self) -> dict:
        return {"recommended": self.recommended, "ratio": self.ratio, "level": self.level.value}


@dataclass(frozen=True, slots=True)
class AccessibleShade:
    """A scale entry that clears a contrast target."""
    shade: int
    color: str
    ratio: float

    def to_dict(self) -> dict:
        return {"shade": self.shade, "color": self.color, "ratio": self.ratio}


@dataclass(frozen=True, slots=True)
class ColorAnalysis:
    """
    Summary of a single color: rounded HCT, luminance and how it reads as
    text on pure white and pure black.

    Numbers are rounded for display (HCT to integers, the rest to two
    decimals); the grades are computed from the unrounded ratios.
    """
    hex: str
    hue: int
    chroma: int
    tone: int
    luminance: float
    contrast_with_white: float
    contrast_with_black: float
    text_on_white: WCAGLevel
    text_on_black: WCAGLevel
    recommended_text_color: str

    def __post_init__(self) -> None:
        _check_hex(self.hex, "hex")
        _check_hex(self.recommended_text_color, "recommended_text_color")

    def to_dict(self) -> dict:
        return {
            "hex": self.hex,
            "hct": {"hue": self.hue, "chroma": self.chroma, "tone": self.tone},
            "luminance": self.luminance,
            "contrast": {
                "with_white": self.contrast_with_white,
                "with_black": self.contrast_with_black,
            },
            "accessibility": {
                "text_on_white": self.text_on_white.value,
                "text_on_black": self.text_on_black.value,
            },
            "recommended_text_color": self.recommended_text_color,
        }


# =============================================================================
# Color Vision Deficiency Types
# =============================================================================


class ColorBlindnessType(Enum):
    """Supported vision models. NORMAL is the identity transform."""

    NORMAL = "normal"
    PROTANOPIA = "protanopia"        # Red-blind
    DEUTERANOPIA = "deuteranopia"    # Green-blind
    TRITANOPIA = "tritanopia"        # Blue-blind
    PROTANOMALY = "protanomaly"      # Red-weak
    DEUTERANOMALY = "deuteranomaly"  # Green-weak
    TRITANOMALY = "tritanomaly"      # Blue-weak
    ACHROMATOPSIA = "achromatopsia"  # Total color blindness
    ACHROMATOMALY = "achromatomaly"  # Partial color blindness


@dataclass(frozen=True, slots=True)
class ColorBlindnessInfo:
    """Display metadata for a vision model."""
    type: ColorBlindnessType
    name: str
    description: str
    prevalence: str


@dataclass(frozen=True, slots=True)
class ColorPair:
    """Two palette colors, in input order."""
    color1: str
    color2: str

    def to_dict(self) -> dict:
        return {"color1": self.color1, "color2": self.color2}


@dataclass(frozen=True, slots=True)
class ColorBlindnessReport:
    """Palette pairs that collapse together under one vision model."""
    type: ColorBlindnessType
    name: str
    issues: tuple[ColorPair, ...] = ()

    @property
    def has_issues(self) -> bool:
        return bool(self.issues)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "name": self.name,
            "issues": [pair.to_dict() for pair in self.issues],
        }


# Used by callers that accept either the enum or its string value
ColorBlindnessTypeLike = Union[ColorBlindnessType, str]
WCAGLevelLike = Union[WCAGLevel, str]
HarmonyTypeLike = Union[HarmonyType, str]
