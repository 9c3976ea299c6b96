# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Design-token JSON export (W3C Design Tokens Community Group format).

Every color token is ``{"$value": "#RRGGBB", "$type": "color"}``. Role
names are camelCase.
"""

from __future__ import annotations

import json
from typing import Sequence

from tonekit import __version__
from tonekit.color.colorspace import round_half_up
from tonekit.export.base import DEFAULT_PROJECT_NAME, GENERATOR, camel_case
from tonekit.schema import ExtractedColor, SemanticTokens, ThemePalette

TOKEN_SCHEMA_URL = "https://design-tokens.github.io/community-group/format/token.json"


def _color_token(value: str) -> dict[str, str]:
    return {"$value": value, "$type": "color"}


def _semantic_tokens(tokens: SemanticTokens) -> dict:
    return {camel_case(role): _color_token(value) for role, value in tokens.items()}


def _extracted_token(color: ExtractedColor) -> dict:
    return {
        **_color_token(color.hex),
        "hct": {
            "hue": int(round_half_up(color.hct.h)),
            "chroma": int(round_half_up(color.hct.c)),
            "tone": int(round_half_up(color.hct.t)),
        },
        "percentage": round_half_up(color.percentage, 2),
    }


def design_tokens(
    palette: ThemePalette,
    extracted: Sequence[ExtractedColor] = (),
    project_name: str = DEFAULT_PROJECT_NAME,
) -> dict:
    """The design-token document as a plain dict."""
    color: dict = {
        "primary": {str(key): _color_token(value) for key, value in palette.color_scale.items()},
        "semantic": {
            "light": _semantic_tokens(palette.light),
            "dark": _semantic_tokens(palette.dark),
        },
    }
    if extracted:
        color["extracted"] = {
            f"color-{index}": _extracted_token(c)
            for index, c in enumerate(extracted, start=1)
        }

    return {
        "$schema": TOKEN_SCHEMA_URL,
        "name": project_name,
        "color": color,
        "metadata": {"generator": GENERATOR, "version": __version__},
    }


def to_design_tokens(
    palette: ThemePalette,
    extracted: Sequence[ExtractedColor] = (),
    project_name: str = DEFAULT_PROJECT_NAME,
) -> str:
    """Serialize a theme as design-token JSON (2-space indent)."""
    return json.dumps(design_tokens(palette, extracted, project_name), indent=2)
