# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
CSS custom property export.

Role names become kebab-case properties (``text_primary`` →
``--text-primary``); scale steps become ``--color-primary-<key>``.
"""

from __future__ import annotations

from typing import Sequence

from tonekit.color.colorspace import normalize_hex
from tonekit.export.base import kebab_case
from tonekit.schema import ColorScale, ExtractedColor, SemanticTokens, ThemePalette


def _token_lines(tokens: SemanticTokens, indent: str) -> list[str]:
    return [f"{indent}--{kebab_case(role)}: {value};" for role, value in tokens.items()]


def _scale_lines(scale: ColorScale, indent: str) -> list[str]:
    return [f"{indent}--color-primary-{key}: {value};" for key, value in scale.items()]


def export_theme_as_css(palette: ThemePalette) -> str:
    """
    Serialize a theme as CSS custom properties.

    Emits three blocks: ``:root`` with the light roles and scale, then the
    dark roles and dark scale twice, once under
    ``@media (prefers-color-scheme: dark)`` and once under a ``.dark``
    class, so either the OS preference or a class toggle switches themes.
    """
    dark_block = [
        *_token_lines(palette.dark, "  "),
        "",
        "  /* Dark Color Scale */",
        *_scale_lines(palette.dark_color_scale, "  "),
    ]

    lines = [
        "/* Light Theme */",
        ":root {",
        *_token_lines(palette.light, "  "),
        "",
        "  /* Color Scale */",
        *_scale_lines(palette.color_scale, "  "),
        "}",
        "",
        "/* Dark Theme */",
        "@media (prefers-color-scheme: dark) {",
        "  :root {",
        *(f"  {line}" if line else line for line in dark_block),
        "  }",
        "}",
        "",
        "/* Manual Dark Mode Class */",
        ".dark {",
        *dark_block,
        "}",
    ]
    return "\n".join(lines) + "\n"


def to_css_variables(
    primary: str,
    ramp: ColorScale,
    extracted: Sequence[ExtractedColor] = (),
) -> str:
    """
    Serialize a primary color, its ramp and extracted colors as one
    ``:root`` block.

    Extracted colors are numbered from 1 in the given order
    (``--color-extracted-1``, ...).
    """
    lines = [
        ":root {",
        "  /* Primary Color */",
        f"  --color-primary: {normalize_hex(primary)};",
        "",
        "  /* Primary Color Ramp */",
        *_scale_lines(ramp, "  "),
    ]
    if extracted:
        lines.append("")
        lines.append("  /* Extracted Colors */")
        lines.extend(
            f"  --color-extracted-{index}: {color.hex};"
            for index, color in enumerate(extracted, start=1)
        )
    lines.append("}")
    return "\n".join(lines)
