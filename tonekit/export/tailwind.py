# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Tailwind config export.

Produces the source text of a ``tailwind.config.js``. The primary ramp is
emitted as literal hex values; theme roles are emitted as ``var(--role)``
references so they follow the CSS export's light/dark switch.
"""

from __future__ import annotations

import json
from typing import Sequence

from tonekit.export.base import kebab_case
from tonekit.schema import ExtractedColor, ThemePalette

_HEADER = "// tailwind.config.js\n/** @type {import('tailwindcss').Config} */\n"

# Roles folded into the primary color object rather than emitted flat
_PRIMARY_ROLES = {"primary": "DEFAULT", "primary_hover": "hover", "primary_active": "active"}


def tailwind_colors(
    palette: ThemePalette,
    extracted: Sequence[ExtractedColor] = (),
) -> dict:
    """The ``theme.extend.colors`` object."""
    primary: dict[str, str] = {str(key): value for key, value in palette.color_scale.items()}
    colors: dict = {"primary": primary}

    for role, _ in palette.light.items():
        reference = f"var(--{kebab_case(role)})"
        if role in _PRIMARY_ROLES:
            primary[_PRIMARY_ROLES[role]] = reference
        else:
            colors[kebab_case(role)] = reference

    if extracted:
        colors["extracted"] = {str(i): color.hex for i, color in enumerate(extracted, start=1)}
    return colors


def to_tailwind_config(
    palette: ThemePalette,
    extracted: Sequence[ExtractedColor] = (),
) -> str:
    """
    Serialize a theme as ``tailwind.config.js`` source.

    Args:
        palette: Theme to export
        extracted: Optional extracted colors, added as ``extracted-1`` ...

    Returns:
        JavaScript source text (``module.exports = {...};``)
    """
    config = {"theme": {"extend": {"colors": tailwind_colors(palette, extracted)}}}
    return f"{_HEADER}module.exports = {json.dumps(config, indent=2)};"
