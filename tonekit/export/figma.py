# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Figma variables export.

One collection with two modes (Light, Dark). Each variable carries a value
per mode: scale variables pair the light ramp with the dark ramp, semantic
variables pair the light and dark role values.
"""

from __future__ import annotations

import json

from tonekit.export.base import DEFAULT_PROJECT_NAME, camel_case
from tonekit.schema import ThemePalette

MODES = ("Light", "Dark")


def figma_variables(palette: ThemePalette, project_name: str = DEFAULT_PROJECT_NAME) -> dict:
    variables = [
        {"name": f"primary/{key}", "values": {"Light": light, "Dark": dark}}
        for (key, light), dark in zip(palette.color_scale.items(), palette.dark_color_scale.shades)
    ]
    variables.extend(
        {"name": f"semantic/{camel_case(role)}", "values": {"Light": light, "Dark": dark}}
        for (role, light), (_, dark) in zip(palette.light.items(), palette.dark.items())
    )
    return {"name": project_name, "modes": list(MODES), "variables": variables}


def to_figma_variables(palette: ThemePalette, project_name: str = DEFAULT_PROJECT_NAME) -> str:
    """Serialize a theme as Figma-variables JSON (2-space indent)."""
    return json.dumps(figma_variables(palette, project_name), indent=2)
