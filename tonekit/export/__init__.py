# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Exporters for themes and ramps.

Each exporter is a pure serializer: it renames and nests, it never alters
a color value.
"""

from __future__ import annotations

from typing import Sequence, Union

from tonekit.export.base import DEFAULT_PROJECT_NAME, ExportFormat
from tonekit.export.css import export_theme_as_css, to_css_variables
from tonekit.export.figma import to_figma_variables
from tonekit.export.tailwind import to_tailwind_config
from tonekit.export.tokens import to_design_tokens
from tonekit.schema import ExtractedColor, ThemePalette


def export_theme(
    palette: ThemePalette,
    format: Union[ExportFormat, str] = ExportFormat.CSS,
    *,
    extracted: Sequence[ExtractedColor] = (),
    project_name: str = DEFAULT_PROJECT_NAME,
) -> str:
    """
    Serialize a theme in the requested format.

    Args:
        palette: Theme to export
        format: ExportFormat or its value ("css", "tailwind", "json", "figma")
        extracted: Extracted colors (Tailwind and JSON only)
        project_name: Collection/document name (JSON and Figma only)

    Raises:
        ValueError: If format is unknown
    """
    format = ExportFormat(format)
    if format is ExportFormat.CSS:
        return export_theme_as_css(palette)
    if format is ExportFormat.TAILWIND:
        return to_tailwind_config(palette, extracted)
    if format is ExportFormat.JSON:
        return to_design_tokens(palette, extracted, project_name)
    return to_figma_variables(palette, project_name)


__all__ = [
    "ExportFormat",
    "export_theme",
    "export_theme_as_css",
    "to_css_variables",
    "to_tailwind_config",
    "to_design_tokens",
    "to_figma_variables",
]
