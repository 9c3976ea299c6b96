# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Base types and naming helpers for exporters."""

from __future__ import annotations

from enum import Enum


DEFAULT_PROJECT_NAME = "Tonekit Design System"
GENERATOR = "tonekit"


class ExportFormat(Enum):
    """Output format for export_theme."""

    CSS = "css"
    TAILWIND = "tailwind"
    JSON = "json"
    FIGMA = "figma"


def kebab_case(name: str) -> str:
    """'text_primary' → 'text-primary'"""
    return name.replace("_", "-")


def camel_case(name: str) -> str:
    """'text_primary' → 'textPrimary'"""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
