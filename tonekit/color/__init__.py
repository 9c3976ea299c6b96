# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Color core for tonekit.

HCT conversion, image color extraction, ramp and theme generation,
contrast evaluation and color vision deficiency simulation. Everything
except image decoding is a pure function of its inputs.
"""

from tonekit.color.accessibility import (
    analyze_color,
    find_accessible_shade,
    generate_accessibility_matrix,
    get_accessibility_report,
    get_auto_text_color,
    get_contrast_ratio,
    get_relative_luminance,
    get_wcag_level,
)
from tonekit.color.clustering import (
    filter_extracted_colors,
    kmeans_clustering,
    select_primary_color,
)
from tonekit.color.colorblind import (
    COLOR_BLINDNESS_TYPES,
    are_colors_distinguishable,
    generate_accessibility_report,
    get_all_simulations,
    get_color_blindness_info,
    simulate_color_blindness,
    simulate_color_scale,
)
from tonekit.color.colorspace import (
    get_luminance,
    hex_to_rgb,
    is_valid_hex,
    normalize_hex,
    rgb_to_hex,
)
from tonekit.color.darkmode import (
    generate_dark_color_scale,
    generate_dark_semantic_tokens,
    generate_light_semantic_tokens,
    generate_theme_palette,
)
from tonekit.color.extract import ExtractionConfig, extract_colors_from_image, sample_pixels
from tonekit.color.hct import (
    adjust_chroma,
    adjust_tone,
    hct_to_hex,
    hct_to_rgb,
    hex_to_hct,
    is_light_color,
    rgb_to_hct,
)
from tonekit.color.ramp import (
    TONE_MAP,
    generate_brand_color_ramp,
    generate_color_palette,
    generate_color_ramp,
    generate_error_ramp,
    generate_neutral_ramp,
    generate_success_ramp,
    generate_surface_colors,
    generate_warning_ramp,
    suggest_palette,
)

__all__ = [
    # Color space
    "normalize_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hct",
    "rgb_to_hct",
    "hct_to_hex",
    "hct_to_rgb",
    "adjust_tone",
    "adjust_chroma",
    "get_luminance",
    "is_light_color",
    # Extraction
    "ExtractionConfig",
    "extract_colors_from_image",
    "sample_pixels",
    "kmeans_clustering",
    "select_primary_color",
    "filter_extracted_colors",
    # Ramps
    "TONE_MAP",
    "generate_color_ramp",
    "generate_brand_color_ramp",
    "generate_neutral_ramp",
    "generate_error_ramp",
    "generate_warning_ramp",
    "generate_success_ramp",
    "generate_color_palette",
    "generate_surface_colors",
    "suggest_palette",
    # Themes
    "generate_dark_color_scale",
    "generate_light_semantic_tokens",
    "generate_dark_semantic_tokens",
    "generate_theme_palette",
    # Accessibility
    "get_relative_luminance",
    "get_contrast_ratio",
    "get_wcag_level",
    "get_accessibility_report",
    "generate_accessibility_matrix",
    "get_auto_text_color",
    "find_accessible_shade",
    "analyze_color",
    # Color vision deficiency
    "COLOR_BLINDNESS_TYPES",
    "simulate_color_blindness",
    "simulate_color_scale",
    "get_all_simulations",
    "get_color_blindness_info",
    "are_colors_distinguishable",
    "generate_accessibility_report",
]
