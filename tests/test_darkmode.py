# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for light/dark theme composition."""

from tonekit.color.darkmode import (
    generate_dark_color_scale,
    generate_dark_semantic_tokens,
    generate_light_semantic_tokens,
    generate_theme_palette,
)
from tonekit.color.ramp import generate_color_ramp
from tonekit.schema import SCALE_KEYS, ThemePalette


class TestDarkColorScale:

    def test_relabels_end_for_end(self):
        scale = generate_color_ramp("#6750A4")
        dark = generate_dark_color_scale(scale)
        assert dark[50] == scale[950]
        assert dark[100] == scale[900]
        assert dark[400] == scale[600]
        assert dark[950] == scale[50]

    def test_500_unchanged(self):
        scale = generate_color_ramp("#6750A4")
        assert generate_dark_color_scale(scale)[500] == scale[500]

    def test_self_inverse(self):
        scale = generate_color_ramp("#5C6356")
        assert generate_dark_color_scale(generate_dark_color_scale(scale)) == scale

    def test_same_colors(self):
        scale = generate_color_ramp("#6750A4")
        assert sorted(generate_dark_color_scale(scale).values()) == sorted(scale.values())


class TestSemanticTokens:

    def test_light_fixed_roles(self):
        tokens = generate_light_semantic_tokens(generate_color_ramp("#6750A4"))
        assert tokens.background == "#FFFFFF"
        assert tokens.background_alt == "#FAFAFA"
        assert tokens.border == "#E5E5E5"
        assert tokens.text_primary == "#1A1A1A"
        assert tokens.text_secondary == "#666666"
        assert tokens.text_muted == "#999999"
        assert tokens.on_primary == "#FFFFFF"
        assert (tokens.success, tokens.warning, tokens.error, tokens.info) == (
            "#10B981", "#F59E0B", "#EF4444", "#3B82F6",
        )

    def test_light_scale_roles(self):
        scale = generate_color_ramp("#6750A4")
        tokens = generate_light_semantic_tokens(scale)
        assert tokens.primary == scale[500]
        assert tokens.primary_hover == scale[600]
        assert tokens.primary_active == scale[700]
        assert tokens.surface_alt == scale[50]
        assert tokens.surface_hover == scale[100]
        assert tokens.border_alt == scale[200]

    def test_dark_roles(self):
        dark = generate_dark_color_scale(generate_color_ramp("#6750A4"))
        tokens = generate_dark_semantic_tokens(dark)
        assert tokens.background == "#0A0A0A"
        assert tokens.surface == "#1A1A1A"
        assert tokens.border_alt == "#444444"
        assert tokens.text_primary == "#FFFFFF"
        assert tokens.on_primary == "#1A1A1A"
        assert tokens.primary == dark[400]
        assert tokens.primary_hover == dark[300]
        assert tokens.primary_active == dark[200]
        assert (tokens.success, tokens.warning, tokens.error, tokens.info) == (
            "#34D399", "#FBBF24", "#F87171", "#60A5FA",
        )

    def test_status_colors_independent_of_seed(self):
        a = generate_theme_palette("#6750A4")
        b = generate_theme_palette("#10B981")
        assert a.light.error == b.light.error
        assert a.dark.info == b.dark.info


class TestThemePalette:

    def test_structure(self):
        palette = generate_theme_palette("#6750A4")
        assert isinstance(palette, ThemePalette)
        assert palette.color_scale == generate_color_ramp("#6750A4")
        assert palette.dark_color_scale == generate_dark_color_scale(palette.color_scale)
        assert list(palette.color_scale) == list(SCALE_KEYS)

    def test_dark_primary_is_light_step_600(self):
        palette = generate_theme_palette("#6750A4")
        assert palette.dark.primary == palette.color_scale[600]

    def test_deterministic(self):
        assert generate_theme_palette("#5C6356") == generate_theme_palette("#5c6356")

    def test_dict_roundtrip(self):
        palette = generate_theme_palette("#6750A4")
        assert ThemePalette.from_dict(palette.to_dict()) == palette
