# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for CSS, Tailwind, design-token and Figma exporters."""

import json

import pytest

from tonekit import __version__
from tonekit.color.darkmode import generate_theme_palette
from tonekit.color.ramp import generate_color_ramp
from tonekit.export import (
    ExportFormat,
    export_theme,
    export_theme_as_css,
    to_css_variables,
    to_design_tokens,
    to_figma_variables,
    to_tailwind_config,
)
from tonekit.export.base import camel_case, kebab_case
from tonekit.schema import SCALE_KEYS, ExtractedColor, HctColor, RgbColor


@pytest.fixture(scope="module")
def palette():
    return generate_theme_palette("#6750A4")


@pytest.fixture
def extracted():
    return (
        ExtractedColor(
            hex="#6750A4",
            rgb=RgbColor(r=103, g=80, b=164),
            hct=HctColor(h=282.5, c=47.6, t=40.4),
            percentage=62.125,
        ),
        ExtractedColor(
            hex="#FFFFFF",
            rgb=RgbColor(r=255, g=255, b=255),
            hct=HctColor(h=209.5, c=2.9, t=100.0),
            percentage=37.875,
        ),
    )


def _tailwind_json(source):
    prefix = "module.exports = "
    start = source.index(prefix) + len(prefix)
    assert source.endswith(";")
    return json.loads(source[start:-1])


class TestNaming:

    def test_kebab(self):
        assert kebab_case("text_primary") == "text-primary"
        assert kebab_case("background") == "background"

    def test_camel(self):
        assert camel_case("surface_alt") == "surfaceAlt"
        assert camel_case("on_primary") == "onPrimary"


class TestThemeCss:

    def test_blocks(self, palette):
        css = export_theme_as_css(palette)
        assert ":root {" in css
        assert "@media (prefers-color-scheme: dark) {" in css
        assert ".dark {" in css

    def test_light_roles_kebab_case(self, palette):
        css = export_theme_as_css(palette)
        assert "  --text-primary: #1A1A1A;" in css
        assert "  --background-alt: #FAFAFA;" in css
        assert f"  --primary: {palette.light.primary};" in css

    def test_dark_content_appears_twice(self, palette):
        css = export_theme_as_css(palette)
        assert css.count("--background: #0A0A0A;") == 2
        assert css.count(f"--color-primary-50: {palette.dark_color_scale[50]};") == 2

    def test_media_and_class_blocks_match(self, palette):
        css = export_theme_as_css(palette)
        media = css.split("@media (prefers-color-scheme: dark) {")[1].split("/* Manual Dark Mode Class */")[0]
        dark_class = css.split(".dark {")[1]
        media_lines = [line.strip() for line in media.splitlines() if line.strip().startswith("--")]
        class_lines = [line.strip() for line in dark_class.splitlines() if line.strip().startswith("--")]
        assert media_lines == class_lines
        assert len(class_lines) == 19 + len(SCALE_KEYS)

    def test_scale_in_root(self, palette):
        root = export_theme_as_css(palette).split("/* Dark Theme */")[0]
        for key in SCALE_KEYS:
            assert f"--color-primary-{key}: {palette.color_scale[key]};" in root


class TestCssVariables:

    def test_primary_and_ramp(self):
        ramp = generate_color_ramp("#6750A4")
        css = to_css_variables("#6750a4", ramp)
        assert css.startswith(":root {")
        assert css.endswith("}")
        assert "  --color-primary: #6750A4;" in css
        assert f"  --color-primary-950: {ramp[950]};" in css
        assert "Extracted" not in css

    def test_extracted(self, extracted):
        css = to_css_variables("#6750A4", generate_color_ramp("#6750A4"), extracted)
        assert "  --color-extracted-1: #6750A4;" in css
        assert "  --color-extracted-2: #FFFFFF;" in css


class TestTailwind:

    def test_header(self, palette):
        source = to_tailwind_config(palette)
        assert source.startswith("// tailwind.config.js\n/** @type {import('tailwindcss').Config} */\n")

    def test_colors(self, palette):
        colors = _tailwind_json(to_tailwind_config(palette))["theme"]["extend"]["colors"]
        assert colors["primary"]["500"] == palette.color_scale[500]
        assert colors["primary"]["DEFAULT"] == "var(--primary)"
        assert colors["primary"]["hover"] == "var(--primary-hover)"
        assert colors["text-primary"] == "var(--text-primary)"
        assert colors["on-primary"] == "var(--on-primary)"
        assert "extracted" not in colors

    def test_extracted(self, palette, extracted):
        colors = _tailwind_json(to_tailwind_config(palette, extracted))["theme"]["extend"]["colors"]
        assert colors["extracted"] == {"1": "#6750A4", "2": "#FFFFFF"}


class TestDesignTokens:

    def test_schema_and_metadata(self, palette):
        doc = json.loads(to_design_tokens(palette))
        assert doc["$schema"] == "https://design-tokens.github.io/community-group/format/token.json"
        assert doc["metadata"] == {"generator": "tonekit", "version": __version__}

    def test_primary_tokens(self, palette):
        primary = json.loads(to_design_tokens(palette))["color"]["primary"]
        assert list(primary) == [str(k) for k in SCALE_KEYS]
        assert primary["500"] == {"$value": palette.color_scale[500], "$type": "color"}

    def test_semantic_tokens_camel_case(self, palette):
        semantic = json.loads(to_design_tokens(palette))["color"]["semantic"]
        assert semantic["light"]["textPrimary"]["$value"] == "#1A1A1A"
        assert semantic["dark"]["backgroundAlt"]["$value"] == "#111111"
        assert len(semantic["light"]) == len(semantic["dark"]) == 19

    def test_extracted(self, palette, extracted):
        doc = json.loads(to_design_tokens(palette, extracted, project_name="Acme"))
        assert doc["name"] == "Acme"
        first = doc["color"]["extracted"]["color-1"]
        assert first["$value"] == "#6750A4"
        assert first["hct"] == {"hue": 283, "chroma": 48, "tone": 40}
        assert first["percentage"] == pytest.approx(62.13)


class TestFigma:

    def test_structure(self, palette):
        doc = json.loads(to_figma_variables(palette, project_name="Acme"))
        assert doc["name"] == "Acme"
        assert doc["modes"] == ["Light", "Dark"]
        assert len(doc["variables"]) == len(SCALE_KEYS) + 19

    def test_scale_modes(self, palette):
        variables = {v["name"]: v["values"] for v in json.loads(to_figma_variables(palette))["variables"]}
        assert variables["primary/50"] == {
            "Light": palette.color_scale[50],
            "Dark": palette.dark_color_scale[50],
        }

    def test_semantic_modes(self, palette):
        variables = {v["name"]: v["values"] for v in json.loads(to_figma_variables(palette))["variables"]}
        assert variables["semantic/background"] == {"Light": "#FFFFFF", "Dark": "#0A0A0A"}
        assert variables["semantic/primary"] == {"Light": palette.light.primary, "Dark": palette.dark.primary}


class TestExportTheme:

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_dispatch_enum(self, palette, fmt):
        assert export_theme(palette, fmt) == export_theme(palette, fmt.value)

    def test_dispatch_targets(self, palette):
        assert export_theme(palette, "css") == export_theme_as_css(palette)
        assert export_theme(palette, "json") == to_design_tokens(palette)
        assert export_theme(palette, "figma") == to_figma_variables(palette)
        assert export_theme(palette, "tailwind") == to_tailwind_config(palette)

    def test_unknown_format(self, palette):
        with pytest.raises(ValueError):
            export_theme(palette, "scss")
