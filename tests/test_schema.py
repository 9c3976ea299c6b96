# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for value types: validation, mapping behavior and dict round-trips."""

import dataclasses

import numpy as np
import pytest

from tonekit.schema import (
    SCALE_KEYS,
    ColorBlindnessReport,
    ColorBlindnessType,
    ColorPair,
    ColorScale,
    ContrastResult,
    ExtractedColor,
    HarmonyColor,
    HarmonyType,
    HctColor,
    RgbColor,
    SemanticTokens,
    WCAGLevel,
)


def _scale():
    return ColorScale(shades=tuple(f"#0000{i:02X}" for i in range(len(SCALE_KEYS))))


class TestHctColor:

    def test_valid(self):
        hct = HctColor(h=0.0, c=0.0, t=100.0)
        assert hct.to_dict() == {"h": 0.0, "c": 0.0, "t": 100.0}

    @pytest.mark.parametrize("h, c, t", [(-1.0, 10.0, 50.0), (360.0, 10.0, 50.0), (10.0, -0.1, 50.0), (10.0, 10.0, 100.5)])
    def test_invalid(self, h, c, t):
        with pytest.raises(ValueError):
            HctColor(h=h, c=c, t=t)

    def test_frozen(self):
        hct = HctColor(h=10.0, c=10.0, t=10.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            hct.h = 20.0

    def test_roundtrip(self):
        hct = HctColor(h=282.5, c=47.6, t=40.4)
        assert HctColor.from_dict(hct.to_dict()) == hct


class TestRgbAndExtracted:

    def test_rgb_hex(self):
        assert RgbColor(r=255, g=0, b=16).hex == "#FF0010"

    def test_rgb_invalid(self):
        with pytest.raises(ValueError):
            RgbColor(r=-1, g=0, b=0)

    def test_extracted_requires_canonical_hex(self):
        with pytest.raises(ValueError):
            ExtractedColor(hex="#ff0000", rgb=RgbColor(r=255, g=0, b=0), hct=HctColor(h=27.4, c=113.4, t=53.2), percentage=10.0)

    def test_extracted_percentage_range(self):
        with pytest.raises(ValueError):
            ExtractedColor(hex="#FF0000", rgb=RgbColor(r=255, g=0, b=0), hct=HctColor(h=27.4, c=113.4, t=53.2), percentage=100.5)

    def test_extracted_roundtrip(self):
        color = ExtractedColor(hex="#FF0000", rgb=RgbColor(r=255, g=0, b=0), hct=HctColor(h=27.4, c=113.4, t=53.2), percentage=12.5)
        assert ExtractedColor.from_dict(color.to_dict()) == color


class TestColorScale:

    def test_int_and_string_keys(self):
        scale = _scale()
        assert scale[50] == "#000000"
        assert scale["950"] == "#00000A"

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            _scale()[55]
        with pytest.raises(KeyError):
            _scale()["primary"]

    @pytest.mark.parametrize("key", [500.7, 500.0, "500.0", " 500", True, None])
    def test_non_exact_keys_rejected(self, key):
        with pytest.raises(KeyError):
            _scale()[key]

    def test_numpy_integer_key(self):
        assert _scale()[np.int64(500)] == "#000005"

    def test_contains_rejects_float(self):
        assert 500.7 not in _scale()

    def test_mapping_protocol(self):
        scale = _scale()
        assert list(scale) == list(SCALE_KEYS)
        assert len(scale) == 11
        assert 500 in scale
        assert dict(scale)[500] == "#000005"

    def test_wrong_length(self):
        with pytest.raises(ValueError):
            ColorScale(shades=("#000000",) * 10)

    def test_non_canonical_shade(self):
        with pytest.raises(ValueError):
            ColorScale(shades=("#fff",) * 11)

    def test_dict_roundtrip(self):
        scale = _scale()
        data = scale.to_dict()
        assert list(data) == [str(k) for k in SCALE_KEYS]
        assert ColorScale.from_dict(data) == scale

    def test_from_dict_missing_key(self):
        data = _scale().to_dict()
        del data["500"]
        with pytest.raises(ValueError):
            ColorScale.from_dict(data)

    def test_hashable(self):
        assert hash(_scale()) == hash(_scale())


class TestSemanticTokens:

    def test_nineteen_roles(self):
        assert len(dataclasses.fields(SemanticTokens)) == 19

    def test_rejects_bad_hex(self):
        values = {f.name: "#000000" for f in dataclasses.fields(SemanticTokens)}
        values["info"] = "blue"
        with pytest.raises(ValueError):
            SemanticTokens(**values)

    def test_items_in_declaration_order(self):
        values = {f.name: "#000000" for f in dataclasses.fields(SemanticTokens)}
        tokens = SemanticTokens(**values)
        assert [role for role, _ in tokens.items()][:3] == ["background", "background_alt", "surface"]
        assert SemanticTokens.from_dict(tokens.to_dict()) == tokens


class TestResults:

    def test_contrast_roundtrip(self):
        result = ContrastResult(ratio=4.5, level=WCAGLevel.AA, pass_aa=True, pass_aaa=False, pass_aa_large=True, pass_aaa_large=True)
        assert ContrastResult.from_dict(result.to_dict()) == result

    def test_contrast_ratio_below_one(self):
        with pytest.raises(ValueError):
            ContrastResult(ratio=0.5, level=WCAGLevel.FAIL, pass_aa=False, pass_aaa=False, pass_aa_large=False, pass_aaa_large=False)

    def test_wcag_level_values(self):
        assert [level.value for level in WCAGLevel] == ["AAA", "AA", "AA-Large", "Fail"]

    def test_colorblind_report(self):
        report = ColorBlindnessReport(
            type=ColorBlindnessType.PROTANOPIA,
            name="Protanopia",
            issues=(ColorPair(color1="#FF0000", color2="#00FF00"),),
        )
        assert report.has_issues
        assert report.to_dict() == {
            "type": "protanopia",
            "name": "Protanopia",
            "issues": [{"color1": "#FF0000", "color2": "#00FF00"}],
        }


class TestHarmonyColor:

    def test_to_dict(self):
        color = HarmonyColor(name="complementary", hex="#4C6B1F", hue=102.5)
        assert color.to_dict() == {"name": "complementary", "hex": "#4C6B1F", "hue": 102.5}

    def test_rejects_hue_out_of_range(self):
        with pytest.raises(ValueError):
            HarmonyColor(name="primary", hex="#000000", hue=360.0)

    def test_harmony_values(self):
        assert HarmonyType("split-complementary") is HarmonyType.SPLIT_COMPLEMENTARY
