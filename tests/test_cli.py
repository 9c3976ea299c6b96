# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for the tonekit command-line interface."""

import json

import numpy as np
import pytest
from PIL import Image

from tonekit.cli import main
from tonekit.color.ramp import generate_color_ramp


class TestRamp:

    def test_standard(self, capsys):
        assert main(["ramp", "#6750A4"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == generate_color_ramp("#6750A4").to_dict()

    def test_variant(self, capsys):
        assert main(["ramp", "#6750A4", "--variant", "neutral"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 11

    def test_invalid_hex(self, capsys):
        assert main(["ramp", "#nothex"]) == 1
        assert capsys.readouterr().err.startswith("error:")


class TestTheme:

    def test_css(self, capsys):
        assert main(["theme", "#6750A4"]) == 0
        assert ":root {" in capsys.readouterr().out

    def test_json(self, capsys):
        assert main(["theme", "#6750A4", "--format", "json", "--name", "Acme"]) == 0
        assert json.loads(capsys.readouterr().out)["name"] == "Acme"

    def test_unknown_format_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["theme", "#6750A4", "--format", "scss"])
        assert exc_info.value.code == 2


class TestContrast:

    def test_report(self, capsys):
        assert main(["contrast", "#000", "#fff"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["contrast"]["level"] == "AAA"
        assert data["contrast"]["ratio"] == pytest.approx(21.0)


class TestSimulate:

    def test_single_type(self, capsys):
        assert main(["simulate", "#FF0000", "--type", "protanopia"]) == 0
        assert capsys.readouterr().out.strip() == "#918E00"

    def test_all_types(self, capsys):
        assert main(["simulate", "#FF0000"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data) == 9
        assert data["normal"] == "#FF0000"


class TestExtract:

    def test_image(self, tmp_path, capsys):
        path = tmp_path / "two_tone.png"
        img = np.zeros((20, 20, 3), dtype=np.uint8)
        img[:, :10] = [0, 200, 0]
        img[:, 10:] = [0, 0, 200]
        Image.fromarray(img).save(path)

        assert main(["extract", str(path), "--colors", "2", "--seed", "0"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert {c["hex"] for c in data["colors"]} == {"#00C800", "#0000C8"}
        assert data["primary"] in {"#00C800", "#0000C8"}

    def test_unreadable_image(self, tmp_path, capsys):
        path = tmp_path / "broken.png"
        path.write_bytes(b"not a png")
        assert main(["extract", str(path)]) == 1
        assert "error:" in capsys.readouterr().err


class TestAnalyze:

    def test_report(self, capsys):
        assert main(["analyze", "#FF0000"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["hct"] == {"hue": 27, "chroma": 113, "tone": 53}
        assert data["recommended_text_color"] == "#000000"


class TestHarmony:

    def test_default_complementary(self, capsys):
        assert main(["harmony", "#6750A4"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["harmony"] == "complementary"
        assert [c["name"] for c in data["colors"]] == ["primary", "complementary"]

    def test_triadic(self, capsys):
        assert main(["harmony", "#6750A4", "--type", "triadic"]) == 0
        assert len(json.loads(capsys.readouterr().out)["colors"]) == 3

    def test_invalid_primary(self, capsys):
        assert main(["harmony", "blue"]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_unknown_type_is_usage_error(self):
        with pytest.raises(SystemExit):
            main(["harmony", "#6750A4", "--type", "tetradic"])
