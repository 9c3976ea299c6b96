# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""Tests for k-means clustering and primary color selection."""

import numpy as np
import pytest

from tonekit.color.clustering import (
    as_pixel_array,
    filter_extracted_colors,
    kmeans_clustering,
    select_primary_color,
)
from tonekit.schema import ExtractedColor, HctColor, RgbColor


def _pixels(*groups):
    """Stack (rgb, count) groups into an (N, 3) uint8 array."""
    return np.concatenate([
        np.tile(np.array(rgb, dtype=np.uint8), (count, 1)) for rgb, count in groups
    ])


def _extracted(hex_color, c, t, percentage):
    rgb = RgbColor(r=int(hex_color[1:3], 16), g=int(hex_color[3:5], 16), b=int(hex_color[5:7], 16))
    return ExtractedColor(hex=hex_color, rgb=rgb, hct=HctColor(h=0.0, c=c, t=t), percentage=percentage)


class TestKMeans:

    def test_empty_input(self):
        assert kmeans_clustering([]) == ()
        assert kmeans_clustering(np.empty((0, 3), dtype=np.uint8)) == ()

    def test_uniform_input_is_exact(self):
        colors = kmeans_clustering(_pixels(((92, 99, 86), 50)), k=6, seed=0)
        assert len(colors) == 1
        assert colors[0].hex == "#5C6356"
        assert colors[0].rgb == RgbColor(r=92, g=99, b=86)
        assert colors[0].percentage == pytest.approx(100.0)

    def test_two_colors_split(self):
        pixels = _pixels(((0, 200, 0), 30), ((0, 0, 200), 70))
        colors = kmeans_clustering(pixels, k=2, seed=1)
        assert [c.hex for c in colors] == ["#0000C8", "#00C800"]
        assert colors[0].percentage == pytest.approx(70.0)
        assert colors[1].percentage == pytest.approx(30.0)

    def test_sorted_descending(self):
        pixels = _pixels(((255, 0, 0), 10), ((0, 255, 0), 50), ((0, 0, 255), 40))
        colors = kmeans_clustering(pixels, k=3, seed=3)
        percentages = [c.percentage for c in colors]
        assert percentages == sorted(percentages, reverse=True)

    def test_percentages_sum_to_100(self):
        rng = np.random.default_rng(7)
        pixels = rng.integers(0, 256, size=(300, 3), dtype=np.uint8)
        colors = kmeans_clustering(pixels, k=5, seed=7)
        assert 1 <= len(colors) <= 5
        assert sum(c.percentage for c in colors) == pytest.approx(100.0)

    def test_k_reduced_to_pixel_count(self):
        colors = kmeans_clustering([(255, 0, 0), (0, 0, 255)], k=6, seed=0)
        assert len(colors) == 2
        assert all(c.percentage == pytest.approx(50.0) for c in colors)

    def test_accepts_rgbcolor_sequence(self):
        colors = kmeans_clustering([RgbColor(r=10, g=20, b=30)] * 4, k=2, seed=0)
        assert [c.hex for c in colors] == ["#0A141E"]

    def test_centroid_is_rounded_mean(self):
        # mean of 10 and 11 is 10.5 → 11 (half-up)
        colors = kmeans_clustering([(10, 10, 10), (11, 11, 11)], k=1, seed=0)
        assert colors[0].rgb == RgbColor(r=11, g=11, b=11)

    def test_seed_is_reproducible(self):
        rng = np.random.default_rng(11)
        pixels = rng.integers(0, 256, size=(200, 3), dtype=np.uint8)
        assert kmeans_clustering(pixels, k=4, seed=5) == kmeans_clustering(pixels, k=4, seed=5)

    def test_accepts_generator(self):
        pixels = _pixels(((0, 0, 0), 5), ((255, 255, 255), 5))
        colors = kmeans_clustering(pixels, k=2, seed=np.random.default_rng(0))
        assert {c.hex for c in colors} == {"#000000", "#FFFFFF"}

    def test_hct_matches_centroid(self):
        colors = kmeans_clustering(_pixels(((255, 0, 0), 4)), k=1, seed=0)
        assert colors[0].hct.h == pytest.approx(27.408, abs=0.05)

    def test_invalid_k(self):
        with pytest.raises(ValueError):
            kmeans_clustering([(0, 0, 0)], k=0)

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            as_pixel_array(np.zeros((4, 4), dtype=np.uint8))


class TestSelectPrimary:

    def test_empty(self):
        assert select_primary_color([]) is None

    def test_vivid_minority_beats_muted_majority(self):
        background = _extracted("#F0F0F0", c=2.0, t=95.0, percentage=85.0)
        logo = _extracted("#6750A4", c=48.0, t=40.0, percentage=15.0)
        # 0.7*2 + 0.3*85 = 26.9 vs 0.7*48 + 0.3*15 = 38.1
        assert select_primary_color([background, logo]) is logo

    def test_first_wins_ties(self):
        a = _extracted("#111111", c=10.0, t=50.0, percentage=50.0)
        b = _extracted("#222222", c=10.0, t=50.0, percentage=50.0)
        assert select_primary_color([a, b]) is a


class TestFilter:

    def test_defaults(self):
        dark = _extracted("#050505", c=20.0, t=5.0, percentage=10.0)
        light = _extracted("#FAFAFA", c=20.0, t=95.0, percentage=10.0)
        gray = _extracted("#777777", c=3.0, t=50.0, percentage=10.0)
        good = _extracted("#6750A4", c=48.0, t=40.0, percentage=10.0)
        assert filter_extracted_colors([dark, light, gray, good]) == (good,)

    def test_bounds_inclusive(self):
        edge = _extracted("#333333", c=10.0, t=10.0, percentage=10.0)
        assert filter_extracted_colors([edge]) == (edge,)

    def test_custom_bounds(self):
        gray = _extracted("#777777", c=3.0, t=50.0, percentage=10.0)
        assert filter_extracted_colors([gray], min_chroma=0.0) == (gray,)
