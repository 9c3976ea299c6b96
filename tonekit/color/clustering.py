# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Dominant color clustering.

K-means over 8-bit RGB pixels with k-means++ seeding. Distances are plain
Euclidean RGB; centroids are the half-up rounded mean of their members so
that every centroid is itself a valid 8-bit color.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from tonekit.color.colorspace import RgbLike, as_rgb
from tonekit.color.hct import srgb_uint8_to_hct
from tonekit.schema import ExtractedColor, HctColor, RgbColor

logger = logging.getLogger(__name__)

PixelsLike = Union[NDArray[np.uint8], Sequence[RgbLike]]
SeedLike = Union[int, np.random.Generator, None]


def as_pixel_array(pixels: PixelsLike) -> NDArray[np.float64]:
    """
    Coerce pixel input to an (N, 3) float array of 8-bit channel values.

    Accepts an (N, 3) array or a sequence of RgbColor / (r, g, b) tuples.
    """
    if isinstance(pixels, np.ndarray):
        data = pixels.astype(np.float64, copy=False)
        if data.size == 0:
            return np.empty((0, 3), dtype=np.float64)
        if data.ndim != 2 or data.shape[1] != 3:
            raise ValueError(f"Expected (N, 3) pixel array, got shape {pixels.shape}")
        return data

    rows = [as_rgb(p).to_tuple() for p in pixels]
    if not rows:
        return np.empty((0, 3), dtype=np.float64)
    return np.array(rows, dtype=np.float64)


def _squared_distances(data: NDArray[np.float64], centroids: NDArray[np.float64]) -> NDArray[np.float64]:
    """(N, k) squared Euclidean distances between pixels and centroids."""
    return np.sum((data[:, np.newaxis, :] - centroids[np.newaxis, :, :]) ** 2, axis=2)


def _init_centroids(
    data: NDArray[np.float64],
    k: int,
    rng: np.random.Generator,
) -> NDArray[np.float64]:
    """k-means++ seeding: each new centroid is drawn with probability ∝ D(x)²."""
    n = len(data)
    centroids = np.empty((k, 3), dtype=np.float64)
    centroids[0] = data[rng.integers(n)]

    for i in range(1, k):
        dists = np.min(_squared_distances(data, centroids[:i]), axis=1)
        total = dists.sum()
        if total == 0:
            # Every pixel coincides with a chosen centroid
            centroids[i] = data[rng.integers(n)]
        else:
            centroids[i] = data[rng.choice(n, p=dists / total)]

    return centroids


def _update_centroids(
    data: NDArray[np.float64],
    labels: NDArray[np.int64],
    centroids: NDArray[np.float64],
) -> NDArray[np.float64]:
    """Half-up rounded mean of each cluster; empty clusters keep their centroid."""
    updated = centroids.copy()
    for j in range(len(centroids)):
        mask = labels == j
        if np.any(mask):
            updated[j] = np.floor(data[mask].mean(axis=0) + 0.5)
    return updated


def kmeans_clustering(
    pixels: PixelsLike,
    k: int = 6,
    max_iterations: int = 20,
    seed: SeedLike = None,
) -> tuple[ExtractedColor, ...]:
    """
    Cluster pixels into at most k dominant colors.

    Args:
        pixels: (N, 3) uint8-compatible array, or a sequence of
                RgbColor / (r, g, b) tuples
        k: Number of clusters. Reduced to N when fewer pixels are given.
        max_iterations: Iteration cap. Stops early once no pixel changes
                        cluster.
        seed: Int seed or numpy Generator for reproducible seeding.
              None draws fresh entropy, so repeated calls may split
              clusters differently.

    Returns:
        Tuple of ExtractedColor sorted by percentage (descending).
        Clusters that end up with no pixels are dropped.
        Empty input returns ().

    Raises:
        ValueError: If k < 1 or pixels has the wrong shape
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    data = as_pixel_array(pixels)
    n = len(data)
    if n == 0:
        return ()
    k = min(k, n)

    rng = np.random.default_rng(seed)
    centroids = _init_centroids(data, k, rng)

    # argmin takes the first minimum, so ties go to the lowest-index centroid
    labels = np.argmin(_squared_distances(data, centroids), axis=1)

    iterations = 0
    for iterations in range(1, max_iterations + 1):
        centroids = _update_centroids(data, labels, centroids)
        new_labels = np.argmin(_squared_distances(data, centroids), axis=1)
        if np.array_equal(new_labels, labels):
            break
        labels = new_labels

    logger.debug(f"k-means: {n} pixels, k={k}, {iterations} iterations")

    counts = np.bincount(labels, minlength=k)
    rgb = centroids.astype(np.uint8)
    hct = srgb_uint8_to_hct(rgb)

    colors = []
    for j in range(k):
        if counts[j] == 0:
            continue
        color = RgbColor(r=int(rgb[j, 0]), g=int(rgb[j, 1]), b=int(rgb[j, 2]))
        h, c, t = hct[j]
        colors.append(ExtractedColor(
            hex=color.hex,
            rgb=color,
            hct=HctColor(h=float(h), c=float(c), t=float(t)),
            percentage=float(counts[j]) / n * 100.0,
        ))

    # Stable sort: equal shares keep centroid order
    colors.sort(key=lambda color: color.percentage, reverse=True)
    return tuple(colors)


def select_primary_color(colors: Sequence[ExtractedColor]) -> Optional[ExtractedColor]:
    """
    Pick the best brand-primary candidate from extracted colors.

    Score is 0.7 * chroma + 0.3 * percentage, so a vivid minority color
    (a logo mark) beats a large but muted background. The first color wins
    ties.

    Returns:
        The highest-scoring color, or None for empty input
    """
    if not colors:
        return None
    return max(colors, key=lambda color: color.hct.c * 0.7 + color.percentage * 0.3)


def filter_extracted_colors(
    colors: Sequence[ExtractedColor],
    *,
    min_tone: float = 10.0,
    max_tone: float = 90.0,
    min_chroma: float = 10.0,
) -> tuple[ExtractedColor, ...]:
    """Drop colors too close to black/white or too gray to work as a primary."""
    return tuple(
        color for color in colors
        if min_tone <= color.hct.t <= max_tone and color.hct.c >= min_chroma
    )
