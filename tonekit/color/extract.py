# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Image color extraction.

Decodes an image, converts it to sRGB, shrinks it to a bounded sample size,
and clusters the opaque pixels into dominant colors.
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, Optional, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageCms

from tonekit.color.clustering import SeedLike, kmeans_clustering
from tonekit.errors import ImageDecodeFailure
from tonekit.schema import ExtractedColor

logger = logging.getLogger(__name__)

ImageSource = Union[str, Path, bytes, bytearray, BinaryIO, Image.Image, NDArray[np.uint8]]


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    """
    Configuration for extract_colors_from_image.

    Attributes:
        sample_size: Longest side (px) the image is shrunk to before
                     sampling. Images are never upscaled.
        color_count: Number of clusters to extract
        max_iterations: k-means iteration cap
        min_alpha: Pixels with alpha below this are ignored
    """
    sample_size: int = 200
    color_count: int = 6
    max_iterations: int = 20
    min_alpha: int = 128

    def __post_init__(self) -> None:
        if self.sample_size < 1:
            raise ValueError(f"sample_size must be >= 1, got {self.sample_size}")
        if self.color_count < 1:
            raise ValueError(f"color_count must be >= 1, got {self.color_count}")
        if self.max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if not 0 <= self.min_alpha <= 255:
            raise ValueError(f"min_alpha must be 0-255, got {self.min_alpha}")


def extract_colors_from_image(
    image: ImageSource,
    *,
    sample_size: Optional[int] = None,
    color_count: Optional[int] = None,
    max_iterations: Optional[int] = None,
    seed: SeedLike = None,
    config: Optional[ExtractionConfig] = None,
) -> tuple[ExtractedColor, ...]:
    """
    Extract the dominant colors of an image.

    Args:
        image: File path, encoded bytes, binary file object, PIL image, or
               (H, W, 3|4) uint8 array
        sample_size: Overrides config.sample_size
        color_count: Overrides config.color_count
        max_iterations: Overrides config.max_iterations
        seed: Seed for k-means++ initialization
        config: Base configuration (defaults to ExtractionConfig())

    Returns:
        ExtractedColor tuple sorted by percentage (descending).
        A fully transparent image returns ().

    Raises:
        ImageDecodeFailure: If the source cannot be opened or decoded
        TypeError: If image is not a supported source kind

    Example:
        >>> from tonekit.color.extract import extract_colors_from_image
        >>> colors = extract_colors_from_image("logo.png", color_count=4, seed=0)
        >>> colors[0].hex
        '#FFFFFF'
    """
    config = config or ExtractionConfig()
    overrides = {
        name: value
        for name, value in (
            ("sample_size", sample_size),
            ("color_count", color_count),
            ("max_iterations", max_iterations),
        )
        if value is not None
    }
    if overrides:
        config = replace(config, **overrides)

    rgba = _load_image(image)
    height, width = rgba.shape[:2]

    new_height, new_width = _fit_sample_size(height, width, config.sample_size)
    if (new_height, new_width) != (height, width):
        rgba = _downsample(rgba, new_height, new_width)

    pixels = sample_pixels(rgba, min_alpha=config.min_alpha)
    logger.debug(
        f"Sampling {width}x{height} image at {new_width}x{new_height}: "
        f"{len(pixels)} opaque pixels"
    )

    return kmeans_clustering(
        pixels,
        k=config.color_count,
        max_iterations=config.max_iterations,
        seed=seed,
    )


def sample_pixels(
    rgba: NDArray[np.uint8],
    max_pixels: Optional[int] = None,
    *,
    min_alpha: int = 128,
) -> NDArray[np.uint8]:
    """
    Flatten an image buffer into opaque RGB pixels.

    When max_pixels is smaller than the pixel count, pixels are taken at a
    fixed stride (ceil(total / max_pixels)) and the result is capped at
    max_pixels.

    Args:
        rgba: (H, W, 4) / (N, 4) RGBA or (H, W, 3) / (N, 3) RGB uint8 array
        max_pixels: Optional cap on returned pixels
        min_alpha: Pixels with alpha below this are skipped

    Returns:
        (M, 3) uint8 array
    """
    rgba = np.asarray(rgba)
    channels = rgba.shape[-1] if rgba.ndim >= 2 else 0
    if channels not in (3, 4):
        raise ValueError(f"Expected RGB or RGBA pixels, got shape {rgba.shape}")

    flat = rgba.reshape(-1, channels)
    total = len(flat)
    if max_pixels is not None and 0 < max_pixels < total:
        flat = flat[::math.ceil(total / max_pixels)]

    if channels == 4:
        flat = flat[flat[:, 3] >= min_alpha]

    if max_pixels is not None:
        flat = flat[:max_pixels]

    return np.ascontiguousarray(flat[:, :3], dtype=np.uint8)


# =============================================================================
# Image loading
# =============================================================================


def _load_image(image: ImageSource) -> NDArray[np.uint8]:
    """
    Decode an image source to an (H, W, 4) RGBA uint8 array.

    Applies ICC profile conversion to sRGB if the image has an embedded
    color profile, so colors match what color pickers show.
    """
    if isinstance(image, np.ndarray):
        return _validate_array(image)

    if isinstance(image, Image.Image):
        return _to_srgba(image)

    if isinstance(image, (str, Path)):
        source = image
    elif isinstance(image, (bytes, bytearray)):
        source = io.BytesIO(bytes(image))
    elif hasattr(image, "read"):
        source = image
    else:
        raise TypeError(
            f"Expected file path, bytes, file object, PIL image or numpy array, "
            f"got {type(image)}"
        )

    try:
        img = Image.open(source)
        img.load()
    except (OSError, SyntaxError, EOFError, ValueError, Image.DecompressionBombError) as e:
        raise ImageDecodeFailure(f"Failed to load image: {e}") from e

    return _to_srgba(img)


def _to_srgba(img: Image.Image) -> NDArray[np.uint8]:
    """Convert a PIL image to sRGB RGBA pixels."""
    alpha = None
    if img.mode in ("RGBA", "LA", "PA") or (img.mode == "P" and "transparency" in img.info):
        alpha = img.convert("RGBA").getchannel("A")

    icc_profile = img.info.get("icc_profile")
    rgb = img.convert("RGB")

    if icc_profile:
        try:
            embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
            srgb_profile = ImageCms.createProfile("sRGB")
            rgb = ImageCms.profileToProfile(rgb, embedded_profile, srgb_profile)
        except (OSError, ImageCms.PyCMSError) as e:
            # Unreadable profile: use the raw RGB values
            logger.debug(f"ICC conversion failed, using untagged RGB: {e}")

    rgba = rgb.convert("RGBA")
    if alpha is not None:
        rgba.putalpha(alpha)
    return np.array(rgba, dtype=np.uint8)


def _validate_array(pixels: NDArray[np.uint8]) -> NDArray[np.uint8]:
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError(f"Expected (H, W, 3) or (H, W, 4) array, got shape {pixels.shape}")
    if pixels.dtype != np.uint8:
        raise ValueError(f"Expected uint8 array, got {pixels.dtype}")
    if pixels.shape[2] == 3:
        opaque = np.full(pixels.shape[:2] + (1,), 255, dtype=np.uint8)
        return np.concatenate([pixels, opaque], axis=2)
    return pixels


def _fit_sample_size(height: int, width: int, sample_size: int) -> tuple[int, int]:
    """Scale so the longest side is at most sample_size. Never upscales."""
    scale = min(sample_size / width, sample_size / height, 1.0)
    return max(1, int(height * scale)), max(1, int(width * scale))


def _downsample(
    pixels: NDArray[np.uint8],
    new_height: int,
    new_width: int,
) -> NDArray[np.uint8]:
    """Downsample RGBA pixels using PIL (Lanczos)."""
    img = Image.fromarray(pixels)
    img = img.resize((new_width, new_height), Image.Resampling.LANCZOS)
    return np.array(img, dtype=np.uint8)
