"""Synthetic sample images for trying out the halftoning methods."""

from __future__ import annotations

from enum import Enum

import numpy as np

from halftone.core.image import GrayImage


class SampleName(str, Enum):
    GRADIENT = "gradient"
    RADIAL = "radial"


def gradient(width: int, height: int) -> GrayImage:
    """Left-to-right ramp from white (0.0) to black (1.0)."""
    if width > 1:
        ramp = np.linspace(0.0, 1.0, width)
    else:
        ramp = np.zeros(width)
    return GrayImage.from_array(np.tile(ramp, (height, 1)))


def radial(width: int, height: int) -> GrayImage:
    """Black in the centre, fading to white at the farthest corner."""
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    cy = (height - 1) / 2.0
    cx = (width - 1) / 2.0
    dist = np.hypot(ys - cy, xs - cx)
    radius = np.hypot(cy, cx)
    if radius == 0:
        return GrayImage.from_array(np.ones((height, width)))
    return GrayImage.from_array(np.clip(1.0 - dist / radius, 0.0, 1.0))


def make_sample(name: SampleName | str, width: int, height: int) -> GrayImage:
    """Build the named sample image."""
    try:
        sample = SampleName(name)
    except ValueError:
        raise ValueError(f"Unknown sample: {name}") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    if sample == SampleName.GRADIENT:
        return gradient(width, height)
    return radial(width, height)
