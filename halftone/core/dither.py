"""Inversion and digital halftoning.

All transforms are filters over `GrayImage` and return new images.
Halftoned outputs contain only 0.0 (white) and 1.0 (black).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from halftone.core.filters import filter_image
from halftone.core.image import GrayImage


def invert(image: GrayImage) -> GrayImage:
    """Swap light and dark: each pixel p becomes 1.0 - p."""
    return filter_image(lambda p: 1.0 - p, image)


def threshold(t: float, image: GrayImage) -> GrayImage:
    """Halftone by thresholding each pixel at the fraction `t`.

    A pixel is black only when strictly greater than `t`; a pixel equal
    to `t` is white.
    """
    return filter_image(lambda p: 1.0 if p > t else 0.0, image)


def dither(image: GrayImage, rng: np.random.Generator | None = None) -> GrayImage:
    """Halftone by making each pixel black with probability equal to its gray level.

    Args:
        image: source image.
        rng: random generator to draw from. A fresh unseeded generator is
             created when omitted, so calls never share random state.

    Returns:
        Binary image. Pixels of 0.0 are always white and pixels of 1.0
        always black, since draws lie in [0, 1).
    """
    if rng is None:
        rng = np.random.default_rng()
    return filter_image(lambda p: 1.0 if rng.random() < p else 0.0, image)


@dataclass
class ErrorAccumulator:
    """Running quantization error for one-dimensional error diffusion."""

    error: float = 0.0

    def quantize(self, p: float) -> float:
        if p + self.error > 0.5:
            self.error -= 1.0 - p
            return 1.0
        self.error -= 0.0 - p
        return 0.0


def error_diffuse(image: GrayImage) -> GrayImage:
    """Halftone by one-dimensional error diffusion.

    The error left by each black/white decision is carried to the next
    pixel in scan order. A single accumulator spans the whole image (it is
    not reset at row boundaries) and starts at zero on every call.
    See https://en.wikipedia.org/wiki/Error_diffusion#One-dimensional_error_diffusion
    """
    return filter_image(ErrorAccumulator().quantize, image)
