"""Image processing pipeline.

Invert (optional) → halftone (threshold / dither / error diffusion).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import numpy as np

from halftone.core.dither import dither, error_diffuse, invert, threshold
from halftone.core.image import GrayImage

logger = logging.getLogger(__name__)


class Method(str, Enum):
    NONE = "none"
    THRESHOLD = "threshold"
    DITHER = "dither"
    ERROR_DIFFUSE = "error-diffuse"


@dataclass(frozen=True)
class Settings:
    """Processing settings that affect output."""

    method: Method = Method.NONE
    threshold: float = 0.5  # fraction of the value space
    invert: bool = False
    seed: int | None = None  # only used by dither


def process(image: GrayImage, settings: Settings) -> GrayImage:
    """Run an image through the pipeline described by `settings`."""
    logger.debug(
        "processing %dx%d image: method=%s invert=%s",
        image.width,
        image.height,
        settings.method.value,
        settings.invert,
    )
    if settings.invert:
        image = invert(image)

    if settings.method == Method.THRESHOLD:
        return threshold(settings.threshold, image)
    if settings.method == Method.DITHER:
        return dither(image, rng=np.random.default_rng(settings.seed))
    if settings.method == Method.ERROR_DIFFUSE:
        return error_diffuse(image)
    return image


def ink(image: GrayImage) -> float:
    """Mean intensity, i.e. the fraction of the image covered in ink."""
    return float(image.to_array().mean())
