"""Per-pixel filter engine."""

from __future__ import annotations

from typing import Callable

from halftone.core.image import GrayImage, Pixel

PixelFn = Callable[[Pixel], Pixel]


def filter_image(f: PixelFn, image: GrayImage) -> GrayImage:
    """Apply `f` to every pixel of `image` and return a new image.

    `f` is called exactly once per pixel, row by row from top to bottom and
    left to right within a row. Stateful filters (see
    `halftone.core.dither.ErrorAccumulator`) rely on this order.

    Exceptions raised by `f` propagate; no partial image is returned.
    """
    rows = []
    for row in image.content:
        rows.append(tuple(f(p) for p in row))
    return GrayImage(width=image.width, height=image.height, content=tuple(rows))
