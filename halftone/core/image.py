"""Grayscale image value type.

Pixels are floats in [0.0, 1.0] where 0.0 is white and 1.0 is black.
Content is stored row-major: a tuple of rows from top to bottom, each a
tuple of pixels from left to right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import numpy as np

Pixel = float
Rows = tuple[tuple[Pixel, ...], ...]


@dataclass(frozen=True)
class GrayImage:
    """An immutable grayscale image.

    Content is copied into tuples of floats and dimensions are checked
    against it on construction. Pixel range is not checked here; renderers
    validate it.
    """

    width: int
    height: int
    content: Rows

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(p) for p in row) for row in self.content)
        object.__setattr__(self, "content", rows)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image size must be positive, got {self.width}x{self.height}"
            )
        if len(self.content) != self.height:
            raise ValueError(
                f"Expected {self.height} rows, got {len(self.content)}"
            )
        for idx, row in enumerate(self.content):
            if len(row) != self.width:
                raise ValueError(
                    f"Row {idx} has {len(row)} pixels, expected {self.width}"
                )

    @classmethod
    def from_array(cls, arr: np.ndarray) -> GrayImage:
        """Build an image from a 2D float array of shape (height, width)."""
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {arr.shape}")
        h, w = arr.shape
        return create(w, h, arr.astype(np.float64).tolist())

    def to_array(self) -> np.ndarray:
        """Return the content as a (height, width) float64 array."""
        return np.array(self.content, dtype=np.float64).reshape(
            self.height, self.width
        )

    def pixels(self) -> Iterator[Pixel]:
        """Yield every pixel, row by row, left to right."""
        for row in self.content:
            yield from row

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height


def create(
    width: int, height: int, content: Sequence[Iterable[float]]
) -> GrayImage:
    """Create an image of `width` columns by `height` rows.

    Raises:
        ValueError: if the size is not positive or the content does not
            have exactly `height` rows of `width` pixels.
    """
    return GrayImage(width=width, height=height, content=tuple(content))
