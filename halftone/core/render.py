"""Map gray levels to displayable colors.

Every pixel is range-checked on the way out; values outside [0.0, 1.0]
raise instead of being clamped.
"""

from __future__ import annotations

from PIL import Image
from rich.text import Text

from halftone.core.image import GrayImage, Pixel

MAX_LEVEL = 255  # maximum channel value

# Upper half block: foreground paints the top pixel, background the bottom one
HALF_BLOCK = "▀"


def rgb_of_gray(value: Pixel) -> tuple[int, int, int]:
    """Return the RGB color for a gray value, 1.0 = black and 0.0 = white.

    Raises:
        ValueError: if the value is outside [0.0, 1.0].
    """
    if not 0.0 <= value <= 1.0:
        raise ValueError("rgb_of_gray: value outside of range")
    level = int(MAX_LEVEL * (1.0 - value))
    return level, level, level


def to_pil(image: GrayImage) -> Image.Image:
    """Render to a Pillow "L" image of the same size."""
    levels = [rgb_of_gray(p)[0] for p in image.pixels()]
    out = Image.new("L", image.size)
    out.putdata(levels)
    return out


def _style(top: tuple[int, int, int], bottom: tuple[int, int, int] | None) -> str:
    fg = f"rgb({top[0]},{top[1]},{top[2]})"
    if bottom is None:
        return fg
    return f"{fg} on rgb({bottom[0]},{bottom[1]},{bottom[2]})"


def render_text(image: GrayImage) -> Text:
    """Render to Rich text, two pixel rows per line of half-block characters."""
    text = Text(no_wrap=True, overflow="crop")
    content = image.content
    for y in range(0, image.height, 2):
        if y > 0:
            text.append("\n")
        top_row = content[y]
        bottom_row = content[y + 1] if y + 1 < image.height else None
        for x, top in enumerate(top_row):
            bottom = rgb_of_gray(bottom_row[x]) if bottom_row is not None else None
            text.append(HALF_BLOCK, style=_style(rgb_of_gray(top), bottom))
    return text
