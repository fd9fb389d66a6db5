"""Terminal size detection utilities."""

from __future__ import annotations

import shutil


def get_terminal_size(
    fallback_width: int = 80,
    fallback_height: int = 24,
) -> tuple[int, int]:
    """Get current terminal size in columns and rows.

    Returns (width, height). Falls back to provided defaults
    if terminal size cannot be determined.
    """
    try:
        size = shutil.get_terminal_size(fallback=(fallback_width, fallback_height))
        return size.columns, size.lines
    except (ValueError, OSError):
        return fallback_width, fallback_height


def canvas_size(
    max_width: int | None = None,
    max_height: int | None = None,
    chrome_lines: int = 4,
) -> tuple[int, int]:
    """Pixel dimensions of an image that fills the terminal.

    Each character cell shows two pixel rows (half blocks), so the pixel
    height is twice the number of usable lines.

    Args:
        max_width: pixel columns (defaults to terminal width). Explicit
                   values are returned unchanged.
        max_height: pixel rows (defaults to twice the terminal height,
                    minus `chrome_lines` for header/footer).
        chrome_lines: terminal lines reserved for UI.

    Returns:
        (width, height) tuple. Terminal-derived sizes are at least 1.
    """
    if max_width is None or max_height is None:
        tw, th = get_terminal_size()
        if max_width is None:
            max_width = max(tw, 1)
        if max_height is None:
            max_height = max(th - chrome_lines, 1) * 2
    return max_width, max_height
