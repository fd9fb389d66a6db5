"""Image preview widget for the TUI."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static


class ImagePreview(Widget):
    """Widget that displays a rendered grayscale image.

    Expects Rich text from `halftone.core.render.render_text`, which has
    already validated every pixel.
    """

    DEFAULT_CSS = """
    ImagePreview {
        width: 1fr;
        height: 1fr;
        overflow: auto;
        background: $surface;
    }

    ImagePreview #preview-content {
        width: auto;
        height: auto;
    }
    """

    def __init__(self, rendered: Text | None = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self._rendered = rendered

    def compose(self) -> ComposeResult:
        yield Static(self._rendered or "No image.", id="preview-content")

    @property
    def rendered(self) -> Text | None:
        return self._rendered
