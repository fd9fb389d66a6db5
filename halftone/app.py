"""Textual application that depicts a grayscale image."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from halftone.core.image import GrayImage
from halftone.core.render import render_text
from halftone.tui.preview import ImagePreview

logger = logging.getLogger(__name__)


class DepictApp(App):
    """Shows one rendered image, then exits after `duration` seconds.

    With no duration the image stays up until dismissed with q or escape.
    """

    TITLE = "halftone"

    BINDINGS = [
        Binding("q", "quit", "Quit", priority=True),
        Binding("escape", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        rendered: Text,
        duration: float | None = None,
        title: str = "",
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._rendered = rendered
        self._duration = duration
        if title:
            self.title = f"halftone - {title}"

    def compose(self) -> ComposeResult:
        yield Header()
        yield ImagePreview(self._rendered)
        yield Footer()

    def on_mount(self) -> None:
        if self._duration:
            self.set_timer(self._duration, self.exit)


def depict(image: GrayImage, duration: float | None = None, title: str = "") -> None:
    """Present `image` in the terminal.

    The image is rendered (and its pixel range checked) before the terminal
    is taken over, so a bad image raises without opening the display.
    """
    rendered = render_text(image)
    logger.debug("depicting %dx%d image for %s s", image.width, image.height, duration)
    app = DepictApp(rendered, duration=duration, title=title)
    app.run()
    if app.return_code:
        raise RuntimeError(f"Display exited with code {app.return_code}")


def print_image(image: GrayImage, console: Console | None = None) -> None:
    """Print `image` to a Rich console without starting the TUI."""
    console = console or Console()
    console.print(render_text(image))
