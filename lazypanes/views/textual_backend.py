"""
Textual rendering backend.

Every surface is mirrored by an absolutely positioned ``SurfaceWidget``
inside one container. The stacking order maps onto Textual layers: the
container declares one layer per surface, bottom to top.
"""

import logging
from typing import Dict, Tuple

from rich.text import Text
from textual.containers import Container
from textual.widgets import Static

from .backend import MemoryBackend
from .surface import Surface

logger = logging.getLogger(__name__)


def _layer_name(surface_name: str) -> str:
    return f"surface-{surface_name}"


class SurfaceWidget(Static):
    """Draws one surface: border, title/tabs and the visible lines."""

    DEFAULT_CSS = """
    SurfaceWidget {
        position: absolute;
        padding: 0;
        margin: 0;
    }
    """

    def __init__(self, surface: Surface) -> None:
        super().__init__(id=_layer_name(surface.name), markup=False)
        self.surface_name = surface.name
        self.styles.layer = _layer_name(surface.name)

    def show_surface(self, surface: Surface) -> None:
        bounds = surface.bounds
        self.styles.offset = (bounds.x0, bounds.y0)
        self.styles.width = bounds.width
        self.styles.height = bounds.height
        self.display = not surface.hidden

        border_color = surface.fg_color if surface.fg_color != "default" else "white"
        if surface.frame:
            self.styles.border = ("round", border_color)
            self.border_title = surface.tabs[surface.tab_index] if surface.tabs else surface.title
        else:
            self.styles.border = ("none", border_color)
            self.border_title = None

        if surface.fg_color != "default":
            self.styles.color = surface.fg_color
        if surface.bg_color != "default":
            self.styles.background = surface.bg_color

        self.update(self._render_lines(surface))

    @staticmethod
    def _render_lines(surface: Surface) -> Text:
        text = Text(no_wrap=not surface.wrap)
        for row, line in enumerate(surface.visible_text()):
            if row:
                text.append("\n")
            if surface.ignore_carriage_returns and "\r" in line.plain:
                line = Text().join(line.split("\r", allow_blank=True))
            selected = surface.contains_list and row == surface.cursor_y
            if selected and surface.sel_bg_color != "default":
                line.stylize(f"on {surface.sel_bg_color}")
            text.append(line)
        return text


class TextualBackend(MemoryBackend):
    """Memory backend that mirrors its surfaces onto Textual widgets.

    Args:
        container: Container the surface widgets are mounted in; it should
            fill the screen
    """

    def __init__(self, container: Container) -> None:
        self.container = container
        self._widgets: Dict[str, SurfaceWidget] = {}
        width, height = container.app.size
        super().__init__(width, height)

    def screen_size(self) -> Tuple[int, int]:
        width, height = self.container.app.size
        self.resize(width, height)
        return width, height

    def widget(self, name: str) -> SurfaceWidget:
        return self._widgets[name]

    def _surface_changed(self, surface: Surface) -> None:
        widget = self._widgets.get(surface.name)
        if widget is None:
            widget = SurfaceWidget(surface)
            self._widgets[surface.name] = widget
            # layer must be declared before the widget is mounted
            self._restacked()
            self.container.mount(widget)
        widget.show_surface(surface)

    def _restacked(self) -> None:
        self.container.styles.layers = tuple(_layer_name(name) for name in self.stacking_order())
        logger.debug("Stacking order: %s", ", ".join(self.stacking_order()))
