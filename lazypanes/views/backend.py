"""
Rendering backend contract and the in-memory implementation.

The layout engine never draws anything itself. It talks to a backend that
can create named surfaces, move them, style them, fill them with lines and
change their stacking order. ``MemoryBackend`` keeps the authoritative
surface model; concrete backends subclass it and mirror changes onto real
widgets through the ``_surface_changed`` / ``_restacked`` hooks.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple, Union

from rich.text import Text

from ..exceptions import SurfaceNotFoundError
from ..layout.region import Region
from .surface import SelectCallback, Surface

logger = logging.getLogger(__name__)


class RenderBackend(Protocol):
    """Operations the layout engine needs from a rendering backend."""

    def screen_size(self) -> Tuple[int, int]:
        """Current terminal width and height."""
        ...

    def get(self, name: str) -> Surface:
        """Fetch a surface, raising SurfaceNotFoundError if it does not exist."""
        ...

    def exists(self, name: str) -> bool:
        ...

    def create(self, name: str, bounds: Region) -> Surface:
        """Create a surface on top of the stacking order."""
        ...

    def set_bounds(self, name: str, bounds: Region) -> Surface:
        """Move/resize a surface and make it visible."""
        ...

    def configure(self, name: str, **properties: Any) -> Surface:
        ...

    def set_content(self, name: str, lines: Iterable[Union[str, Text]]) -> None:
        """Replace the content; ``Text`` rows keep their styling."""
        ...

    def append_lines(self, name: str, lines: Iterable[str]) -> None:
        ...

    def focus_point(self, name: str, cx: int, cy: int, line_count: int) -> None:
        ...

    def set_on_select_item(self, name: str, callback: Optional[SelectCallback]) -> None:
        ...

    def raise_surface(self, name: str) -> None:
        ...

    def lower_surface(self, name: str) -> None:
        ...

    def hide(self, name: str) -> None:
        """Send a surface to the back of the stacking order and mark it hidden."""
        ...

    def stacking_order(self) -> List[str]:
        """Surface names from bottom to top."""
        ...


class MemoryBackend:
    """Backend holding surfaces in memory.

    Used directly in tests and headless runs, and as the model behind the
    Textual backend. ``revision`` increases on every effective change so
    callers can tell whether a pass touched anything.
    """

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self._width = width
        self._height = height
        self._surfaces: Dict[str, Surface] = {}
        self._stack: List[str] = []
        self.revision = 0

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def screen_size(self) -> Tuple[int, int]:
        return self._width, self._height

    def resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height

    # ------------------------------------------------------------------
    # Lookup / creation
    # ------------------------------------------------------------------

    def get(self, name: str) -> Surface:
        try:
            return self._surfaces[name]
        except KeyError:
            raise SurfaceNotFoundError(panel=name) from None

    def exists(self, name: str) -> bool:
        return name in self._surfaces

    def surfaces(self) -> List[Surface]:
        return [self._surfaces[name] for name in self._stack]

    def visible_surfaces(self) -> List[Surface]:
        return [s for s in self.surfaces() if not s.hidden]

    def create(self, name: str, bounds: Region) -> Surface:
        if name in self._surfaces:
            raise ValueError(f"Surface '{name}' already exists")
        surface = Surface(name=name, bounds=bounds)
        self._surfaces[name] = surface
        self._stack.append(name)
        logger.debug("Created surface %s at %s", name, bounds)
        self._changed(surface)
        self._stack_changed()
        return surface

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_bounds(self, name: str, bounds: Region) -> Surface:
        surface = self.get(name)
        if surface.bounds != bounds or surface.hidden:
            surface.bounds = bounds
            surface.hidden = False
            self._changed(surface)
        return surface

    def configure(self, name: str, **properties: Any) -> Surface:
        surface = self.get(name)
        allowed = Surface.property_names()
        changed = False
        for key, value in properties.items():
            if key not in allowed:
                raise ValueError(f"Unknown surface property '{key}'")
            if getattr(surface, key) != value:
                setattr(surface, key, value)
                changed = True
        if changed:
            self._changed(surface)
        return surface

    def set_content(self, name: str, lines: Iterable[Union[str, Text]]) -> None:
        surface = self.get(name)
        rows = list(lines)
        new_lines = [row.plain if isinstance(row, Text) else row for row in rows]
        new_styled: List[Text] = []
        if any(isinstance(row, Text) for row in rows):
            new_styled = [row if isinstance(row, Text) else Text(row) for row in rows]
        if surface.lines != new_lines or surface.styled != new_styled:
            surface.lines = new_lines
            surface.styled = new_styled
            self._changed(surface)

    def append_lines(self, name: str, lines: Iterable[str]) -> None:
        surface = self.get(name)
        new_lines = list(lines)
        if new_lines:
            surface.lines.extend(new_lines)
            if surface.styled:
                surface.styled.extend(Text(line) for line in new_lines)
            self._changed(surface)

    def focus_point(self, name: str, cx: int, cy: int, line_count: int) -> None:
        surface = self.get(name)
        if surface.focus_point(cx, cy, line_count):
            self._changed(surface)

    def set_on_select_item(self, name: str, callback: Optional[SelectCallback]) -> None:
        surface = self.get(name)
        if surface.on_select_item != callback:
            surface.on_select_item = callback
            self.revision += 1

    # ------------------------------------------------------------------
    # Stacking order
    # ------------------------------------------------------------------

    def raise_surface(self, name: str) -> None:
        self.get(name)
        if self._stack[-1] != name:
            self._stack.remove(name)
            self._stack.append(name)
            self._stack_changed()

    def lower_surface(self, name: str) -> None:
        self.get(name)
        if self._stack[0] != name:
            self._stack.remove(name)
            self._stack.insert(0, name)
            self._stack_changed()

    def hide(self, name: str) -> None:
        surface = self.get(name)
        self.lower_surface(name)
        if not surface.hidden:
            surface.hidden = True
            self._changed(surface)

    def stacking_order(self) -> List[str]:
        return list(self._stack)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    def _changed(self, surface: Surface) -> None:
        self.revision += 1
        self._surface_changed(surface)

    def _stack_changed(self) -> None:
        self.revision += 1
        self._restacked()

    def _surface_changed(self, surface: Surface) -> None:
        """Mirror a surface change onto the real display."""

    def _restacked(self) -> None:
        """Mirror a stacking order change onto the real display."""
