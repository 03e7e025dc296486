"""Surface model: the visual object bound to a panel."""

from dataclasses import dataclass, field, fields
from typing import Callable, List, Optional, Tuple

from rich.text import Text

from ..layout.region import Region

# Called with (visible row, item index, total matches) when search selects an item
SelectCallback = Callable[[int, int, int], None]

HIDDEN_REGION = Region(0, 0, 0, 0)


@dataclass
class Surface:
    """A named surface with bounds, styling, content and scroll position.

    ``bounds`` are the outer bounds; a framed surface draws its border on
    the outermost cells and shows content inside them.
    """

    name: str
    bounds: Region = HIDDEN_REGION
    title: str = ""
    fg_color: str = "default"
    bg_color: str = "default"
    sel_bg_color: str = "default"
    frame: bool = True
    wrap: bool = False
    editable: bool = False
    highlight: bool = False
    contains_list: bool = False
    ignore_carriage_returns: bool = False
    tabs: List[str] = field(default_factory=list)
    tab_index: int = 0
    lines: List[str] = field(default_factory=list)
    # styled rows, parallel to lines; empty for plain content
    styled: List[Text] = field(default_factory=list)
    origin_x: int = 0
    origin_y: int = 0
    cursor_x: int = 0
    cursor_y: int = 0
    hidden: bool = False
    on_select_item: Optional[SelectCallback] = None

    @classmethod
    def property_names(cls) -> List[str]:
        """Names of the styling properties a backend may configure."""
        excluded = {"name", "bounds", "lines", "styled", "origin_x", "origin_y", "cursor_x",
                    "cursor_y", "hidden", "on_select_item"}
        return [f.name for f in fields(cls) if f.name not in excluded]

    def size(self) -> Tuple[int, int]:
        """Width and height of the content area."""
        border = 2 if self.frame else 0
        return (
            max(self.bounds.width - border, 0),
            max(self.bounds.height - border, 0),
        )

    def visible_lines(self) -> List[str]:
        _, height = self.size()
        return self.lines[self.origin_y : self.origin_y + height]

    def visible_text(self) -> List[Text]:
        """Visible rows as rich text, keeping styling where the content has it."""
        _, height = self.size()
        if self.styled:
            return [row.copy() for row in self.styled[self.origin_y : self.origin_y + height]]
        return [Text(line) for line in self.visible_lines()]

    def focus_point(self, cx: int, cy: int, line_count: int) -> bool:
        """Scroll so that line ``cy`` is visible and put the cursor on it.

        Out-of-range lines (including -1 for "no selection") are ignored.

        Returns:
            True if the origin or cursor moved
        """
        if cy < 0 or cy > line_count:
            return False

        before = (self.origin_x, self.origin_y, self.cursor_x, self.cursor_y)
        _, height = self.size()
        last_row = max(height - 1, 0)

        if last_row > line_count:
            self.origin_x, self.origin_y = 0, 0
            self.cursor_x, self.cursor_y = cx, cy
        elif cy < self.origin_y:
            # above the viewport
            self.origin_x, self.origin_y = 0, cy
            self.cursor_x, self.cursor_y = cx, 0
        elif cy > self.origin_y + last_row:
            # below the viewport
            self.origin_x, self.origin_y = 0, cy - last_row
            self.cursor_x, self.cursor_y = cx, last_row
        else:
            self.cursor_x, self.cursor_y = cx, cy - self.origin_y

        return before != (self.origin_x, self.origin_y, self.cursor_x, self.cursor_y)
