"""Screen regions and the minimum-size policy."""

from dataclasses import dataclass

# Below either of these the whole screen is given to the "limit" notice
MINIMUM_WIDTH = 10
MINIMUM_HEIGHT = 9


@dataclass(frozen=True)
class Region:
    """Inclusive rectangle of terminal cells.

    A region is produced fresh on every relayout pass and never mutated.

    Examples:
        >>> Region(0, 0, 9, 2).width
        10
        >>> Region(1, 1, 3, 3).expand(1)
        Region(x0=0, y0=0, x1=4, y1=4)
    """

    x0: int
    y0: int
    x1: int
    y1: int

    def __post_init__(self) -> None:
        if self.x0 > self.x1 or self.y0 > self.y1:
            raise ValueError(
                f"Invalid region ({self.x0}, {self.y0}, {self.x1}, {self.y1}): "
                "corners must satisfy x0<=x1 and y0<=y1"
            )

    @property
    def width(self) -> int:
        return self.x1 - self.x0 + 1

    @property
    def height(self) -> int:
        return self.y1 - self.y0 + 1

    def expand(self, amount: int = 1) -> "Region":
        """Grow the region outward by ``amount`` cells on every side."""
        return Region(
            self.x0 - amount,
            self.y0 - amount,
            self.x1 + amount,
            self.y1 + amount,
        )

    def inset(self, amount: int = 1) -> "Region":
        """Shrink the region inward by ``amount`` cells on every side."""
        return Region(
            self.x0 + amount,
            self.y0 + amount,
            self.x1 - amount,
            self.y1 - amount,
        )

    def overlaps(self, other: "Region") -> bool:
        return not (
            self.x1 < other.x0
            or other.x1 < self.x0
            or self.y1 < other.y0
            or other.y1 < self.y0
        )


def is_too_small(
    width: int,
    height: int,
    min_width: int = MINIMUM_WIDTH,
    min_height: int = MINIMUM_HEIGHT,
) -> bool:
    """Whether the terminal is too small to lay out any panel but the notice."""
    return width < min_width or height < min_height
