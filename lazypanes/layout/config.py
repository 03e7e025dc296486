"""
Layout configuration dataclasses.

Defines the tunable geometry used by the dimension calculator. Settings
can be defined in Python code or loaded from a YAML mapping.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

from ..exceptions import ConfigurationError
from .region import MINIMUM_HEIGHT, MINIMUM_WIDTH, is_too_small


SIZE_UNITS = ("fr", "%", "px")


@dataclass(frozen=True)
class SizeSpec:
    """Share of a split given to one window.

    ``fr`` windows divide whatever the ``%`` and ``px`` windows leave over;
    ``px`` counts terminal cells. ``str()`` gives back the YAML form, e.g.
    ``2fr`` or ``3px``.
    """

    value: float
    unit: str = "fr"

    def __post_init__(self) -> None:
        if self.unit not in SIZE_UNITS:
            raise ValueError(f"Unknown size unit {self.unit!r}; expected fr, % or px")
        if self.value < 0:
            raise ValueError(f"Negative size {self.value:g}{self.unit}")

    @classmethod
    def fraction(cls, value: float = 1) -> "SizeSpec":
        return cls(value, "fr")

    @classmethod
    def percent(cls, value: float) -> "SizeSpec":
        return cls(value, "%")

    @classmethod
    def fixed(cls, value: int) -> "SizeSpec":
        return cls(value, "px")

    @classmethod
    def from_string(cls, text: str) -> "SizeSpec":
        """Read a YAML size such as ``1fr``, ``25%`` or ``3px``; a bare number is ``fr``."""
        raw = text.strip().lower()
        unit = next((u for u in SIZE_UNITS if raw.endswith(u)), "")
        number = raw[: len(raw) - len(unit)]
        try:
            return cls(float(number), unit or "fr")
        except ValueError:
            raise ValueError(f"Cannot read window size {text!r}") from None

    def resolve(self, total: int) -> int:
        """Number of cells this size takes out of ``total`` (fractions excluded)."""
        if self.unit == "px":
            return int(self.value)
        if self.unit == "%":
            return int(total * self.value / 100)
        return 0

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit}"


SIDE_WINDOWS = ("files", "branches", "commits", "stash")


def _default_side_sizes() -> Dict[str, SizeSpec]:
    return {
        "files": SizeSpec.fraction(1),
        "branches": SizeSpec.fraction(1),
        "commits": SizeSpec.fraction(1),
        "stash": SizeSpec.fixed(3),
    }


def _as_size(key: str, value: Union[str, int, float, SizeSpec]) -> SizeSpec:
    if isinstance(value, SizeSpec):
        return value
    try:
        if isinstance(value, (int, float)):
            return SizeSpec.fraction(value)
        return SizeSpec.from_string(str(value))
    except ValueError as e:
        raise ConfigurationError(str(e), key=key) from e


@dataclass(frozen=True)
class LayoutSettings:
    """Geometry settings for the dimension calculator.

    Attributes:
        min_width: Narrowest terminal that still gets a normal layout
        min_height: Shortest terminal that still gets a normal layout
        side_panel_width: Width of the left list column
        side_panel_sizes: Vertical share of each side window
        expand_focused_side_panel: Give the current side window double weight
        top_strip_height: Rows reserved for the status/information strip
    """

    min_width: int = MINIMUM_WIDTH
    min_height: int = MINIMUM_HEIGHT
    side_panel_width: SizeSpec = field(default_factory=lambda: SizeSpec.percent(100 / 3))
    side_panel_sizes: Dict[str, SizeSpec] = field(default_factory=_default_side_sizes)
    expand_focused_side_panel: bool = True
    top_strip_height: int = 3

    def __post_init__(self) -> None:
        if self.min_width < 10 or self.min_height < 9:
            raise ConfigurationError(
                "Minimum size cannot go below 10x9",
                min_width=self.min_width,
                min_height=self.min_height,
            )
        if self.top_strip_height < 3:
            raise ConfigurationError(
                "Top strip needs at least 3 rows", key="top_strip_height"
            )
        # footer row plus one framed row in the middle
        if self.min_height < self.top_strip_height + 4:
            raise ConfigurationError(
                "Minimum height leaves no room below the top strip",
                min_height=self.min_height,
                top_strip_height=self.top_strip_height,
            )
        unknown = set(self.side_panel_sizes) - set(SIDE_WINDOWS)
        if unknown:
            raise ConfigurationError(
                f"Unknown side windows: {sorted(unknown)}", key="side_panel_sizes"
            )

    def is_too_small(self, width: int, height: int) -> bool:
        return is_too_small(width, height, self.min_width, self.min_height)

    def side_size(self, window: str) -> SizeSpec:
        return self.side_panel_sizes.get(window, SizeSpec.fraction(1))

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutSettings":
        """Create settings from a dictionary (e.g., from YAML).

        Args:
            data: Mapping with any subset of the settings fields

        Returns:
            LayoutSettings instance
        """
        kwargs: Dict[str, Any] = {}
        for key in ("min_width", "min_height", "top_strip_height"):
            if key in data:
                try:
                    kwargs[key] = int(data[key])
                except (TypeError, ValueError) as e:
                    raise ConfigurationError(f"Expected an integer for {key}", key=key) from e
        if "expand_focused_side_panel" in data:
            kwargs["expand_focused_side_panel"] = bool(data["expand_focused_side_panel"])
        if "side_panel_width" in data:
            kwargs["side_panel_width"] = _as_size("side_panel_width", data["side_panel_width"])
        if "side_panel_sizes" in data:
            sizes = _default_side_sizes()
            for window, size in (data["side_panel_sizes"] or {}).items():
                sizes[window] = _as_size(f"side_panel_sizes.{window}", size)
            kwargs["side_panel_sizes"] = sizes
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary for serialization."""
        return {
            "min_width": self.min_width,
            "min_height": self.min_height,
            "side_panel_width": str(self.side_panel_width),
            "side_panel_sizes": {k: str(v) for k, v in self.side_panel_sizes.items()},
            "expand_focused_side_panel": self.expand_focused_side_panel,
            "top_strip_height": self.top_strip_height,
        }


DEFAULT_SETTINGS = LayoutSettings()
