"""Immutable UI state threaded through each relayout pass."""

from dataclasses import dataclass, field, replace
from typing import Optional


@dataclass(frozen=True)
class UIModeFlags:
    """Mode flags that change panel geometry or the information strip.

    Attributes:
        diff_mode: Comparing against a ref; splits main/secondary side by side
        diff_ref: The ref shown in the information strip while in diff mode
        filter_path: Path the commit log is filtered by ("" when not filtering)
        cherry_picked_count: Number of commits copied for cherry-picking
        mouse_enabled: Pointer interaction is on (shows the donate prompt)
        searching: Search bar replaces the options bar
        search_string: Current search text
    """

    diff_mode: bool = False
    diff_ref: str = ""
    filter_path: str = ""
    cherry_picked_count: int = 0
    mouse_enabled: bool = False
    searching: bool = False
    search_string: str = ""

    def __post_init__(self) -> None:
        if self.cherry_picked_count < 0:
            raise ValueError("cherry_picked_count must be non-negative")

    @property
    def filter_mode(self) -> bool:
        return bool(self.filter_path)


@dataclass(frozen=True)
class UIState:
    """Everything one relayout pass needs to know about the previous one.

    Created once at startup and replaced (never mutated) by the relayout
    entry point.
    """

    flags: UIModeFlags = field(default_factory=UIModeFlags)
    prev_width: Optional[int] = None
    prev_height: Optional[int] = None
    prev_main_width: Optional[int] = None
    prev_main_height: Optional[int] = None
    old_information: Optional[str] = None
    side_window: str = "files"
    passes: int = 0

    def with_flags(self, **changes) -> "UIState":
        return replace(self, flags=replace(self.flags, **changes))
