"""
The fixed panel table.

Each panel names one surface, the window it is placed in, whether it is
framed, and the defaults applied once when its surface is created.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..layout.dimensions import (
    APP_STATUS,
    INFORMATION,
    LIMIT,
    MAIN,
    OPTIONS,
    SEARCH,
    SEARCH_PREFIX,
    SEARCH_PREFIX_WINDOW,
    SECONDARY,
    STATUS,
)

FILES = "files"
BRANCHES = "branches"
COMMITS = "commits"
COMMIT_FILES = "commitFiles"
STASH = "stash"
COMMIT_MESSAGE = "commitMessage"
CREDENTIALS = "credentials"
MENU = "menu"

# Popups are parked here until something shows them
HIDDEN_VIEW_OFFSET = 9999


@dataclass(frozen=True)
class PanelSpec:
    """Static description of a panel.

    Attributes:
        name: Surface name
        window: Window (dimension key) the surface is placed in
        frame: Whether the surface draws a border around its region
        title_id: Translation id of the title, if any
        color: Semantic foreground color
        background: Semantic background color
        wrap: Wrap long lines
        editable: Accepts typed input
        highlight: Highlight the selected line
        contains_list: Surface shows a selectable list
        ignore_carriage_returns: Drop ``\\r`` from content
        tab_ids: Translation ids of the surface's tabs
        content: Literal content written once at creation
        content_id: Translation id of content written once at creation
        popup: Created off-screen and positioned by popup handling, not layout
        lowered: Sent to the back of the stacking order on creation
    """

    name: str
    window: str
    frame: bool = True
    title_id: Optional[str] = None
    color: str = "default_text"
    background: str = "default_background"
    wrap: bool = False
    editable: bool = False
    highlight: bool = False
    contains_list: bool = False
    ignore_carriage_returns: bool = False
    tab_ids: Tuple[str, ...] = ()
    content: Optional[str] = None
    content_id: Optional[str] = None
    popup: bool = False
    lowered: bool = False


# Creation order matters: later surfaces start higher in the stacking order
LAYOUT_PANELS: List[PanelSpec] = [
    PanelSpec(MAIN, MAIN, title_id="DiffTitle", wrap=True, ignore_carriage_returns=True),
    PanelSpec(SECONDARY, SECONDARY, title_id="DiffTitle", wrap=True, ignore_carriage_returns=True),
    PanelSpec(STATUS, STATUS, title_id="StatusTitle"),
    PanelSpec(FILES, FILES, title_id="FilesTitle", highlight=True, contains_list=True),
    PanelSpec(
        BRANCHES,
        BRANCHES,
        title_id="BranchesTitle",
        contains_list=True,
        tab_ids=("LocalBranchesTab", "RemotesTab", "TagsTab"),
    ),
    PanelSpec(COMMIT_FILES, COMMITS, title_id="CommitFiles", contains_list=True),
    PanelSpec(
        COMMITS,
        COMMITS,
        title_id="CommitsTitle",
        contains_list=True,
        tab_ids=("CommitsTab", "ReflogTab"),
    ),
    PanelSpec(STASH, STASH, title_id="StashTitle", contains_list=True),
    PanelSpec(COMMIT_MESSAGE, COMMIT_MESSAGE, title_id="CommitMessage", editable=True, popup=True),
    PanelSpec(CREDENTIALS, CREDENTIALS, title_id="CredentialsUsername", editable=True, popup=True),
    PanelSpec(OPTIONS, OPTIONS, frame=False, color="options"),
    PanelSpec(SEARCH_PREFIX_WINDOW, SEARCH_PREFIX_WINDOW, frame=False, color="search", content=SEARCH_PREFIX),
    PanelSpec(SEARCH, SEARCH, frame=False, color="search", editable=True),
    PanelSpec(APP_STATUS, APP_STATUS, frame=False, color="app_status", lowered=True),
    PanelSpec(INFORMATION, INFORMATION, frame=False, color="information"),
    PanelSpec(LIMIT, LIMIT, frame=False, wrap=True, content_id="NotEnoughSpace"),
]

# Created by the host when a menu is shown; never laid out by a relayout pass
MENU_PANEL = PanelSpec(MENU, MENU, contains_list=True, popup=True)

PANELS: Dict[str, PanelSpec] = {spec.name: spec for spec in LAYOUT_PANELS + [MENU_PANEL]}
POPUP_PANELS = frozenset(spec.name for spec in PANELS.values() if spec.popup)


def panel_spec(name: str) -> PanelSpec:
    try:
        return PANELS[name]
    except KeyError:
        raise ValueError(f"Unknown panel '{name}'") from None
