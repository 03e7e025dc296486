"""
Context identifiers.

Contexts are the named UI modes that can occupy a panel. Several contexts
can share one panel (local branches, remotes and tags all display inside
the branches panel); only one of them owns the panel's surface at a time.
"""

from enum import Enum
from typing import List, Optional

from ..layout.dimensions import MAIN, STATUS
from ..views.panels import (
    BRANCHES,
    COMMIT_FILES,
    COMMIT_MESSAGE,
    COMMITS,
    CREDENTIALS,
    FILES,
    MENU,
    STASH,
)


class ContextKey(Enum):
    """
    Closed set of contexts.

    Panels:
        files      ── FILES
        branches   ── LOCAL_BRANCHES, REMOTES, REMOTE_BRANCHES, TAGS
        commits    ── BRANCH_COMMITS, REFLOG_COMMITS
        commitFiles── COMMIT_FILES
        stash      ── STASH
        status     ── STATUS
        main       ── MAIN
        menu, commitMessage, credentials ── popups
    """

    FILES = "files"
    LOCAL_BRANCHES = "local-branches"
    REMOTES = "remotes"
    REMOTE_BRANCHES = "remote-branches"
    TAGS = "tags"
    BRANCH_COMMITS = "branch-commits"
    REFLOG_COMMITS = "reflog-commits"
    STASH = "stash"
    COMMIT_FILES = "commit-files"
    STATUS = "status"
    MAIN = "main"
    MENU = "menu"
    COMMIT_MESSAGE = "commit-message"
    CREDENTIALS = "credentials"

    @property
    def panel(self) -> str:
        """Name of the panel this context displays in."""
        return _PANELS[self]

    @property
    def tab_index(self) -> Optional[int]:
        """Tab selected on the panel while this context owns it."""
        return _TAB_INDEXES.get(self)

    @property
    def is_list(self) -> bool:
        return self in LIST_CONTEXTS

    @classmethod
    def for_panel(cls, panel: str) -> List["ContextKey"]:
        """All contexts that can display in ``panel``, default owner first."""
        return [key for key in cls if key.panel == panel]


_PANELS = {
    ContextKey.FILES: FILES,
    ContextKey.LOCAL_BRANCHES: BRANCHES,
    ContextKey.REMOTES: BRANCHES,
    ContextKey.REMOTE_BRANCHES: BRANCHES,
    ContextKey.TAGS: BRANCHES,
    ContextKey.BRANCH_COMMITS: COMMITS,
    ContextKey.REFLOG_COMMITS: COMMITS,
    ContextKey.STASH: STASH,
    ContextKey.COMMIT_FILES: COMMIT_FILES,
    ContextKey.STATUS: STATUS,
    ContextKey.MAIN: MAIN,
    ContextKey.MENU: MENU,
    ContextKey.COMMIT_MESSAGE: COMMIT_MESSAGE,
    ContextKey.CREDENTIALS: CREDENTIALS,
}

_TAB_INDEXES = {
    ContextKey.LOCAL_BRANCHES: 0,
    ContextKey.REMOTES: 1,
    ContextKey.REMOTE_BRANCHES: 1,
    ContextKey.TAGS: 2,
    ContextKey.BRANCH_COMMITS: 0,
    ContextKey.REFLOG_COMMITS: 1,
}

# Order matches the order selections are synchronized in
LIST_CONTEXTS = (
    ContextKey.FILES,
    ContextKey.LOCAL_BRANCHES,
    ContextKey.REMOTES,
    ContextKey.REMOTE_BRANCHES,
    ContextKey.TAGS,
    ContextKey.BRANCH_COMMITS,
    ContextKey.REFLOG_COMMITS,
    ContextKey.STASH,
    ContextKey.COMMIT_FILES,
    ContextKey.MENU,
)
