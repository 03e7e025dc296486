"""Translation lookup: message id -> localized display string."""

import logging
from typing import Dict, Mapping, Optional

logger = logging.getLogger(__name__)

ENGLISH: Dict[str, str] = {
    "NotEnoughSpace": "Not enough space to render panels",
    "DiffTitle": "Diff",
    "StatusTitle": "Status",
    "FilesTitle": "Files",
    "BranchesTitle": "Branches",
    "CommitFiles": "Commit files",
    "CommitsTitle": "Commits",
    "StashTitle": "Stash",
    "CommitMessage": "Commit message",
    "CredentialsUsername": "Username",
    "LocalBranchesTab": "Local Branches",
    "RemotesTab": "Remotes",
    "TagsTab": "Tags",
    "CommitsTab": "Commits",
    "ReflogTab": "Reflog",
    "showingGitDiff": "showing output for:",
    "filteringBy": "filtering by",
    "(reset)": "(reset)",
    "Donate": "Donate",
    "commitsCopied": "commits copied",
    "MatchesFor": "matches for",
    "NoMatchesFor": "no matches for",
}


class Translator:
    """Looks up display strings, falling back to the message id itself.

    Examples:
        >>> Translator().localize("FilesTitle")
        'Files'
        >>> Translator.identity().localize("filteringBy")
        'filteringBy'
    """

    def __init__(self, messages: Optional[Mapping[str, str]] = None) -> None:
        self._messages: Dict[str, str] = dict(ENGLISH if messages is None else messages)

    @classmethod
    def identity(cls) -> "Translator":
        """A translator with no messages, so every id renders as itself."""
        return cls({})

    def localize(self, message_id: str) -> str:
        try:
            return self._messages[message_id]
        except KeyError:
            logger.debug("No translation for %r", message_id)
            return message_id

    def __contains__(self, message_id: str) -> bool:
        return message_id in self._messages
