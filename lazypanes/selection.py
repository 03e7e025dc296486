"""
Selection synchronizer.

After every relayout, each list context that owns its surface gets its
selected line scrolled into view and its search-select handler bound as the
surface's selection callback. Contexts that do not own their surface are
in the background and are skipped.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List

from .contexts.keys import ContextKey
from .contexts.registry import Context, ContextRegistry
from .i18n import Translator
from .layout.dimensions import SEARCH
from .theme import Theme
from .views.backend import RenderBackend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OnSelectItem:
    """Selection callback: report search matches, then select the item.

    Equal callbacks compare equal, so rebinding it every pass is a no-op.
    """

    handler: Callable[[int], None]
    report: Callable[[int, int], None]

    def __call__(self, y: int, index: int, total: int) -> None:
        self.report(index, total)
        if total:
            self.handler(y)


class SelectionSynchronizer:
    def __init__(
        self,
        backend: RenderBackend,
        registry: ContextRegistry,
        translator: Translator,
        theme: Theme,
        search_string: Callable[[], str],
    ) -> None:
        self.backend = backend
        self.registry = registry
        self.translator = translator
        self.theme = theme
        self._search_string = search_string

    def sync(self) -> List[ContextKey]:
        """Refocus and rebind every owning list context.

        Returns:
            Keys of the contexts that were synchronized
        """
        if self.registry.tree is None:
            return []

        synced = []
        for context in self.registry.tree.list_contexts():
            # menu surface only exists while a menu has been shown
            if not self.backend.exists(context.panel):
                continue
            if not self.registry.owns_surface(context.key):
                continue
            self._sync_context(context)
            synced.append(context.key)
        return synced

    def _sync_context(self, context: Context) -> None:
        panel = context.panel
        self.backend.focus_point(panel, 0, context.selected_line, context.item_count)
        self.backend.configure(panel, sel_bg_color=self.theme.color("selected_line_bg"))
        self.backend.set_on_select_item(
            panel, OnSelectItem(handler=context.on_search_select, report=self.report_matches)
        )

    def report_matches(self, index: int, total: int) -> None:
        """Write the search match summary into the search bar."""
        if not self.backend.exists(SEARCH):
            return
        search = self._search_string()
        if total == 0:
            message = f"{self.translator.localize('NoMatchesFor')} '{search}'"
        else:
            message = f"{self.translator.localize('MatchesFor')} '{search}' ({index + 1} of {total})"
        self.backend.set_content(SEARCH, [message])
