"""
Buffered content for the scrollable content panels.

Main and secondary content comes from line sources that can be long (a
diff, a log). Only as many lines as fit are read up front; when the main
panel gets taller, exactly the extra rows are read, and lines already read
are never dropped or re-read.
"""

import itertools
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from .layout.dimensions import MAIN, SECONDARY
from .views.backend import RenderBackend

logger = logging.getLogger(__name__)


class BufferedStore:
    """Lines materialized so far from one panel's line source."""

    def __init__(self, panel: str, source: Iterable[str]) -> None:
        self.panel = panel
        self._source = iter(source)
        self.lines: List[str] = []
        self.exhausted = False

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def read_lines(self, count: int) -> List[str]:
        """Materialize up to ``count`` more lines and return them."""
        if count <= 0 or self.exhausted:
            return []
        new_lines = list(itertools.islice(self._source, count))
        if len(new_lines) < count:
            self.exhausted = True
        self.lines.extend(new_lines)
        return new_lines


class BufferedContentManager:
    """Grows the main and secondary stores when the main panel gets taller.

    A single height delta, measured on the main panel, is applied to every
    managed store.
    """

    def __init__(self, backend: RenderBackend, panels: Sequence[str] = (MAIN, SECONDARY)) -> None:
        self.backend = backend
        self.panels = tuple(panels)
        self.main_height: Optional[int] = None
        self._stores: Dict[str, BufferedStore] = {}

    def start(self, panel: str, source: Iterable[str], initial: Optional[int] = None) -> BufferedStore:
        """Replace a panel's store with a new source and read the first lines.

        Args:
            panel: Content panel to fill
            source: Line source; consumed lazily
            initial: Lines to read now (defaults to the surface height)

        Returns:
            The new store
        """
        store = BufferedStore(panel, source)
        self._stores[panel] = store
        if initial is None:
            initial = self.backend.get(panel).size()[1] if self.backend.exists(panel) else 0
        if self.backend.exists(panel):
            self.backend.set_content(panel, [])
        self._materialize(store, initial)
        return store

    def store(self, panel: str) -> Optional[BufferedStore]:
        return self._stores.get(panel)

    def on_relayout(self, new_height: int) -> int:
        """Read the extra rows a taller main panel can show.

        The height is recorded as soon as it is seen, so a pass that aborts
        after growing does not grow the stores again when it is retried.

        Args:
            new_height: Main panel content height on this pass

        Returns:
            Lines requested per store (0 on the first pass or when the
            panel did not grow)
        """
        previous_height, self.main_height = self.main_height, new_height
        if previous_height is None:
            return 0
        delta = new_height - previous_height
        if delta <= 0:
            return 0

        for panel in self.panels:
            store = self._stores.get(panel)
            if store is not None:
                self._materialize(store, delta)
        logger.debug("Main panel grew by %d rows", delta)
        return delta

    def _materialize(self, store: BufferedStore, count: int) -> None:
        new_lines = store.read_lines(count)
        if new_lines and self.backend.exists(store.panel):
            self.backend.append_lines(store.panel, new_lines)
