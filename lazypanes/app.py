"""
Textual demo app driving the layout engine.

Panels are filled with static demo content; resizing the terminal, toggling
diff/search mode and cycling contexts all go through a relayout pass.
"""

import logging
from typing import Dict, Iterator, Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container

from . import __version__
from .contexts.keys import ContextKey
from .contexts.registry import StaticListProvider
from .engine import LayoutEngine, LayoutPass
from .exceptions import ContextUnavailableError, LayoutPassError
from .layout.config import DEFAULT_SETTINGS, LayoutSettings
from .layout.dimensions import MAIN, OPTIONS
from .views.textual_backend import TextualBackend

logger = logging.getLogger(__name__)

# Contexts cycled with tab, in panel order
CYCLE_ORDER = (
    ContextKey.FILES,
    ContextKey.LOCAL_BRANCHES,
    ContextKey.BRANCH_COMMITS,
    ContextKey.STASH,
)

OPTIONS_TEXT = "tab: next panel | j/k: move | d: diff | /: search | q: quit"


def demo_providers() -> Dict[ContextKey, StaticListProvider]:
    """Static list content for the demo panels."""
    return {
        ContextKey.FILES: StaticListProvider(
            [f" M src/module_{i:02d}.py" for i in range(30)]
        ),
        ContextKey.LOCAL_BRANCHES: StaticListProvider(
            ["* main", "  feature/layout", "  feature/contexts", "  fix/resize"]
        ),
        ContextKey.REMOTES: StaticListProvider(["origin", "upstream"]),
        ContextKey.TAGS: StaticListProvider(["v0.1.0", "v0.0.9"]),
        ContextKey.BRANCH_COMMITS: StaticListProvider(
            [f"{i:07x} commit number {i}" for i in range(0x1000, 0x1000 + 60)]
        ),
        ContextKey.REFLOG_COMMITS: StaticListProvider(["HEAD@{0}: checkout", "HEAD@{1}: commit"]),
        ContextKey.STASH: StaticListProvider(["stash@{0}: WIP on main"]),
    }


def demo_diff() -> Iterator[str]:
    """Endless diff-like lines, read lazily by the main panel."""
    hunk = 0
    while True:
        yield f"@@ -{hunk * 10},7 +{hunk * 10},8 @@"
        for i in range(9):
            yield f"+ added line {hunk}.{i}" if i % 3 == 0 else f"  context line {hunk}.{i}"
        hunk += 1


class LazyPanesApp(App[None]):
    """Multi-panel demo screen."""

    CSS = """
    #surfaces {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("tab", "next_context", "Next panel", priority=True),
        Binding("j", "cursor_down", "Down"),
        Binding("k", "cursor_up", "Up"),
        Binding("d", "toggle_diff", "Diff"),
        Binding("slash", "toggle_search", "Search", key_display="/"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, settings: LayoutSettings = DEFAULT_SETTINGS, version: str = __version__) -> None:
        super().__init__()
        self.settings = settings
        self.version = version
        self.providers = demo_providers()
        self.engine: Optional[LayoutEngine] = None
        self.backend: Optional[TextualBackend] = None
        self.last_pass: Optional[LayoutPass] = None

    def compose(self) -> ComposeResult:
        yield Container(id="surfaces")

    def on_mount(self) -> None:
        self.backend = TextualBackend(self.query_one("#surfaces", Container))
        self.engine = LayoutEngine(
            self.backend,
            version=self.version,
            providers=self.providers,
            settings=self.settings,
            app_status=lambda: "",
            on_initial_views=self._fill_initial_views,
        )
        self.relayout()

    def on_resize(self, event: events.Resize) -> None:
        self.relayout()

    def relayout(self) -> None:
        if self.engine is None:
            return
        try:
            self.last_pass = self.engine.recompute_layout()
        except LayoutPassError as e:
            logger.error("Relayout failed: %s", e)
            self.notify(str(e), severity="error")

    def _fill_initial_views(self) -> None:
        if self.engine is None or self.backend is None:
            return
        self.backend.set_content(OPTIONS, [OPTIONS_TEXT])
        self.engine.buffers.start(MAIN, demo_diff())
        for key, provider in self.providers.items():
            if key.tab_index in (None, 0):
                self.backend.set_content(key.panel, provider.items)

    def _switch(self, key: ContextKey) -> None:
        if self.engine is None or self.backend is None:
            return
        try:
            self.engine.switch_context(key)
        except ContextUnavailableError as e:
            logger.warning("Cannot switch context yet: %s", e)
            return
        provider = self.providers.get(key)
        if provider is not None:
            self.backend.set_content(key.panel, provider.items)
        self.relayout()

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def action_next_context(self) -> None:
        if self.engine is None:
            return
        focused = self.engine.contexts.focused
        if focused is None or focused.key not in CYCLE_ORDER:
            self._switch(CYCLE_ORDER[0])
            return
        index = CYCLE_ORDER.index(focused.key)
        self._switch(CYCLE_ORDER[(index + 1) % len(CYCLE_ORDER)])

    def action_cursor_down(self) -> None:
        self._move_selection(1)

    def action_cursor_up(self) -> None:
        self._move_selection(-1)

    def _move_selection(self, step: int) -> None:
        if self.engine is None or self.engine.contexts.focused is None:
            return
        provider = self.providers.get(self.engine.contexts.focused.key)
        if provider is None or not provider.items:
            return
        provider.selected_line = max(0, min(provider.selected_line + step, provider.item_count - 1))
        self.relayout()

    def action_toggle_diff(self) -> None:
        if self.engine is None:
            return
        diff_mode = not self.engine.state.flags.diff_mode
        self.engine.set_flags(diff_mode=diff_mode, diff_ref="HEAD~1" if diff_mode else "")
        self.relayout()

    def action_toggle_search(self) -> None:
        if self.engine is None:
            return
        self.engine.set_flags(searching=not self.engine.state.flags.searching)
        self.relayout()


def run(settings: LayoutSettings = DEFAULT_SETTINGS) -> None:
    """Run the demo app."""
    LazyPanesApp(settings=settings).run()
