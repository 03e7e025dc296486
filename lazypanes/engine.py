"""
Layout engine: the relayout entry point.

One pass runs, in order: dimension calculation, view synchronization
(including the one-time initial setup), information strip refresh,
buffered content growth, the initial focus fallback, selection
synchronization, the main-resize hook and popup re-centering.

Passes are not reentrant. The host must serialize resize, mode-flag and
content-count events into one relayout call at a time.
"""

import logging
from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional

from rich.text import Text

from .buffers import BufferedContentManager
from .contexts.keys import ContextKey
from .contexts.registry import Context, ContextRegistry, ListProvider
from .exceptions import LayoutPassError
from .i18n import Translator
from .layout.config import DEFAULT_SETTINGS, SIDE_WINDOWS, LayoutSettings
from .layout.dimensions import (
    INFO_SECTION_PADDING,
    INFORMATION,
    LIMIT,
    MAIN,
    compute_dimensions,
    information_text,
    popup_region,
)
from .layout.region import Region
from .selection import SelectionSynchronizer
from .state import UIState
from .theme import Theme
from .views.backend import RenderBackend
from .views.panels import POPUP_PANELS, panel_spec
from .views.synchronizer import ViewSynchronizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutPass:
    """Outcome of a successful relayout pass."""

    regions: Dict[str, Region]
    state: UIState

    @property
    def too_small(self) -> bool:
        return LIMIT in self.regions


class LayoutEngine:
    """Owns the layout pipeline for one screen.

    Args:
        backend: Rendering backend holding the surfaces
        version: Version string shown in the information strip
        providers: List content providers keyed by context
        translator: Display string lookup
        theme: Semantic color lookup
        settings: Geometry settings
        app_status: Returns the current application status text
        on_initial_views: Called once after the initial context tree is built
        on_main_resize: Called with the main panel's content size when it changes
        state: Initial UI state
    """

    def __init__(
        self,
        backend: RenderBackend,
        *,
        version: str = "",
        providers: Optional[Mapping[ContextKey, ListProvider]] = None,
        translator: Optional[Translator] = None,
        theme: Optional[Theme] = None,
        settings: LayoutSettings = DEFAULT_SETTINGS,
        app_status: Optional[Callable[[], str]] = None,
        on_initial_views: Optional[Callable[[], None]] = None,
        on_main_resize: Optional[Callable[[int, int], None]] = None,
        state: Optional[UIState] = None,
    ) -> None:
        self.backend = backend
        self.version = version
        self.translator = translator or Translator()
        self.theme = theme or Theme()
        self.settings = settings
        self.state = state or UIState()
        self._providers = dict(providers or {})
        self._app_status = app_status or (lambda: "")
        self._on_initial_views = on_initial_views
        self._on_main_resize = on_main_resize

        self.contexts = ContextRegistry(backend)
        self.views = ViewSynchronizer(
            backend, self.translator, self.theme, on_initial_views=self._initial_setup
        )
        self.buffers = BufferedContentManager(backend)
        self.selection = SelectionSynchronizer(
            backend,
            self.contexts,
            self.translator,
            self.theme,
            search_string=lambda: self.state.flags.search_string,
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def recompute_layout(self) -> LayoutPass:
        """Run one relayout pass.

        Returns:
            The regions computed for this pass and the new UI state

        Raises:
            LayoutPassError: If any step fails; the rest of the pass is
                skipped and surfaces already updated are left as they are
        """
        try:
            return self._run_pass()
        except LayoutPassError:
            raise
        except Exception as e:
            logger.error("Relayout pass aborted: %s", e)
            raise LayoutPassError(str(e) or type(e).__name__, step=type(e).__name__) from e

    def switch_context(self, key: ContextKey) -> Context:
        """Focus a context.

        Raises:
            ContextUnavailableError: If the context's surface does not exist
                yet; retry after the next relayout
        """
        context = self.contexts.switch_context(key)
        window = panel_spec(context.panel).window
        if window in SIDE_WINDOWS and window != self.state.side_window:
            self.state = replace(self.state, side_window=window)
        self._resize_current_popup(*self.backend.screen_size())
        return context

    def set_flags(self, **changes) -> UIState:
        """Change mode flags; takes effect on the next relayout."""
        self.state = self.state.with_flags(**changes)
        return self.state

    # ------------------------------------------------------------------
    # Pass steps
    # ------------------------------------------------------------------

    def _run_pass(self) -> LayoutPass:
        width, height = self.backend.screen_size()
        state = self.state

        if self.settings.is_too_small(width, height):
            regions = compute_dimensions(width, height, settings=self.settings)
            self.views.show_only(LIMIT, regions[LIMIT])
            logger.debug("Terminal %dx%d below minimum size", width, height)
            self.state = replace(state, prev_width=width, prev_height=height, passes=state.passes + 1)
            return LayoutPass(regions, self.state)

        if self.contexts.focused is None:
            initial_window = panel_spec(self._initial_context().panel).window
            if initial_window in SIDE_WINDOWS:
                state = replace(state, side_window=initial_window)

        information = information_text(state.flags, self.translator, self.version)
        regions = compute_dimensions(
            width,
            height,
            information=information.plain,
            app_status=self._app_status(),
            flags=state.flags,
            side_window=state.side_window,
            settings=self.settings,
        )
        created = self.views.sync(regions)

        if INFORMATION in created or state.old_information != information.plain:
            self.backend.set_content(INFORMATION, [Text.assemble(INFO_SECTION_PADDING, information)])

        main_width, main_height = regions[MAIN].width, regions[MAIN].height
        self.buffers.on_relayout(main_height)

        if self.contexts.focused is None:
            self.switch_context(self._initial_context())

        self.selection.sync()

        if (main_width, main_height) != (state.prev_main_width, state.prev_main_height):
            if self._on_main_resize is not None:
                self._on_main_resize(main_width, main_height)

        self._reveal_current_popup()
        self._resize_current_popup(width, height)

        # switch_context may have moved the side window during this pass
        self.state = replace(
            self.state,
            prev_width=width,
            prev_height=height,
            prev_main_width=main_width,
            prev_main_height=main_height,
            old_information=information.plain,
            passes=state.passes + 1,
        )
        logger.debug("Relayout %dx%d: %d windows", width, height, len(regions))
        return LayoutPass(regions, self.state)

    def _initial_context(self) -> ContextKey:
        if self.state.flags.filter_mode:
            return ContextKey.BRANCH_COMMITS
        return ContextKey.FILES

    def _initial_setup(self) -> None:
        self.contexts.build_tree(self._providers)
        if self._on_initial_views is not None:
            self._on_initial_views()

    def _reveal_current_popup(self) -> None:
        """Show a focused popup again after the too-small notice hid it."""
        focused = self.contexts.focused
        if focused is None or focused.panel not in POPUP_PANELS:
            return
        if self.backend.get(focused.panel).hidden:
            self.contexts.show(focused.panel)

    def _resize_current_popup(self, width: int, height: int) -> None:
        focused = self.contexts.focused
        if focused is None or focused.panel not in POPUP_PANELS:
            return
        surface = self.backend.get(focused.panel)
        if surface.hidden:
            return
        region = popup_region(width, height, len(surface.lines))
        self.backend.set_bounds(focused.panel, region.expand(1) if surface.frame else region)

