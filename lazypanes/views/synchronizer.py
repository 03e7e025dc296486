"""
View synchronizer.

Gets or creates the surface for every panel from the regions computed for
a pass. Defaults are applied once, when a surface is created; later passes
only move surfaces, so content, scroll position and styling survive.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..exceptions import SurfaceNotFoundError
from ..i18n import Translator
from ..layout.dimensions import OPTIONS
from ..layout.region import Region
from ..theme import Theme
from .backend import RenderBackend
from .panels import HIDDEN_VIEW_OFFSET, LAYOUT_PANELS, PanelSpec, panel_spec
from .surface import HIDDEN_REGION, Surface

logger = logging.getLogger(__name__)

POPUP_PARKING = Region(
    HIDDEN_VIEW_OFFSET,
    HIDDEN_VIEW_OFFSET,
    HIDDEN_VIEW_OFFSET + 10,
    HIDDEN_VIEW_OFFSET + 10,
)


class ViewSynchronizer:
    """Creates and positions surfaces from computed regions.

    Args:
        backend: Rendering backend owning the surfaces
        translator: Lookup for titles, tabs and fixed content
        theme: Lookup for semantic colors
        on_initial_views: Called once, right after the options surface is
            first created
    """

    def __init__(
        self,
        backend: RenderBackend,
        translator: Translator,
        theme: Theme,
        on_initial_views: Optional[Callable[[], None]] = None,
    ) -> None:
        self.backend = backend
        self.translator = translator
        self.theme = theme
        self._on_initial_views = on_initial_views
        self._initial_views_created = False

    def sync(self, regions: Dict[str, Region]) -> List[str]:
        """Ensure a surface for every layout panel.

        Returns:
            Names of the surfaces created during this call
        """
        created = []
        for spec in LAYOUT_PANELS:
            if spec.popup:
                _, was_created = self.ensure_popup(spec.name)
            else:
                _, was_created = self.ensure(spec.name, regions.get(spec.window), spec.frame)
            if was_created:
                created.append(spec.name)
        if created:
            logger.debug("Created surfaces: %s", ", ".join(created))
        return created

    def ensure(
        self, panel_name: str, region: Optional[Region], has_frame: bool
    ) -> Tuple[Surface, bool]:
        """Get or create the surface of a panel and place it.

        Args:
            panel_name: Panel whose surface to place
            region: Content region for this pass, or None if the panel is hidden
            has_frame: Expand the bounds by one cell for the border

        Returns:
            Tuple of (surface, whether it was created by this call)
        """
        spec = panel_spec(panel_name)
        surface = self._lookup(panel_name)

        if region is None:
            if surface is None:
                surface = self.backend.create(panel_name, HIDDEN_REGION)
                self._apply_defaults(spec)
                self.backend.hide(panel_name)
                self._created(spec)
                return surface, True
            if not surface.hidden:
                self.backend.hide(panel_name)
            return surface, False

        bounds = region.expand(1) if has_frame else region
        if surface is None:
            surface = self.backend.create(panel_name, bounds)
            self._apply_defaults(spec)
            self._created(spec)
            return surface, True

        self.backend.set_bounds(panel_name, bounds)
        return surface, False

    def ensure_popup(self, panel_name: str) -> Tuple[Surface, bool]:
        """Create a popup surface parked off-screen; existing popups are left alone."""
        spec = panel_spec(panel_name)
        surface = self._lookup(panel_name)
        if surface is not None:
            return surface, False
        surface = self.backend.create(panel_name, POPUP_PARKING)
        self._apply_defaults(spec)
        self.backend.hide(panel_name)
        return surface, True

    def show_only(self, panel_name: str, region: Region) -> Surface:
        """Place one panel on top and hide every other surface."""
        surface, _ = self.ensure(panel_name, region, panel_spec(panel_name).frame)
        self.backend.raise_surface(panel_name)
        for name in self.backend.stacking_order():
            if name != panel_name and not self.backend.get(name).hidden:
                self.backend.hide(name)
        return surface

    def _lookup(self, panel_name: str) -> Optional[Surface]:
        try:
            return self.backend.get(panel_name)
        except SurfaceNotFoundError:
            return None

    def _apply_defaults(self, spec: PanelSpec) -> None:
        localize = self.translator.localize
        self.backend.configure(
            spec.name,
            title=localize(spec.title_id) if spec.title_id else "",
            fg_color=self.theme.color(spec.color),
            bg_color=self.theme.color(spec.background),
            frame=spec.frame,
            wrap=spec.wrap,
            editable=spec.editable,
            highlight=spec.highlight,
            contains_list=spec.contains_list,
            ignore_carriage_returns=spec.ignore_carriage_returns,
            tabs=[localize(tab_id) for tab_id in spec.tab_ids],
        )
        if spec.content is not None:
            self.backend.set_content(spec.name, [spec.content])
        elif spec.content_id is not None:
            self.backend.set_content(spec.name, [localize(spec.content_id)])
        if spec.lowered:
            self.backend.lower_surface(spec.name)

    def _created(self, spec: PanelSpec) -> None:
        if spec.name != OPTIONS or self._initial_views_created:
            return
        self._initial_views_created = True
        logger.info("Initial views created")
        if self._on_initial_views is not None:
            self._on_initial_views()
