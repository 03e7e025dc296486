"""Tests for the view synchronizer and the memory backend."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from rich.text import Text

from lazypanes.exceptions import SurfaceNotFoundError
from lazypanes.i18n import Translator
from lazypanes.layout.dimensions import (
    APP_STATUS,
    LIMIT,
    MAIN,
    OPTIONS,
    SEARCH_PREFIX,
    SEARCH_PREFIX_WINDOW,
    SECONDARY,
    compute_dimensions,
)
from lazypanes.layout.region import Region
from lazypanes.theme import Theme
from lazypanes.views.backend import MemoryBackend
from lazypanes.views.panels import COMMIT_FILES, COMMIT_MESSAGE, COMMITS, LAYOUT_PANELS
from lazypanes.views.synchronizer import POPUP_PARKING, ViewSynchronizer


@pytest.fixture
def on_initial_views() -> Mock:
    return Mock()


@pytest.fixture
def views(backend: MemoryBackend, on_initial_views: Mock) -> ViewSynchronizer:
    return ViewSynchronizer(backend, Translator(), Theme(), on_initial_views=on_initial_views)


class TestSync:
    """Test creating and placing surfaces from regions."""

    def test_creates_every_layout_panel(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        created = views.sync(compute_dimensions(200, 50, information="v1"))
        assert created == [spec.name for spec in LAYOUT_PANELS]
        assert all(backend.exists(spec.name) for spec in LAYOUT_PANELS)

    def test_second_sync_creates_nothing(self, views: ViewSynchronizer) -> None:
        regions = compute_dimensions(200, 50, information="v1")
        views.sync(regions)
        assert views.sync(regions) == []

    def test_framed_surface_bounds_include_border(
        self, backend: MemoryBackend, views: ViewSynchronizer
    ) -> None:
        regions = compute_dimensions(200, 50)
        views.sync(regions)
        assert backend.get(MAIN).bounds == regions[MAIN].expand(1)
        assert backend.get(MAIN).size() == (regions[MAIN].width, regions[MAIN].height)

    def test_frameless_surface_bounds_match_region(
        self, backend: MemoryBackend, views: ViewSynchronizer
    ) -> None:
        regions = compute_dimensions(200, 50)
        views.sync(regions)
        assert backend.get(OPTIONS).bounds == regions[OPTIONS]
        assert backend.get(OPTIONS).frame is False

    def test_panels_share_window(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        assert backend.get(COMMIT_FILES).bounds == backend.get(COMMITS).bounds

    def test_absent_windows_are_hidden(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        assert backend.get(SECONDARY).hidden
        assert backend.get(APP_STATUS).hidden
        assert backend.get(LIMIT).hidden
        assert not backend.get(MAIN).hidden

    def test_hidden_surface_shown_again(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        views.sync(compute_dimensions(200, 50, flags=None, app_status="Pushing"))
        assert not backend.get(APP_STATUS).hidden

    def test_idempotent(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        regions = compute_dimensions(200, 50, information="v1")
        views.sync(regions)
        revision = backend.revision
        views.sync(regions)
        assert backend.revision == revision

    def test_content_survives_resize(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        backend.set_content(MAIN, ["line 1", "line 2"])
        views.sync(compute_dimensions(120, 30))
        assert backend.get(MAIN).lines == ["line 1", "line 2"]


class TestDefaults:
    """Test one-time defaults applied on creation."""

    def test_titles_and_tabs(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        assert backend.get("files").title == "Files"
        assert backend.get("branches").tabs == ["Local Branches", "Remotes", "Tags"]
        assert backend.get("commits").tabs == ["Commits", "Reflog"]
        assert backend.get(MAIN).wrap is True

    def test_search_prefix_content(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        assert backend.get(SEARCH_PREFIX_WINDOW).lines == [SEARCH_PREFIX]

    def test_limit_content(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        assert backend.get(LIMIT).lines == ["Not enough space to render panels"]

    def test_defaults_not_reapplied(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        backend.configure("files", title="Changed")
        views.sync(compute_dimensions(200, 50))
        assert backend.get("files").title == "Changed"

    def test_app_status_sent_to_back(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50, app_status="Fetching"))
        order = backend.stacking_order()
        visible = [name for name in order if not backend.get(name).hidden]
        assert visible[0] == APP_STATUS


class TestInitialViews:
    """Test the one-time initial setup trigger."""

    def test_runs_once(self, views: ViewSynchronizer, on_initial_views: Mock) -> None:
        views.sync(compute_dimensions(200, 50))
        views.sync(compute_dimensions(100, 30))
        on_initial_views.assert_called_once_with()

    def test_not_triggered_by_other_panels(self, views: ViewSynchronizer, on_initial_views: Mock) -> None:
        views.ensure(MAIN, Region(1, 1, 10, 10), True)
        on_initial_views.assert_not_called()


class TestPopups:
    """Test popup surfaces."""

    def test_parked_off_screen_and_hidden(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        popup = backend.get(COMMIT_MESSAGE)
        assert popup.bounds == POPUP_PARKING
        assert popup.hidden

    def test_not_moved_by_layout(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        backend.set_bounds(COMMIT_MESSAGE, Region(10, 10, 30, 15))
        views.sync(compute_dimensions(120, 40))
        assert backend.get(COMMIT_MESSAGE).bounds == Region(10, 10, 30, 15)


class TestShowOnly:
    """Test the minimum-size notice."""

    def test_hides_everything_else(self, backend: MemoryBackend, views: ViewSynchronizer) -> None:
        views.sync(compute_dimensions(200, 50))
        views.show_only(LIMIT, Region(0, 0, 7, 4))
        assert [s.name for s in backend.visible_surfaces()] == [LIMIT]
        assert backend.stacking_order()[-1] == LIMIT


class TestMemoryBackend:
    """Test backend bookkeeping."""

    def test_missing_surface(self, backend: MemoryBackend) -> None:
        with pytest.raises(SurfaceNotFoundError) as exc_info:
            backend.get("nope")
        assert exc_info.value.panel == "nope"

    def test_duplicate_create(self, backend: MemoryBackend) -> None:
        backend.create("x", Region(0, 0, 1, 1))
        with pytest.raises(ValueError):
            backend.create("x", Region(0, 0, 1, 1))

    def test_unknown_property(self, backend: MemoryBackend) -> None:
        backend.create("x", Region(0, 0, 1, 1))
        with pytest.raises(ValueError):
            backend.configure("x", colour="red")

    def test_hide_lowers(self, backend: MemoryBackend) -> None:
        backend.create("a", Region(0, 0, 1, 1))
        backend.create("b", Region(0, 0, 1, 1))
        backend.hide("b")
        assert backend.stacking_order() == ["b", "a"]
        assert backend.get("b").hidden

    def test_unchanged_writes_do_not_bump_revision(self, backend: MemoryBackend) -> None:
        backend.create("a", Region(0, 0, 5, 5))
        backend.set_content("a", ["x"])
        revision = backend.revision
        backend.set_content("a", ["x"])
        backend.set_bounds("a", Region(0, 0, 5, 5))
        backend.configure("a", title="")
        assert backend.revision == revision

    def test_styled_content_keeps_plain_lines(self, backend: MemoryBackend) -> None:
        backend.create("a", Region(0, 0, 20, 5))
        backend.set_content("a", [Text("red", style="red"), "plain"])
        surface = backend.get("a")
        assert surface.lines == ["red", "plain"]
        assert [row.plain for row in surface.styled] == ["red", "plain"]

        revision = backend.revision
        backend.set_content("a", [Text("red", style="red"), "plain"])
        assert backend.revision == revision

        backend.append_lines("a", ["more"])
        assert surface.styled[-1].plain == "more"

    def test_plain_content_clears_styling(self, backend: MemoryBackend) -> None:
        backend.create("a", Region(0, 0, 20, 5))
        backend.set_content("a", [Text("red", style="red")])
        revision = backend.revision
        backend.set_content("a", ["red"])
        assert backend.get("a").styled == []
        assert backend.revision == revision + 1
