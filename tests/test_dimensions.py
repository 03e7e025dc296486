"""Tests for the dimension calculator."""

from __future__ import annotations

import itertools

import pytest

from lazypanes.layout.config import LayoutSettings, SizeSpec
from lazypanes.layout.dimensions import (
    APP_STATUS,
    INFORMATION,
    LIMIT,
    MAIN,
    OPTIONS,
    SEARCH,
    SEARCH_PREFIX_WINDOW,
    SECONDARY,
    STATUS,
    compute_dimensions,
    popup_region,
    split_sizes,
)
from lazypanes.layout.region import Region
from lazypanes.state import UIModeFlags
from lazypanes.views.panels import panel_spec

INFO = "v0.1.0-test"


def _outer_bounds(regions: dict[str, Region]) -> dict[str, Region]:
    """Regions as surfaces would occupy them, borders included."""
    return {
        name: region.expand(1) if panel_spec(name).frame else region
        for name, region in regions.items()
    }


class TestSplitSizes:
    """Test dividing a length between children."""

    def test_equal_fractions(self) -> None:
        assert split_sizes(10, [SizeSpec.fraction(1), SizeSpec.fraction(1)]) == [5, 5]

    def test_fixed_and_fraction(self) -> None:
        assert split_sizes(10, [SizeSpec.fraction(1), SizeSpec.fixed(3)]) == [7, 3]

    def test_leftover_goes_to_first_fraction(self) -> None:
        sizes = [SizeSpec.fraction(1), SizeSpec.fraction(1), SizeSpec.fraction(1)]
        assert split_sizes(10, sizes) == [4, 3, 3]

    def test_minimum_per_child(self) -> None:
        sizes = [SizeSpec.fraction(1), SizeSpec.fixed(0)]
        assert split_sizes(8, sizes, minimum=3) == [5, 3]

    def test_fixed_only_gives_rest_to_last(self) -> None:
        assert split_sizes(10, [SizeSpec.fixed(2), SizeSpec.fixed(3)]) == [2, 8]

    def test_not_enough_room_for_minimum(self) -> None:
        with pytest.raises(ValueError):
            split_sizes(5, [SizeSpec.fraction(1), SizeSpec.fraction(1)], minimum=3)

    def test_empty(self) -> None:
        assert split_sizes(10, []) == []

    @pytest.mark.parametrize("length", [12, 13, 27, 46, 100])
    def test_sums_to_length(self, length: int) -> None:
        sizes = [SizeSpec.fraction(2), SizeSpec.fraction(1), SizeSpec.fraction(1), SizeSpec.fixed(3)]
        assert sum(split_sizes(length, sizes, minimum=3)) == length


class TestTooSmall:
    """Test the minimum-size notice."""

    @pytest.mark.parametrize(
        "width,height",
        [(9, 50), (200, 8), (0, 0), (1, 1), (9, 8)],
    )
    def test_only_limit_window(self, width: int, height: int) -> None:
        regions = compute_dimensions(width, height, information=INFO)
        assert regions == {LIMIT: Region(0, 0, max(width - 1, 0), max(height - 1, 0))}

    def test_minimum_size_is_laid_out(self) -> None:
        regions = compute_dimensions(10, 9, information=INFO)
        assert LIMIT not in regions
        assert MAIN in regions

    def test_custom_minimum(self) -> None:
        settings = LayoutSettings(min_width=40, min_height=12)
        regions = compute_dimensions(39, 50, settings=settings)
        assert list(regions) == [LIMIT]


class TestDefaultLayout:
    """Test the layout of a roomy terminal."""

    @pytest.fixture
    def regions(self) -> dict[str, Region]:
        return compute_dimensions(200, 50, information=INFO)

    def test_main_fills_right_column(self, regions: dict[str, Region]) -> None:
        assert regions[MAIN] == Region(67, 4, 198, 47)
        assert SECONDARY not in regions

    def test_top_strip(self, regions: dict[str, Region]) -> None:
        assert regions[STATUS] == Region(1, 1, 186, 1)
        assert regions[INFORMATION] == Region(188, 1, 199, 1)
        assert regions[INFORMATION].width == len(" " + INFO)

    def test_footer(self, regions: dict[str, Region]) -> None:
        assert regions[OPTIONS] == Region(0, 49, 199, 49)
        assert APP_STATUS not in regions
        assert SEARCH not in regions
        assert SEARCH_PREFIX_WINDOW not in regions

    def test_side_windows_stack(self, regions: dict[str, Region]) -> None:
        assert regions["files"] == Region(1, 4, 64, 22)
        assert regions["branches"] == Region(1, 25, 64, 33)
        assert regions["commits"] == Region(1, 36, 64, 44)
        assert regions["stash"] == Region(1, 47, 64, 47)

    def test_current_side_window_expanded(self) -> None:
        regions = compute_dimensions(200, 50, information=INFO, side_window="commits")
        assert regions["commits"].height > regions["files"].height
        # stash keeps its fixed size unless it is current
        assert regions["stash"].height == 1

    def test_current_stash_grows(self) -> None:
        regions = compute_dimensions(200, 50, information=INFO, side_window="stash")
        assert regions["stash"].height > 1

    def test_no_expansion_when_disabled(self) -> None:
        settings = LayoutSettings(expand_focused_side_panel=False)
        regions = compute_dimensions(200, 50, information=INFO, settings=settings)
        assert regions["files"].height - regions["branches"].height <= 1

    def test_no_information_without_text(self) -> None:
        regions = compute_dimensions(200, 50)
        assert INFORMATION not in regions
        assert regions[STATUS] == Region(1, 1, 198, 1)

    def test_information_capped_at_half_width(self) -> None:
        regions = compute_dimensions(40, 20, information="x" * 100)
        assert regions[INFORMATION].width == 20


class TestModes:
    """Test geometry changes driven by mode flags."""

    def test_diff_mode_splits_main(self) -> None:
        regions = compute_dimensions(200, 50, flags=UIModeFlags(diff_mode=True, diff_ref="HEAD"))
        assert regions[MAIN] == Region(67, 4, 131, 47)
        assert regions[SECONDARY] == Region(134, 4, 198, 47)

    def test_searching_replaces_options(self) -> None:
        regions = compute_dimensions(200, 50, flags=UIModeFlags(searching=True))
        assert OPTIONS not in regions
        assert regions[SEARCH_PREFIX_WINDOW] == Region(0, 49, 7, 49)
        assert regions[SEARCH] == Region(8, 49, 199, 49)

    def test_app_status_pushes_options(self) -> None:
        regions = compute_dimensions(200, 50, app_status="ok")
        assert regions[APP_STATUS] == Region(0, 49, 2, 49)
        assert regions[OPTIONS] == Region(3, 49, 199, 49)

    def test_tabbed_side_column(self) -> None:
        regions = compute_dimensions(80, 12, side_window="branches")
        assert "branches" in regions
        assert not {"files", "commits", "stash"} & set(regions)

    def test_unknown_side_window_falls_back_to_files(self) -> None:
        regions = compute_dimensions(80, 12, side_window="main")
        assert "files" in regions


class TestLayoutProperties:
    """Properties that hold for every size and mode."""

    SIZES = list(itertools.product([10, 11, 37, 80, 200], [9, 10, 15, 16, 24, 50]))

    @pytest.mark.parametrize("width,height", SIZES)
    @pytest.mark.parametrize("diff_mode", [False, True])
    @pytest.mark.parametrize("searching", [False, True])
    @pytest.mark.parametrize("app_status", ["", "Fetching..."])
    def test_disjoint_and_on_screen(
        self, width: int, height: int, diff_mode: bool, searching: bool, app_status: str
    ) -> None:
        flags = UIModeFlags(diff_mode=diff_mode, searching=searching)
        regions = compute_dimensions(
            width, height, information=INFO, app_status=app_status, flags=flags
        )
        outer = _outer_bounds(regions)

        for name, region in outer.items():
            assert region.x0 >= 0 and region.y0 >= 0, name
            assert region.x1 < width and region.y1 < height, name

        for (a, ra), (b, rb) in itertools.combinations(outer.items(), 2):
            assert not ra.overlaps(rb), f"{a} {ra} overlaps {b} {rb}"

    @pytest.mark.parametrize("width,height", SIZES)
    def test_pure(self, width: int, height: int) -> None:
        first = compute_dimensions(width, height, information=INFO)
        second = compute_dimensions(width, height, information=INFO)
        assert first == second


class TestPopupRegion:
    """Test popup centring."""

    def test_centred(self) -> None:
        assert popup_region(200, 50, 5) == Region(43, 22, 156, 26)

    def test_height_capped(self) -> None:
        region = popup_region(80, 20, 500)
        assert region.height == 18

    def test_empty_popup_has_one_row(self) -> None:
        assert popup_region(80, 20, 0).height == 1
