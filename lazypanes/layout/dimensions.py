"""
Dimension calculator.

Pure functions mapping (terminal size, mode flags, status/information text)
to a window name -> Region mapping. A window missing from the mapping is
hidden for the pass. Regions are content areas: framed panels get their
border drawn one cell outside the region.
"""

import logging
from typing import Dict, List, Optional, Sequence

from rich.text import Text

from ..i18n import Translator
from ..state import UIModeFlags
from .config import DEFAULT_SETTINGS, SIDE_WINDOWS, LayoutSettings, SizeSpec
from .region import Region

logger = logging.getLogger(__name__)

MAIN = "main"
SECONDARY = "secondary"
STATUS = "status"
INFORMATION = "information"
OPTIONS = "options"
APP_STATUS = "appStatus"
SEARCH_PREFIX_WINDOW = "searchPrefix"
SEARCH = "search"
LIMIT = "limit"

SEARCH_PREFIX = "search: "
INFO_SECTION_PADDING = " "

# A framed window needs one row/column of content between its borders
FRAMED_MINIMUM = 3


def split_sizes(length: int, sizes: Sequence[SizeSpec], minimum: int = 0) -> List[int]:
    """Divide ``length`` cells between children.

    Every child first gets ``minimum`` cells. Fixed and percentage sizes
    then take what they ask for (as far as space allows) and fractions
    share what is left by weight, leftover cells going to the earliest
    fractional children. The result always sums to ``length``.

    Args:
        length: Cells available along the split axis
        sizes: One size specification per child
        minimum: Cells every child gets regardless of its size

    Returns:
        List of cell counts, one per child

    Raises:
        ValueError: If ``length`` cannot satisfy the minimum for every child

    Examples:
        >>> split_sizes(10, [SizeSpec.fraction(1), SizeSpec.fraction(1)])
        [5, 5]
        >>> split_sizes(10, [SizeSpec.fraction(1), SizeSpec.fixed(3)])
        [7, 3]
    """
    if not sizes:
        return []
    spare = length - minimum * len(sizes)
    if spare < 0:
        raise ValueError(
            f"Cannot split {length} cells into {len(sizes)} parts of at least {minimum}"
        )
    result = [minimum] * len(sizes)

    for i, size in enumerate(sizes):
        if size.unit == "fr":
            continue
        take = min(max(size.resolve(length) - minimum, 0), spare)
        result[i] += take
        spare -= take

    fractions = [i for i, size in enumerate(sizes) if size.unit == "fr"]
    total_weight = sum(sizes[i].value for i in fractions)
    if not fractions or total_weight <= 0:
        result[-1] += spare
        return result

    distributed = 0
    for i in fractions:
        share = int(spare * sizes[i].value / total_weight)
        result[i] += share
        distributed += share
    for i in fractions[: spare - distributed]:
        result[i] += 1
    return result


def information_text(flags: UIModeFlags, translator: Translator, version: str) -> Text:
    """Build the coloured text shown in the information strip.

    Diff mode wins over filter mode, which wins over copied commits, which
    win over the donate prompt; otherwise the version string is shown.
    """
    reset = Text(translator.localize("(reset)"), style="underline")
    if flags.diff_mode:
        return Text.assemble(
            f"{translator.localize('showingGitDiff')} git diff {flags.diff_ref} ",
            reset,
            style="magenta",
        )
    if flags.filter_mode:
        return Text.assemble(
            f"{translator.localize('filteringBy')} '{flags.filter_path}' ",
            reset,
            style="bold red",
        )
    if flags.cherry_picked_count > 0:
        return Text(
            f"{flags.cherry_picked_count} {translator.localize('commitsCopied')}",
            style="cyan",
        )
    if flags.mouse_enabled:
        return Text.assemble(
            (translator.localize("Donate"), "magenta underline"),
            f" {version}",
        )
    return Text(version)


def compute_dimensions(
    width: int,
    height: int,
    *,
    information: str = "",
    app_status: str = "",
    flags: Optional[UIModeFlags] = None,
    side_window: str = "files",
    settings: LayoutSettings = DEFAULT_SETTINGS,
) -> Dict[str, Region]:
    """Compute the region of every visible window for one pass.

    Args:
        width: Terminal width in cells
        height: Terminal height in cells
        information: Plain text of the information strip
        app_status: Plain text of the application status bar
        flags: Current mode flags
        side_window: Side window the user is working in (expanded or tabbed)
        settings: Geometry settings

    Returns:
        Mapping of window name to content region. Below the minimum size it
        holds only the ``limit`` window.
    """
    flags = flags or UIModeFlags()
    if settings.is_too_small(width, height):
        return {LIMIT: Region(0, 0, max(width - 1, 0), max(height - 1, 0))}

    dimensions: Dict[str, Region] = {}
    top = settings.top_strip_height
    footer_y = height - 1

    # Reserved rows first so they win over the content columns
    dimensions.update(_top_strip(width, top, information))
    dimensions.update(_footer(width, footer_y, app_status, flags))

    side_width = _side_column_width(width, flags, settings)
    dimensions.update(
        _side_column(0, side_width - 1, top, footer_y - 1, side_window, settings)
    )
    dimensions.update(_main_column(side_width, width - 1, top, footer_y - 1, flags))
    return dimensions


def popup_region(width: int, height: int, line_count: int) -> Region:
    """Centered content region for a popup holding ``line_count`` lines."""
    panel_width = max(1, width * 4 // 7)
    panel_height = max(1, min(line_count, height - 2))
    x0 = (width - panel_width) // 2
    y0 = (height - panel_height) // 2
    return Region(x0, y0, x0 + panel_width - 1, y0 + panel_height - 1)


def _top_strip(width: int, top: int, information: str) -> Dict[str, Region]:
    info_width = 0
    if information:
        info_width = min(len(INFO_SECTION_PADDING + information), width // 2)

    regions = {STATUS: Region(0, 0, width - 1 - info_width, top - 1).inset(1)}
    if info_width:
        row = top // 2
        regions[INFORMATION] = Region(width - info_width, row, width - 1, row)
    return regions


def _footer(width: int, y: int, app_status: str, flags: UIModeFlags) -> Dict[str, Region]:
    regions: Dict[str, Region] = {}
    x = 0
    if app_status:
        status_width = min(len(app_status) + 1, width // 2)
        regions[APP_STATUS] = Region(0, y, status_width - 1, y)
        x = status_width

    if flags.searching:
        prefix_width = min(len(SEARCH_PREFIX), width - x - 1)
        regions[SEARCH_PREFIX_WINDOW] = Region(x, y, x + prefix_width - 1, y)
        regions[SEARCH] = Region(x + prefix_width, y, width - 1, y)
    else:
        regions[OPTIONS] = Region(x, y, width - 1, y)
    return regions


def _side_column_width(width: int, flags: UIModeFlags, settings: LayoutSettings) -> int:
    main_minimum = FRAMED_MINIMUM * (2 if flags.diff_mode else 1)
    requested = settings.side_panel_width.resolve(width)
    return max(FRAMED_MINIMUM, min(requested, width - main_minimum))


def _side_column(
    x0: int,
    x1: int,
    y0: int,
    y1: int,
    side_window: str,
    settings: LayoutSettings,
) -> Dict[str, Region]:
    current = side_window if side_window in SIDE_WINDOWS else SIDE_WINDOWS[0]
    length = y1 - y0 + 1

    if length < FRAMED_MINIMUM * len(SIDE_WINDOWS):
        # Tabbed: only the current window fits
        logger.debug("Side column tabbed (%d rows), showing %s", length, current)
        return {current: Region(x0, y0, x1, y1).inset(1)}

    sizes = []
    for window in SIDE_WINDOWS:
        size = settings.side_size(window)
        if window == current:
            if size.unit != "fr":
                size = SizeSpec.fraction(1)
            if settings.expand_focused_side_panel:
                size = SizeSpec.fraction(size.value * 2)
        sizes.append(size)

    regions = {}
    y = y0
    for window, rows in zip(SIDE_WINDOWS, split_sizes(length, sizes, FRAMED_MINIMUM)):
        regions[window] = Region(x0, y, x1, y + rows - 1).inset(1)
        y += rows
    return regions


def _main_column(x0: int, x1: int, y0: int, y1: int, flags: UIModeFlags) -> Dict[str, Region]:
    if not flags.diff_mode:
        return {MAIN: Region(x0, y0, x1, y1).inset(1)}

    main_width, _ = split_sizes(
        x1 - x0 + 1, [SizeSpec.fraction(1), SizeSpec.fraction(1)], FRAMED_MINIMUM
    )
    return {
        MAIN: Region(x0, y0, x0 + main_width - 1, y1).inset(1),
        SECONDARY: Region(x0 + main_width, y0, x1, y1).inset(1),
    }
