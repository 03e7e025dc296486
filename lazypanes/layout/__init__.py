"""
Geometry for the panel layout.

Example usage:
    from lazypanes.layout import compute_dimensions

    regions = compute_dimensions(200, 50, information="v0.1.0")
    regions["main"]  # Region(x0=67, y0=4, x1=198, y1=47)
"""

from .config import DEFAULT_SETTINGS, SIDE_WINDOWS, LayoutSettings, SizeSpec
from .dimensions import (
    APP_STATUS,
    INFORMATION,
    LIMIT,
    MAIN,
    OPTIONS,
    SEARCH,
    SEARCH_PREFIX,
    SEARCH_PREFIX_WINDOW,
    SECONDARY,
    STATUS,
    compute_dimensions,
    information_text,
    popup_region,
    split_sizes,
)
from .region import MINIMUM_HEIGHT, MINIMUM_WIDTH, Region, is_too_small

__all__ = [
    # Regions
    "Region",
    "MINIMUM_WIDTH",
    "MINIMUM_HEIGHT",
    "is_too_small",
    # Settings
    "LayoutSettings",
    "SizeSpec",
    "DEFAULT_SETTINGS",
    "SIDE_WINDOWS",
    # Dimension calculator
    "compute_dimensions",
    "information_text",
    "popup_region",
    "split_sizes",
    # Window names
    "MAIN",
    "SECONDARY",
    "STATUS",
    "INFORMATION",
    "OPTIONS",
    "APP_STATUS",
    "SEARCH",
    "SEARCH_PREFIX",
    "SEARCH_PREFIX_WINDOW",
    "LIMIT",
]
