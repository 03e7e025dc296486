"""Surfaces, rendering backends and the view synchronizer."""

from .backend import MemoryBackend, RenderBackend
from .panels import LAYOUT_PANELS, PANELS, POPUP_PANELS, PanelSpec, panel_spec
from .surface import Surface
from .synchronizer import ViewSynchronizer

__all__ = [
    "MemoryBackend",
    "RenderBackend",
    "Surface",
    "ViewSynchronizer",
    "PanelSpec",
    "LAYOUT_PANELS",
    "PANELS",
    "POPUP_PANELS",
    "panel_spec",
]
