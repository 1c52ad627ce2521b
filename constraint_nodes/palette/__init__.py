"""
Palette module for instance colors and per-pass annotations.

This module provides:
- ColorPalette definitions loaded from JSON
- Registry for loading and serving palettes
- Annotation builder assigning colors and uniquing suffixes to instances
"""

from .schemas import ColorPalette, PaletteSummary
from .registry import PaletteRegistry, get_palette_registry
from .annotator import annotate_group, build_annotations

__all__ = [
    "ColorPalette",
    "PaletteSummary",
    "PaletteRegistry",
    "get_palette_registry",
    "annotate_group",
    "build_annotations",
]
