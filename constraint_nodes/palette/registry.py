"""
Palette Registry - loads and serves instance color palettes.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from .. import config
from .schemas import ColorPalette, PaletteSummary

logger = logging.getLogger(__name__)


class PaletteRegistry:
    """Registry for color palettes loaded from palettes.json."""

    def __init__(self, definitions_dir: Optional[Path] = None, default_key: Optional[str] = None):
        """Initialize the registry."""
        self.definitions_dir = definitions_dir or config.PALETTE_DEFINITIONS_DIR
        self.default_key = default_key or config.DEFAULT_PALETTE_KEY
        self._palettes: dict[str, ColorPalette] = {}
        self._load_all()

    def _load_all(self):
        """Load all palette definitions."""
        palettes_path = self.definitions_dir / "palettes.json"
        if not palettes_path.exists():
            raise FileNotFoundError(f"Palette definitions not found: {palettes_path}")

        with open(palettes_path, "r") as f:
            data = json.load(f)

        for entry in data.get("palettes", []):
            try:
                palette = ColorPalette(**entry)
            except Exception as e:
                logger.error(f"Failed to load palette {entry.get('key', '?')}: {e}")
                continue
            self._palettes[palette.key] = palette
            logger.info(f"Loaded palette: {palette.key}")

        if self.default_key not in self._palettes:
            raise ValueError(f"Default palette not defined: {self.default_key}")

    def reload(self):
        """Reload all definitions from disk."""
        self._palettes.clear()
        self._load_all()

    def list_palettes(self) -> list[PaletteSummary]:
        """List all available palettes."""
        return [
            PaletteSummary(
                key=palette.key,
                name=palette.name,
                size=len(palette.series),
                preview=[color.rgb for color in palette.series[:3]],
            )
            for palette in self._palettes.values()
        ]

    def get_palette(self, key: str) -> Optional[ColorPalette]:
        """Get a specific palette."""
        return self._palettes.get(key)

    def get_default_palette(self) -> ColorPalette:
        return self._palettes[self.default_key]

    def count(self) -> int:
        return len(self._palettes)

    def get_stats(self) -> dict:
        """Get registry statistics."""
        return {
            "palettes_loaded": len(self._palettes),
            "default_palette": self.default_key,
        }


# Global registry instance
_registry: Optional[PaletteRegistry] = None


def get_palette_registry() -> PaletteRegistry:
    """Get the global palette registry instance."""
    global _registry
    if _registry is None:
        _registry = PaletteRegistry()
    return _registry
