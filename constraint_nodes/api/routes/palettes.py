"""
Palette API routes for instance color palettes.
"""

from fastapi import APIRouter, HTTPException

from ...palette import ColorPalette, PaletteSummary, get_palette_registry

router = APIRouter(prefix="/palettes", tags=["palettes"])


@router.get("", response_model=list[PaletteSummary])
async def list_palettes():
    """List all available palettes with summaries."""
    registry = get_palette_registry()
    return registry.list_palettes()


@router.get("/stats")
async def get_palette_stats():
    """Get palette registry statistics."""
    registry = get_palette_registry()
    return registry.get_stats()


@router.get("/{key}", response_model=ColorPalette)
async def get_palette(key: str):
    """Get a specific palette by key."""
    registry = get_palette_registry()
    palette = registry.get_palette(key)
    if not palette:
        raise HTTPException(status_code=404, detail=f"Palette '{key}' not found")
    return palette
