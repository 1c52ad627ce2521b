"""
API routes converting constraint models into template nodes.
"""

from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query

from ...models import Constraint, ConstraintGroup
from ...nodes import constraint_group_node, constraint_node
from ...palette import annotate_group, get_palette_registry

router = APIRouter(prefix="/nodes", tags=["nodes"])


def prepare_group(group: ConstraintGroup, annotate: bool, palette_key: Optional[str]) -> ConstraintGroup:
    """Apply palette annotations when asked to; 404 for unknown palettes."""
    if not annotate:
        return group
    registry = get_palette_registry()
    palette = registry.get_palette(palette_key) if palette_key else registry.get_default_palette()
    if palette is None:
        raise HTTPException(status_code=404, detail=f"Palette not found: {palette_key}")
    return annotate_group(group, palette)


@router.post("/constraint-group")
async def get_constraint_group_node(
    group: ConstraintGroup,
    include_permalink: bool = Query(True, description="Compute the shareable permalink"),
    annotate: bool = Query(False, description="Assign palette colors and suffixes to instances"),
    palette: Optional[str] = Query(None, description="Palette key (default palette when omitted)"),
) -> dict[str, Any]:
    """
    Convert a constraint group into its template node.

    The permalink is null when disabled or when the encoded raw text would
    reach 2000 characters.
    """
    group = prepare_group(group, annotate, palette)
    return constraint_group_node(group, include_permalink=include_permalink)


@router.post("/constraint")
async def get_constraint_node(constraint: Constraint) -> dict[str, Any]:
    """Convert a single constraint into its template node, without annotations."""
    return constraint_node(constraint)
