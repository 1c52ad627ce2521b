"""
API routes rendering constraint groups to HTML.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse

from ...models import ConstraintGroup
from ...rendering import ConstraintGroupRenderer
from .nodes import prepare_group

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])

# Initialize renderer
renderer = ConstraintGroupRenderer()


@router.post("/constraint-group", response_class=HTMLResponse)
async def render_constraint_group(
    group: ConstraintGroup,
    include_permalink: bool = Query(True),
    annotate: bool = Query(True),
    palette: Optional[str] = Query(None),
):
    """Render a constraint group as an HTML fragment."""
    group = prepare_group(group, annotate, palette)
    try:
        html = renderer.render(group, include_permalink=include_permalink)
    except ValueError as e:
        logger.error(f"Render failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return HTMLResponse(content=html)
