"""
Pydantic schemas for instance color palettes.
"""

from pydantic import BaseModel, Field

from ..models import Color


class ColorPalette(BaseModel):
    """Colors handed out to instances within one rendering pass."""
    key: str = Field(..., description="Palette identifier")
    name: str = Field(..., description="Human-readable name")
    series: list[Color] = Field(..., min_length=1, description="Ordered colors, cycled per instance")


class PaletteSummary(BaseModel):
    """Summary of a palette for list endpoints."""
    key: str
    name: str
    size: int = Field(..., description="Number of series colors")
    preview: list[str] = Field(..., description="First 3 series colors as rgb strings")
