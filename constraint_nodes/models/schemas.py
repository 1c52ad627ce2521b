"""Domain schemas for parsed Auto Layout constraints.

These are the read-only inputs of the node mapper. They are produced
upstream by whatever parses a constraint log and are never mutated here.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Relation(str, Enum):
    """Constraint relation, keyed by its display token."""
    EQUAL = "=="
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


class Attribute(str, Enum):
    """Layout attribute raw names."""
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    LEADING = "leading"
    TRAILING = "trailing"
    WIDTH = "width"
    HEIGHT = "height"
    CENTER_X = "centerX"
    CENTER_Y = "centerY"
    LAST_BASELINE = "lastBaseline"
    FIRST_BASELINE = "firstBaseline"
    LEFT_MARGIN = "leftMargin"
    RIGHT_MARGIN = "rightMargin"
    TOP_MARGIN = "topMargin"
    BOTTOM_MARGIN = "bottomMargin"
    LEADING_MARGIN = "leadingMargin"
    TRAILING_MARGIN = "trailingMargin"
    CENTER_X_WITHIN_MARGINS = "centerXWithinMargins"
    CENTER_Y_WITHIN_MARGINS = "centerYWithinMargins"
    NOT_AN_ATTRIBUTE = "notAnAttribute"

    @property
    def includes_margin(self) -> bool:
        return self.value.endswith("Margin") or self.value.endswith("WithinMargins")


class Color(BaseModel):
    """An RGB color."""
    model_config = ConfigDict(frozen=True)

    red: int = Field(..., ge=0, le=255)
    green: int = Field(..., ge=0, le=255)
    blue: int = Field(..., ge=0, le=255)

    @property
    def rgb(self) -> str:
        return f"rgb({self.red}, {self.green}, {self.blue})"


DEFAULT_COLOR = Color(red=142, green=142, blue=147)


class Instance(BaseModel):
    """A view or layout guide taking part in constraints.

    Identity is the address: two instances with the same address are
    the same object within a rendering pass.
    """
    model_config = ConfigDict(frozen=True)

    address: str = Field(..., description="Stable identity, e.g. '0x7fd2b3c0a1e0'")
    class_name: str = Field(..., description="Runtime class name, e.g. 'UILabel'")
    pretty_name: str = Field(..., description="Display name, e.g. 'Label'")
    identifier: Optional[str] = Field(
        default=None,
        description="Accessibility or constraint identifier set by the developer",
    )

    def __eq__(self, other):
        if not isinstance(other, Instance):
            return NotImplemented
        return self.address == other.address

    def __hash__(self):
        return hash(self.address)


class LayoutItemAttribute(BaseModel):
    """One side of a constraint: an instance paired with an attribute."""
    model_config = ConfigDict(frozen=True)

    layout_item: Instance
    attribute: Attribute


class Constant(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = 0.0


class Multiplier(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: float = 1.0


class Annotation(BaseModel):
    """Per-pass display data for an instance."""
    model_config = ConfigDict(frozen=True)

    uniquing_suffix: str = Field(
        default="",
        description="Suffix telling apart instances that share a display name",
    )
    color: Color = DEFAULT_COLOR


class Footnote(BaseModel):
    model_config = ConfigDict(frozen=True)

    marker: str
    html_text: str = Field(..., description="Pre-rendered HTML body")


class Constraint(BaseModel):
    """A single layout constraint.

    A constraint without ``second`` pins an attribute to a constant
    (e.g. a width); with ``second`` it relates two endpoints.
    """
    model_config = ConfigDict(frozen=True)

    identity: str = Field(..., description="Constraint address or identifier token")
    first: LayoutItemAttribute
    second: Optional[LayoutItemAttribute] = None
    relation: Relation = Relation.EQUAL
    constant: Constant = Field(default_factory=Constant)
    multiplier: Multiplier = Field(default_factory=Multiplier)
    footnote: Optional[Footnote] = Field(
        default=None,
        description="Footnote this constraint refers to",
    )
    html_description: str = Field(
        default="",
        description="Pre-rendered HTML description of the constraint",
    )


class ConstraintGroup(BaseModel):
    """All constraints parsed from one raw log, plus their footnotes."""
    model_config = ConfigDict(frozen=True)

    raw: str = Field(..., description="Raw text the group was parsed from")
    constraints: list[Constraint] = Field(default_factory=list)
    footnotes: list[Footnote] = Field(default_factory=list)
    annotations: dict[str, Annotation] = Field(
        default_factory=dict,
        description="Annotations keyed by instance address",
    )

    def annotation_for(self, instance: Instance) -> Optional[Annotation]:
        return self.annotations.get(instance.address)

    def instances(self) -> list[Instance]:
        """Instances in order of first appearance, first endpoint before second."""
        seen: dict[str, Instance] = {}
        for constraint in self.constraints:
            for endpoint in (constraint.first, constraint.second):
                if endpoint is None:
                    continue
                seen.setdefault(endpoint.layout_item.address, endpoint.layout_item)
        return list(seen.values())
