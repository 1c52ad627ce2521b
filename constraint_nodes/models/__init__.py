"""
Domain models for parsed layout constraints.
"""

from .schemas import (
    DEFAULT_COLOR,
    Annotation,
    Attribute,
    Color,
    Constant,
    Constraint,
    ConstraintGroup,
    Footnote,
    Instance,
    LayoutItemAttribute,
    Multiplier,
    Relation,
)

__all__ = [
    "DEFAULT_COLOR",
    "Annotation",
    "Attribute",
    "Color",
    "Constant",
    "Constraint",
    "ConstraintGroup",
    "Footnote",
    "Instance",
    "LayoutItemAttribute",
    "Multiplier",
    "Relation",
]
