"""
Node mapping for constraint templates.

Converts domain models into plain trees of dicts, lists and scalars.
"""

from .formatting import (
    MAXIMUM_PERMALINK_LENGTH,
    format_number,
    initial_of,
    make_permalink,
    percent_encode_alphanumerics,
)
from .mapper import (
    Node,
    attribute_node,
    color_node,
    constant_node,
    constraint_group_node,
    constraint_group_node_without_permalink,
    constraint_node,
    endpoint_node,
    footnote_node,
    instance_node,
    make_node,
    multiplier_node,
    relation_node,
)

__all__ = [
    "MAXIMUM_PERMALINK_LENGTH",
    "Node",
    "attribute_node",
    "color_node",
    "constant_node",
    "constraint_group_node",
    "constraint_group_node_without_permalink",
    "constraint_node",
    "endpoint_node",
    "footnote_node",
    "format_number",
    "initial_of",
    "instance_node",
    "make_node",
    "make_permalink",
    "multiplier_node",
    "percent_encode_alphanumerics",
    "relation_node",
]
