"""Domain-to-view-node mapper.

Turns constraint groups and everything they contain into plain
dict/list/str/number/bool/None trees for the HTML templates. Field names
here are the contract with the templates; ``second`` is the only key that
is ever omitted, every other optional field is an explicit None.
"""

from functools import singledispatch
from typing import Any, Mapping, Optional, Union

from ..models import (
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
from .formatting import (
    NEGATIVE_PREFIX,
    POSITIVE_PREFIX,
    format_number,
    initial_of,
    make_permalink,
)

Node = Union[None, bool, int, float, str, list[Any], dict[str, Any]]

MULTIPLIER_FRACTION_DIGITS = 3


def constraint_group_node(group: ConstraintGroup, include_permalink: bool = True) -> dict[str, Node]:
    """Node for a whole group: constraints, permalink and footnotes."""
    constraint_nodes = [
        constraint_node(constraint, annotations=group.annotations)
        for constraint in group.constraints
    ]
    footnote_nodes = [footnote_node(footnote) for footnote in group.footnotes]
    permalink = make_permalink(group.raw) if include_permalink else None

    return {
        "constraints": constraint_nodes,
        "permalink": permalink,
        "footnotes": footnote_nodes,
    }


def constraint_group_node_without_permalink(group: ConstraintGroup) -> dict[str, Node]:
    return constraint_group_node(group, include_permalink=False)


def constraint_node(
    constraint: Constraint,
    annotations: Optional[Mapping[str, Annotation]] = None,
) -> dict[str, Node]:
    """Node for one constraint.

    Annotations are keyed by instance address. A zero constant between two
    endpoints is hidden; otherwise the constant carries a "+ " prefix only
    when there is a second endpoint to add it to.
    """
    annotations = annotations or {}
    second = constraint.second
    hide_constant = constraint.constant.value == 0.0 and second is not None

    node: dict[str, Node] = {
        "identity": constraint.identity,
        "first": endpoint_node(
            constraint.first,
            annotation=annotations.get(constraint.first.layout_item.address),
        ),
        "relation": relation_node(constraint.relation),
        "constant": None if hide_constant else constant_node(
            constraint.constant, include_positive_prefix=second is not None,
        ),
        "multiplier": multiplier_node(constraint.multiplier),
        "description": constraint.html_description,
        "footnote": footnote_node(constraint.footnote) if constraint.footnote is not None else None,
    }

    if second is not None:
        node["second"] = endpoint_node(
            second,
            annotation=annotations.get(second.layout_item.address),
        )
    return node


def endpoint_node(endpoint: LayoutItemAttribute, annotation: Optional[Annotation] = None) -> dict[str, Node]:
    return {
        "instance": instance_node(endpoint.layout_item, annotation=annotation),
        "attribute": attribute_node(endpoint.attribute),
    }


def instance_node(instance: Instance, annotation: Optional[Annotation] = None) -> dict[str, Node]:
    color = annotation.color if annotation is not None else DEFAULT_COLOR
    return {
        "address": instance.address,
        "class": instance.class_name,
        "name": instance.pretty_name,
        "suffix": annotation.uniquing_suffix if annotation is not None else None,
        "color": color_node(color),
        "initial": initial_of(instance.pretty_name),
        "identifier": instance.identifier,
    }


def attribute_node(attribute: Attribute) -> dict[str, Node]:
    return {
        "name": attribute.value,
        "includesMargin": attribute.includes_margin,
    }


def relation_node(relation: Relation) -> str:
    return relation.value


def multiplier_node(multiplier: Multiplier) -> Optional[str]:
    """None for the identity multiplier, otherwise e.g. "* 0.5"."""
    if multiplier.value == 1.0:
        return None
    return "* " + format_number(multiplier.value, maximum_fraction_digits=MULTIPLIER_FRACTION_DIGITS)


def constant_node(constant: Constant, include_positive_prefix: bool = False) -> dict[str, Node]:
    if constant.value < 0:
        prefix = NEGATIVE_PREFIX
    elif include_positive_prefix:
        prefix = POSITIVE_PREFIX
    else:
        prefix = None
    return {
        "value": format_number(abs(constant.value)),
        "prefix": prefix,
    }


def color_node(color: Color) -> str:
    return color.rgb


def footnote_node(footnote: Footnote) -> dict[str, Node]:
    return {
        "marker": footnote.marker,
        "text": footnote.html_text,
    }


# Generic entry point with default context: no annotations, permalink on,
# no positive prefix on constants.

@singledispatch
def make_node(entity) -> Node:
    raise TypeError(f"No node representation for {type(entity).__name__}")


make_node.register(ConstraintGroup, constraint_group_node)
make_node.register(Constraint, constraint_node)
make_node.register(LayoutItemAttribute, endpoint_node)
make_node.register(Instance, instance_node)
make_node.register(Attribute, attribute_node)
make_node.register(Relation, relation_node)
make_node.register(Multiplier, multiplier_node)
make_node.register(Constant, constant_node)
make_node.register(Color, color_node)
make_node.register(Footnote, footnote_node)
