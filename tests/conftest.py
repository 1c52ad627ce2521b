"""
Shared fixtures: a small constraint group with a label pinned inside a
container view, two buttons sharing a display name, and a footnote.
"""
import pytest

from constraint_nodes.models import (
    Attribute,
    Constant,
    Constraint,
    ConstraintGroup,
    Footnote,
    Instance,
    LayoutItemAttribute,
    Multiplier,
    Relation,
)


@pytest.fixture
def label():
    return Instance(address="0x7f8a1c0", class_name="UILabel", pretty_name="Label", identifier="title")


@pytest.fixture
def container():
    return Instance(address="0x7f8a2d0", class_name="UIView", pretty_name="View")


@pytest.fixture
def endpoint_factory():
    """Factory for (instance, attribute) endpoints."""
    def _make(instance, attribute=Attribute.TOP):
        return LayoutItemAttribute(layout_item=instance, attribute=attribute)
    return _make


@pytest.fixture
def margins_footnote():
    return Footnote(marker="1", html_text="Uses the <em>layout margins</em> of the view")


@pytest.fixture
def constraint_factory(endpoint_factory, label, container):
    """Factory for constraints between the label and the container."""
    def _make(constant=0.0, multiplier=1.0, second=True, relation=Relation.EQUAL,
              footnote=None, identity="0x600001"):
        return Constraint(
            identity=identity,
            first=endpoint_factory(label, Attribute.TOP),
            second=endpoint_factory(container, Attribute.TOP_MARGIN) if second else None,
            relation=relation,
            constant=Constant(value=constant),
            multiplier=Multiplier(value=multiplier),
            footnote=footnote,
            html_description="<strong>Label</strong> sits below the top margin",
        )
    return _make


@pytest.fixture
def group(constraint_factory, margins_footnote):
    return ConstraintGroup(
        raw="(\n    \"<NSLayoutConstraint:0x600001 UILabel:0x7f8a1c0.top == UIView:0x7f8a2d0.topMargin + 8>\"\n)",
        constraints=[
            constraint_factory(constant=8.0, footnote=margins_footnote),
            constraint_factory(constant=44.0, second=False, identity="0x600002"),
        ],
        footnotes=[margins_footnote],
    )


@pytest.fixture
def twin_buttons_group(endpoint_factory, container):
    """Two distinct buttons with the same display name."""
    ok = Instance(address="0xb1", class_name="UIButton", pretty_name="Button")
    cancel = Instance(address="0xb2", class_name="UIButton", pretty_name="Button")
    return ConstraintGroup(
        raw="buttons",
        constraints=[
            Constraint(
                identity="c1",
                first=endpoint_factory(ok, Attribute.LEADING),
                second=endpoint_factory(container, Attribute.LEADING),
            ),
            Constraint(
                identity="c2",
                first=endpoint_factory(cancel, Attribute.LEADING),
                second=endpoint_factory(ok, Attribute.TRAILING),
                constant=Constant(value=8.0),
            ),
        ],
    )
