"""
Tests for the HTML renderer.
"""
import pytest

from constraint_nodes.models import Instance, Relation
from constraint_nodes.palette import annotate_group
from constraint_nodes.rendering import ConstraintGroupRenderer
from constraint_nodes.rendering.renderer import GROUP_TEMPLATE


@pytest.fixture
def renderer():
    return ConstraintGroupRenderer()


class TestConstraintGroupRenderer:

    def test_renders_constraints_and_footnotes(self, renderer, group):
        html = renderer.render(group, permalink_base="")
        assert html.startswith('<section class="constraint-group">')
        assert 'id="constraint-0x600001"' in html
        assert 'id="constraint-0x600002"' in html
        assert 'id="footnote-1"' in html

    def test_relation_is_escaped(self, renderer, group, constraint_factory):
        assert '<span class="relation">==</span>' in renderer.render(group)
        lower = constraint_factory(relation=Relation.LESS_THAN_OR_EQUAL)
        html = renderer.render(group.model_copy(update={"constraints": [lower]}))
        assert '<span class="relation">&lt;=</span>' in html

    def test_prerendered_html_is_not_escaped(self, renderer, group):
        html = renderer.render(group)
        assert "<strong>Label</strong> sits below the top margin" in html
        assert "Uses the <em>layout margins</em> of the view" in html

    def test_instance_names_are_escaped(self, renderer, group):
        sneaky = Instance(address="0x7f8a1c0", class_name="UILabel", pretty_name="<b>x</b>")
        first = group.constraints[0].first.model_copy(update={"layout_item": sneaky})
        constraint = group.constraints[0].model_copy(update={"first": first})
        html = renderer.render(group.model_copy(update={"constraints": [constraint]}))
        assert "&lt;b&gt;x&lt;/b&gt;" in html

    def test_constant_and_prefix(self, renderer, group):
        html = renderer.render(group)
        assert '<span class="constant">+ 8</span>' in html
        assert '<span class="constant">44</span>' in html

    def test_permalink_link(self, renderer, group):
        html = renderer.render(group, permalink_base="https://example.com/?c=")
        assert 'href="https://example.com/?c=%28%0A' in html

    def test_no_permalink(self, renderer, group):
        assert "Permalink" not in renderer.render(group, include_permalink=False)

    def test_annotation_colors_and_suffixes(self, renderer, twin_buttons_group):
        html = renderer.render(annotate_group(twin_buttons_group))
        assert "<sub>1</sub>" in html
        assert "<sub>2</sub>" in html
        assert "color: rgb(" in html

    def test_footnote_reference_links_marker(self, renderer, group):
        html = renderer.render(group)
        assert '<a href="#footnote-1">1</a>' in html

    def test_template_compiled_once(self, renderer, group):
        renderer.render(group)
        template = renderer.env.get_template(GROUP_TEMPLATE)
        renderer.render(group)
        assert renderer.env.get_template(GROUP_TEMPLATE) is template

    def test_missing_template(self, group, tmp_path):
        with pytest.raises(ValueError):
            ConstraintGroupRenderer(templates_dir=tmp_path).render(group)

    def test_broken_template(self, group, tmp_path):
        (tmp_path / "constraint_group.html").write_text("{% for x in %}")
        with pytest.raises(ValueError):
            ConstraintGroupRenderer(templates_dir=tmp_path).render(group)
