"""HTML renderer for constraint groups using Jinja2 templates.

The templates only ever see node trees, never domain models. Pre-rendered
HTML fields (constraint descriptions, footnote text) are emitted with
``|safe``; everything else is autoescaped.
"""

import logging
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, TemplateError

from .. import config
from ..models import ConstraintGroup
from ..nodes import constraint_group_node

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
GROUP_TEMPLATE = "constraint_group.html"


class ConstraintGroupRenderer:
    """Renders constraint groups to HTML fragments.

    Usage:
        renderer = ConstraintGroupRenderer()
        html = renderer.render(group, include_permalink=True)
    """

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize the renderer.

        Args:
            templates_dir: Directory holding the HTML templates (default: package templates)
        """
        self.templates_dir = templates_dir or TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(
        self,
        group: ConstraintGroup,
        include_permalink: bool = True,
        permalink_base: Optional[str] = None,
    ) -> str:
        """Render a constraint group.

        Args:
            group: The group to render, with annotations already applied
            include_permalink: Whether to compute and link the permalink
            permalink_base: URL prefix for the permalink (default: config)

        Returns:
            HTML fragment

        Raises:
            ValueError: If the template is missing or fails to render
        """
        node = constraint_group_node(group, include_permalink=include_permalink)
        base = config.PERMALINK_BASE if permalink_base is None else permalink_base

        try:
            template = self.env.get_template(GROUP_TEMPLATE)
            rendered = template.render(group=node, permalink_base=base)
        except TemplateError as e:
            raise ValueError(f"Template rendering error for {GROUP_TEMPLATE}: {e}")

        logger.debug(
            f"Rendered {len(node['constraints'])} constraints, "
            f"{len(node['footnotes'])} footnotes"
        )
        return rendered.strip()
