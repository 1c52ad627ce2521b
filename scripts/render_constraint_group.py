#!/usr/bin/env python3
"""Render a parsed constraint group to template nodes or HTML.

Reads a ConstraintGroup JSON file (as produced by the constraint parser),
optionally annotates its instances with a palette, and writes either the
node tree as JSON or the rendered HTML fragment.

Examples:
    python scripts/render_constraint_group.py group.json
    python scripts/render_constraint_group.py group.json --annotate --format html -o group.html
"""

import argparse
import json
import sys
from pathlib import Path

from constraint_nodes.models import ConstraintGroup
from constraint_nodes.nodes import constraint_group_node
from constraint_nodes.palette import annotate_group, get_palette_registry
from constraint_nodes.rendering import ConstraintGroupRenderer


def load_group(path: Path) -> ConstraintGroup:
    with open(path) as f:
        return ConstraintGroup(**json.load(f))


def main():
    parser = argparse.ArgumentParser(
        description="Render a constraint group to template nodes or HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("group", type=Path, help="ConstraintGroup JSON file")
    parser.add_argument(
        "--format", choices=["nodes", "html"], default="nodes",
        help="Output format (default: nodes)",
    )
    parser.add_argument(
        "--annotate", action="store_true",
        help="Assign palette colors and uniquing suffixes to instances",
    )
    parser.add_argument("--palette", help="Palette key (default palette when omitted)")
    parser.add_argument(
        "--no-permalink", action="store_true",
        help="Skip permalink computation",
    )
    parser.add_argument("-o", "--output", type=Path, help="Write to file instead of stdout")
    args = parser.parse_args()

    if not args.group.exists():
        print(f"Group file not found: {args.group}", file=sys.stderr)
        sys.exit(1)

    group = load_group(args.group)

    if args.annotate:
        registry = get_palette_registry()
        palette = registry.get_palette(args.palette) if args.palette else registry.get_default_palette()
        if palette is None:
            print(f"Unknown palette: {args.palette}", file=sys.stderr)
            sys.exit(1)
        group = annotate_group(group, palette)

    include_permalink = not args.no_permalink
    if args.format == "html":
        output = ConstraintGroupRenderer().render(group, include_permalink=include_permalink)
    else:
        node = constraint_group_node(group, include_permalink=include_permalink)
        output = json.dumps(node, indent=2, ensure_ascii=False)

    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
        print(f"Wrote {args.format} to {args.output}", file=sys.stderr)
    else:
        print(output)


if __name__ == "__main__":
    main()
