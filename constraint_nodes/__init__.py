"""Constraint Nodes - view nodes for Auto Layout constraint pages.

This package turns parsed layout constraints into template-ready trees:
- Domain models (constraint groups, constraints, instances, footnotes)
- Node mapping with number, prefix and permalink formatting
- Palette-based instance annotations
- HTML rendering and an HTTP API on top of the nodes
"""

__version__ = "0.1.0"
