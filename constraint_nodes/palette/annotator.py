"""Per-pass instance annotations: display colors and uniquing suffixes."""

import logging
from collections import Counter
from typing import Optional

from ..models import Annotation, ConstraintGroup
from .registry import get_palette_registry
from .schemas import ColorPalette

logger = logging.getLogger(__name__)


def build_annotations(group: ConstraintGroup, palette: Optional[ColorPalette] = None) -> dict[str, Annotation]:
    """Annotate every instance of ``group``, keyed by address.

    Colors cycle through the palette in order of first appearance. Instances
    whose display name is shared with another instance get suffixes "1",
    "2", ... in that same order; unique names get "".
    """
    palette = palette or get_palette_registry().get_default_palette()
    instances = group.instances()
    name_counts = Counter(instance.pretty_name for instance in instances)
    seen_names: Counter = Counter()

    annotations = {}
    for index, instance in enumerate(instances):
        suffix = ""
        if name_counts[instance.pretty_name] > 1:
            seen_names[instance.pretty_name] += 1
            suffix = str(seen_names[instance.pretty_name])
        annotations[instance.address] = Annotation(
            uniquing_suffix=suffix,
            color=palette.series[index % len(palette.series)],
        )

    logger.debug(f"Annotated {len(annotations)} instances with palette {palette.key}")
    return annotations


def annotate_group(group: ConstraintGroup, palette: Optional[ColorPalette] = None) -> ConstraintGroup:
    """Copy of ``group`` with built annotations; existing ones take precedence."""
    annotations = build_annotations(group, palette)
    annotations.update(group.annotations)
    return group.model_copy(update={"annotations": annotations})
