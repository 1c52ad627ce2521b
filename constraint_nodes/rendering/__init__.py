from .renderer import ConstraintGroupRenderer

__all__ = ["ConstraintGroupRenderer"]
