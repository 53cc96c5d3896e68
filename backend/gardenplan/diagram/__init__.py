"""Bird's-eye planting diagram engine."""

from gardenplan.diagram.config import DEFAULT_CONFIG, DiagramConfig
from gardenplan.diagram.layout import (
    BoundaryError,
    Layout,
    Placement,
    PlantError,
    Row,
    SizeClass,
    classify_row,
    color_for,
    layout_diagram,
    radius_for,
    size_class,
)
from gardenplan.diagram.render import legend_label, render_diagram

__all__ = [
    "DEFAULT_CONFIG",
    "DiagramConfig",
    "BoundaryError",
    "PlantError",
    "Layout",
    "Placement",
    "Row",
    "SizeClass",
    "classify_row",
    "color_for",
    "layout_diagram",
    "legend_label",
    "radius_for",
    "render_diagram",
    "size_class",
]
