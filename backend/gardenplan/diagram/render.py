"""Render a planting layout as a bird's-eye SVG diagram."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np
from numpy.typing import NDArray

from gardenplan.diagram.config import DEFAULT_CONFIG, DiagramConfig
from gardenplan.diagram.layout import Layout, Placement, color_for, layout_diagram
from gardenplan.svg.serializer import fmt, serialize_svg

logger = logging.getLogger(__name__)

TITLE = "Bird's Eye Planting Diagram"

_INK = "#1e40af"
_LEAF_STROKE = "#2e7d32"
_BED_FILL = "#e8f5e9"
_GRID_STROKE = "#ddd"


def legend_label(name: str) -> str:
    """Common name only: drop a trailing "(Scientific name)"."""
    return name.split("(", 1)[0].strip()


def boundary_path(outline: NDArray[np.float64]) -> str:
    cmds = [
        f"{'M' if i == 0 else 'L'} {fmt(x)} {fmt(y)}"
        for i, (x, y) in enumerate(outline)
    ]
    return " ".join(cmds) + " Z"


def grid_lines(
    canvas_w: float, canvas_h: float, config: DiagramConfig = DEFAULT_CONFIG,
) -> list[dict[str, Any]]:
    pad, step = config.padding, config.grid_spacing
    right, bottom = canvas_w - pad, canvas_h - pad
    style = {"stroke": _GRID_STROKE, "stroke-width": "0.5"}
    lines: list[dict[str, Any]] = []

    x = pad
    while x <= right:
        lines.append({"tag": "line", "x1": x, "y1": pad, "x2": x, "y2": bottom, **style})
        x += step
    y = pad
    while y <= bottom:
        lines.append({"tag": "line", "x1": pad, "y1": y, "x2": right, "y2": y, **style})
        y += step
    return lines


def _marker(index: int, placement: Placement) -> dict[str, Any]:
    plant = placement.plant
    return {
        "tag": "g",
        "class": "plant",
        "data-row": placement.row.value,
        "comment": f"Plant {index}: {plant.name}",
        "children": [
            {
                "tag": "circle",
                "cx": placement.x,
                "cy": placement.y,
                "r": placement.radius,
                "fill": color_for(plant.type),
                "fill-opacity": "0.7",
                "stroke": _LEAF_STROKE,
                "stroke-width": "2",
            },
            {
                "tag": "text",
                "x": placement.x,
                "y": placement.y - placement.radius - 5,
                "text-anchor": "middle",
                "font-size": "10",
                "font-weight": "bold",
                "fill": _INK,
                "text": str(index),
            },
        ],
    }


def _legend(layout: Layout, config: DiagramConfig) -> dict[str, Any]:
    plants = [p.plant for p in layout.placements]
    shown = plants[:config.legend_limit]
    children: list[dict[str, Any]] = [
        {
            "tag": "rect",
            "width": "180",
            "height": min(len(plants) * 20 + 40, 140),
            "fill": "white",
            "stroke": _INK,
            "stroke-width": "1",
        },
        {
            "tag": "text", "x": "10", "y": "20", "font-size": "12",
            "font-weight": "bold", "fill": _INK, "text": "Plant Legend:",
        },
    ]
    for i, plant in enumerate(shown):
        children.append({
            "tag": "g",
            "class": "legend-entry",
            "transform": f"translate(10, {30 + i * 20})",
            "children": [
                {
                    "tag": "circle", "cx": "5", "cy": "0", "r": "5",
                    "fill": color_for(plant.type), "fill-opacity": "0.7",
                    "stroke": _LEAF_STROKE,
                },
                {
                    "tag": "text", "x": "15", "y": "4", "font-size": "10", "fill": "#000",
                    "text": f"{i + 1}. {legend_label(plant.name)}",
                },
            ],
        })
    hidden = len(plants) - len(shown)
    if hidden > 0:
        children.append({
            "tag": "text",
            "class": "legend-more",
            "x": "10",
            "y": 30 + len(shown) * 20,
            "font-size": "9",
            "fill": "#666",
            "text": f"+{hidden} more",
        })
    return {
        "tag": "g",
        "class": "legend",
        "transform": f"translate(10, {fmt(max(10, layout.canvas_height - 150))})",
        "children": children,
    }


def _scale_bar(layout: Layout, config: DiagramConfig) -> dict[str, Any]:
    length = config.scale_bar_length
    ink = {"stroke": "#000", "stroke-width": "2"}
    return {
        "tag": "g",
        "class": "scale",
        "transform": (
            f"translate({fmt(max(10, layout.canvas_width - length - 20))}, "
            f"{fmt(layout.canvas_height - 40)})"
        ),
        "children": [
            {"tag": "line", "x1": "0", "y1": "0", "x2": length, "y2": "0", **ink},
            {"tag": "line", "x1": "0", "y1": "-5", "x2": "0", "y2": "5", **ink},
            {"tag": "line", "x1": length, "y1": "-5", "x2": length, "y2": "5", **ink},
            {
                "tag": "text", "x": length / 2, "y": "15", "text-anchor": "middle",
                "font-size": "10", "text": "Approx. Scale",
            },
        ],
    }


def render_layout(layout: Layout, config: DiagramConfig | None = None) -> str:
    config = config or DEFAULT_CONFIG
    w, h = layout.canvas_width, layout.canvas_height

    elements: list[dict[str, Any]] = [
        {"tag": "rect", "class": "background", "width": w, "height": h, "fill": "#ffffff"},
        {
            "tag": "text", "class": "title", "x": w / 2, "y": "30",
            "text-anchor": "middle", "font-size": "20", "font-weight": "bold",
            "fill": _INK, "text": TITLE,
        },
        {
            "tag": "path",
            "class": "boundary",
            "d": boundary_path(layout.outline),
            "fill": _BED_FILL,
            "stroke": _INK,
            "stroke-width": "3",
            "stroke-dasharray": "5,5",
        },
        {"tag": "g", "class": "grid", "children": grid_lines(w, h, config)},
        {
            "tag": "g",
            "class": "plants",
            "children": [_marker(i + 1, p) for i, p in enumerate(layout.placements)],
        },
    ]
    if layout.placements:
        elements.append(_legend(layout, config))
    elements.append(_scale_bar(layout, config))

    return serialize_svg(elements, w, h, title=TITLE)


def render_diagram(
    boundary: Iterable[object],
    plants: Iterable[object] | None,
    rng: np.random.Generator | None = None,
    config: DiagramConfig | None = None,
) -> str:
    """Render the bird's-eye diagram for a bed outline and its plants.

    ``boundary`` is a sequence of at least three points (``Point`` models,
    ``{"x", "y"}`` mappings or pairs) in photo pixel space. ``plants`` are
    ``PlantDescriptor`` models or equivalent mappings. ``rng`` supplies the
    marker jitter; pass a seeded generator for reproducible output.

    Raises ``BoundaryError`` or ``PlantError`` before producing any markup
    when the input is malformed.
    """
    layout = layout_diagram(boundary, plants, rng=rng, config=config)
    logger.debug(
        "Diagram %sx%s with %d markers",
        fmt(layout.canvas_width), fmt(layout.canvas_height), len(layout.placements),
    )
    return render_layout(layout, config)
