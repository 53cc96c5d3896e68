"""Placement geometry for the bird's-eye planting diagram.

The layout is a pure function of the boundary and the plant list except for
positional jitter, which is drawn from an injectable ``numpy`` generator so
callers can seed it.
"""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from pydantic import ValidationError
from shapely import make_valid
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon

from gardenplan.diagram.config import DEFAULT_CONFIG, DiagramConfig
from gardenplan.models.garden import PlantDescriptor, PlantType, Point

logger = logging.getLogger(__name__)

MIN_BOUNDARY_POINTS = 3


class BoundaryError(ValueError):
    """The outline cannot form a polygon."""


class PlantError(ValueError):
    """A plant entry is not a usable descriptor."""


class Row(str, enum.Enum):
    BACK = "back"
    MIDDLE = "middle"
    FRONT = "front"


class SizeClass(str, enum.Enum):
    LARGE = "large"
    SMALL = "small"


PLANT_COLORS: dict[PlantType, str] = {
    PlantType.PERENNIAL: "#81c784",
    PlantType.SHRUB: "#66bb6a",
    PlantType.TREE: "#4caf50",
    PlantType.GRASS: "#aed581",
    PlantType.OTHER: "#81c784",
}

_LARGE_TYPES = frozenset({PlantType.TREE, PlantType.SHRUB})


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class Placement:
    x: float
    y: float
    radius: float
    plant: PlantDescriptor
    row: Row
    inside: bool = True


@dataclass
class Layout:
    bounds: Bounds
    outline: NDArray[np.float64]
    canvas_width: float
    canvas_height: float
    center: tuple[float, float]
    placements: list[Placement] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------

def _coord(value: object, index: int, axis: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise BoundaryError(f"Point {index} has a non-numeric {axis}: {value!r}")
    try:
        number = float(value)
    except OverflowError as e:
        raise BoundaryError(f"Point {index} has an out-of-range {axis}: {value!r}") from e
    if not math.isfinite(number):
        raise BoundaryError(f"Point {index} has a non-finite {axis}: {value!r}")
    return number


def as_points(boundary: Iterable[object] | None) -> NDArray[np.float64]:
    """Coerce ``Point`` models, ``{x, y}`` mappings or ``(x, y)`` pairs to an (n, 2) array."""
    if boundary is None or isinstance(boundary, (str, bytes, Mapping)):
        raise BoundaryError("Boundary must be a sequence of points")

    coords: list[tuple[float, float]] = []
    for i, p in enumerate(boundary):
        if isinstance(p, Point):
            x, y = p.x, p.y
        elif isinstance(p, Mapping):
            if "x" not in p or "y" not in p:
                raise BoundaryError(f"Point {i} is missing x or y: {p!r}")
            x, y = p["x"], p["y"]
        elif isinstance(p, (tuple, list)) and len(p) == 2:
            x, y = p
        else:
            raise BoundaryError(f"Point {i} is not an x/y pair: {p!r}")
        coords.append((_coord(x, i, "x"), _coord(y, i, "y")))

    if len(coords) < MIN_BOUNDARY_POINTS:
        raise BoundaryError(
            f"Boundary needs at least {MIN_BOUNDARY_POINTS} points, got {len(coords)}"
        )
    return np.asarray(coords, dtype=np.float64)


def as_plants(plants: Iterable[object] | None) -> list[PlantDescriptor]:
    if plants is None:
        return []
    result: list[PlantDescriptor] = []
    for i, plant in enumerate(plants):
        if isinstance(plant, PlantDescriptor):
            result.append(plant)
            continue
        if not isinstance(plant, Mapping):
            raise PlantError(f"Plant {i} is not a mapping: {plant!r}")
        try:
            result.append(PlantDescriptor.model_validate(plant))
        except ValidationError as e:
            raise PlantError(f"Plant {i} is invalid: {e}") from e
    return result


# ---------------------------------------------------------------------------
# Geometry
# ---------------------------------------------------------------------------

def compute_bounds(points: NDArray[np.float64]) -> Bounds:
    return Bounds(
        min_x=float(np.min(points[:, 0])),
        min_y=float(np.min(points[:, 1])),
        max_x=float(np.max(points[:, 0])),
        max_y=float(np.max(points[:, 1])),
    )


def normalize_points(
    points: NDArray[np.float64], bounds: Bounds, padding: float,
) -> NDArray[np.float64]:
    """Translate so the bounding box's minimum corner lands on (padding, padding)."""
    offset = np.array([bounds.min_x - padding, bounds.min_y - padding])
    return points - offset


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Vertex mean (not the area centroid)."""
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------

def classify_row(placement: str | None) -> Row:
    """Map a free-text placement hint to a row.

    Substring match, case-insensitive. "back" is checked before "front", so
    text mentioning both lands in the back row; text mentioning neither is
    treated as middle.
    """
    text = (placement or "").lower()
    if "back" in text:
        return Row.BACK
    if "front" in text:
        return Row.FRONT
    return Row.MIDDLE


def size_class(plant_type: PlantType | str | None) -> SizeClass:
    if PlantType.parse(plant_type) in _LARGE_TYPES:
        return SizeClass.LARGE
    return SizeClass.SMALL


def radius_for(plant_type: PlantType | str | None, config: DiagramConfig = DEFAULT_CONFIG) -> float:
    if size_class(plant_type) is SizeClass.LARGE:
        return config.large_radius
    return config.small_radius


def color_for(plant_type: PlantType | str | None) -> str:
    return PLANT_COLORS[PlantType.parse(plant_type)]


def row_spacing(row: Row, config: DiagramConfig = DEFAULT_CONFIG) -> float:
    if row is Row.BACK:
        return config.back_spacing
    if row is Row.FRONT:
        return config.front_spacing
    return config.middle_spacing


def row_y(row: Row, bed_height: float, center_y: float, config: DiagramConfig = DEFAULT_CONFIG) -> float:
    if row is Row.BACK:
        return config.padding + config.back_depth * bed_height
    if row is Row.FRONT:
        return config.padding + config.front_depth * bed_height
    return center_y


# ---------------------------------------------------------------------------
# Placement
# ---------------------------------------------------------------------------

def _boundary_shape(outline: NDArray[np.float64]):
    polygon = Polygon(outline)
    if not polygon.is_valid:
        logger.warning("Boundary polygon is not simple; inside checks use its repaired shape")
        return make_valid(polygon)
    return polygon


def place_plants(
    outline: NDArray[np.float64],
    plants: list[PlantDescriptor],
    bed_height: float,
    rng: np.random.Generator,
    config: DiagramConfig = DEFAULT_CONFIG,
) -> list[Placement]:
    """Spread plants left-to-right around the centroid, one row per placement hint.

    Markers are not clipped to the outline; ``Placement.inside`` reports
    whether each one landed within it.
    """
    cx, cy = centroid(outline)
    shape = _boundary_shape(outline)
    count = len(plants)
    placements: list[Placement] = []

    for index, plant in enumerate(plants):
        row = classify_row(plant.placement)
        x = cx + (index - count / 2) * row_spacing(row, config)
        y = row_y(row, bed_height, cy, config)

        if config.jitter:
            dx, dy = rng.uniform(-config.jitter, config.jitter, size=2)
            x += float(dx)
            y += float(dy)

        placements.append(Placement(
            x=x,
            y=y,
            radius=radius_for(plant.type, config),
            plant=plant,
            row=row,
            inside=bool(shape.covers(ShapelyPoint(x, y))),
        ))

    outside = sum(1 for p in placements if not p.inside)
    if outside:
        logger.debug("%d of %d markers fall outside the boundary", outside, count)
    return placements


def layout_diagram(
    boundary: Iterable[object],
    plants: Iterable[object] | None,
    rng: np.random.Generator | None = None,
    config: DiagramConfig | None = None,
) -> Layout:
    """Compute canvas size, normalised outline and plant placements."""
    config = config or DEFAULT_CONFIG
    points = as_points(boundary)
    descriptors = as_plants(plants)
    rng = rng if rng is not None else np.random.default_rng()

    bounds = compute_bounds(points)
    outline = normalize_points(points, bounds, config.padding)

    return Layout(
        bounds=bounds,
        outline=outline,
        canvas_width=bounds.width + 2 * config.padding,
        canvas_height=bounds.height + 2 * config.padding,
        center=centroid(outline),
        placements=place_plants(outline, descriptors, bounds.height, rng, config),
    )
