"""Diagram configuration — fixed drawing constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DiagramConfig:
    """Constants for the bird's-eye planting diagram, in canvas units."""

    padding: float = 50.0
    grid_spacing: float = 40.0

    # Marker radius by size class
    large_radius: float = 20.0  # trees, shrubs
    small_radius: float = 12.0

    # Row depth as a fraction of the bed height, measured from the top
    back_depth: float = 0.2
    front_depth: float = 0.8

    # Horizontal spread between neighbours in a row
    back_spacing: float = 40.0
    middle_spacing: float = 35.0
    front_spacing: float = 30.0

    # Uniform jitter half-width on each axis; 0 disables it
    jitter: float = 10.0

    legend_limit: int = 5
    scale_bar_length: float = 100.0


DEFAULT_CONFIG = DiagramConfig()
