"""Garden plan backend — planting recommendations and bird's-eye diagrams."""

__version__ = "0.1.0"
