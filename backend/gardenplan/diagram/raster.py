"""Rasterise diagrams to PNG for clients that cannot embed SVG."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def render_png(svg: str, scale: float = 1.0) -> bytes:
    """Render SVG string to PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    except Exception as e:
        logger.warning("Failed to render diagram to PNG: %s", e)
        raise
