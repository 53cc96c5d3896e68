"""POST /api/diagram — bird's-eye planting diagram (SVG, or PNG via cairosvg)."""

from __future__ import annotations

import logging

import numpy as np
from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from gardenplan.diagram import render_diagram
from gardenplan.models.requests import DiagramRequest
from gardenplan.models.responses import DiagramResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _render(req: DiagramRequest) -> str:
    logger.info(
        "Generating diagram: %d outline points, %d plants",
        len(req.outline_points), len(req.plants),
    )
    try:
        return render_diagram(
            req.outline_points,
            req.plants,
            rng=np.random.default_rng(req.seed),
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/diagram", response_model=DiagramResponse)
async def diagram(req: DiagramRequest) -> DiagramResponse:
    return DiagramResponse(diagram=_render(req))


@router.post("/diagram/png")
async def diagram_png(req: DiagramRequest) -> Response:
    from gardenplan.diagram.raster import render_png

    svg = _render(req)
    try:
        png = render_png(svg)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Could not rasterize diagram: {e}") from e
    return Response(content=png, media_type="image/png")
