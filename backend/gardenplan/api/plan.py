"""POST /api/plan — AI planting recommendation, optionally with visualizations."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from gardenplan.config import Settings
from gardenplan.dependencies import get_settings
from gardenplan.diagram import render_diagram
from gardenplan.imaging import watercolor
from gardenplan.imaging.photo import Photo, PhotoError, decode_photo
from gardenplan.llm import planner
from gardenplan.llm.client import LLMNotConfiguredError
from gardenplan.llm.prompts import build_photo_watercolor_prompt
from gardenplan.models.garden import Recommendation
from gardenplan.models.requests import PlanRequest
from gardenplan.models.responses import PlanResponse, VisualizedPlanResponse, Visualizations

logger = logging.getLogger(__name__)

router = APIRouter()

VISUALIZATION_NOTE = (
    "Watercolor shows transformed garden in same angle. "
    "Bird's eye shows planting layout and spacing."
)


def _decode(image: str) -> Photo:
    try:
        return decode_photo(image)
    except PhotoError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e


async def _recommend(photo: Photo, req: PlanRequest, config: Settings) -> Recommendation:
    try:
        return await planner.generate_recommendation(
            photo, req.outline_points, req.sun_exposure, req.theme, config,
        )
    except LLMNotConfiguredError as e:
        logger.error("Plan requested but the language model is not configured")
        raise HTTPException(
            status_code=500,
            detail={"error": "API key not configured", "details": str(e)},
        ) from e
    except Exception as e:
        logger.exception("Plan generation failed")
        raise HTTPException(
            status_code=500,
            detail={"error": "Failed to generate garden plan. Please try again.", "details": str(e)},
        ) from e


@router.post("/plan", response_model=PlanResponse)
async def plan(req: PlanRequest, config: Settings = Depends(get_settings)) -> PlanResponse:
    photo = _decode(req.image)
    recommendation = await _recommend(photo, req, config)
    return PlanResponse(recommendation=recommendation)


@router.post("/plan/visualized", response_model=VisualizedPlanResponse)
async def plan_visualized(
    req: PlanRequest, config: Settings = Depends(get_settings),
) -> VisualizedPlanResponse:
    """Plan plus a bird's-eye diagram and a watercolor of the user's photo.

    A failed visualization leaves its field null; the plan is still returned.
    """
    photo = _decode(req.image)
    recommendation = await _recommend(photo, req, config)

    bird_eye = render_diagram(req.outline_points, recommendation.plants)

    painted: str | None = None
    try:
        painted = await watercolor.transform_photo(
            build_photo_watercolor_prompt(recommendation.plants), photo, config=config,
        )
    except watercolor.ImageGenerationError as e:
        logger.warning("Watercolor generation failed: %s", e)

    return VisualizedPlanResponse(
        recommendation=recommendation,
        visualizations=Visualizations(
            watercolor=painted,
            bird_eye=bird_eye,
            note=VISUALIZATION_NOTE,
        ),
    )
