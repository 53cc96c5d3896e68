"""POST /api/watercolor — watercolor rendering of the recommended plants."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from gardenplan.config import Settings
from gardenplan.dependencies import get_settings
from gardenplan.imaging import watercolor as imaging
from gardenplan.llm.prompts import build_watercolor_prompt
from gardenplan.models.requests import WatercolorRequest
from gardenplan.models.responses import WatercolorResponse

logger = logging.getLogger(__name__)

router = APIRouter()

FAILED_NOTE = "Watercolor generation failed - your plant plan is still complete!"


@router.post("/watercolor", response_model=WatercolorResponse)
async def watercolor(
    req: WatercolorRequest, config: Settings = Depends(get_settings),
) -> WatercolorResponse:
    prompt = build_watercolor_prompt(req.plants, req.sun_exposure, req.theme)
    logger.info("Generating watercolor for %d plants", len(req.plants))
    try:
        image = await imaging.generate_watercolor(prompt, config=config)
    except imaging.ImageGenerationError as e:
        logger.warning("Watercolor generation failed: %s", e)
        return WatercolorResponse(success=False, error=str(e), note=FAILED_NOTE)
    return WatercolorResponse(success=True, image=image)
