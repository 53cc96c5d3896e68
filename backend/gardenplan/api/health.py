"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from gardenplan import __version__
from gardenplan.config import Settings
from gardenplan.dependencies import get_settings
from gardenplan.models.garden import SUN_EXPOSURE_CHOICES, THEME_CHOICES
from gardenplan.models.responses import HealthResponse, OptionsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(config: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        llm_configured=bool(config.anthropic_api_key),
        image_generation_configured=bool(config.gemini_api_key),
    )


@router.get("/options", response_model=OptionsResponse)
async def options() -> OptionsResponse:
    """The wizard's two preference questions and their choices."""
    return OptionsResponse(sun_exposure=SUN_EXPOSURE_CHOICES, theme=THEME_CHOICES)
