"""Photo + outline + preferences → planting recommendation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gardenplan.config import Settings
from gardenplan.imaging.photo import Photo
from gardenplan.llm import client as llm_client
from gardenplan.llm.parsing import parse_recommendation
from gardenplan.llm.prompts import build_plan_prompt
from gardenplan.models.garden import Point, Recommendation

logger = logging.getLogger(__name__)


async def generate_recommendation(
    photo: Photo,
    outline_points: Sequence[Point],
    sun_exposure: str,
    theme: str,
    config: Settings | None = None,
) -> Recommendation:
    """Ask the vision model for a plan. Unparseable answers yield the fallback plan."""
    prompt = build_plan_prompt(len(outline_points), sun_exposure, theme)
    text = await llm_client.get_plan_response(prompt, photo, config)
    logger.debug("Plan response: %d chars", len(text))
    return parse_recommendation(text)
