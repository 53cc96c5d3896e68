"""Best-effort extraction of a planting recommendation from model output."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from gardenplan.models.garden import PlantDescriptor, PlantType, Recommendation

logger = logging.getLogger(__name__)

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)

OVERVIEW_EXCERPT = 300


def extract_json(text: str) -> dict[str, Any]:
    """Parse the first JSON object in ``text``.

    Tries the whole text, then a fenced ```json block, then the widest
    ``{...}`` span. Raises ``ValueError`` when none of them parse to an object.
    """
    candidates = [text.strip()]
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        candidates.append(fenced.group(1))
    obj = _OBJECT_RE.search(text)
    if obj:
        candidates.append(obj.group(0))

    for candidate in candidates:
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    raise ValueError("No JSON object found in model response")


def fallback_recommendation(raw_text: str) -> Recommendation:
    """Generic shade-tolerant plan used when the model's answer is unusable."""
    excerpt = raw_text.strip()[:OVERVIEW_EXCERPT]
    overview = f"{excerpt}..." if excerpt else "A low-maintenance Minnesota garden for your space."
    return Recommendation(
        overview=overview,
        plants=[
            PlantDescriptor(
                name="Hosta (Hosta spp.)",
                type=PlantType.PERENNIAL,
                description=(
                    "Shade-loving foliage plant with lush leaves, various colors available, "
                    '12-30" tall'
                ),
                placement="Throughout the outlined area",
            ),
            PlantDescriptor(
                name="Astilbe (Astilbe spp.)",
                type=PlantType.PERENNIAL,
                description='Feathery plumes in summer, prefers partial shade, 18-36" tall',
                placement="Middle section of garden bed",
            ),
            PlantDescriptor(
                name="Coral Bells (Heuchera)",
                type=PlantType.PERENNIAL,
                description='Colorful foliage year-round, tiny flowers, 12-18" tall',
                placement="Front border",
            ),
        ],
        layout=(
            "Arrange plants with taller specimens in back, medium heights in middle, "
            "and shorter plants in front."
        ),
        tips=[
            "Visit Gertens Garden Center for expert planting advice and to see these plants in person",
            "Water regularly during the first growing season to establish strong root systems",
            "Apply 2-3 inches of mulch to retain moisture and suppress weeds",
        ],
    )


def parse_recommendation(text: str) -> Recommendation:
    try:
        data = extract_json(text)
        recommendation = Recommendation.model_validate(data)
    except (ValueError, ValidationError) as e:
        logger.warning("Could not parse recommendation (%s); using fallback plan", e)
        logger.debug("Unparsed response text: %s", text[:500])
        return fallback_recommendation(text)

    logger.info("Parsed recommendation with %d plants", len(recommendation.plants))
    return recommendation
