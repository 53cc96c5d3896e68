"""Watercolor renderings via the Gemini image APIs.

One request per call; a failed call raises ``ImageGenerationError`` and the
caller decides whether the plan is still usable without the image.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gardenplan.config import Settings, settings
from gardenplan.imaging.photo import Photo

logger = logging.getLogger(__name__)


class ImageGenerationError(RuntimeError):
    """The image service was unavailable or returned no image."""


def _extract_prediction(data: dict[str, Any]) -> str:
    predictions = data.get("predictions") or []
    if predictions and isinstance(predictions[0], dict):
        first = predictions[0]
        if first.get("bytesBase64Encoded"):
            return first["bytesBase64Encoded"]
        image = first.get("image")
        if isinstance(image, dict) and image.get("bytesBase64Encoded"):
            return image["bytesBase64Encoded"]
    raise ImageGenerationError("Could not extract image from response")


def _extract_inline_image(data: dict[str, Any]) -> str:
    for candidate in data.get("candidates") or []:
        for part in (candidate.get("content") or {}).get("parts") or []:
            inline = part.get("inlineData") or part.get("inline_data")
            if inline and inline.get("data"):
                return inline["data"]
    raise ImageGenerationError("Response contained no image part")


async def _post(
    url: str,
    payload: dict[str, Any],
    config: Settings,
    client: httpx.AsyncClient | None,
) -> dict[str, Any]:
    if not config.gemini_api_key:
        raise ImageGenerationError("GEMINI_API_KEY not set")

    params = {"key": config.gemini_api_key}
    try:
        if client is None:
            async with httpx.AsyncClient(timeout=config.request_timeout_s) as owned:
                resp = await owned.post(url, params=params, json=payload)
        else:
            resp = await client.post(url, params=params, json=payload)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as e:
        logger.error("Image API error: %s %s", e.response.status_code, e.response.text[:200])
        raise ImageGenerationError(f"Image API error: {e.response.status_code}") from e
    except (httpx.RequestError, ValueError) as e:
        raise ImageGenerationError(f"Image API request failed: {e}") from e


async def generate_watercolor(
    prompt: str,
    client: httpx.AsyncClient | None = None,
    config: Settings | None = None,
) -> str:
    """Text-to-image watercolor; returns base64 PNG bytes."""
    config = config or settings
    url = f"{config.gemini_base_url}/models/{config.imagen_model}:predict"
    payload = {
        "instances": [{"prompt": prompt}],
        "parameters": {
            "sampleCount": 1,
            "aspectRatio": "4:3",
            "safetyFilterLevel": "block_some",
            "personGeneration": "dont_allow",
        },
    }
    logger.info("Requesting watercolor from %s", config.imagen_model)
    data = await _post(url, payload, config, client)
    return _extract_prediction(data)


async def transform_photo(
    prompt: str,
    photo: Photo,
    client: httpx.AsyncClient | None = None,
    config: Settings | None = None,
) -> str:
    """Repaint the user's photo as a watercolor; returns base64 image bytes."""
    config = config or settings
    url = f"{config.gemini_base_url}/models/{config.image_edit_model}:generateContent"
    payload = {
        "contents": [{
            "parts": [
                {"text": prompt},
                {"inlineData": {"mimeType": photo.media_type, "data": photo.data}},
            ],
        }],
    }
    logger.info("Requesting photo watercolor from %s", config.image_edit_model)
    data = await _post(url, payload, config, client)
    return _extract_inline_image(data)
