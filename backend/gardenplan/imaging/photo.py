"""Decode and verify the uploaded garden photo."""

from __future__ import annotations

import base64
import binascii
import io
import logging
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

# Formats the vision model accepts as-is; anything else is re-encoded as PNG.
_MEDIA_TYPES = {
    "JPEG": "image/jpeg",
    "PNG": "image/png",
    "GIF": "image/gif",
    "WEBP": "image/webp",
}
_PNG_MODES = {"1", "L", "LA", "P", "RGB", "RGBA", "I"}


class PhotoError(ValueError):
    """The uploaded photo could not be decoded as an image."""


@dataclass(frozen=True)
class Photo:
    data: str  # base64, no data-URL prefix
    media_type: str
    width: int
    height: int


def _strip_data_url(image: str) -> str:
    if image.startswith("data:"):
        _, _, payload = image.partition(",")
        return payload
    return image


def decode_photo(image: str) -> Photo:
    """Accept a data URL or bare base64 string and return a verified ``Photo``."""
    payload = "".join(_strip_data_url(image.strip()).split())
    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise PhotoError("Image is not valid base64") from e
    if not raw:
        raise PhotoError("Image is empty")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            img.load()
            fmt = img.format or ""
            width, height = img.size
            if fmt not in _MEDIA_TYPES:
                logger.debug("Re-encoding %s photo as PNG", fmt or "unknown")
                converted = img if img.mode in _PNG_MODES else img.convert("RGB")
                buf = io.BytesIO()
                converted.save(buf, format="PNG")
                raw, fmt = buf.getvalue(), "PNG"
    except (UnidentifiedImageError, OSError, Image.DecompressionBombError) as e:
        raise PhotoError(f"Image could not be read: {e}") from e

    return Photo(
        data=base64.b64encode(raw).decode("ascii"),
        media_type=_MEDIA_TYPES[fmt],
        width=width,
        height=height,
    )
