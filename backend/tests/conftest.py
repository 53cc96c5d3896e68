"""Shared test fixtures."""

from __future__ import annotations

import base64
import io
import xml.etree.ElementTree as ET

import pytest
from PIL import Image

SVG_NS = {"svg": "http://www.w3.org/2000/svg"}

# 100 x 60 rectangle in photo pixel space, offset from the origin
RECT_OUTLINE = [
    {"x": 200, "y": 300},
    {"x": 300, "y": 300},
    {"x": 300, "y": 360},
    {"x": 200, "y": 360},
]

ORIGIN_RECT_OUTLINE = [
    {"x": 0, "y": 0},
    {"x": 100, "y": 0},
    {"x": 100, "y": 60},
    {"x": 0, "y": 60},
]

# Non-convex bed: an L shape
L_OUTLINE = [
    {"x": 10, "y": 10},
    {"x": 410, "y": 10},
    {"x": 410, "y": 110},
    {"x": 160, "y": 110},
    {"x": 160, "y": 310},
    {"x": 10, "y": 310},
]

RIGHT_TRIANGLE_OUTLINE = [
    {"x": 0, "y": 0},
    {"x": 100, "y": 0},
    {"x": 0, "y": 100},
]

SEVEN_PLANTS = [
    {"name": "Purple Coneflower (Echinacea purpurea)", "type": "perennial",
     "description": "Purple-pink flowers, 24-36\" tall", "placement": "Middle section"},
    {"name": "Black-Eyed Susan (Rudbeckia fulgida)", "type": "perennial",
     "description": "Golden yellow flowers July-September", "placement": "Middle and back"},
    {"name": "Karl Foerster Grass (Calamagrostis)", "type": "grass",
     "description": "Upright feathery plumes", "placement": "Back of bed"},
    {"name": "Dwarf Lilac (Syringa meyeri)", "type": "shrub",
     "description": "Lavender spring blooms", "placement": "Back corner"},
    {"name": "Coral Bells (Heuchera)", "type": "perennial",
     "description": "Colorful foliage", "placement": "Front border"},
    {"name": "Serviceberry (Amelanchier)", "type": "tree",
     "description": "White spring flowers", "placement": "back"},
    {"name": "Creeping Phlox (Phlox subulata)", "type": "perennial",
     "description": "Pink ground cover", "placement": "front edge"},
]

HOSTA_AND_SPRUCE = [
    {"name": "Hosta", "type": "perennial", "placement": "front"},
    {"name": "Spruce", "type": "tree", "placement": "back"},
]


def parse_svg(svg: str) -> ET.Element:
    return ET.fromstring(svg)


def png_bytes(size: tuple[int, int] = (8, 6), fmt: str = "PNG") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, (60, 140, 60)).save(buf, format=fmt)
    return buf.getvalue()


def data_url(raw: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


@pytest.fixture
def photo_data_url() -> str:
    return data_url(png_bytes())


@pytest.fixture
def seven_plants() -> list[dict]:
    return [dict(p) for p in SEVEN_PLANTS]
