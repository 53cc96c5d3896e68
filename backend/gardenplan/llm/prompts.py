"""Prompt text for plan generation and watercolor renderings."""

from __future__ import annotations

from collections.abc import Iterable

from gardenplan.diagram.render import legend_label
from gardenplan.models.garden import GardenTheme, PlantDescriptor, SunExposure

_SUN_EXPOSURE_TEXT = {
    SunExposure.FULL_SUN.value: "Full Sun (6+ hours direct sunlight)",
    SunExposure.PARTIAL_SUN.value: "Partial Sun (3-6 hours direct sunlight)",
    SunExposure.MOSTLY_SHADE.value: "Mostly Shade (less than 3 hours direct sunlight)",
}

_THEME_TEXT = {
    GardenTheme.SHADE_LOVING.value: "Shade Loving - Lush foliage plants that thrive in low light",
    GardenTheme.FUN_IN_SUN.value: "Fun in the Sun - Vibrant sun-loving flowers and plants",
    GardenTheme.COLORS_GALORE.value: "Colors Galore - A rainbow of colorful blooms",
    GardenTheme.WHITE_MOONLIGHT.value: "White Moonlight Garden - Elegant white flowering perennials",
    GardenTheme.MINNESOTA_NATIVE.value: (
        "Minnesota Native Garden - Native plants that support local ecosystems"
    ),
}

_THEME_MOOD = {
    GardenTheme.WHITE_MOONLIGHT.value: "elegant white flower garden, serene and peaceful",
    GardenTheme.COLORS_GALORE.value: "vibrant rainbow garden bursting with color",
    GardenTheme.MINNESOTA_NATIVE.value: "natural prairie wildflower garden",
    GardenTheme.SHADE_LOVING.value: "lush green woodland garden",
    GardenTheme.FUN_IN_SUN.value: "cheerful sunny flower garden",
}

_SUN_LIGHTING = {
    SunExposure.FULL_SUN.value: "bright sunny day, warm golden light",
    SunExposure.PARTIAL_SUN.value: "soft dappled sunlight filtering through trees",
}

# Bloom colour → words that signal it in a plant name or description.
# Ordered; the output keeps this order.
_COLOR_WORDS: list[tuple[str, tuple[str, ...]]] = [
    ("purple", ("purple", "lavender", "violet")),
    ("pink", ("pink", "rose")),
    ("white", ("white", "cream")),
    ("yellow", ("yellow", "golden", "gold")),
    ("red", ("red", "ruby", "crimson")),
    ("blue", ("blue", "azure")),
    ("orange", ("orange", "coral")),
    ("green", ("chartreuse", "lime", "green")),
]

WATERCOLOR_PLANT_LIMIT = 6


def format_sun_exposure(exposure: str) -> str:
    return _SUN_EXPOSURE_TEXT.get(exposure, exposure)


def format_theme(theme: str) -> str:
    return _THEME_TEXT.get(theme, theme)


_PLAN_TEMPLATE = """You are an expert landscape designer for Gertens Garden Center in Minnesota.

Analyze this garden space photo and create a detailed landscape plan with the following specifications:

GARDEN AREA OUTLINE:
The user has outlined the garden bed area with {point_count} points. This outline represents the boundaries where plants should be placed.

GARDEN CONDITIONS:
- Sun Exposure: {sun_exposure}
- Garden Theme: {theme}
- Location: Minnesota (USDA Hardiness Zones 3-4)

REQUIREMENTS:
1. Recommend 6-10 specific perennials, shrubs, or small trees suitable for the conditions
2. All plants MUST be hardy in Minnesota (Zones 3-4)
3. Plants should match the selected theme and sun exposure
4. Consider the outlined area size for appropriate plant quantities and spacing
5. Include a mix of heights (ground cover, medium, tall) for visual interest
6. Suggest seasonal bloom times for continuous color throughout the growing season

Please provide your response ONLY as valid JSON with no markdown formatting or code blocks:
{{
  "overview": "Brief 2-3 sentence overview of the garden design concept",
  "plants": [
    {{
      "name": "Plant Common Name (Scientific Name)",
      "type": "one of: perennial, shrub, tree, grass",
      "description": "Brief description including bloom time, color, height",
      "placement": "Front, middle or back of bed"
    }}
  ],
  "layout": "Description of how to arrange the plants within the outlined area",
  "tips": [
    "Practical planting tip 1",
    "Practical planting tip 2",
    "Practical planting tip 3"
  ]
}}

Focus on creating a beautiful, low-maintenance garden that will thrive in Minnesota's climate!"""


def build_plan_prompt(point_count: int, sun_exposure: str, theme: str) -> str:
    return _PLAN_TEMPLATE.format(
        point_count=point_count,
        sun_exposure=format_sun_exposure(sun_exposure),
        theme=format_theme(theme),
    )


def extract_bloom_colors(plants: Iterable[PlantDescriptor]) -> list[str]:
    """Colour words mentioned in plant names or descriptions."""
    text = " ".join(
        f"{p.description or ''} {p.name or ''}".lower() for p in plants
    )
    return [color for color, words in _COLOR_WORDS if any(w in text for w in words)]


def build_watercolor_prompt(
    plants: list[PlantDescriptor], sun_exposure: str, theme: str,
) -> str:
    names = ", ".join(legend_label(p.name) for p in plants[:WATERCOLOR_PLANT_LIMIT])
    colors = extract_bloom_colors(plants)
    lighting = _SUN_LIGHTING.get(sun_exposure, "gentle shade, cool peaceful lighting")
    mood = _THEME_MOOD.get(theme, "beautiful flower garden")
    color_text = f"featuring {', '.join(colors)} blooms" if colors else "with colorful flowers"

    return (
        f"A beautiful watercolor painting of a {mood} in full summer bloom.\n"
        f"Garden bed filled with {names}, {color_text}, and lush green foliage.\n"
        f"{lighting}, professional watercolor illustration style by a landscape artist.\n"
        "Soft flowing translucent colors, artistic garden design visualization,\n"
        "dreamy botanical aesthetic, high quality botanical watercolor art,\n"
        "delicate brush strokes, soft edges, layered washes, flowing paint technique.\n"
        "Garden bed perspective view, natural organic composition."
    )


def build_photo_watercolor_prompt(plants: list[PlantDescriptor]) -> str:
    """Prompt for repainting the user's own photo with the recommended plants."""
    plant_list = ", ".join(p.name for p in plants)
    placed = "; ".join(f"{p.name} ({p.placement or 'anywhere'})" for p in plants)
    return (
        "Create a beautiful watercolor illustration showing this garden space "
        f"transformed with the following plants: {plant_list}.\n\n"
        "Style requirements:\n"
        "- Watercolor painting style with soft, flowing colors\n"
        "- Maintain the same viewing angle and framing as the reference photo\n"
        "- Show the garden in full bloom during summer\n"
        f"- Include these specific plants placed appropriately: {placed}\n"
        "- Artistic, dreamy garden aesthetic\n"
        "- Vibrant colors for flowers, lush greens for foliage\n"
        "- Professional landscape illustration quality"
    )
