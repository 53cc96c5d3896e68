"""Domain models shared by the diagram engine and the API."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, FiniteFloat, field_validator


class Point(BaseModel):
    """A click on the uploaded photo, in image pixel space."""

    x: FiniteFloat
    y: FiniteFloat


class PlantType(str, enum.Enum):
    PERENNIAL = "perennial"
    SHRUB = "shrub"
    TREE = "tree"
    GRASS = "grass"
    OTHER = "other"

    @classmethod
    def parse(cls, value: object) -> "PlantType":
        """Exact, case-insensitive match; anything else is ``OTHER``."""
        if isinstance(value, PlantType):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.OTHER


class PlantDescriptor(BaseModel):
    name: str
    type: PlantType = PlantType.OTHER
    placement: str = ""
    description: str | None = None

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> PlantType:
        return PlantType.parse(value)

    @field_validator("placement", mode="before")
    @classmethod
    def _placement_text(cls, value: object) -> str:
        return "" if value is None else str(value)


class Recommendation(BaseModel):
    overview: str = ""
    plants: list[PlantDescriptor] = Field(default_factory=list)
    layout: str = ""
    tips: list[str] = Field(default_factory=list)


class SunExposure(str, enum.Enum):
    FULL_SUN = "full-sun"
    PARTIAL_SUN = "partial-sun"
    MOSTLY_SHADE = "mostly-shade"


class GardenTheme(str, enum.Enum):
    SHADE_LOVING = "shade-loving"
    FUN_IN_SUN = "fun-in-sun"
    COLORS_GALORE = "colors-galore"
    WHITE_MOONLIGHT = "white-moonlight"
    MINNESOTA_NATIVE = "minnesota-native"


class Choice(BaseModel):
    value: str
    label: str
    description: str


SUN_EXPOSURE_CHOICES: list[Choice] = [
    Choice(value=SunExposure.FULL_SUN.value, label="Full Sun",
           description="6+ hours of direct sunlight per day"),
    Choice(value=SunExposure.PARTIAL_SUN.value, label="Partial Sun",
           description="3-6 hours of direct sunlight per day"),
    Choice(value=SunExposure.MOSTLY_SHADE.value, label="Mostly Shade",
           description="Less than 3 hours of direct sunlight per day"),
]

THEME_CHOICES: list[Choice] = [
    Choice(value=GardenTheme.SHADE_LOVING.value, label="Shade Loving",
           description="Lush foliage plants that thrive in low light"),
    Choice(value=GardenTheme.FUN_IN_SUN.value, label="Fun in the Sun",
           description="Vibrant sun-loving flowers and plants"),
    Choice(value=GardenTheme.COLORS_GALORE.value, label="Colors Galore",
           description="A rainbow of colorful blooms throughout the season"),
    Choice(value=GardenTheme.WHITE_MOONLIGHT.value, label="White Moonlight Garden",
           description="Elegant white flowering perennials"),
    Choice(value=GardenTheme.MINNESOTA_NATIVE.value, label="Minnesota Native Garden",
           description="Native plants that support local ecosystems"),
]
