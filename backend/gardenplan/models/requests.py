"""API request models.

Field aliases follow the camelCase names the wizard frontend posts
(``outlinePoints``, ``sunExposure``); snake_case is accepted as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gardenplan.models.garden import PlantDescriptor, Point


class DiagramRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    outline_points: list[Point] = Field(
        ..., alias="outlinePoints", min_length=3,
        description="Garden bed outline in photo pixel space",
    )
    plants: list[PlantDescriptor] = Field(default_factory=list)
    seed: int | None = Field(
        default=None, description="Seed for placement jitter (reproducible output)",
    )


class PlanRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image: str = Field(..., min_length=1, description="Photo as data URL or bare base64")
    outline_points: list[Point] = Field(..., alias="outlinePoints", min_length=3)
    sun_exposure: str = Field(..., alias="sunExposure")
    theme: str


class WatercolorRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plants: list[PlantDescriptor] = Field(default_factory=list)
    sun_exposure: str = Field(default="", alias="sunExposure")
    theme: str = ""
