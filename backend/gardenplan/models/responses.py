"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from gardenplan.models.garden import Choice, Recommendation


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    llm_configured: bool = False
    image_generation_configured: bool = False


class OptionsResponse(BaseModel):
    sun_exposure: list[Choice] = Field(default_factory=list)
    theme: list[Choice] = Field(default_factory=list)


class DiagramResponse(BaseModel):
    success: bool = True
    diagram: str
    type: str = "svg"


class PlanResponse(BaseModel):
    success: bool = True
    recommendation: Recommendation


class WatercolorResponse(BaseModel):
    success: bool
    image: str | None = None
    type: str = "png"
    error: str | None = None
    note: str | None = None


class Visualizations(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    watercolor: str | None = None
    bird_eye: str | None = Field(default=None, alias="birdEye")
    note: str = ""


class VisualizedPlanResponse(BaseModel):
    success: bool = True
    recommendation: Recommendation
    visualizations: Visualizations
