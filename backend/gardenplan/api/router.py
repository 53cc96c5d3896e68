"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from gardenplan.api import diagram, health, plan, watercolor

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(diagram.router)
api_router.include_router(plan.router)
api_router.include_router(watercolor.router)
