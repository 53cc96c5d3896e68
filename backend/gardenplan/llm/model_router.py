"""Task → model selection. Mid-tier for plan generation, cheap for anything else."""

from __future__ import annotations

from gardenplan.config import Settings, settings

_TASK_MODEL_MAP = {
    "plan": "mid",
}


def get_model_for_task(task: str, config: Settings | None = None) -> str:
    config = config or settings
    tier = _TASK_MODEL_MAP.get(task, "cheap")
    if tier == "mid":
        return config.model_mid
    return config.model_cheap
