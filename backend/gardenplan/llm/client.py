"""LangChain ChatAnthropic wrapper for the vision plan request."""

from __future__ import annotations

import logging
from typing import Any

from gardenplan.config import Settings, settings
from gardenplan.imaging.photo import Photo
from gardenplan.llm.model_router import get_model_for_task

logger = logging.getLogger(__name__)


class LLMNotConfiguredError(RuntimeError):
    """No API key is configured for the language model."""


def _content_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def get_plan_response(
    prompt: str,
    photo: Photo,
    config: Settings | None = None,
) -> str:
    """Send the garden photo and the planning prompt; return the model's raw text."""
    config = config or settings
    if not config.anthropic_api_key:
        raise LLMNotConfiguredError("ANTHROPIC_API_KEY environment variable is missing")

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage

    model_id = get_model_for_task("plan", config)
    llm = ChatAnthropic(
        model=model_id,
        api_key=config.anthropic_api_key,
        max_tokens=config.plan_max_tokens,
    )

    message = HumanMessage(
        content=[
            {
                "type": "image",
                "source": {
                    "type": "base64",
                    "media_type": photo.media_type,
                    "data": photo.data,
                },
            },
            {
                "type": "text",
                "text": prompt,
            },
        ]
    )

    logger.info("Requesting plan from %s (%dx%d photo)", model_id, photo.width, photo.height)
    response = await llm.ainvoke([message])
    return _content_text(response.content)
