# app/agents/workflow.py
import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from app.agents.llm.base import LLMClient
from app.agents.schemas import RoadmapResponse
from app.errors import InvalidResponseFormat

logger = logging.getLogger(__name__)


SYSTEM_PLANNER = """You are a project planning expert. Create a project roadmap with 3-4 phases. Each phase should have 3-5 specific tasks. Return ONLY valid JSON in this exact format:
{"roadmap": [{"phase": "Phase Name", "tasks": ["task 1", "task 2", "task 3"], "status": "pending"}]}"""

NO_DESCRIPTION = "No description provided"

# Greedy: first "{" to last "}" in the reply. Prose after the object that
# contains its own braces ends up inside the match and breaks parsing.
JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def build_user_prompt(title: str, description: str | None = None) -> str:
    return (
        "Create a roadmap for this project:\n"
        f"Title: {title}\n"
        f"Description: {description or NO_DESCRIPTION}"
    )


def extract_json_object(text: str) -> str | None:
    """
    Return the substring from the first "{" to the last "}" of text,
    or None if there is no such pair.
    """
    match = JSON_OBJECT_RE.search(text)
    if not match:
        return None
    return match.group(0)


def parse_roadmap(content: str, *, strict: bool = False) -> dict[str, Any]:
    extracted = extract_json_object(content)
    if extracted is None:
        raise InvalidResponseFormat()

    # json.JSONDecodeError propagates to the caller's catch-all
    parsed = json.loads(extracted)

    if strict:
        try:
            RoadmapResponse.model_validate(parsed)
        except ValidationError as e:
            logger.warning("Roadmap reply failed schema validation: %s", e)
            raise InvalidResponseFormat() from e

    return parsed


async def generate_roadmap(llm: LLMClient, title: str, description: str | None = None,
*, strict: bool = False) -> dict[str, Any]:
    logger.info("Generating roadmap for: %s", title)

    content = await llm.generate_text(system=SYSTEM_PLANNER, user=build_user_prompt(title, description))
    return parse_roadmap(content, strict=strict)
