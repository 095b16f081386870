# Roadmap generation endpoint
import logging

import httpx
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from pydantic import ValidationError

from app.deps import get_settings, get_transport
from app.settings import Settings
from app.agents.llm.client import get_llm_client
from app.agents.schemas import ErrorResponse, RoadmapRequest
from app.agents.workflow import generate_roadmap
from app.errors import InvalidRequest

logger = logging.getLogger(__name__)
router = APIRouter()


def _parse_request(payload) -> RoadmapRequest:
    if not isinstance(payload, dict):
        raise InvalidRequest("Request body must be a JSON object")
    if not isinstance(payload.get("projectTitle"), str):
        raise InvalidRequest("projectTitle is required")
    try:
        return RoadmapRequest.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise InvalidRequest(f"Invalid request fields: {fields}") from e


@router.options("/generate-roadmap")
def roadmap_preflight(settings: Settings = Depends(get_settings)):
    return Response(headers=settings.cors_headers())


# Browsers preflight with OPTIONS; every other method is handled as a generation request
@router.api_route("/generate-roadmap", methods=["POST", "GET", "PUT", "PATCH", "DELETE"])
async def create_roadmap(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_transport),
):
    try:
        llm = get_llm_client(settings, transport)
        req = _parse_request(await request.json())

        roadmap = await generate_roadmap(
            llm,
            req.projectTitle,
            req.projectDescription,
            strict=settings.ROADMAP_STRICT_SCHEMA,
        )
        return JSONResponse(roadmap, headers=settings.cors_headers())
    except Exception as e:
        logger.exception("Generate roadmap error: %s", e)
        body = ErrorResponse(error=str(e) or "Unknown error")
        return JSONResponse(body.model_dump(), status_code=500, headers=settings.cors_headers())
