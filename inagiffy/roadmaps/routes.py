# Roadmap API
import json
import re
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Body, Depends
from fastapi.responses import Response
from pydantic import ValidationError

from inagiffy.agents.cancellation import CancelToken
from inagiffy.agents.llm.base import LLMClient
from inagiffy.agents.llm.client import get_llm_client
from inagiffy.agents.schemas import DiagramRequest, Roadmap
from inagiffy.agents.workflow import generate_learning_roadmap
from inagiffy.diagram.layout import DiagramState
from inagiffy.errors import RequestValidationFailure
from inagiffy.roadmaps.validation import format_validation_errors, validate_generate_request
from inagiffy.settings import settings

router = APIRouter(prefix="/api")


def get_cancel_token() -> CancelToken:
    return CancelToken(timeout=settings.GENERATION_TIMEOUT_SECONDS)


def export_filename(topic: str) -> str:
    dashed = re.sub(r"\s+", "-", topic)
    return f"{dashed}-roadmap.json"


@router.post("/generate-map")
def generate_map(
    payload: Any = Body(None),
    llm: LLMClient = Depends(get_llm_client),
    token: CancelToken = Depends(get_cancel_token),
):
    req = validate_generate_request(payload)
    roadmap = generate_learning_roadmap(llm, req.topic, req.level, token)
    return {"success": True, "data": roadmap.to_json_dict()}


@router.post("/diagram")
def render_diagram(payload: Any = Body(None)):
    try:
        req = DiagramRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationFailure(
            format_validation_errors(e.errors(include_url=False, include_context=False))
        ) from e

    state = DiagramState(req.expanded)
    try:
        diagram = state.render(req.roadmap)
    except KeyError as e:
        raise RequestValidationFailure([
            {"field": "expanded", "message": str(e.args[0]), "type": "unknown_node"},
        ]) from e
    return diagram.to_dict()


@router.post("/export")
def export_roadmap(payload: Any = Body(None)):
    try:
        roadmap = Roadmap.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationFailure(
            format_validation_errors(e.errors(include_url=False, include_context=False))
        ) from e

    return Response(
        content=json.dumps(roadmap.to_json_dict(), indent=2, ensure_ascii=False),
        media_type="application/json",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(export_filename(roadmap.topic))}"},
    )
