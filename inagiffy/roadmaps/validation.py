## Request validation for /api/generate-map
from typing import Any

from pydantic import ValidationError

from inagiffy.agents.schemas import GenerateMapRequest
from inagiffy.errors import RequestValidationFailure


def format_validation_errors(errors: list[dict]) -> list[dict]:
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        details.append({
            "field": ".".join(loc) or "body",
            "message": err.get("msg", "Invalid value").removeprefix("Value error, "),
            "type": err.get("type", "value_error"),
        })
    return details


def validate_generate_request(payload: Any) -> GenerateMapRequest:
    """Every invalid field is reported, not only the first one."""
    if not isinstance(payload, dict):
        raise RequestValidationFailure([
            {"field": "body", "message": "Expected a JSON object", "type": "model_type"},
        ])

    try:
        return GenerateMapRequest.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationFailure(
            format_validation_errors(e.errors(include_url=False, include_context=False))
        ) from e
