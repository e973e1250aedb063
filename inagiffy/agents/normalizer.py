## Roadmap normalization: shape check + resource URL filtering
import logging
from typing import Any

from pydantic import AnyUrl, TypeAdapter, ValidationError

from inagiffy.agents.extraction import extract_json
from inagiffy.agents.schemas import Branch, Resource, Roadmap, Subtopic
from inagiffy.errors import SchemaFailure

logger = logging.getLogger(__name__)

# Matched as substrings of the hostname, so sub.example.com and example.com.au go too
DENYLISTED_DOMAINS = (
    "example.com",
    "placeholder.com",
    "test.com",
    "dummy.com",
    "fake.com",
)

# AnyUrl rather than HttpUrl: HttpUrl caps length at 2083 characters
_any_url = TypeAdapter(AnyUrl)


def url_rejection_reason(url: Any) -> str | None:
    """None when the URL is acceptable, otherwise a short reason for the logs."""
    if not isinstance(url, str) or not url.strip():
        return "missing url"
    if any(ch.isspace() for ch in url.strip()):
        return "malformed url"

    try:
        parsed = _any_url.validate_python(url.strip())
    except ValidationError:
        return "malformed url"
    if parsed.scheme not in ("http", "https"):
        return "non-http(s) url"

    host = (parsed.host or "").lower()
    if not host:
        return "missing host"
    if any(domain in host for domain in DENYLISTED_DOMAINS):
        return "placeholder domain"
    return None


def is_acceptable_url(url: Any) -> bool:
    return url_rejection_reason(url) is None


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _normalize_resources(raw: Any) -> list[Resource]:
    if not isinstance(raw, list):
        return []

    kept: list[Resource] = []
    for item in raw:
        if not isinstance(item, dict):
            logger.warning("Filtered out malformed resource: %r", item)
            continue

        reason = url_rejection_reason(item.get("url"))
        if reason:
            logger.warning("Filtered out invalid URL (%s): %s", reason, item.get("url"))
            continue

        try:
            kept.append(Resource.model_validate({**item, "title": _text(item.get("title")), "url": item["url"].strip()}))
        except ValidationError as e:
            logger.warning("Filtered out resource %r: %s", item.get("title"), e.errors(include_url=False))
    return kept


def _normalize_subtopics(raw: Any) -> list[Subtopic]:
    if not isinstance(raw, list):
        return []

    return [
        Subtopic(
            name=_text(item.get("name")),
            description=_text(item.get("description")),
            resources=_normalize_resources(item.get("resources")),
        )
        for item in raw
        if isinstance(item, dict)
    ]


def normalize_roadmap(data: Any) -> Roadmap:
    """
    Turn parsed model output into a Roadmap.

    Only the top level is strict: a non-empty topic string and a branches list.
    Below that, malformed entries are skipped and missing text defaults to "".
    """
    if not isinstance(data, dict):
        raise SchemaFailure("Invalid roadmap structure: expected a JSON object")

    topic = data.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        raise SchemaFailure("Invalid roadmap structure: missing topic")

    branches = data.get("branches")
    if not isinstance(branches, list):
        raise SchemaFailure("Invalid roadmap structure: branches must be an array")

    normalized = [
        Branch(
            name=_text(branch.get("name")),
            description=_text(branch.get("description")),
            subtopics=_normalize_subtopics(branch.get("subtopics")),
        )
        for branch in branches
        if isinstance(branch, dict)
    ]
    if len(normalized) != len(branches):
        logger.warning("Skipped %d malformed branch(es) for %r", len(branches) - len(normalized), topic)

    return Roadmap(topic=topic.strip(), branches=normalized)


def parse_roadmap(text: str) -> Roadmap:
    return normalize_roadmap(extract_json(text))
