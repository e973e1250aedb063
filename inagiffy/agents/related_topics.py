## Related topics + next learning paths (best-effort enrichment)
import logging

from pydantic import ValidationError

from inagiffy.agents.cancellation import CancelToken
from inagiffy.agents.extraction import extract_json
from inagiffy.agents.llm.base import LLMClient
from inagiffy.agents.result import Result
from inagiffy.agents.schemas import Level, RelatedTopics, Roadmap
from inagiffy.errors import GenerationFailure, SchemaFailure
from inagiffy.settings import settings

logger = logging.getLogger(__name__)


SYSTEM_RELATED = """You are an expert learning advisor.
Given a topic someone is studying and the outline of their roadmap, suggest
what to explore alongside it and what to learn after it.

You must return ONLY valid JSON (no markdown, no code fences, no commentary):
{
  "relatedTopics": [
    {"topic": "string", "description": "string", "reason": "string"}
  ],
  "nextLearningPaths": [
    {"topic": "string", "description": "string", "reason": "string"}
  ]
}

Rules:
- relatedTopics: 4-6 complementary topics at a similar depth
- nextLearningPaths: 3-5 logical next steps once this topic is mastered
- description: one sentence on what the topic covers
- reason: one sentence on why it fits this learner
- Never repeat the current topic
"""


def build_related_prompt(topic: str, roadmap: Roadmap, level: Level) -> str:
    branch_names = "\n".join(f"- {b.name}" for b in roadmap.branches if b.name)
    return f"""
Current topic: {topic}
Learner level: {level}

Roadmap branches:
{branch_names or "- (none)"}

Suggest related topics and next learning paths. Respond only with valid JSON.
""".strip()


def generate_related_topics(llm: LLMClient, topic: str, roadmap: Roadmap, level: Level,
                            token: CancelToken | None = None) -> Result[RelatedTopics]:
    """Never raises: every failure comes back as Result.failure."""
    try:
        if token is not None:
            token.raise_if_cancelled("related topics")

        raw_text = llm.generate_text(
            system=SYSTEM_RELATED,
            user=build_related_prompt(topic, roadmap, level),
            temperature=settings.LLM_TEMPERATURE,
        )
        if not raw_text or not raw_text.strip():
            raise GenerationFailure(f"No related topics from {llm.provider_name}")

        data = extract_json(raw_text)
        if not isinstance(data, dict):
            raise SchemaFailure("Related topics response is not a JSON object")

        try:
            related = RelatedTopics.model_validate(data)
        except ValidationError as e:
            raise SchemaFailure(f"Invalid related topics structure: {e}") from e

        return Result.success(related.truncated())
    except Exception as e:
        logger.debug("Related topics generation failed", exc_info=True)
        return Result.failure(e)
