# inagiffy/agents/workflow.py
import logging

from inagiffy.agents.cancellation import CancelToken
from inagiffy.agents.llm.base import LLMClient
from inagiffy.agents.normalizer import parse_roadmap
from inagiffy.agents.related_topics import generate_related_topics
from inagiffy.agents.schemas import Level, RelatedTopics, Roadmap
from inagiffy.errors import ConfigurationFailure, GenerationFailure
from inagiffy.settings import settings

logger = logging.getLogger(__name__)


SYSTEM_ROADMAP = """You are an expert educational content planner and topic mapper. Given a subject, you generate a structured, hierarchical roadmap breaking it into subtopics, with short descriptions and 1-2 recommended resources per subtopic.

Always respond in strict JSON following this exact schema:
{
  "topic": "string",
  "branches": [
    {
      "name": "string",
      "description": "string",
      "subtopics": [
        {
          "name": "string",
          "description": "string",
          "resources": [
            {
              "type": "Article" | "Video" | "Book" | "Course",
              "title": "string",
              "url": "string"
            }
          ]
        }
      ]
    }
  ]
}

URL rules:
- ONLY use real, existing and accessible URLs from well-known educational platforms
- Prefer official documentation (developer.mozilla.org, docs.python.org, react.dev, ...)
- Popular learning platforms are fine (freecodecamp.org, coursera.org, udemy.com, khanacademy.org, youtube.com)
- Official GitHub repositories (github.com) are fine
- For books use Amazon, Goodreads or the publisher's website
- For videos use YouTube, Vimeo or the official channel
- NEVER invent URLs or use placeholder domains such as example.com, placeholder.com, test.com, dummy.com or fake.com

Valid URL examples:
- https://developer.mozilla.org/en-US/docs/Web/HTML
- https://react.dev/learn
- https://www.freecodecamp.org/learn
- https://docs.python.org/3/tutorial/
- https://github.com/facebook/react

Invalid URL examples (DO NOT USE):
- https://example.com/tutorial
- https://placeholder.com/resource
- https://learn-x.com (made-up domains)

Other rules:
- Return ONLY valid JSON, no markdown, no code fences, no commentary
- Include 3-6 main branches
- Each branch has 3-5 subtopics
- Each subtopic has 1-2 learning resources
- Descriptions are concise (1-2 sentences)
"""


def build_roadmap_prompt(topic: str, level: Level) -> str:
    return f"""
Generate a learning roadmap for: {topic}
Tailor it for {level} learners.
Include 3-6 main branches, each with 3-5 subtopics and 1-2 learning resources (article/video/book/course).

Only include real URLs from official documentation, reputable learning platforms,
official GitHub repositories, YouTube channels with real video IDs, or official websites and blogs.
Do not make up URLs.

Respond only with valid JSON.
""".strip()


def generate_roadmap_text(llm: LLMClient, topic: str, level: Level,
                          token: CancelToken | None = None) -> str:
    """Single LLM call for the roadmap. No retries."""
    if token is not None:
        token.raise_if_cancelled("roadmap generation")

    try:
        raw_text = llm.generate_text(
            system=SYSTEM_ROADMAP,
            user=build_roadmap_prompt(topic, level),
            temperature=settings.LLM_TEMPERATURE,
        )
    except ConfigurationFailure:
        raise
    except Exception as e:
        logger.exception("%s API error while generating roadmap for %r", llm.provider_name, topic)
        raise GenerationFailure(f"Failed to generate roadmap: {e}") from e

    if not raw_text or not raw_text.strip():
        raise GenerationFailure(f"Failed to generate roadmap: no response from {llm.provider_name}")
    return raw_text


def generate_learning_roadmap(llm: LLMClient, topic: str, level: Level = "intermediate",
                              token: CancelToken | None = None) -> Roadmap:
    llm.ensure_configured()

    raw_text = generate_roadmap_text(llm, topic, level, token)
    roadmap = parse_roadmap(raw_text)
    logger.info("Generated roadmap for %r with %d branch(es)", topic, len(roadmap.branches))

    # Enrichment is best effort: a failure here must never fail the roadmap
    result = generate_related_topics(llm, topic, roadmap, level, token)
    if not result.ok:
        logger.warning("Related topics unavailable for %r: %s", topic, result.error)
    related = result.unwrap_or(RelatedTopics())

    roadmap.related_topics = related.related_topics
    roadmap.next_learning_paths = related.next_learning_paths
    return roadmap
