## Pydantic Schemas for roadmap output and API requests
from enum import Enum
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Level = Literal["beginner", "intermediate", "advanced"]

MAX_RELATED_TOPICS = 6
MAX_NEXT_LEARNING_PATHS = 5


class ResourceType(str, Enum):
    ARTICLE = "Article"
    VIDEO = "Video"
    BOOK = "Book"
    COURSE = "Course"


class Resource(BaseModel):
    type: ResourceType
    title: str = ""
    url: str


class Subtopic(BaseModel):
    name: str = ""
    description: str = ""
    resources: List[Resource] = Field(default_factory=list)


class Branch(BaseModel):
    name: str = ""
    description: str = ""
    subtopics: List[Subtopic] = Field(default_factory=list)


class RelatedTopic(BaseModel):
    topic: str
    description: str = ""
    reason: str = ""


class RelatedTopics(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    related_topics: List[RelatedTopic] = Field(default_factory=list, alias="relatedTopics")
    next_learning_paths: List[RelatedTopic] = Field(default_factory=list, alias="nextLearningPaths")

    def truncated(self) -> "RelatedTopics":
        return RelatedTopics(
            related_topics=self.related_topics[:MAX_RELATED_TOPICS],
            next_learning_paths=self.next_learning_paths[:MAX_NEXT_LEARNING_PATHS],
        )


class Roadmap(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    topic: str = Field(min_length=1)
    branches: List[Branch]
    related_topics: List[RelatedTopic] = Field(default_factory=list, alias="relatedTopics")
    next_learning_paths: List[RelatedTopic] = Field(default_factory=list, alias="nextLearningPaths")

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class GenerateMapRequest(BaseModel):
    topic: str
    level: Level = "intermediate"

    @field_validator("topic")
    @classmethod
    def topic_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Topic is required")
        return v


class DiagramRequest(BaseModel):
    roadmap: Roadmap
    expanded: List[str] = Field(default_factory=list)
