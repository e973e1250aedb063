"""
Shared fixtures: a scripted LLM client and a TestClient wired to it.
"""
import json

import pytest
from fastapi.testclient import TestClient

from inagiffy.agents.llm.base import LLMClient
from inagiffy.agents.llm.client import get_llm_client
from inagiffy.main import app


class FakeLLM(LLMClient):
    """Returns (or raises) the scripted replies in order and records every call."""

    provider_name = "Fake"

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        if not self.replies:
            raise RuntimeError("FakeLLM ran out of replies")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


def _resource(type_, title, url):
    return {"type": type_, "title": title, "url": url}


PHOTOGRAPHY_ROADMAP = {
    "topic": "Photography",
    "branches": [
        {
            "name": "Camera Basics",
            "description": "How a camera turns light into an image.",
            "subtopics": [
                {
                    "name": "Exposure Triangle",
                    "description": "Aperture, shutter speed and ISO.",
                    "resources": [
                        _resource("Article", "Exposure explained", "https://www.cambridgeincolour.com/tutorials/camera-exposure.htm"),
                        _resource("Video", "Exposure in 5 minutes", "https://www.youtube.com/watch?v=F8T94sdiNjc"),
                    ],
                },
                {
                    "name": "Lenses",
                    "description": "Focal length and field of view.",
                    "resources": [
                        _resource("Article", "Lens guide", "https://example.com/lenses"),
                    ],
                },
                {
                    "name": "Sensors",
                    "description": "Crop factor and full frame.",
                    "resources": [],
                },
            ],
        },
        {
            "name": "Composition",
            "description": "Arranging a frame.",
            "subtopics": [
                {
                    "name": "Rule of Thirds",
                    "description": "Placing subjects off-centre.",
                    "resources": [
                        _resource("Course", "Photography Basics", "https://www.coursera.org/learn/photography-basics"),
                        _resource("Book", "Bad link", "not a url"),
                    ],
                },
            ],
        },
        {
            "name": "Editing",
            "description": "Post-processing workflow.",
            "subtopics": [
                {
                    "name": "Raw Processing",
                    "description": "Developing raw files.",
                    "resources": [
                        _resource("Article", "darktable manual", "https://docs.darktable.org/usermanual/"),
                        _resource("Video", "Old FTP mirror", "ftp://files.example.org/x"),
                    ],
                },
            ],
        },
    ],
}

RELATED = {
    "relatedTopics": [
        {"topic": "Videography", "description": "Moving images.", "reason": "Same gear."},
        {"topic": "Graphic Design", "description": "Visual layout.", "reason": "Shared composition rules."},
    ],
    "nextLearningPaths": [
        {"topic": "Studio Lighting", "description": "Controlled light.", "reason": "Natural next step."},
    ],
}


@pytest.fixture
def roadmap_json():
    return json.dumps(PHOTOGRAPHY_ROADMAP)


@pytest.fixture
def related_json():
    return json.dumps(RELATED)


@pytest.fixture
def fake_llm_factory():
    return FakeLLM


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def use_llm():
    """Route the app's LLM dependency to the given fake for one test."""
    def _use(llm):
        app.dependency_overrides[get_llm_client] = lambda: llm
        return llm

    yield _use
    app.dependency_overrides.pop(get_llm_client, None)
