import logging

import pytest

from inagiffy.agents.normalizer import is_acceptable_url, normalize_roadmap, parse_roadmap
from inagiffy.errors import ParseFailure, SchemaFailure


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://example.com/tutorial", False),
        ("not a url", False),
        ("https://developer.mozilla.org/en-US/docs/Web/HTML", True),
        ("ftp://files.example.org/x", False),
        ("http://docs.python.org/3/tutorial/", True),
        ("https://www.placeholder.com/resource", False),
        ("https://mytest.com/x", False),
        ("https://learn.fake.com.au/", False),
        ("/relative/path", False),
        ("https://www.youtube.com/watch?v=" + "a" * 2100, True),
        ("mailto:someone@developer.mozilla.org", False),
        ("", False),
        (None, False),
    ],
)
def test_url_filter(url, expected):
    assert is_acceptable_url(url) is expected


def _roadmap_with(resources):
    return {
        "topic": "Web",
        "branches": [
            {"name": "HTML", "description": "Markup", "subtopics": [
                {"name": "Elements", "description": "Tags", "resources": resources},
            ]},
        ],
    }


def test_invalid_resources_are_dropped_in_order(caplog):
    resources = [
        {"type": "Article", "title": "MDN", "url": "https://developer.mozilla.org/en-US/docs/Web/HTML"},
        {"type": "Video", "title": "Fake", "url": "https://example.com/tutorial"},
        {"type": "Book", "title": "Broken", "url": "not a url"},
        {"type": "Course", "title": "FCC", "url": "https://www.freecodecamp.org/learn"},
    ]
    with caplog.at_level(logging.WARNING, logger="inagiffy.agents.normalizer"):
        roadmap = normalize_roadmap(_roadmap_with(resources))

    kept = roadmap.branches[0].subtopics[0].resources
    assert [r.title for r in kept] == ["MDN", "FCC"]
    assert "https://example.com/tutorial" in caplog.text
    assert "not a url" in caplog.text


def test_resource_with_unknown_type_is_dropped():
    resources = [
        {"type": "Podcast", "title": "Pod", "url": "https://www.youtube.com/watch?v=abc"},
        {"type": "Video", "title": "Vid", "url": "https://www.youtube.com/watch?v=def"},
    ]
    roadmap = normalize_roadmap(_roadmap_with(resources))
    assert [r.title for r in roadmap.branches[0].subtopics[0].resources] == ["Vid"]


@pytest.mark.parametrize(
    "data",
    [
        {"topic": "X"},
        {"topic": "X", "branches": "not a list"},
        {"topic": "X", "branches": {"name": "a"}},
        {"branches": []},
        {"topic": "   ", "branches": []},
        {"topic": 42, "branches": []},
        ["topic", "branches"],
    ],
)
def test_schema_failures(data):
    with pytest.raises(SchemaFailure):
        normalize_roadmap(data)


def test_empty_branches_are_accepted():
    roadmap = normalize_roadmap({"topic": "X", "branches": []})
    assert roadmap.topic == "X"
    assert roadmap.branches == []


def test_malformed_nested_entries_are_skipped():
    data = {
        "topic": "Chemistry",
        "branches": [
            "just a string",
            {"name": "Organic", "subtopics": "oops"},
            {"description": "no name", "subtopics": [None, {"name": "Bonds", "resources": None}]},
        ],
    }
    roadmap = normalize_roadmap(data)

    assert len(roadmap.branches) == 2
    assert roadmap.branches[0].name == "Organic"
    assert roadmap.branches[0].subtopics == []
    assert roadmap.branches[1].name == ""
    assert [s.name for s in roadmap.branches[1].subtopics] == ["Bonds"]
    assert roadmap.branches[1].subtopics[0].resources == []


def test_parse_roadmap_from_fenced_text(roadmap_json):
    roadmap = parse_roadmap(f"Here is your roadmap:\n```json\n{roadmap_json}\n```")
    assert roadmap.topic == "Photography"
    assert len(roadmap.branches) == 3
    for branch in roadmap.branches:
        for subtopic in branch.subtopics:
            assert all(is_acceptable_url(r.url) for r in subtopic.resources)


def test_parse_roadmap_raises_parse_failure():
    with pytest.raises(ParseFailure):
        parse_roadmap("I could not build that roadmap, sorry.")
