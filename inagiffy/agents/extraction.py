## Recovering a JSON object from model output
"""
Models are told to answer with bare JSON but regularly wrap it in prose or
markdown fences. extract_json tries, in order:

1. the whole text as strict JSON
2. the first balanced {...} inside each ``` / ```json fenced block
3. the first balanced {...} in the whole text that parses

Brace matching skips braces inside JSON string literals.
"""
import json
import re
from typing import Any, Iterator

from inagiffy.errors import ParseFailure

_FENCE_RE = re.compile(r"```[ \t]*(?:json|JSON)?[ \t]*\r?\n?(.*?)```", re.DOTALL)


def _balanced_object_end(text: str, start: int) -> int | None:
    """Index one past the '}' closing the object opened at text[start], or None."""
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i + 1

    return None


def iter_balanced_objects(text: str) -> Iterator[str]:
    """Yield top-level balanced {...} spans in order of appearance."""
    pos = text.find("{")
    while pos != -1:
        end = _balanced_object_end(text, pos)
        if end is None:
            # stray unclosed brace, try the next one
            pos = text.find("{", pos + 1)
            continue
        yield text[pos:end]
        pos = text.find("{", end)


def _first_parsable_object(text: str) -> Any | None:
    for candidate in iter_balanced_objects(text):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    return None


def extract_json(text: str) -> Any:
    if text is None or not text.strip():
        raise ParseFailure("Empty response, nothing to parse")

    stripped = text.strip()

    try:
        return json.loads(stripped)
    except json.JSONDecodeError:
        pass

    for match in _FENCE_RE.finditer(stripped):
        found = _first_parsable_object(match.group(1))
        if found is not None:
            return found

    found = _first_parsable_object(stripped)
    if found is not None:
        return found

    raise ParseFailure("Failed to parse JSON response from the model")
