"""JSON recovery utilities for LLM answers.

The service's answer is natural language coerced into JSON by prompting
alone, so the array is often wrapped in a preamble or an epilogue. This
module cuts the array out of the surrounding prose before parsing it.
"""

from __future__ import annotations

import json
from typing import Any

from json_repair import repair_json


def extract_json_array(text: str) -> str:
    """Return the span from the first ``[`` to the last ``]`` (inclusive).

    Raises:
        ValueError: If either bracket is missing or the span is inverted.

    Example:
        >>> extract_json_array('Here you go: [{"a": 1}] Thanks!')
        '[{"a": 1}]'
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected string input, got {type(text)}")

    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1:
        raise ValueError("Response text does not contain JSON array delimiters.")
    if end <= start:
        raise ValueError("Response text does not contain matching JSON array delimiters.")
    return text[start : end + 1]


def parse_json_array(text: str, *, repair: bool = False) -> list[Any]:
    """Extract and parse the JSON array embedded in ``text``.

    Args:
        text: Response content that should contain a JSON array.
        repair: When True, run the fragment through ``json_repair`` first so
            trailing commas, single quotes and similar slips are tolerated.

    Raises:
        ValueError: If no array can be located, or the parsed value is not a list.
        json.JSONDecodeError: If the fragment is not valid JSON.
    """
    fragment = extract_json_array(text)
    if repair:
        fragment = repair_json(fragment)
    parsed = json.loads(fragment)
    if not isinstance(parsed, list):
        raise ValueError(f"Expected a JSON array, got {type(parsed).__name__}")
    return parsed
