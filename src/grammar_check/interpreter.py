"""Turn a raw chat-completions response into GrammarIssue objects.

The outer envelope is strict JSON, but the message content is free-form
text that is only expected to *contain* a JSON array. The array is cut out
by bracket scanning (first ``[`` to last ``]``) before it is parsed.

Interpretation is all-or-nothing per answer: any failure yields an empty
list and a logged diagnostic, never a partial list and never an exception.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from src.llm.json_utils import parse_json_array
from src.llm.provider import InterpretationError
from src.models import GrammarIssue

logger = logging.getLogger(__name__)


def _load_envelope(raw_response_body: str | bytes | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(raw_response_body, Mapping):
        return raw_response_body
    try:
        envelope = json.loads(raw_response_body)
    except (TypeError, ValueError) as exc:
        raise InterpretationError(f"Response body is not valid JSON: {exc}") from exc
    if not isinstance(envelope, dict):
        raise InterpretationError(
            f"Response body is not a JSON object (got {type(envelope).__name__})"
        )
    return envelope


def extract_message_content(raw_response_body: str | bytes | Mapping[str, Any]) -> str:
    """Return ``choices[0].message.content`` from a chat-completions body.

    Raises:
        InterpretationError: If any step of the lookup fails.
    """
    envelope = _load_envelope(raw_response_body)

    choices = envelope.get("choices")
    if not isinstance(choices, list):
        raise InterpretationError("Response has no 'choices' array")
    if not choices:
        raise InterpretationError("Response 'choices' array is empty")

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    if not isinstance(message, dict):
        raise InterpretationError("First choice has no 'message' object")

    content = message.get("content")
    if not isinstance(content, str):
        raise InterpretationError("Message 'content' is missing or not a string")
    return content


def parse_issues(content: str, *, repair: bool = False) -> list[GrammarIssue]:
    """Recover the issue array from message content.

    Raises:
        InterpretationError: If no array can be recovered or an element is
            not a JSON object.
    """
    try:
        items = parse_json_array(content, repair=repair)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError subclass
        raise InterpretationError(str(exc), response_text=content) from exc

    issues: list[GrammarIssue] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise InterpretationError(
                f"Issue #{index} is not a JSON object (got {type(item).__name__})",
                response_text=content,
            )
        issues.append(GrammarIssue.from_llm_response(item))
    return issues


def interpret(
    raw_response_body: str | bytes | Mapping[str, Any],
    original_text: str,
    *,
    repair: bool = False,
) -> list[GrammarIssue]:
    """Best-effort conversion of a service answer into an ordered issue list.

    ``original_text`` is the text that was submitted. Issues are not
    cross-checked against it; positions stay advisory.

    Args:
        raw_response_body: The HTTP response body (text, bytes, or an
            already-decoded JSON object).
        original_text: The text that was analysed.
        repair: Opt-in lenient mode that runs the recovered array through
            ``json_repair`` before parsing.

    Returns:
        Issues in the order the service listed them; empty on any failure.
    """
    try:
        content = extract_message_content(raw_response_body)
        issues = parse_issues(content, repair=repair)
    except InterpretationError as exc:
        logger.warning(
            "Could not interpret analysis response for %d-character text: %s",
            len(original_text or ""),
            exc,
        )
        return []
    except Exception:
        logger.exception("Unexpected error interpreting analysis response")
        return []

    logger.debug("Interpreted %d issue(s) from analysis response", len(issues))
    return issues
