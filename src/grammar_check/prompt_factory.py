"""Build the grammar check prompt and the chat-completions request payload.

The prompt is rendered from ``grammar_check.md``. The text to analyse is
interpolated verbatim: no truncation, escaping or length capping happens
here. Staying inside the token budget is the service's concern.
"""

from __future__ import annotations

from typing import Any

from src.prompt.render_prompt import render_template

GRAMMAR_CHECK_TEMPLATE = "grammar_check.md"

# Keys the service is asked to use for each issue object.
REQUIRED_FIELDS = ("original", "suggestion", "explanation", "position")


def build_prompt(text: str) -> str:
    """Return the fixed instruction preamble followed by ``text``."""
    return render_template(GRAMMAR_CHECK_TEMPLATE, {"text": text})


def build_request_payload(prompt: str, model: str, max_tokens: int) -> dict[str, Any]:
    """Build a single-message, one-shot chat request.

    No temperature, system message or history is sent; ``model`` and
    ``max_tokens`` are passed through from configuration unchanged.
    """
    return {
        "model": model,
        "max_tokens": max_tokens,
        "messages": [{"role": "user", "content": prompt}],
    }
