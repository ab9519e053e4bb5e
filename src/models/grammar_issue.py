"""Immutable model for a single writing issue reported by the analysis service.

Instances are only built while interpreting one service answer. ``length`` is
derived from ``original_text`` and is never taken from the remote payload;
``position`` is whatever offset the service suggested and is not checked
against the submitted text.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


def _as_text(value: object) -> str:
    return value if isinstance(value, str) else ""


def _as_position(value: object) -> int:
    # bool is an int subclass but never a meaningful offset
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


class GrammarIssue(BaseModel):
    """One flagged span of text with a suggested correction.

    Contract:
    - original_text: the exact substring judged problematic (may be empty)
    - suggestion: proposed replacement; empty means deletion
    - explanation: free-text rationale
    - position: advisory character offset into the submitted text (>= 0)
    - length: ``len(original_text)``, computed
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    original_text: str = ""
    suggestion: str = ""
    explanation: str = ""
    position: int = Field(default=0, ge=0)

    @field_validator("original_text", "suggestion", "explanation", mode="before")
    def _none_to_empty(cls, value: object) -> object:
        # Strings are kept verbatim; original_text must stay an exact span.
        return "" if value is None else value

    @field_validator("position", mode="before")
    def _clamp_position(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool) and value < 0:
            return 0
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        return len(self.original_text)

    @classmethod
    def from_llm_response(cls, data: dict[str, Any]) -> "GrammarIssue":
        """Create a GrammarIssue from one object of the service's JSON array.

        The service uses the short keys ``original``, ``suggestion``,
        ``explanation`` and ``position``. Missing or wrong-typed strings become
        ``""`` and a missing or wrong-typed position becomes ``0``.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Expected a JSON object, got {type(data).__name__}")
        return cls(
            original_text=_as_text(data.get("original")),
            suggestion=_as_text(data.get("suggestion")),
            explanation=_as_text(data.get("explanation")),
            position=_as_position(data.get("position")),
        )

    def __str__(self) -> str:
        return (
            f"[Position {self.position}] '{self.original_text}' -> '{self.suggestion}'\n"
            f"Explanation: {self.explanation}"
        )
