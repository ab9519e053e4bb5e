"""Tagged outcome of a grammar check.

Lets a caller tell "no issues found" apart from "the service call failed",
which the plain list-returning API cannot express.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .grammar_issue import GrammarIssue


@dataclass(frozen=True)
class CheckResult:
    """Either ``ok(issues)`` or ``err(reason)``."""

    _issues: tuple[GrammarIssue, ...] | None = None
    _error: Exception | None = field(default=None)

    @classmethod
    def ok(cls, issues: list[GrammarIssue] | tuple[GrammarIssue, ...]) -> "CheckResult":
        return cls(_issues=tuple(issues))

    @classmethod
    def err(cls, error: Exception) -> "CheckResult":
        return cls(_error=error)

    @property
    def is_ok(self) -> bool:
        return self._error is None

    @property
    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> list[GrammarIssue]:
        if self._error is not None:
            raise ValueError("Called value on CheckResult.err")
        return list(self._issues or ())

    @property
    def error(self) -> Exception:
        if self._error is None:
            raise ValueError("Called error on CheckResult.ok")
        return self._error

    def issues_or_empty(self) -> list[GrammarIssue]:
        """Collapse to the list-only view: failures become an empty list."""
        return list(self._issues or ()) if self._error is None else []
