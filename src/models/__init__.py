"""Public model exports for the project.

Keep the :mod:`src` namespace clean; tests and other modules should import
``from src.models import GrammarIssue, DocumentFormat``.
"""

from __future__ import annotations

from .check_result import CheckResult
from .enums import DocumentFormat
from .grammar_issue import GrammarIssue

__all__ = ["GrammarIssue", "DocumentFormat", "CheckResult"]
