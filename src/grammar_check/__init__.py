"""Grammar checking against a remote language-analysis service.

Builds the request, performs one round trip and recovers the issue list
from the service's free-form answer.
"""

from __future__ import annotations

from .interpreter import extract_message_content, interpret, parse_issues
from .prompt_factory import build_prompt, build_request_payload
from .report import build_issue_table, issues_from_json, issues_to_json, render_report
from .service import GrammarCheckService

__all__ = [
    "GrammarCheckService",
    "build_prompt",
    "build_request_payload",
    "extract_message_content",
    "interpret",
    "parse_issues",
    "build_issue_table",
    "issues_from_json",
    "issues_to_json",
    "render_report",
]
