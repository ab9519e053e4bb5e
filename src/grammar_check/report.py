"""Utilities for presenting grammar check results.

The builders here only read the issue list and the original text; nothing is
ever written back to the source document.
"""

from __future__ import annotations

import json

from src.models import GrammarIssue

REPORT_TITLE = "Grammar Check Results"


def _cell(value: str) -> str:
    return value.replace("|", "\\|").replace("\r", " ").replace("\n", " ")


def summary_line(issues: list[GrammarIssue]) -> str:
    if not issues:
        return "No grammar issues found! Your text looks good."
    return f"Found {len(issues)} grammar issue(s) in your text."


def render_report(issues: list[GrammarIssue]) -> str:
    """Build the human-readable report: title, summary, one block per issue."""
    lines = [REPORT_TITLE, "=" * len(REPORT_TITLE), summary_line(issues)]

    for number, issue in enumerate(issues, start=1):
        lines.extend(
            [
                "",
                f"Issue #{number} (Position: {issue.position})",
                f"  Original:    {issue.original_text}",
                f"  Suggestion:  {issue.suggestion}",
                f"  Explanation: {issue.explanation}",
            ]
        )

    return "\n".join(lines)


def build_issue_table(issues: list[GrammarIssue]) -> str:
    """Build a Markdown table with one row per issue.

    Pipes are escaped and line breaks flattened to keep one row per issue.
    """
    if not issues:
        return ""

    lines = [
        "| # | position | original | suggestion | explanation |",
        "| --- | --- | --- | --- | --- |",
    ]
    for number, issue in enumerate(issues, start=1):
        lines.append(
            f"| {number} | {issue.position} | {_cell(issue.original_text)} "
            f"| {_cell(issue.suggestion)} | {_cell(issue.explanation)} |"
        )
    return "\n".join(lines)


def issues_to_json(issues: list[GrammarIssue]) -> str:
    """Serialise issues (including the derived ``length``) as a JSON array.

    Read the output back with :func:`issues_from_json`.
    """
    return json.dumps(
        [issue.model_dump() for issue in issues], ensure_ascii=False, indent=2
    )


def issues_from_json(text: str) -> list[GrammarIssue]:
    """Load issues written by :func:`issues_to_json`.

    ``length`` is derived from ``original_text``, so the serialised value is
    dropped rather than fed back into the model.

    Raises:
        ValueError: If the text is not a JSON array of objects, or a stored
            ``length`` disagrees with its ``original_text``.
    """
    items = json.loads(text)
    if not isinstance(items, list):
        raise ValueError(f"Expected a JSON array, got {type(items).__name__}")

    issues: list[GrammarIssue] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Issue #{index} is not a JSON object")
        fields = dict(item)
        length = fields.pop("length", None)
        issue = GrammarIssue.model_validate(fields)
        if length is not None and length != issue.length:
            raise ValueError(
                f"Issue #{index} has length {length} but its original text has {issue.length} characters"
            )
        issues.append(issue)
    return issues
