"""Command-line interface for the grammar checker.

Loads a document (or takes text directly), sends it to the analysis service
and prints the issues found. The document itself is never modified.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from src.extraction import ExtractionIOError, UnsupportedFormatError, extract
from src.llm.config import AnalysisConfig
from src.models import GrammarIssue

from .prompt_factory import build_prompt, build_request_payload
from .report import build_issue_table, issues_to_json, render_report
from .service import GrammarCheckService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SERVICE_FAILURE = 2


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Check the grammar of a Word, PDF or text document using an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a document
  python -m src.grammar_check report.docx

  # Check text passed on the command line
  python -m src.grammar_check --text "Their is a problem here."

  # Print issues as JSON and fail loudly if the service call fails
  python -m src.grammar_check notes.pdf --json --strict-errors

  # Show the prompt and request payload without calling the service
  python -m src.grammar_check notes.txt --emit-prompt

Environment Variables:
  OPENAI_API_KEY   API key for the analysis service (required)
  OPENAI_MODEL     Model identifier (default: gpt-4o-mini)
  MAX_TOKENS       Output token budget (default: 4000)
  OPENAI_API_URL   Chat completions endpoint override
  OPENAI_TIMEOUT   Request timeout in seconds (default: none)
        """,
    )

    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        help="Document to check (.docx, .doc, .pdf or .txt)",
    )
    parser.add_argument(
        "--text",
        help="Check this text instead of a document",
    )
    parser.add_argument(
        "--dotenv",
        type=Path,
        help="Path to .env file for API keys",
    )
    parser.add_argument(
        "--model",
        help="Model identifier (overrides OPENAI_MODEL)",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        help="Output token budget (overrides MAX_TOKENS)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the issues as a JSON array instead of a text report",
    )
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Print the issues as a Markdown table instead of a text report",
    )
    parser.add_argument(
        "--strict-errors",
        action="store_true",
        help="Exit with status 2 when the service call fails instead of reporting no issues",
    )
    parser.add_argument(
        "--emit-prompt",
        action="store_true",
        help="Print the prompt and request payload and exit without calling the service",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )

    return parser.parse_args(args)


def load_document(path: Path) -> str:
    """Extract a document's text and log a short status line."""
    content = extract(path)
    logger.info("File loaded successfully: %s (%d characters)", path.name, len(content))
    return content


def _build_config(args: argparse.Namespace) -> AnalysisConfig:
    config = AnalysisConfig.from_env(args.dotenv)
    overrides: dict[str, object] = {}
    if args.model:
        overrides["model"] = args.model
    if args.max_tokens is not None:
        overrides["max_tokens"] = args.max_tokens
    return replace(config, **overrides) if overrides else config


def _print_issues(issues: list[GrammarIssue], args: argparse.Namespace) -> None:
    if args.json:
        print(issues_to_json(issues))
    elif args.markdown and issues:
        print(build_issue_table(issues))
    else:
        print(render_report(issues))


def main(
    argv: list[str] | None = None,
    *,
    service: GrammarCheckService | None = None,
) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (None = use sys.argv)
        service: Optional pre-built service (tests inject a stub transport)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.path is not None and args.text is not None:
        print("Error: pass either a document path or --text, not both", file=sys.stderr)
        return EXIT_USAGE

    if args.json and args.markdown:
        print("Error: --json and --markdown are mutually exclusive", file=sys.stderr)
        return EXIT_USAGE

    if args.path is not None:
        try:
            text = load_document(args.path)
        except UnsupportedFormatError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_USAGE
        except ExtractionIOError as exc:
            print(f"Failed to load file: {exc}", file=sys.stderr)
            return EXIT_USAGE
    else:
        text = args.text or ""

    if not text.strip():
        print("Please enter some text or load a file first.", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = _build_config(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    if args.emit_prompt:
        prompt = build_prompt(text)
        print(prompt)
        print()
        print(json.dumps(build_request_payload(prompt, config.model, config.max_tokens), indent=2))
        return EXIT_OK

    service = service or GrammarCheckService()

    try:
        if args.strict_errors:
            result = service.run(text, config)
            if result.is_err:
                print(f"Error checking grammar: {result.error}", file=sys.stderr)
                return EXIT_SERVICE_FAILURE
            issues = result.value
        else:
            issues = service.check_grammar(text, config)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    _print_issues(issues, args)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
