"""Render prompt templates in src/prompt/promptFiles using pystache.

This small helper loads a template file, strips any leading/trailing
code-fence wrappers (so files that include ```markdown blocks still work),
and renders the template with an optional JSON context passed via a file.

Usage:
    python -m src.prompt.render_prompt [template_filename] [context.json]

If no arguments are given, it renders `grammar_check.md` with an empty
context and prints to stdout.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pystache

PROMPTS_DIR = Path(__file__).parent / "promptFiles"
DEFAULT_TEMPLATE = "grammar_check.md"


def _read_prompt(name: str) -> str:
    p = PROMPTS_DIR / name
    if not p.exists():
        raise FileNotFoundError(f"Prompt file not found: {p}")
    return p.read_text(encoding="utf-8")


def _strip_code_fences(s: str) -> str:
    """Strip a single leading and trailing code-fence block if present.

    Handles fences like ``` or ```` optionally followed by a language tag.
    """
    lines = s.splitlines()
    if not lines:
        return s
    first = lines[0].lstrip()
    last = lines[-1].lstrip()
    if first.startswith("```"):
        lines = lines[1:]
    if lines and last.startswith("```"):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def render_template(
    template_name: str = DEFAULT_TEMPLATE,
    context: dict | None = None,
) -> str:
    """Render ``template_name`` with ``context``.

    Only the template is trimmed; the rendered output is returned as is so
    interpolated values keep their leading and trailing whitespace.
    """
    template = _strip_code_fences(_read_prompt(template_name))
    renderer = pystache.Renderer(missing_tags="ignore")
    return renderer.render(template, context or {})


def _load_context(path: str) -> dict:
    return json.loads(Path(path).read_text(encoding="utf-8"))


if __name__ == "__main__":
    tpl = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_TEMPLATE
    ctx = None
    if len(sys.argv) > 2:
        ctx = _load_context(sys.argv[2])
    print(render_template(tpl, ctx))
