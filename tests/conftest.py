from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for test imports
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

_CONFIG_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "MAX_TOKENS",
    "OPENAI_API_URL",
    "OPENAI_TIMEOUT",
)


@pytest.fixture
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Give the test a private copy of os.environ without the config variables.

    load_dotenv writes straight into os.environ, so values it loads would
    otherwise leak into later tests.
    """
    env = {k: v for k, v in os.environ.items() if k not in _CONFIG_VARS}
    monkeypatch.setattr(os, "environ", env)
    return env


@pytest.fixture
def empty_dotenv(tmp_path: Path) -> Path:
    """An empty .env file so config loading never discovers a stray one."""
    path = tmp_path / "empty.env"
    path.write_text("", encoding="utf-8")
    return path
