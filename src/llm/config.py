from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

OPENAI_CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_MAX_TOKENS = 4000


def _read_positive_int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %d", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %d", name, raw, default)
        return default
    return value


def _read_float_env(name: str) -> float | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; no timeout applied", name, raw)
        return None
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; no timeout applied", name, raw)
        return None
    return value


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for one call to the analysis service.

    Built once by the caller (usually via :meth:`from_env`) and passed into
    every check so tests can inject their own values.
    """

    api_key: str = ""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_url: str = OPENAI_CHAT_COMPLETIONS_URL
    # None defers to whatever the transport enforces by default
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ValueError("max_tokens must be a positive integer")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, dotenv_path: str | Path | None = None) -> "AnalysisConfig":
        """Read the configuration from the environment and an optional .env file.

        Values already present in the environment take precedence over the
        .env file.

        Environment Variables:
            OPENAI_API_KEY   API key (default: empty)
            OPENAI_MODEL     Model identifier (default: gpt-4o-mini)
            MAX_TOKENS       Output token budget (default: 4000)
            OPENAI_API_URL   Chat completions endpoint
            OPENAI_TIMEOUT   Request timeout in seconds (default: none)
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path=Path(dotenv_path))
        else:
            load_dotenv()

        return cls(
            api_key=os.environ.get("OPENAI_API_KEY", "").strip(),
            model=os.environ.get("OPENAI_MODEL", "").strip() or DEFAULT_MODEL,
            max_tokens=_read_positive_int_env("MAX_TOKENS", DEFAULT_MAX_TOKENS),
            api_url=os.environ.get("OPENAI_API_URL", "").strip()
            or OPENAI_CHAT_COMPLETIONS_URL,
            timeout=_read_float_env("OPENAI_TIMEOUT"),
        )
