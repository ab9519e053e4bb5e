from __future__ import annotations

import logging

from src.llm.config import AnalysisConfig
from src.llm.provider import MissingCredentialError, RemoteServiceError
from src.llm.transport import RequestsTransport, Transport, build_headers
from src.models import CheckResult, GrammarIssue

from .interpreter import interpret
from .prompt_factory import build_prompt, build_request_payload

logger = logging.getLogger(__name__)


class GrammarCheckService:
    """Sends text to the analysis service and returns the issues it reports.

    Each call performs at most one blocking round trip and keeps no state
    between calls, so one instance may serve concurrent callers as long as
    the transport is itself safe to share.

    Three entry points share the same core:

    - :meth:`check` raises typed errors.
    - :meth:`check_grammar` never raises; failures become an empty list.
    - :meth:`run` never raises; failures become ``CheckResult.err``.
    """

    def __init__(self, transport: Transport | None = None) -> None:
        self._transport = transport or RequestsTransport()

    def check(self, text: str | None, config: AnalysisConfig) -> list[GrammarIssue]:
        """Analyse ``text`` and return the issues found.

        Raises:
            MissingCredentialError: If ``config.api_key`` is empty.
            TransportError: If the round trip itself fails.
            RemoteServiceError: If the service answers with a non-200 status.
        """
        if text is None or not text.strip():
            return []

        if not config.has_credentials:
            raise MissingCredentialError(
                "OpenAI API key not configured. Set OPENAI_API_KEY in your "
                "environment or .env file."
            )

        prompt = build_prompt(text)
        payload = build_request_payload(prompt, config.model, config.max_tokens)

        logger.info(
            "Requesting grammar analysis for %d characters (model=%s)",
            len(text),
            config.model,
        )
        response = self._transport.post_json(
            config.api_url,
            payload,
            build_headers(config.api_key),
            timeout=config.timeout,
        )

        if not response.ok:
            raise RemoteServiceError(
                f"Analysis service returned error code: {response.status_code}",
                status_code=response.status_code,
                response_text=response.body,
            )

        return interpret(response.body, text)

    def run(self, text: str | None, config: AnalysisConfig) -> CheckResult:
        """Like :meth:`check`, but reports failure as a tagged result."""
        try:
            return CheckResult.ok(self.check(text, config))
        except Exception as exc:
            logger.exception("Error checking grammar: %s", exc)
            return CheckResult.err(exc)

    def check_grammar(self, text: str | None, config: AnalysisConfig) -> list[GrammarIssue]:
        """Like :meth:`check`, but any failure is logged and becomes ``[]``.

        Callers cannot tell "no issues" from "the call failed"; use
        :meth:`run` when that distinction matters.
        """
        return self.run(text, config).issues_or_empty()
