from __future__ import annotations


class GrammarCheckError(Exception):
    """Generic failure raised while checking text against the analysis service."""


class MissingCredentialError(GrammarCheckError):
    """Raised when no API key is configured; no request is attempted."""


class TransportError(GrammarCheckError):
    """Raised when the HTTP round trip itself fails (DNS, TLS, timeout, ...)."""


class RemoteServiceError(GrammarCheckError):
    """Raised when the analysis service answers with a non-success status.

    The status code and the raw response body are kept to aid debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        response_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.response_text:
            # Truncate very long responses for readability
            text = self.response_text
            if len(text) > 2000:
                text = text[:2000] + "... [truncated]"
            parts.append(f"\n--- Service Response ---\n{text}")
        return "".join(parts)


class InterpretationError(GrammarCheckError):
    """Raised internally when a service answer cannot be turned into issues.

    Never escapes :func:`src.grammar_check.interpreter.interpret`; it is
    logged and reduced to an empty result there.
    """

    def __init__(self, message: str, *, response_text: str | None = None) -> None:
        super().__init__(message)
        self.response_text = response_text
