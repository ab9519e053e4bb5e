"""Analysis-service plumbing: configuration, transport, errors and JSON recovery."""

from __future__ import annotations

from .config import AnalysisConfig, OPENAI_CHAT_COMPLETIONS_URL
from .provider import (
    GrammarCheckError,
    InterpretationError,
    MissingCredentialError,
    RemoteServiceError,
    TransportError,
)
from .transport import RequestsTransport, Transport, TransportResponse, build_headers

__all__ = [
    "AnalysisConfig",
    "OPENAI_CHAT_COMPLETIONS_URL",
    "GrammarCheckError",
    "InterpretationError",
    "MissingCredentialError",
    "RemoteServiceError",
    "TransportError",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "build_headers",
]
