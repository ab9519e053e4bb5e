"""HTTP transport for the analysis service: send JSON, receive a status and body."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Protocol

import requests

from .provider import TransportError


@dataclass(frozen=True)
class TransportResponse:
    """Status code and undecoded body text of one round trip."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class Transport(Protocol):
    """Shared contract for anything that can POST a JSON payload."""

    def post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        *,
        timeout: float | None = None,
    ) -> TransportResponse:
        """Perform exactly one request/response round trip."""
        ...


def build_headers(api_key: str) -> dict[str, str]:
    """Return the JSON content type and bearer authorisation headers."""
    return {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


class RequestsTransport:
    """Transport backed by a ``requests`` session.

    Thread-safe as long as each thread uses its own transport, or the caller
    supplies a session it is happy to share.
    """

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self._session = session
        self._timeout = timeout

    def post_json(
        self,
        url: str,
        payload: Mapping[str, Any],
        headers: Mapping[str, str],
        *,
        timeout: float | None = None,
    ) -> TransportResponse:
        effective_timeout = timeout if timeout is not None else self._timeout
        poster = self._session.post if self._session is not None else requests.post
        try:
            response = poster(
                url,
                json=dict(payload),
                headers=dict(headers),
                timeout=effective_timeout,
            )
        except requests.RequestException as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        # The service always answers in UTF-8; don't let requests guess.
        body = response.content.decode("utf-8", errors="replace")
        return TransportResponse(status_code=response.status_code, body=body)
