"""HTTP client for the plain-text query-execution endpoint."""

from __future__ import annotations

from typing import Any

import httpx

from querypad.config import QuerypadSettings
from querypad.logging import logger
from querypad.services.exceptions import HttpStatusError, ParseError, TransportError

PLAIN_TEXT_HEADERS = {"Content-Type": "text/plain"}


class QueryEndpointClient:
    """Posts raw query text to the endpoint and returns the decoded JSON body.

    Failures are reported through the ``SubmissionError`` hierarchy: no
    response at all raises ``TransportError``, a non-2xx status raises
    ``HttpStatusError`` (the body is ignored) and an unparseable 2xx body
    raises ``ParseError``.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: QuerypadSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or QuerypadSettings()

    @property
    def url(self) -> str:
        return self._settings.endpoint

    async def execute(self, query_text: str) -> Any:
        logger.debug("endpoint_request", url=self.url, query_length=len(query_text))
        try:
            response = await self._client.post(
                self.url,
                content=query_text.encode("utf-8"),
                headers=PLAIN_TEXT_HEADERS,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        logger.debug("endpoint_response", url=self.url, status_code=response.status_code)
        if not response.is_success:
            raise HttpStatusError(response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(str(exc)) from exc


__all__ = ["PLAIN_TEXT_HEADERS", "QueryEndpointClient"]
