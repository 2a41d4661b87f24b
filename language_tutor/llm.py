"""Completion client — one POST to a text-completion endpoint per turn."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .errors import (
    AuthenticationError,
    EmptyCompletionError,
    InvalidRequestError,
    MalformedResponseError,
    NetworkError,
    ServiceError,
)
from .types import CompletionRequest, CompletionResponse

log = logging.getLogger("llm")

ERROR_BODY_MAX_LEN = 200


class CompletionClient:
    """Stateless request/response wrapper around an httpx.AsyncClient.

    The client is created lazily on first use. Pass one in to control the
    transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        url: str,
        timeout: float = 60.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
            log.info("httpx client initialized for %s", self.url)
        return self._client

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    async def complete(self, request: CompletionRequest, token: str) -> str:
        """Submit a completion request and return the final choice's text.

        Args:
            request: Prompt and sampling parameters.
            token: API credential, sent as a bearer token.

        Returns:
            Text of the last choice, stripped of surrounding whitespace.

        Raises:
            NetworkError: transport failure or timeout.
            AuthenticationError: HTTP 401 or 403.
            ServiceError: any other non-2xx status.
            InvalidRequestError: the token cannot be encoded into a header.
            MalformedResponseError: body is not a valid completion response.
            EmptyCompletionError: the response has no choices.
        """
        client = await self._get_client()
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

        log.debug("Completion request: model=%s, %d prompt chars, max_tokens=%d",
                  request.model, len(request.prompt), request.max_tokens)

        try:
            resp = await client.post(
                self.url,
                content=request.model_dump_json(),
                headers=headers,
            )
        except httpx.TimeoutException as e:
            raise NetworkError(f"Request to {self.url} timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Cannot reach {self.url}: {e}") from e
        except UnicodeEncodeError as e:
            # HTTP headers are ASCII only
            raise InvalidRequestError(
                f"Token contains a character that cannot be sent in a header: {e.object[e.start:e.end]!r}"
            ) from e

        if resp.status_code in (401, 403):
            raise AuthenticationError(
                f"API rejected the token (HTTP {resp.status_code}). Check the token argument.",
                resp.status_code,
            )
        if not resp.is_success:
            raise ServiceError(
                f"HTTP {resp.status_code}: {resp.text[:ERROR_BODY_MAX_LEN]}",
                resp.status_code,
            )

        try:
            parsed = CompletionResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Unexpected response body: {resp.text[:ERROR_BODY_MAX_LEN]!r}"
            ) from e

        if not parsed.choices:
            raise EmptyCompletionError("The API returned no choices")

        text = parsed.choices[-1].text.strip()
        log.info("Completion response: %d choices, %d chars", len(parsed.choices), len(text))
        return text
