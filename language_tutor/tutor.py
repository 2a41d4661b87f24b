"""Tutor — runs one conversation turn at a time.

Turn flow:
  1. Render the prompt from the preamble, the recent window and the question
  2. POST it to the completions endpoint
  3. On success, record (question, answer) and return the answer

History is only touched after a successful round-trip, so a failed turn
leaves the conversation exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import Settings, settings as default_settings
from .conversation import DEFAULT_LANGUAGE, Conversation
from .errors import TurnError, TutorError
from .llm import CompletionClient
from .types import CompletionRequest

log = logging.getLogger("tutor")


class Tutor:
    """Owns the conversation, the completion client and the API token."""

    def __init__(
        self,
        token: str,
        language: str = DEFAULT_LANGUAGE,
        settings: Optional[Settings] = None,
        client: Optional[CompletionClient] = None,
    ) -> None:
        self.settings = settings or default_settings
        self.conversation = Conversation(language)
        self.client = client or CompletionClient(self.settings.api_url, timeout=self.settings.timeout)
        self._token = token
        self._turn = 0

    @property
    def turn(self) -> int:
        """Number of turns attempted so far."""
        return self._turn

    def build_request(self, question: str) -> CompletionRequest:
        prompt = self.conversation.render(question, self.settings.context_window)
        return CompletionRequest(
            model=self.settings.model,
            prompt=prompt,
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
            stop=self.settings.stop,
        )

    async def ask(self, question: str) -> str:
        """Send a question to the model and record the reply.

        Raises:
            TurnError: wrapping the TutorError that ended this turn.
        """
        self._turn += 1
        request = self.build_request(question)
        log.debug("Turn %d: %d interactions in history", self._turn, len(self.conversation))

        try:
            answer = await self.client.complete(request, self._token)
        except TutorError as e:
            log.info("Turn %d failed: %s: %s", self._turn, e.kind, e)
            raise TurnError(self._turn, e) from e

        self.conversation.record(question, answer)
        return answer

    async def close(self) -> None:
        await self.client.close()
