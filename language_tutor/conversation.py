"""Conversation state — language preamble, append-only turns, windowed prompt."""

from __future__ import annotations

from pathlib import Path

from .types import Interaction

# Load preamble template
_PROMPT_PATH = Path(__file__).parent / "prompts" / "preamble.txt"
PREAMBLE_TEMPLATE = _PROMPT_PATH.read_text(encoding="utf-8")

INTERACTION_TEMPLATE = "S: {question}\nT: {response}\n\n"
QUESTION_TEMPLATE = "S: {question}\nT:"

DEFAULT_LANGUAGE = "Mandarin Chinese"


class Conversation:
    """Ordered history of interactions for one tutoring session.

    History only grows: entries are never edited, reordered or dropped.
    The prompt sent to the model is bounded by `render`'s context window,
    not by trimming the history itself.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE):
        self._language = language
        self._interactions: list[Interaction] = []

    @property
    def language(self) -> str:
        return self._language

    @property
    def interactions(self) -> tuple[Interaction, ...]:
        return tuple(self._interactions)

    @property
    def preamble(self) -> str:
        """The session framing text with the target language filled in."""
        return PREAMBLE_TEMPLATE.format(language=self._language)

    def render(self, question: str, context_window: int) -> str:
        """Build the completion prompt for a new question.

        Args:
            question: The learner's latest line.
            context_window: How many of the most recent interactions to include.

        Returns:
            Preamble, then up to `context_window` interactions oldest first,
            then the question with an empty tutor slot.
        """
        if context_window < 0:
            raise ValueError(f"context_window must be >= 0, got {context_window}")

        recent = self._interactions[-context_window:] if context_window else []
        parts = [self.preamble]
        parts.extend(
            INTERACTION_TEMPLATE.format(question=i.question, response=i.response)
            for i in recent
        )
        parts.append(QUESTION_TEMPLATE.format(question=question))
        return "".join(parts)

    def record(self, question: str, response: str) -> None:
        """Append a completed turn to the history."""
        self._interactions.append(Interaction(question=question, response=response))

    def __len__(self) -> int:
        return len(self._interactions)
