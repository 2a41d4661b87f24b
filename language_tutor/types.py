"""Shared data types for the tutor: history entries and wire payloads."""

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(frozen=True)
class Interaction:
    """One learner question and the tutor's reply."""
    question: str
    response: str


class CompletionRequest(BaseModel):
    """Body POSTed to the completions endpoint."""
    model: str
    prompt: str
    temperature: float
    max_tokens: int
    stop: str


class CompletionChoice(BaseModel):
    text: str


class CompletionResponse(BaseModel):
    """Reply from the completions endpoint. Only `choices` is consumed."""
    choices: list[CompletionChoice]
