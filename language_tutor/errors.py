"""Failure kinds surfaced to the REPL.

Each step of a turn that can fail raises one of these, chained to the
underlying httpx/pydantic exception. The REPL reports `kind` and the message
and exits; nothing here is retried.
"""

from __future__ import annotations


class TutorError(Exception):
    """Base for every failure the tutor reports to the user."""

    kind = "error"


class NetworkError(TutorError):
    """The completions endpoint could not be reached or timed out."""

    kind = "network error"


class InvalidRequestError(TutorError):
    """The request could not be encoded, e.g. a token with non-ASCII characters."""

    kind = "invalid request"


class AuthenticationError(TutorError):
    """The API rejected the credential (HTTP 401/403)."""

    kind = "authentication error"

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class ServiceError(TutorError):
    """The API answered with any other non-2xx status."""

    kind = "service error"

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(TutorError):
    """The reply body was not JSON or did not carry a choices list."""

    kind = "malformed response"


class EmptyCompletionError(TutorError):
    """The reply parsed but contained no choices."""

    kind = "empty completion"


class TurnError(Exception):
    """A TutorError tagged with the turn number it happened on."""

    def __init__(self, turn: int, error: TutorError):
        super().__init__(f"Turn {turn} failed ({error.kind}): {error}")
        self.turn = turn
        self.error = error

    @property
    def kind(self) -> str:
        return self.error.kind
