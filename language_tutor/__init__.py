"""Language tutor — a terminal conversation partner backed by a completion API."""

__version__ = "0.1.0"
