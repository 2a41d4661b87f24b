"""
Tests for settings defaults and environment overrides.
Run with: pytest tests/test_config.py
"""

import pytest
from pydantic import ValidationError

from language_tutor.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.api_url == "https://api.openai.com/v1/completions"
    assert s.model == "text-davinci-002"
    assert s.temperature == 0.8
    assert s.max_tokens == 256
    assert s.stop == "S:"
    assert s.context_window == 10
    assert s.log_level == "WARNING"


def test_env_override(monkeypatch):
    monkeypatch.setenv("TUTOR_CONTEXT_WINDOW", "3")
    monkeypatch.setenv("TUTOR_MODEL", "gpt-3.5-turbo-instruct")
    s = Settings(_env_file=None)
    assert s.context_window == 3
    assert s.model == "gpt-3.5-turbo-instruct"


def test_negative_context_window_rejected(monkeypatch):
    monkeypatch.setenv("TUTOR_CONTEXT_WINDOW", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_unprefixed_env_ignored(monkeypatch):
    monkeypatch.setenv("MODEL", "something-else")
    assert Settings(_env_file=None).model == "text-davinci-002"
