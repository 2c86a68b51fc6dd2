from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest


class FakeCompletions:
    """Records create() calls and answers with a fixed message content."""

    def __init__(self, content: Optional[str]) -> None:
        self.content = content
        self.calls: List[Dict[str, Any]] = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeOpenAI:
    """Stand-in for openai.OpenAI exposing only chat.completions.create."""

    def __init__(self, content: Optional[str]) -> None:
        self.completions = FakeCompletions(content)
        self.chat = SimpleNamespace(completions=self.completions)


@pytest.fixture
def good_plan() -> Dict[str, Any]:
    return {
        "playlistName": "Neon Rain",
        "vibes": ["late night", "synthwave", "moody"],
        "description": "Slow synths for wet city streets.",
    }


@pytest.fixture
def fake_openai():
    """Factory: fake_openai('{"json": ...}') -> FakeOpenAI."""
    return FakeOpenAI


@pytest.fixture
def use_fake_openai(monkeypatch, fake_openai):
    """
    Route vibeset.ai.plan's client factory to a FakeOpenAI answering `content`.
    """

    def _install(content: Optional[str]) -> FakeOpenAI:
        fake = fake_openai(content)
        monkeypatch.setattr(
            "vibeset.ai.plan._get_openai_client",
            lambda: fake,
            raising=True,
        )
        return fake

    return _install
