from __future__ import annotations

import os
import sys
import threading
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, List, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps.collect_actors'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


def chat_response(content: Optional[str]) -> SimpleNamespace:
    """Object shaped like an OpenAI chat completion with a single choice."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=2, total_tokens=12),
    )


class FakeGitHub:
    """In-memory GitHub port: activity pages plus user payloads (or exceptions) by login."""

    def __init__(self, pages: List[List[Dict[str, Any]]], users: Optional[Dict[str, Any]] = None) -> None:
        self.pages = pages
        self.users = users or {}
        self.user_calls: List[str] = []
        self._lock = threading.Lock()

    def iter_activity_pages(self, owner: str, repo: str):
        for page in self.pages:
            yield page

    def get_user(self, username: str) -> Dict[str, Any]:
        with self._lock:
            self.user_calls.append(username)
        value = self.users.get(username)
        if value is None:
            raise LookupError(f"Not Found: {username}")
        if isinstance(value, Exception):
            raise value
        return value

    def get_api_usage(self) -> Dict[str, int]:
        return {"api_calls_made": len(self.user_calls)}


class FakeLLM:
    """LLM port answering each prompt through ``reply(prompt) -> str | None``."""

    def __init__(self, reply: Callable[[str], Optional[str]]) -> None:
        self.reply = reply
        self.calls: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def chat(self, *, use_case, messages, model=None, prompt_name=None, prompt_text=None):
        with self._lock:
            self.calls.append({"use_case": use_case, "messages": messages, "model": model})
        return chat_response(self.reply(messages[-1]["content"]))


def activity(login: Optional[str]) -> Dict[str, Any]:
    record: Dict[str, Any] = {"id": 1, "activity_type": "push", "ref": "refs/heads/main"}
    record["actor"] = {"login": login, "id": 7} if login is not None else None
    return record


@pytest.fixture
def make_github():
    return FakeGitHub


@pytest.fixture
def make_llm():
    return FakeLLM


@pytest.fixture
def make_activity():
    return activity


@pytest.fixture(autouse=True)
def _fresh_settings():
    # Settings are cached per process; tests change env freely
    from config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
