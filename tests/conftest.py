"""
Shared test fixtures: fake HTTP, fake git, fake text generation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import requests

from gasdeploy.git import GitCommandError


class FakeResponse:
    def __init__(self, status_code: int, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise ValueError("no JSON body")
        return self._payload


class FakeHTTP:
    """Replays queued responses for `requests.request` and records each call."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[FakeResponse | Exception] = []

    def queue(self, *responses: FakeResponse | Exception) -> None:
        self.responses.extend(responses)

    def __call__(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


class FakeRepo:
    def __init__(self, *, diff: str = "", has_commits: bool = True, fail_on: str | None = None) -> None:
        self._diff = diff
        self._has_commits = has_commits
        self._fail_on = fail_on
        self.calls: list[str] = []

    def diff(self) -> str:
        self.calls.append("diff")
        return self._diff

    def has_commits(self) -> bool:
        self.calls.append("rev-parse")
        return self._has_commits

    def _mutating(self, name: str) -> None:
        self.calls.append(name)
        if name == self._fail_on:
            raise GitCommandError(f"Command failed: git {name}")

    def add_all(self) -> None:
        self._mutating("add")

    def commit(self, message: str) -> None:
        self._mutating("commit")
        self.commit_message = message

    def push(self) -> None:
        self._mutating("push")


class FakeGenerator:
    def __init__(self, *outputs: str, error: Exception | None = None) -> None:
        self.outputs = list(outputs)
        self.error = error
        self.prompts: list[str] = []

    def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.outputs.pop(0)


@pytest.fixture
def fake_http(monkeypatch: pytest.MonkeyPatch) -> FakeHTTP:
    fake = FakeHTTP()
    monkeypatch.setattr(requests, "request", fake)
    return fake


@pytest.fixture
def gas_project(tmp_path: Path) -> Path:
    """A minimal GAS project root with a couple of source files."""
    root = tmp_path / "invoice-tool"
    root.mkdir()
    (root / "a.gs").write_text("function main() {\n  Logger.log('hi');\n}\n", encoding="utf-8")
    (root / "b.html").write_text("<html><body>Invoice</body></html>\n", encoding="utf-8")
    return root
