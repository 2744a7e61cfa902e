"""
github_client.py

Responsibility: Isolate all direct GitHub REST API interaction.

This module must be the only place that:
- Constructs GitHub REST endpoints
- Sends HTTP requests to api.github.com
- Interprets GitHub API status codes / error payloads

Two statuses are not errors: 404 on lookup (repo is absent) and 422 on
creation (name already taken, e.g. created between lookup and create).
"""

from __future__ import annotations

import enum
from typing import Any

import requests


class GitHubError(RuntimeError):
    pass


class RemoteLookupError(GitHubError):
    pass


class RemoteCreateError(GitHubError):
    pass


class ProvisionOutcome(enum.Enum):
    EXISTS = "exists"
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"


def _error_message(r: requests.Response) -> Any:
    try:
        payload = r.json()
    except ValueError:
        return r.text
    if isinstance(payload, dict):
        return payload.get("message", payload)
    return payload


class GitHubClient:
    def __init__(self, token: str, api_base: str = "https://api.github.com") -> None:
        if not token.strip():
            raise GitHubError("GitHub token is required.")
        self._token = token
        self._api_base = api_base.rstrip("/")

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github.v3+json",
            "Authorization": f"token {self._token}",
            "User-Agent": "gas-deploy",
        }

    def _request(self, method: str, path: str, *, json_body: dict[str, Any] | None = None) -> requests.Response:
        url = f"{self._api_base}{path}"
        return requests.request(method, url, headers=self._headers(), json=json_body, timeout=30)

    def repo_exists(self, owner: str, name: str) -> bool:
        """
        True on 200, False on 404. Any other outcome raises RemoteLookupError.
        """
        path = f"/repos/{owner}/{name}"
        try:
            r = self._request("GET", path)
        except requests.RequestException as e:
            raise RemoteLookupError(f"GitHub request failed GET {path}: {e}") from e
        if r.status_code == 200:
            return True
        if r.status_code == 404:
            return False
        raise RemoteLookupError(f"GitHub API error {r.status_code} GET {path}: {_error_message(r)}")

    def create_repo(self, *, name: str, private: bool = True, description: str = "") -> ProvisionOutcome:
        """
        Create a repository under the authenticated user.

        A 422 response means the name is already taken on the account and is
        reported as ALREADY_EXISTS instead of an error.
        """
        body = {
            "name": name,
            "private": private,
            "description": description,
        }
        try:
            r = self._request("POST", "/user/repos", json_body=body)
        except requests.RequestException as e:
            raise RemoteCreateError(f"GitHub request failed POST /user/repos: {e}") from e
        if r.status_code == 422:
            return ProvisionOutcome.ALREADY_EXISTS
        if r.status_code >= 400:
            raise RemoteCreateError(f"GitHub API error {r.status_code} POST /user/repos: {_error_message(r)}")
        return ProvisionOutcome.CREATED
