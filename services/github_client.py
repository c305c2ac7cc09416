"""
GitHub REST API access for repository activity and user profiles.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Optional

import requests

from config.settings import Settings, get_settings


logger = logging.getLogger(__name__)


class GitHubError(Exception):
    """Non-success response from the GitHub API."""

    def __init__(self, status_code: int, url: str, message: str = "") -> None:
        self.status_code = status_code
        self.url = url
        self.message = message
        detail = f"GitHub API {status_code} for {url}"
        super().__init__(f"{detail}: {message}" if message else detail)


class GitHubClient:
    """Thin wrapper over a requests session; one instance per run."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.base_url = self.settings.github_api_url
        self.session = session or requests.Session()
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        # Anonymous access works for public data, with a lower rate limit
        token = self.settings.github_api_key
        if token and token.strip():
            self.headers["Authorization"] = f"Bearer {token.strip()}"
        self.api_calls_made = 0

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        response = self.session.get(
            url,
            headers=self.headers,
            params=params,
            timeout=self.settings.http_timeout_seconds,
        )
        self.api_calls_made += 1
        if response.status_code != 200:
            message = ""
            try:
                message = (response.json() or {}).get("message", "")
            except ValueError:
                message = response.text[:200]
            raise GitHubError(response.status_code, url, message)
        return response

    def iter_activity_pages(self, owner: str, repo: str) -> Iterator[List[Dict[str, Any]]]:
        """Yield each page of the repository activity feed until no next link remains."""
        url: Optional[str] = f"{self.base_url}/repos/{owner}/{repo}/activity"
        params: Optional[Dict[str, Any]] = {"per_page": self.settings.github_per_page}
        page = 0
        while url:
            page += 1
            logger.debug(f"Fetching activity page {page} for {owner}/{repo}")
            response = self._get(url, params=params)
            yield response.json() or []
            # The next link already carries the query string
            url = response.links.get("next", {}).get("url")
            params = None

    def get_user(self, username: str) -> Dict[str, Any]:
        response = self._get(f"{self.base_url}/users/{username}")
        return response.json()

    def get_api_usage(self) -> Dict[str, int]:
        return {"api_calls_made": self.api_calls_made}
