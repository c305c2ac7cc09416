from __future__ import annotations

from typing import Any, Dict, Iterator, List, Protocol


class GitHubClientPort(Protocol):
    def iter_activity_pages(self, owner: str, repo: str) -> Iterator[List[Dict[str, Any]]]:
        ...

    def get_user(self, username: str) -> Dict[str, Any]:
        ...
