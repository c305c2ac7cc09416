from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import List, Optional, Sequence

from models import UserProfile
from pipelines.runner import RunContext
from ports import GitHubClientPort


logger = logging.getLogger(__name__)


def lookup_user(github: GitHubClientPort, username: str) -> Optional[UserProfile]:
    """Public profile for a login, or None when the lookup fails for any reason."""
    logger.info(f"Looking up user: {username}")
    try:
        return UserProfile.model_validate(github.get_user(username))
    except Exception as e:
        logger.warning(
            f"Profile lookup failed for {username}",
            extra={"step": "resolve_profiles", "status": "missing", "error": str(e)},
        )
        return None


def resolve_profiles(
    github: GitHubClientPort,
    usernames: Sequence[str],
    max_workers: Optional[int] = None,
) -> List[Optional[UserProfile]]:
    """Look up every login concurrently; results keep the order of ``usernames``."""
    if not usernames:
        return []
    workers = max_workers or len(usernames)
    with _fut.ThreadPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(lambda name: lookup_user(github, name), usernames))


class ResolveProfiles:
    def __init__(self, github: GitHubClientPort, max_workers: Optional[int] = None) -> None:
        self.github = github
        self.max_workers = max_workers

    def run(self, ctx: RunContext) -> RunContext:
        ctx.profiles = resolve_profiles(self.github, ctx.actors, max_workers=self.max_workers)
        resolved = sum(1 for p in ctx.profiles if p is not None)
        ctx.meta["profiles_resolved"] = resolved
        ctx.meta["profiles_missing"] = len(ctx.profiles) - resolved
        logger.info(
            f"Resolved {resolved}/{len(ctx.profiles)} profiles",
            extra={"step": "resolve_profiles", "status": "ok"},
        )
        return ctx
