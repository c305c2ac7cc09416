from __future__ import annotations

import logging
from typing import Set

from models import ActivityRecord
from pipelines.runner import RunContext
from ports import GitHubClientPort


logger = logging.getLogger(__name__)


def is_bot_login(login: str) -> bool:
    # Bot accounts are named like "dependabot[bot]"
    return "[" in login


def collect_repo_actors(github: GitHubClientPort, owner: str, repo: str) -> Set[str]:
    """Distinct non-bot logins seen across every page of the repository activity feed.

    Pagination errors propagate to the caller.
    """
    actors: Set[str] = set()
    for page in github.iter_activity_pages(owner, repo):
        for raw in page:
            record = ActivityRecord.model_validate(raw)
            if record.actor and not is_bot_login(record.actor.login):
                actors.add(record.actor.login)
    return actors


class CollectActors:
    def __init__(self, github: GitHubClientPort) -> None:
        self.github = github

    def run(self, ctx: RunContext) -> RunContext:
        actors = collect_repo_actors(self.github, ctx.owner, ctx.repo)
        ctx.actors = sorted(actors)
        ctx.meta["actors_total"] = len(ctx.actors)
        logger.info(
            f"Collected {len(ctx.actors)} actors for {ctx.owner}/{ctx.repo}",
            extra={"step": "collect_actors", "status": "ok"},
        )
        return ctx
