from __future__ import annotations

import pytest

from pipelines.runner import Pipeline, RunContext
from pipelines.steps.collect_actors import CollectActors, collect_repo_actors, is_bot_login


def test_bot_logins_excluded_and_duplicates_merged(make_github, make_activity):
    gh = make_github([[make_activity(l) for l in ["alice", "github-actions[bot]", "bob", "alice"]]])
    assert collect_repo_actors(gh, "o", "r") == {"alice", "bob"}


def test_actors_deduplicated_across_pages(make_github, make_activity):
    gh = make_github([
        [make_activity("alice"), make_activity(None)],
        [make_activity("carol"), make_activity("alice")],
        [],
        [make_activity("weird[name")],
    ])
    assert collect_repo_actors(gh, "o", "r") == {"alice", "carol"}


def test_record_without_actor_key_is_skipped(make_github):
    gh = make_github([[{"id": 3, "activity_type": "force_push"}]])
    assert collect_repo_actors(gh, "o", "r") == set()


def test_is_bot_login():
    assert is_bot_login("dependabot[bot]")
    assert is_bot_login("[")
    assert not is_bot_login("renovate-bot")


def test_pagination_error_propagates(make_activity):
    class _Broken:
        def iter_activity_pages(self, owner, repo):
            yield [make_activity("alice")]
            raise RuntimeError("Bad credentials")

    with pytest.raises(RuntimeError):
        collect_repo_actors(_Broken(), "o", "r")


def test_step_fills_sorted_actors(make_github, make_activity):
    gh = make_github([[make_activity("zed"), make_activity("amy")]])
    ctx = Pipeline([CollectActors(gh)]).run(RunContext(owner="o", repo="r"))
    assert ctx.actors == ["amy", "zed"]
    assert ctx.meta["actors_total"] == 2


def test_unread_record_fields_do_not_break_collection(make_github):
    gh = make_github([[
        {"id": "not-a-number", "timestamp": 1700000000, "ref": ["odd"], "actor": {"login": "alice"}},
    ]])
    assert collect_repo_actors(gh, "o", "r") == {"alice"}
