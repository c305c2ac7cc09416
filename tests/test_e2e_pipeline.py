from __future__ import annotations

from pipelines.find_repo_companies import build_company_report, find_repo_users_companies


def _fixtures(make_github, make_llm, make_activity):
    gh = make_github(
        [
            [make_activity("actor1"), make_activity("dependabot[bot]"), make_activity("actor2")],
            [make_activity("actor3"), make_activity("actor1")],
        ],
        users={
            "actor1": {"login": "actor1", "bio": "Works at Acme", "company": None},
            "actor2": ConnectionError("lookup failed"),
            "actor3": {"login": "actor3", "bio": "I like cats", "company": None},
        },
    )

    def _reply(prompt):
        return "Acme" if "Works at Acme" in prompt else "NONE"

    return gh, make_llm(_reply)


def test_e2e_single_company_despite_failed_lookup(make_github, make_llm, make_activity):
    gh, llm = _fixtures(make_github, make_llm, make_activity)
    assert find_repo_users_companies("owner", "repo", github=gh, llm=llm) == ["acme"]
    # Only resolvable profiles reach the model
    assert len(llm.calls) == 2
    assert "dependabot[bot]" not in gh.user_calls


def test_e2e_report_counts(make_github, make_llm, make_activity):
    gh, llm = _fixtures(make_github, make_llm, make_activity)
    report = build_company_report("owner", "repo", github=gh, llm=llm, model="gpt-x")
    assert report.owner == "owner" and report.repo == "repo"
    assert report.actors == 3
    assert report.profiles_resolved == 2
    assert report.profiles_missing == 1
    assert report.companies == ["acme"]
    assert {c["model"] for c in llm.calls} == {"gpt-x"}


def test_e2e_idempotent(make_github, make_llm, make_activity):
    gh, llm = _fixtures(make_github, make_llm, make_activity)
    first = find_repo_users_companies("o", "r", github=gh, llm=llm)
    second = find_repo_users_companies("o", "r", github=gh, llm=llm)
    assert set(first) == set(second)


def test_e2e_duplicate_companies_collapse(make_github, make_llm, make_activity):
    gh = make_github(
        [[make_activity("a"), make_activity("b")]],
        users={"a": {"login": "a", "bio": "x"}, "b": {"login": "b", "bio": "y"}},
    )
    llm = make_llm(lambda prompt: "Acme Corp, ACME corp.")
    assert find_repo_users_companies("o", "r", github=gh, llm=llm) == ["acmecorp"]
