from __future__ import annotations

from typing import List, Optional

from config.settings import Settings, get_settings
from models import CompanyReport
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import CollectActors, ExtractCompanies, ResolveProfiles
from ports import GitHubClientPort, LLMClientPort


def build_pipeline(
    github: GitHubClientPort,
    llm: LLMClientPort,
    model: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Pipeline:
    settings = settings or get_settings()
    return Pipeline([
        CollectActors(github),
        ResolveProfiles(github, max_workers=settings.lookup_concurrency),
        ExtractCompanies(
            llm,
            model=model,
            max_workers=settings.extract_concurrency,
            tolerate_failures=settings.extract_tolerate_failures,
        ),
    ])


def build_company_report(
    owner: str,
    repo: str,
    *,
    github: GitHubClientPort,
    llm: LLMClientPort,
    model: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> CompanyReport:
    """Collect actors, resolve their profiles and extract companies for one repository."""
    ctx = build_pipeline(github, llm, model=model, settings=settings).run(RunContext(owner=owner, repo=repo))
    return CompanyReport(
        owner=owner,
        repo=repo,
        actors=int(ctx.meta.get("actors_total") or 0),
        profiles_resolved=int(ctx.meta.get("profiles_resolved") or 0),
        profiles_missing=int(ctx.meta.get("profiles_missing") or 0),
        companies=list(ctx.companies),
    )


def find_repo_users_companies(
    owner: str,
    repo: str,
    *,
    github: GitHubClientPort,
    llm: LLMClientPort,
    model: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> List[str]:
    """Deduplicated, normalized company names across the repository's contributors."""
    report = build_company_report(owner, repo, github=github, llm=llm, model=model, settings=settings)
    return report.companies
