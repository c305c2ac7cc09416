import argparse
import json
import os
import sys
import uuid as _uuid
from dataclasses import replace

from config.settings import get_settings, require_openai_key
from pipelines.find_repo_companies import build_company_report
from pipelines.steps.collect_actors import collect_repo_actors
from services.github_client import GitHubClient
from services.llm_client import LLMClient
from services.reporting import print_summary
from utils.logging_setup import init_logging


def _positive_int(value):
    parsed = int(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got: {value}")
    return parsed


def _parse_repo(args):
    """Accept either OWNER REPO or OWNER/REPO."""
    if args.repo:
        return args.owner, args.repo
    owner, sep, repo = args.owner.partition("/")
    if not sep or not owner or not repo or "/" in repo:
        raise SystemExit(f"Expected OWNER REPO or OWNER/REPO, got: {args.owner}")
    return owner, repo


def cmd_actors(args):
    owner, repo = _parse_repo(args)
    github = GitHubClient(get_settings())
    for login in sorted(collect_repo_actors(github, owner, repo)):
        print(login)


def cmd_companies(args):
    settings = get_settings()
    # Fail before any GitHub traffic when the model can't be reached anyway
    require_openai_key(settings)
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = _uuid.uuid4().hex
    if args.concurrency is not None or args.tolerate_failures:
        settings = replace(
            settings,
            lookup_concurrency=args.concurrency if args.concurrency is not None else settings.lookup_concurrency,
            extract_concurrency=args.concurrency if args.concurrency is not None else settings.extract_concurrency,
            extract_tolerate_failures=args.tolerate_failures or settings.extract_tolerate_failures,
        )

    owner, repo = _parse_repo(args)
    github = GitHubClient(settings)
    llm = LLMClient(settings)
    report = build_company_report(owner, repo, github=github, llm=llm, model=args.model, settings=settings)

    if args.json:
        print(json.dumps(report.model_dump(), indent=2, ensure_ascii=False))
    else:
        for name in report.companies:
            print(name)
    if args.summary:
        # Keep stdout parseable when it carries JSON
        print_summary(report, github.get_api_usage(), file=sys.stderr if args.json else None)


def _add_repo_args(p):
    p.add_argument("owner", help="Repository owner, or OWNER/REPO")
    p.add_argument("repo", nargs="?", default=None, help="Repository name (omit when using OWNER/REPO)")


def main(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Find companies behind a GitHub repository's contributors")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default from settings)")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_act = sub.add_parser("actors", help="List non-bot actors from the repository activity feed")
    _add_repo_args(p_act)
    p_act.set_defaults(func=cmd_actors)

    p_com = sub.add_parser("companies", help="Extract companies mentioned in contributor profiles")
    _add_repo_args(p_com)
    p_com.add_argument("--model", "-m", default=None, help="Chat model to use (default from settings/routes)")
    p_com.add_argument("--json", action="store_true", help="Print a JSON report instead of one company per line")
    p_com.add_argument("--summary", action="store_true", help="Print run statistics after the results")
    p_com.add_argument("--concurrency", "-c", type=_positive_int, default=None, help="Max concurrent lookups/model calls (default: unlimited)")
    p_com.add_argument("--tolerate-failures", action="store_true", help="Skip profiles whose model call fails instead of aborting")
    p_com.set_defaults(func=cmd_companies)

    args = parser.parse_args(argv)
    init_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
