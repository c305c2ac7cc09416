from __future__ import annotations

import os
from functools import partial
from typing import IO, Optional

from config.settings import get_settings
from models import CompanyReport
from utils.llm_logger import usage_for_run


def print_summary(report: CompanyReport, api_usage: Optional[dict] = None, file: Optional[IO[str]] = None) -> None:
    """Print summary of a company extraction run (stdout unless ``file`` is given)."""
    out = partial(print, file=file)
    out("\n" + "="*60)
    out("CONTRIBUTOR COMPANIES - SUMMARY")
    out("="*60)
    out(f"Repository: {report.owner}/{report.repo}")
    out(f"Actors Found: {report.actors}")
    out(f"Profiles Resolved: {report.profiles_resolved}")
    out(f"Profiles Missing: {report.profiles_missing}")
    out(f"Companies Found: {len(report.companies)}")
    if api_usage:
        out(f"GitHub API Calls: {api_usage.get('api_calls_made', 0)}")
    # LLM usage summary (per provider) for current RUN_ID if tracing enabled
    settings = get_settings()
    run_id = os.getenv("RUN_ID")
    if run_id and settings.llm_trace:
        usage = usage_for_run(run_id, settings.llm_log_path)
        if usage:
            out("LLM Usage:")
            for provider, stats in usage.items():
                out(f"  {provider}: calls={stats.get('calls', 0)}, tokens={stats.get('tokens', 0)}")
    out("="*60)
