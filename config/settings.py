from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _optional_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    parsed = int(value)
    return parsed if parsed > 0 else None


@dataclass(frozen=True)
class Settings:
    # GitHub
    github_api_key: str | None
    github_api_url: str
    github_per_page: int

    # Language model
    openai_api_key: str | None
    openai_model: str

    # Limits/Concurrency/Timeouts (None = one worker per item)
    http_timeout_seconds: int
    lookup_concurrency: int | None
    extract_concurrency: int | None
    extract_tolerate_failures: bool

    # Core/runtime
    log_level: str
    run_env: str

    # Logging/tracing
    llm_trace: bool = False
    llm_log_path: str = "logs/llm_calls.jsonl"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        github_api_key=os.getenv("GITHUB_API_KEY"),
        github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com").rstrip("/"),
        github_per_page=int(os.getenv("GITHUB_PER_PAGE", "100")),
        openai_api_key=os.getenv("OPENAI_API_KEY"),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-4o"),
        http_timeout_seconds=int(os.getenv("HTTP_TIMEOUT_SECONDS", "20")),
        lookup_concurrency=_optional_int(os.getenv("LOOKUP_CONCURRENCY")),
        extract_concurrency=_optional_int(os.getenv("EXTRACT_CONCURRENCY")),
        extract_tolerate_failures=_as_bool(os.getenv("EXTRACT_TOLERATE_FAILURES")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        llm_trace=_as_bool(os.getenv("LLM_TRACE")),
        llm_log_path=os.getenv("LLM_LOG_PATH", "logs/llm_calls.jsonl"),
    )


def require_openai_key(settings: Settings) -> str:
    if not settings.openai_api_key:
        raise RuntimeError("OPENAI_API_KEY required to extract companies from profiles")
    return settings.openai_api_key
