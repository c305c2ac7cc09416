from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CompanyReport(BaseModel):
    """Run result: companies found for a repository plus per-stage counts."""

    owner: str
    repo: str
    actors: int = 0
    profiles_resolved: int = 0
    profiles_missing: int = 0
    companies: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
