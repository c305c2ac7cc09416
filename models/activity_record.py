from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Actor(BaseModel):
    """Account that performed a repository activity."""

    login: str

    model_config = ConfigDict(extra="ignore")


class ActivityRecord(BaseModel):
    """API shape: one entry of the repository activity feed. Only the actor is read."""

    actor: Actor | None = None

    model_config = ConfigDict(extra="ignore")
