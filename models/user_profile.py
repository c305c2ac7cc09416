from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserProfile(BaseModel):
    """API shape: public GitHub profile. Fields beyond these pass through untouched."""

    login: str
    name: str | None = None
    bio: str | None = None
    company: str | None = None
    blog: str | None = None
    location: str | None = None
    email: str | None = None
    html_url: str | None = None

    model_config = ConfigDict(extra="allow")
