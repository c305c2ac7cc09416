from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from models import UserProfile
from utils.logging_setup import init_logging


@dataclass
class RunContext:
    owner: str = ""
    repo: str = ""
    actors: List[str] = field(default_factory=list)
    # Positionally aligned with actors; None where the lookup failed
    profiles: List[Optional[UserProfile]] = field(default_factory=list)
    companies: List[str] = field(default_factory=list)
    meta: dict = field(default_factory=dict)


class Step(Protocol):
    def run(self, ctx: RunContext) -> RunContext:
        ...


class Pipeline:
    def __init__(self, steps: List[Step]):
        self.steps = steps

    def run(self, ctx: RunContext) -> RunContext:
        # Make logging idempotent for any direct runner use
        init_logging()
        for step in self.steps:
            ctx = step.run(ctx)
        return ctx
