from __future__ import annotations

import concurrent.futures as _fut
import logging
from typing import List, Optional, Sequence

from models import UserProfile
from pipelines.runner import RunContext
from ports import LLMClientPort
from services.company_names import build_extraction_prompt, parse_company_list
from services.llm_client import first_message_text


logger = logging.getLogger(__name__)


def find_potential_user_companies(
    llm: LLMClientPort,
    user: Optional[UserProfile],
    model: Optional[str] = None,
) -> List[str]:
    """Normalized company names the model finds in a profile's bio and company fields.

    No model call is made for a missing profile. Model errors propagate.
    """
    if user is None:
        return []
    prompt = build_extraction_prompt(user)
    resp = llm.chat(
        use_case="company_extraction",
        messages=[{"role": "user", "content": prompt}],
        model=model,
        prompt_name="company_extraction",
        prompt_text=prompt,
    )
    return parse_company_list(first_message_text(resp))


def extract_companies(
    llm: LLMClientPort,
    profiles: Sequence[Optional[UserProfile]],
    model: Optional[str] = None,
    max_workers: Optional[int] = None,
    tolerate_failures: bool = False,
) -> List[List[str]]:
    """Run extraction for every profile concurrently; results keep the order of ``profiles``.

    By default the first failure aborts the whole batch. With ``tolerate_failures``
    a failing profile contributes an empty list instead.
    """
    if not profiles:
        return []

    def _extract(user: Optional[UserProfile]) -> List[str]:
        if not tolerate_failures:
            return find_potential_user_companies(llm, user, model=model)
        try:
            return find_potential_user_companies(llm, user, model=model)
        except Exception as e:
            login = user.login if user is not None else "-"
            logger.warning(
                f"Company extraction failed for {login}",
                extra={"step": "extract_companies", "status": "skipped", "error": str(e)},
            )
            return []

    workers = max_workers or len(profiles)
    with _fut.ThreadPoolExecutor(max_workers=workers) as ex:
        return list(ex.map(_extract, profiles))


class ExtractCompanies:
    def __init__(
        self,
        llm: LLMClientPort,
        model: Optional[str] = None,
        max_workers: Optional[int] = None,
        tolerate_failures: bool = False,
    ) -> None:
        self.llm = llm
        self.model = model
        self.max_workers = max_workers
        self.tolerate_failures = tolerate_failures

    def run(self, ctx: RunContext) -> RunContext:
        per_profile = extract_companies(
            self.llm,
            ctx.profiles,
            model=self.model,
            max_workers=self.max_workers,
            tolerate_failures=self.tolerate_failures,
        )
        # Merge on the calling thread; workers only return their own lists
        companies = {name for names in per_profile for name in names}
        ctx.companies = sorted(companies)
        ctx.meta["companies_total"] = len(ctx.companies)
        logger.info(
            f"Extracted {len(ctx.companies)} distinct companies",
            extra={"step": "extract_companies", "status": "ok"},
        )
        return ctx
