from __future__ import annotations

import re
from typing import List, Optional

from models import UserProfile


EXTRACTION_INSTRUCTIONS = (
    'Comma seperated list of mentioned names of companies. If it sounds like a bot do not include. '
    'Clean output. Say "NONE" if none'
)

NO_COMPANIES_TOKEN = "NONE"

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def build_extraction_prompt(user: UserProfile) -> str:
    """Prompt asking for the companies named in a profile's bio and company fields.

    Both values are embedded verbatim; a missing value renders as ``None``.
    """
    potential_companies = f'"{{"bio": "{user.bio}", "company": "{user.company}}}"'
    return f"{EXTRACTION_INSTRUCTIONS}\n\n{potential_companies}"


def normalize_company_name(raw: str) -> str:
    """Lowercase and drop every non-alphanumeric character ("Acme Corp" -> "acmecorp")."""
    return _NON_ALNUM.sub("", raw.lower())


def parse_company_list(text: Optional[str]) -> List[str]:
    """Turn a model reply into normalized company names.

    An empty reply, or one containing NONE anywhere, means no companies.
    """
    if not text:
        return []
    if NO_COMPANIES_TOKEN in text:
        return []
    names = [normalize_company_name(part) for part in text.split(",")]
    return [name for name in names if name]
