"""Company allowlist and recency filters for scraped postings."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable, List, Optional, Sequence

from internship_scout.models import Posting

FRESHNESS_WINDOW_HOURS = 12
DAY_HOURS = 24
UNKNOWN_AGE_HOURS = 100

_HOURS_RE = re.compile(r"(\d+)\s*h")


def hours_since_posted(posted_text: Optional[str]) -> int:
    """
    Estimate a posting's age from LinkedIn's relative time text.
    "3h" and "12 h ago" parse directly; anything mentioning "day" counts as 24;
    everything else is treated as 100 hours old.
    """
    text = posted_text or ""
    match = _HOURS_RE.search(text)
    if match:
        return int(match.group(1))
    if "day" in text:
        return DAY_HOURS
    return UNKNOWN_AGE_HOURS


def is_fresh(posting: Posting, max_hours: int = FRESHNESS_WINDOW_HOURS) -> bool:
    return hours_since_posted(posting.posted_text) <= max_hours


def filter_by_recency(postings: Iterable[Posting], max_hours: int = FRESHNESS_WINDOW_HOURS) -> List[Posting]:
    kept: List[Posting] = []
    for posting in postings:
        hours = hours_since_posted(posting.posted_text)
        if hours <= max_hours:
            kept.append(replace(posting, hours_since_posted=hours))
    return kept


def company_matches(company: Optional[str], allowlist: Sequence[str]) -> bool:
    """True if any allowlist entry is a case-insensitive substring of ``company``."""
    name = (company or "").lower()
    if not name:
        return False
    return any(entry.lower() in name for entry in allowlist if entry)


def filter_by_company(postings: Iterable[Posting], allowlist: Sequence[str]) -> List[Posting]:
    return [posting for posting in postings if company_matches(posting.company, allowlist)]
