"""Data models for scraped postings and scrape outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

TRANSPORT = "transport"
PARSE = "parse"


@dataclass(frozen=True)
class Posting:
    title: str = ""
    company: str = ""
    posted_text: str = ""
    link: str = ""
    hours_since_posted: Optional[int] = None


@dataclass(frozen=True)
class ScrapeFailure:
    kind: str
    message: str


@dataclass
class ScrapeResult:
    postings: List[Posting] = field(default_factory=list)
    failure: Optional[ScrapeFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
