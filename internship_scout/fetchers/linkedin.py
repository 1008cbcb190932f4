"""Fetcher for the public LinkedIn job-search results page."""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from internship_scout.fetchers.base import BaseFetcher
from internship_scout.models import Posting

logger = logging.getLogger(__name__)

CARD_SELECTOR = ".base-card"
TITLE_SELECTOR = ".base-search-card__title"
COMPANY_SELECTOR = ".base-search-card__subtitle"
LINK_SELECTOR = "a.base-card__full-link"
TIME_SELECTOR = "time"


def _text(card, selector: str) -> str:
    tag = card.select_one(selector)
    return tag.get_text(strip=True) if tag else ""


def extract_postings(html: Optional[str]) -> List[Posting]:
    """Map every listing card in ``html`` to a Posting, in document order.

    Missing sub-elements become empty strings. Nothing is filtered here.
    """
    if not html:
        return []
    soup = BeautifulSoup(html, "html.parser")
    postings: List[Posting] = []
    for card in soup.select(CARD_SELECTOR):
        link_tag = card.select_one(LINK_SELECTOR)
        postings.append(
            Posting(
                title=_text(card, TITLE_SELECTOR),
                company=_text(card, COMPANY_SELECTOR),
                posted_text=_text(card, TIME_SELECTOR),
                link=(link_tag.get("href", "") or "").strip() if link_tag else "",
            )
        )
    return postings


class LinkedInFetcher(BaseFetcher):
    def parse(self, html: str) -> List[Posting]:
        postings = extract_postings(html)
        logger.info("%s extracted %d posting cards", self.source_name, len(postings))
        return postings
