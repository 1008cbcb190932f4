"""One LinkedIn scrape cycle: fetch, extract, filter, report."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

import requests

from internship_scout.config import Settings
from internship_scout.fetchers.linkedin import LinkedInFetcher
from internship_scout.filters import filter_by_company, filter_by_recency
from internship_scout.models import PARSE, TRANSPORT, Posting, ScrapeFailure, ScrapeResult

logger = logging.getLogger(__name__)

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/123.0 Safari/537.36"
)
ACCEPT_LANGUAGE = "en-US,en;q=0.9"


def _make_session(verify: bool, proxy: Optional[str]) -> requests.Session:
    sess = requests.Session()
    sess.headers.update({"User-Agent": USER_AGENT, "Accept-Language": ACCEPT_LANGUAGE})
    if proxy:
        sess.proxies.update({"http": proxy, "https": proxy})
    sess.verify = verify
    return sess


def scrape_once(settings: Settings, session: Optional[requests.Session] = None) -> ScrapeResult:
    """Run one scrape cycle. Failures come back classified, never raised."""
    session = session or _make_session(settings.verify_ssl, settings.proxy)
    fetcher = LinkedInFetcher("linkedin", settings.search_url, session, timeout=settings.request_timeout)
    logger.info("Fetching %s", settings.search_url)

    try:
        html = fetcher.fetch_html()
    except requests.RequestException as exc:
        logger.error("Scrape failed fetching %s (%s)", settings.search_url, exc)
        return ScrapeResult(failure=ScrapeFailure(TRANSPORT, str(exc)))

    try:
        postings = fetcher.parse(html)
        postings = filter_by_company(postings, settings.companies)
        postings = filter_by_recency(postings)
    except Exception as exc:
        logger.error("Scrape failed parsing results (%s)", exc)
        return ScrapeResult(failure=ScrapeFailure(PARSE, str(exc)))

    return ScrapeResult(postings=postings)


def log_summary(postings: Iterable[Posting]) -> None:
    postings = list(postings)
    logger.info("Found %d new internships:", len(postings))
    for job in postings:
        logger.info("→ %s — %s (%s)", job.company, job.title, job.posted_text)


class ScrapeRunner:
    """Serializes scrape cycles; an overlapping call is skipped, not queued."""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        self.settings = settings
        self.session = session
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._lock.locked()

    def run(self) -> ScrapeResult:
        if not self._lock.acquire(blocking=False):
            logger.warning("Previous scrape still in progress; skipping this run")
            return ScrapeResult()
        try:
            logger.info("Starting LinkedIn internship scrape...")
            result = scrape_once(self.settings, session=self.session)
            if result.ok:
                log_summary(result.postings)
                logger.info("LinkedIn scrape complete.")
            return result
        finally:
            self._lock.release()
