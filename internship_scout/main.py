"""CLI entry for scraping fresh internship postings.

Run with `internship-scout` or `python -m internship_scout.main`.
"""

from __future__ import annotations

import logging
import os

from internship_scout.config import Settings
from internship_scout.notifier import send_email
from internship_scout.scraper import ScrapeRunner

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logger.info("Loaded %d allowlisted companies", len(settings.companies))

    result = ScrapeRunner(settings).run()
    if not result.ok:
        logger.info("Scrape produced no results (%s failure)", result.failure.kind)
        return

    if settings.mail is None:
        logger.info("MAIL_USER/MAIL_PASS/MAIL_TO not set; skipping email")
        return
    if not result.postings:
        logger.info("No new internships; skipping email")
        return
    send_email(result.postings, settings.mail)


if __name__ == "__main__":
    main()
