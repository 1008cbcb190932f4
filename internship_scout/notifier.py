"""Send newly found internships as an HTML e-mail digest."""

from __future__ import annotations

import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from html import escape
from typing import Sequence
from urllib.parse import urlparse

from internship_scout.config import MailSettings
from internship_scout.filters import FRESHNESS_WINDOW_HOURS
from internship_scout.models import Posting

logger = logging.getLogger(__name__)

SENDER_NAME = "Internship Tracker Bot"
LINK_SCHEMES = {"http", "https"}

_ITEM_TEMPLATE = (
    "<li><b>{company}</b> — {title}<br/>"
    "Posted: {posted}<br/>"
    '<a href="{link}">View Posting</a></li>'
)


def safe_link(link: str) -> str:
    """Return ``link`` only if it is an http(s) URL; anything else becomes empty."""
    link = (link or "").strip()
    return link if urlparse(link).scheme.lower() in LINK_SCHEMES else ""


def build_subject(postings: Sequence[Posting]) -> str:
    return f"🧭 {len(postings)} New Internship Postings (last {FRESHNESS_WINDOW_HOURS}h)"


def build_html(postings: Sequence[Posting]) -> str:
    items = "".join(
        _ITEM_TEMPLATE.format(
            company=escape(p.company),
            title=escape(p.title),
            posted=escape(p.posted_text),
            link=escape(safe_link(p.link)),
        )
        for p in postings
    )
    return f"<h3>New Internships Found</h3><ul>{items}</ul>"


def build_text(postings: Sequence[Posting]) -> str:
    lines = [f"- {p.company} — {p.title} ({p.posted_text}) {p.link}".rstrip() for p in postings]
    return "\n".join(["New Internships Found", ""] + lines)


def build_message(postings: Sequence[Posting], mail: MailSettings) -> MIMEMultipart:
    msg = MIMEMultipart("alternative")
    msg["Subject"] = build_subject(postings)
    msg["From"] = formataddr((SENDER_NAME, mail.smtp_user))
    msg["To"] = mail.recipient
    msg.attach(MIMEText(build_text(postings), "plain", "utf-8"))
    msg.attach(MIMEText(build_html(postings), "html", "utf-8"))
    return msg


def send_email(postings: Sequence[Posting], mail: MailSettings) -> None:
    """Send one digest. SMTP and socket errors are left to the caller."""
    msg = build_message(postings, mail)
    with smtplib.SMTP_SSL(mail.smtp_host, mail.smtp_port, timeout=mail.timeout) as server:
        server.login(mail.smtp_user, mail.smtp_password)
        server.sendmail(mail.smtp_user, [mail.recipient], msg.as_string())
    logger.info("Email sent to %s", mail.recipient)
