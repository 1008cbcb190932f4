"""Environment-based settings for internship_scout."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

import yaml
from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).resolve().parent
DEFAULT_SEARCH_URL = "https://www.linkedin.com/jobs/search?keywords=intern&f_TP=1"
DEFAULT_COMPANY_LIST = ROOT / "companies.yaml"


def load_company_allowlist(path: Path) -> Tuple[str, ...]:
    """Read the company allowlist; accepts a bare list or a ``companies:`` key."""
    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or []
    if isinstance(data, dict):
        data = data.get("companies") or []
    return tuple(name.strip() for name in data if isinstance(name, str) and name.strip())


@dataclass(frozen=True)
class MailSettings:
    smtp_user: str
    smtp_password: str
    recipient: str
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    timeout: float = 30.0

    @classmethod
    def from_env(cls) -> Optional["MailSettings"]:
        user = os.getenv("MAIL_USER", "").strip()
        password = os.getenv("MAIL_PASS", "").strip()
        recipient = os.getenv("MAIL_TO", "").strip()
        if not (user and password and recipient):
            return None
        return cls(
            smtp_user=user,
            smtp_password=password,
            recipient=recipient,
            smtp_host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            smtp_port=int(os.getenv("SMTP_PORT", "465")),
        )


@dataclass(frozen=True)
class Settings:
    search_url: str
    companies: Tuple[str, ...]
    request_timeout: float
    proxy: str | None
    verify_ssl: bool
    mail: Optional[MailSettings] = None

    @classmethod
    def from_env(cls) -> "Settings":
        company_path = Path(os.getenv("COMPANY_LIST_PATH") or DEFAULT_COMPANY_LIST)
        return cls(
            search_url=os.getenv("SEARCH_URL", DEFAULT_SEARCH_URL),
            companies=load_company_allowlist(company_path),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", "30")),
            proxy=os.getenv("HTTP_PROXY") or os.getenv("HTTPS_PROXY") or None,
            verify_ssl=os.getenv("VERIFY_SSL", "true").lower() not in {"0", "false", "no"},
            mail=MailSettings.from_env(),
        )
