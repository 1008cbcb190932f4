import pytest

from internship_scout.config import MailSettings, Settings

SEARCH_URL = "https://www.linkedin.com/jobs/search?keywords=intern&f_TP=1"


def card(title: str, company: str, posted: str, link: str) -> str:
    return f"""
    <div class="base-card">
      <a class="base-card__full-link" href="{link}"></a>
      <h3 class="base-search-card__title">  {title}  </h3>
      <h4 class="base-search-card__subtitle"> {company} </h4>
      <time datetime="2025-01-01">{posted}</time>
    </div>
    """


@pytest.fixture
def results_html() -> str:
    return (
        "<html><body><ul>"
        + card("SWE Intern", "Acme Corp", "3h", "https://x/a")
        + card("Data Intern", "Acme Corp", "2 days ago", "https://x/b")
        + card("PM Intern", "Initech", "1h", "https://x/c")
        + "</ul></body></html>"
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        search_url=SEARCH_URL,
        companies=("Acme",),
        request_timeout=5,
        proxy=None,
        verify_ssl=True,
    )


@pytest.fixture
def mail() -> MailSettings:
    return MailSettings(smtp_user="bot@example.com", smtp_password="app-pass", recipient="me@example.com")
