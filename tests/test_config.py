import pytest

from internship_scout.config import DEFAULT_COMPANY_LIST, DEFAULT_SEARCH_URL, MailSettings, Settings, load_company_allowlist


def test_allowlist_accepts_bare_list(tmp_path):
    path = tmp_path / "companies.yaml"
    path.write_text("- Acme\n- '  Globex '\n- ''\n- 42\n", encoding="utf-8")
    assert load_company_allowlist(path) == ("Acme", "Globex")


def test_allowlist_accepts_companies_key(tmp_path):
    path = tmp_path / "companies.yaml"
    path.write_text("companies:\n  - Initech\n", encoding="utf-8")
    assert load_company_allowlist(path) == ("Initech",)


def test_missing_allowlist_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_company_allowlist(tmp_path / "nope.yaml")


def test_settings_from_env(tmp_path, monkeypatch):
    path = tmp_path / "companies.yaml"
    path.write_text("- Acme\n", encoding="utf-8")
    for name in ("SEARCH_URL", "HTTP_PROXY", "HTTPS_PROXY", "MAIL_USER", "MAIL_PASS", "MAIL_TO"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COMPANY_LIST_PATH", str(path))
    monkeypatch.setenv("REQUEST_TIMEOUT", "7")
    monkeypatch.setenv("VERIFY_SSL", "no")

    settings = Settings.from_env()
    assert settings.search_url == DEFAULT_SEARCH_URL
    assert settings.companies == ("Acme",)
    assert settings.request_timeout == 7.0
    assert settings.verify_ssl is False
    assert settings.mail is None


def test_mail_settings_need_all_credentials(monkeypatch):
    monkeypatch.setenv("MAIL_USER", "bot@example.com")
    monkeypatch.setenv("MAIL_PASS", "app-pass")
    monkeypatch.delenv("MAIL_TO", raising=False)
    assert MailSettings.from_env() is None

    monkeypatch.setenv("MAIL_TO", "me@example.com")
    monkeypatch.setenv("SMTP_PORT", "587")
    mail = MailSettings.from_env()
    assert mail.recipient == "me@example.com"
    assert mail.smtp_port == 587


def test_default_allowlist_ships_inside_package():
    assert DEFAULT_COMPANY_LIST.parent.name == "internship_scout"
    assert DEFAULT_COMPANY_LIST.is_file()
    assert "Google" in load_company_allowlist(DEFAULT_COMPANY_LIST)


def test_settings_fall_back_to_packaged_allowlist(monkeypatch):
    monkeypatch.delenv("COMPANY_LIST_PATH", raising=False)
    assert Settings.from_env().companies == load_company_allowlist(DEFAULT_COMPANY_LIST)
