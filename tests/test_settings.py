"""Tests for gmailquery settings."""

from gmailquery.settings import GmailQuerySettings


def test_defaults(monkeypatch):
    for key in ("LOG_LEVEL", "SEARCH_TIMEZONE", "SEARCH_DATE_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    s = GmailQuerySettings(_env_file=None)
    assert s.LOG_LEVEL == "INFO"
    assert s.SEARCH_TIMEZONE == "US/Pacific"
    assert s.SEARCH_DATE_FORMAT == "%Y/%m/%d"


def test_env_override(monkeypatch):
    monkeypatch.setenv("SEARCH_TIMEZONE", "Europe/Paris")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = GmailQuerySettings(_env_file=None)
    assert s.SEARCH_TIMEZONE == "Europe/Paris"
    assert s.LOG_LEVEL == "DEBUG"


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SEARCH_DATE_FORMAT", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("SEARCH_DATE_FORMAT=%Y-%m-%d\nUNRELATED=1\n", encoding="utf-8")
    s = GmailQuerySettings(_env_file=env_file)
    assert s.SEARCH_DATE_FORMAT == "%Y-%m-%d"
