"""Tests for environment-driven settings."""
import pytest

from app.contactviewer.config import load_config, load_settings


def _clear(monkeypatch):
    for k in ("SECRET_KEY", "ENV", "KEAP_API_TOKEN", "KEAP_BASE_URL", "KEAP_TIMEOUT_SECONDS", "CONTACT_LIST_LIMIT"):
        monkeypatch.delenv(k, raising=False)


def test_defaults(monkeypatch):
    _clear(monkeypatch)
    s = load_settings()
    assert s.keap_api_token == ""
    assert s.keap_base_url == "https://api.infusionsoft.com/crm/rest"
    assert s.keap_timeout_seconds == 30
    assert s.contact_list_limit == 100


def test_integer_settings_parsed(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("KEAP_TIMEOUT_SECONDS", " 5 ")
    monkeypatch.setenv("CONTACT_LIST_LIMIT", "25")
    cfg = load_config()
    assert cfg["KEAP_TIMEOUT_SECONDS"] == 5
    assert cfg["CONTACT_LIST_LIMIT"] == 25


@pytest.mark.parametrize("name", ["KEAP_TIMEOUT_SECONDS", "CONTACT_LIST_LIMIT"])
def test_non_integer_setting_rejected(monkeypatch, name):
    _clear(monkeypatch)
    monkeypatch.setenv(name, "ten")
    with pytest.raises(RuntimeError, match=name):
        load_settings()


def test_secure_cookie_only_in_production(monkeypatch):
    _clear(monkeypatch)
    monkeypatch.setenv("ENV", "production")
    assert load_config()["SESSION_COOKIE_SECURE"] is True
    monkeypatch.setenv("ENV", "development")
    assert load_config()["SESSION_COOKIE_SECURE"] is False
