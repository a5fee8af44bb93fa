import pytest
import requests

from cookbook.ingest import fetch


class FakeResponse:
    def __init__(self, status_code=200, text="<html></html>", url="https://example.com/final"):
        self.status_code = status_code
        self.text = text
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")


def test_fetch_url_returns_text_and_final_url(monkeypatch):
    seen = {}

    def fake_get(url, headers, timeout, allow_redirects):
        seen.update(url=url, headers=headers, timeout=timeout)
        return FakeResponse()

    monkeypatch.setattr(fetch.requests, "get", fake_get)
    html, final = fetch.fetch_url("https://example.com/r", timeout=5)
    assert (html, final) == ("<html></html>", "https://example.com/final")
    assert seen["timeout"] == 5
    assert "User-Agent" in seen["headers"]


def test_fetch_url_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(fetch.requests, "get", lambda *a, **kw: FakeResponse(status_code=500))
    with pytest.raises(requests.HTTPError):
        fetch.fetch_url("https://example.com/r")


def test_fetch_url_uses_configured_user_agent_and_timeout(monkeypatch):
    seen = {}

    def fake_get(url, headers, timeout, allow_redirects):
        seen.update(headers=headers, timeout=timeout, allow_redirects=allow_redirects)
        return FakeResponse(url=url)

    monkeypatch.setattr(fetch.settings, "USER_AGENT", "test-agent/2")
    monkeypatch.setattr(fetch.settings, "FETCH_TIMEOUT", "7")
    monkeypatch.setattr(fetch.requests, "get", fake_get)
    html, final = fetch.fetch_url("https://example.com/r")
    assert final == "https://example.com/r"
    assert seen == {"headers": {"User-Agent": "test-agent/2"}, "timeout": 7.0, "allow_redirects": True}
