from __future__ import annotations

import pytest
import requests

from mpgblog.api import indexnow as indexnow_module
from mpgblog.api import IndexNowError


class _FakeResponse:
    def __init__(self, status_code: int = 200) -> None:
        self.status_code = status_code
        self.reason = "OK" if status_code < 400 else "Forbidden"
        self.url = indexnow_module.INDEXNOW_ENDPOINT

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


def test_submit_filters_foreign_hosts(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_post(url, *, json, headers, timeout):
        calls.append((url, json))
        return _FakeResponse(202)

    monkeypatch.setattr(indexnow_module.requests, "post", fake_post)

    result = indexnow_module.submit_urls(
        ["https://mpgcalculator.net/blog", "https://other.example/x", "not a url"],
        host="mpgcalculator.net",
        key="abc123",
    )

    assert result.status_code == 202
    assert result.submitted == ["https://mpgcalculator.net/blog"]
    assert result.rejected == ["https://other.example/x", "not a url"]
    endpoint, payload = calls[0]
    assert endpoint == "https://api.indexnow.org/IndexNow"
    assert payload == {
        "host": "mpgcalculator.net",
        "key": "abc123",
        "keyLocation": "https://mpgcalculator.net/abc123.txt",
        "urlList": ["https://mpgcalculator.net/blog"],
    }


def test_nothing_sent_without_valid_urls(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(indexnow_module.requests, "post", lambda *a, **k: pytest.fail("post called"))

    result = indexnow_module.submit_urls(["https://other.example/x"], host="mpgcalculator.net", key="abc123")

    assert not result.sent
    assert result.submitted == []


def test_http_error_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(indexnow_module.requests, "post", lambda *a, **k: _FakeResponse(403))

    with pytest.raises(IndexNowError) as exc:
        indexnow_module.submit_urls(["https://mpgcalculator.net/blog"], host="mpgcalculator.net", key="abc123")

    assert "403" in str(exc.value)


def test_network_error_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(*_args, **_kwargs):
        raise requests.ConnectionError("boom")

    monkeypatch.setattr(indexnow_module.requests, "post", boom)

    with pytest.raises(IndexNowError):
        indexnow_module.submit_urls(["https://mpgcalculator.net/blog"], host="mpgcalculator.net", key="abc123")
