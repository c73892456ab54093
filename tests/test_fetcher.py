from __future__ import annotations

import httpx
import pytest

from news_digest.exceptions import TransportError
from news_digest.fetcher import (
    HttpTransport,
    build_search_url,
    fetch_latest_news,
    search_headers,
)
from news_digest.models import SearchQuery


class _FakeResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


def test_search_query_is_form_encoded() -> None:
    assert SearchQuery.from_keyword("AI").encoded == "AI"
    assert SearchQuery.from_keyword("인공 지능").encoded == "%EC%9D%B8%EA%B3%B5+%EC%A7%80%EB%8A%A5"


def test_build_search_url() -> None:
    url = build_search_url("https://openapi.naver.com/v1/search/news", SearchQuery.from_keyword("AI"))

    assert url == "https://openapi.naver.com/v1/search/news?query=AI&sort=date&display=1"


def test_search_headers() -> None:
    assert search_headers("id", "secret") == {
        "X-Naver-Client-Id": "id",
        "X-Naver-Client-Secret": "secret",
    }


def test_get_sends_headers_and_returns_body(monkeypatch: pytest.MonkeyPatch) -> None:
    def _request(self, method, url, params=None, json=None, headers=None):
        assert method == "GET"
        assert url.endswith("?query=AI&sort=date&display=1")
        assert headers["X-Naver-Client-Id"] == "id"
        assert headers["X-Naver-Client-Secret"] == "secret"
        return _FakeResponse(200, '{"items":[]}')

    monkeypatch.setattr("httpx.Client.request", _request)

    with HttpTransport(timeout_sec=5.0) as transport:
        body = fetch_latest_news(
            transport,
            endpoint="https://openapi.naver.com/v1/search/news",
            query=SearchQuery.from_keyword("AI"),
            client_id="id",
            client_secret="secret",
        )

    assert body == '{"items":[]}'


def test_error_status_still_returns_body(monkeypatch: pytest.MonkeyPatch) -> None:
    def _request(self, method, url, params=None, json=None, headers=None):
        return _FakeResponse(401, '{"errorMessage":"Authentication failed"}')

    monkeypatch.setattr("httpx.Client.request", _request)

    with HttpTransport() as transport:
        response = transport.get("https://openapi.naver.com/v1/search/news")

    assert response.status_code == 401
    assert not response.ok
    assert "Authentication failed" in response.text


def test_post_sends_json_and_params(monkeypatch: pytest.MonkeyPatch) -> None:
    def _request(self, method, url, params=None, json=None, headers=None):
        assert method == "POST"
        assert params == {"key": "k"}
        assert json == {"contents": [{"parts": [{"text": "hi"}]}]}
        return _FakeResponse(200, "ok")

    monkeypatch.setattr("httpx.Client.request", _request)

    with HttpTransport() as transport:
        response = transport.post(
            "https://gen.example/models/m:generateContent",
            {"contents": [{"parts": [{"text": "hi"}]}]},
            params={"key": "k"},
        )

    assert response.ok
    assert response.text == "ok"


def test_connection_error_raises_transport_error_without_query(monkeypatch: pytest.MonkeyPatch) -> None:
    def _request(self, method, url, params=None, json=None, headers=None):
        raise httpx.ConnectError("connection refused")

    monkeypatch.setattr("httpx.Client.request", _request)

    with HttpTransport() as transport:
        with pytest.raises(TransportError) as excinfo:
            transport.get("https://gen.example/models/m:generateContent?key=secret-key")

    assert "https://gen.example/models/m:generateContent" in str(excinfo.value)
    assert "secret-key" not in str(excinfo.value)


def test_context_manager_closes_client(monkeypatch: pytest.MonkeyPatch) -> None:
    closed = []
    monkeypatch.setattr("httpx.Client.close", lambda self: closed.append(True))

    with HttpTransport():
        pass

    assert closed == [True]
