from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from .exceptions import TransportError
from .models import SearchQuery

LOGGER = logging.getLogger(__name__)

DEFAULT_SEARCH_ENDPOINT = "https://openapi.naver.com/v1/search/news"


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class HttpTransport:
    """
    Blocking HTTP client used for the search and generation calls.

    Owns a single httpx.Client; use it as a context manager (or call close())
    so the connection pool is released on every exit path. Error statuses are
    not raised: their body is returned like any other so the extractors can
    degrade to placeholder text. Only failures to send or read a request
    become TransportError.
    """

    def __init__(self, *, timeout_sec: float = 15.0) -> None:
        self._client = httpx.Client(timeout=timeout_sec)

    def __enter__(self) -> "HttpTransport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> HttpResponse:
        try:
            response = self._client.request(method, url, params=params, json=json_body, headers=headers)
            text = response.text
        except httpx.HTTPError as e:
            raise TransportError(f"API request failed for {method} {_redact(url)}: {e}") from e
        result = HttpResponse(status_code=response.status_code, text=text)
        if not result.ok:
            LOGGER.warning("%s %s returned HTTP %d", method, _redact(url), result.status_code)
        return result

    def get(self, url: str, *, headers: Optional[Dict[str, str]] = None,
            params: Optional[Dict[str, str]] = None) -> HttpResponse:
        return self.request("GET", url, headers=headers, params=params)

    def post(self, url: str, json_body: Dict[str, Any], *, headers: Optional[Dict[str, str]] = None,
             params: Optional[Dict[str, str]] = None) -> HttpResponse:
        return self.request("POST", url, headers=headers, params=params, json_body=json_body)


def _redact(url: str) -> str:
    # Query strings may carry API keys
    return url.split("?", 1)[0]


def build_search_url(endpoint: str, query: SearchQuery) -> str:
    return f"{endpoint}?query={query.encoded}&sort=date&display=1"


def search_headers(client_id: str, client_secret: str) -> Dict[str, str]:
    return {
        "X-Naver-Client-Id": client_id,
        "X-Naver-Client-Secret": client_secret,
    }


def fetch_latest_news(transport: HttpTransport, *, endpoint: str, query: SearchQuery,
                      client_id: str, client_secret: str) -> str:
    """Run the search call for the newest single article and return the raw body."""
    url = build_search_url(endpoint, query)
    response = transport.get(url, headers=search_headers(client_id, client_secret))
    LOGGER.info("Search for %r returned HTTP %d", query.keyword, response.status_code)
    return response.text
