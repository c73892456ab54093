from __future__ import annotations

import pytest

from news_digest.config import Config
from news_digest.fetcher import HttpResponse


SEARCH_RESPONSE = (
    '{"lastBuildDate":"Mon, 01 Jan 2024 09:00:00 +0900","total":1,"start":1,"display":1,'
    '"items":[{"title":"A","originallink":"http://o","link":"http://x",'
    '"description":"D","pubDate":"2024-01-01"}]}'
)

GENERATION_RESPONSE = (
    '{\n  "candidates": [\n    {\n      "content": {\n        "parts": [\n          {\n'
    '            "text": "Short summary\\n"\n          }\n        ],\n        "role": "model"\n'
    '      }\n    }\n  ]\n}\n'
)


class FakeTransport:
    """Records calls and replays canned responses."""

    def __init__(self, search: HttpResponse, generation: HttpResponse) -> None:
        self.search = search
        self.generation = generation
        self.calls = []

    def get(self, url, *, headers=None, params=None):
        self.calls.append(("GET", url, headers, params, None))
        return self.search

    def post(self, url, json_body, *, headers=None, params=None):
        self.calls.append(("POST", url, headers, params, json_body))
        return self.generation


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        client_id="cid",
        client_secret="secret",
        gemini_api_key="gkey",
        output_dir=str(tmp_path / "news"),
    )


@pytest.fixture
def make_transport():
    def _make(search: str = SEARCH_RESPONSE, generation: str = GENERATION_RESPONSE,
              search_status: int = 200, generation_status: int = 200) -> FakeTransport:
        return FakeTransport(HttpResponse(search_status, search), HttpResponse(generation_status, generation))

    return _make


@pytest.fixture
def fake_transport(make_transport) -> FakeTransport:
    return make_transport()
