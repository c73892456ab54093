from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from .extractor import extract_field
from .models import NewsItem, SelectionMiss

LOGGER = logging.getLogger(__name__)

NO_ITEMS_MESSAGE = "뉴스 데이터 없음"
PARSE_FAILURE_PREFIX = "뉴스 파싱 실패: "

ITEMS_MARKER = '"items":'
FIELD_END = '"'
FIELD_MARKERS = {
    "title": '"title":"',
    "link": '"link":"',
    "description": '"description":"',
    "published_at": '"pubDate":"',
}

NO_ITEMS = SelectionMiss(NO_ITEMS_MESSAGE)

SelectionResult = Union[NewsItem, SelectionMiss]


def _first_item_span(search_response: str) -> Optional[Tuple[int, int]]:
    # First "{" after the items marker, then the first "}" after it.
    # Not brace-depth aware: a nested object inside the item ends it early.
    items_at = search_response.find(ITEMS_MARKER)
    if items_at == -1:
        return None
    open_at = search_response.find("{", items_at + len(ITEMS_MARKER))
    if open_at == -1:
        return None
    close_at = search_response.find("}", open_at)
    if close_at == -1:
        return None
    return open_at, close_at + 1


def select_first_item(search_response: str) -> SelectionResult:
    """
    Pull the first item of a search response into a NewsItem.

    Never raises: a payload without items (error bodies included) gives the
    "no items" sentinel, and anything unexpected gives a parse-failure
    sentinel carrying the exception text.
    """
    try:
        span = _first_item_span(search_response)
        if span is None:
            LOGGER.info("No news item found in search response")
            return NO_ITEMS
        item = search_response[span[0]:span[1]]
        fields = {
            name: extract_field(item, marker, FIELD_END)
            for name, marker in FIELD_MARKERS.items()
        }
        return NewsItem(**fields)
    except Exception as e:
        LOGGER.warning("Failed to parse search response: %s", e)
        return SelectionMiss(f"{PARSE_FAILURE_PREFIX}{e}")


def render_news(result: SelectionResult) -> str:
    return result.render()
