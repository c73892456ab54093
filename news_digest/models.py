from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
from urllib.parse import quote_plus


FIELD_MISSING_MESSAGE = "text 필드 없음"
TERMINATOR_MISSING_MESSAGE = "text 종료 지점 없음"


@dataclass(frozen=True)
class SearchQuery:
    keyword: str
    encoded: str

    @classmethod
    def from_keyword(cls, keyword: str) -> "SearchQuery":
        # Form encoding: spaces become "+"
        return cls(keyword=keyword, encoded=quote_plus(keyword, encoding="utf-8"))


@dataclass(frozen=True)
class NewsItem:
    """
    The first article of a search response.

    Every field is independently optional; a missing field is kept as None and
    only replaced by "N/A" when the item is rendered.
    """
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    published_at: Optional[str] = None

    def render(self) -> str:
        return (
            f"제목: {_or_na(self.title)}\n"
            f"링크: {_or_na(self.link)}\n"
            f"설명: {_or_na(self.description)}\n"
            f"게시일: {_or_na(self.published_at)}"
        )


@dataclass(frozen=True)
class SelectionMiss:
    """Non-error outcome of item selection: no item found, or the payload could not be parsed."""
    message: str

    def render(self) -> str:
        return self.message


class SummaryStatus(Enum):
    FOUND = "found"
    FIELD_MISSING = "field_missing"
    TERMINATOR_MISSING = "terminator_missing"


@dataclass(frozen=True)
class SummaryResult:
    status: SummaryStatus
    value: Optional[str] = None

    @classmethod
    def found(cls, value: str) -> "SummaryResult":
        return cls(SummaryStatus.FOUND, value)

    @property
    def ok(self) -> bool:
        return self.status is SummaryStatus.FOUND

    @property
    def text(self) -> str:
        if self.status is SummaryStatus.FIELD_MISSING:
            return FIELD_MISSING_MESSAGE
        if self.status is SummaryStatus.TERMINATOR_MISSING:
            return TERMINATOR_MISSING_MESSAGE
        return self.value or ""


@dataclass(frozen=True)
class Document:
    keyword: str
    news_content: str
    summary: str
    timestamp: str

    @property
    def filename(self) -> str:
        return f"latest_ai_news_{self.timestamp}.md"


def _or_na(value: Optional[str]) -> str:
    return value if value is not None else "N/A"
