from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from datetime import datetime
from pathlib import Path
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .exceptions import StorageError
from .models import Document

LOGGER = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y년 %m월 %d일 %H시 %M분"
DOCUMENT_TEMPLATE = """# 최신 AI 뉴스 요약

## 원본 뉴스
{news_content}

## 요약
{summary}
"""


def make_timestamp(now: Optional[datetime] = None, tz: str = "Asia/Seoul") -> str:
    """
    Format the run time to the minute in the given zone, e.g. "2024년 01월 01일 09시 30분".

    Naive datetimes are taken to already be in `tz`.
    """
    zone = ZoneInfo(tz)
    if now is None:
        now = datetime.now(zone)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=zone)
    else:
        now = now.astimezone(zone)
    return now.strftime(TIMESTAMP_FORMAT)


def build_document(keyword: str, news_content: str, summary: str, timestamp: str) -> Document:
    return Document(keyword=keyword, news_content=news_content, summary=summary, timestamp=timestamp)


def render_document(doc: Document) -> str:
    return DOCUMENT_TEMPLATE.format(news_content=doc.news_content, summary=doc.summary)


def save_document(doc: Document, directory: Union[str, Path] = "news") -> Path:
    """
    Write the document to <directory>/latest_ai_news_<timestamp>.md.

    The directory is created when missing. The body goes to a temporary file
    that replaces the target only once fully written, so a failed write leaves
    no partial document and keeps any earlier file at that path. Runs within
    the same minute share a filename and the later one overwrites the earlier file.
    """
    path = Path(directory) / doc.filename
    tmp: Optional[Path] = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=path.parent, prefix=".latest_ai_news_", suffix=".tmp", delete=False,
        ) as f:
            tmp = Path(f.name)
            f.write(render_document(doc))
        os.replace(tmp, path)
    except OSError as e:
        if tmp is not None:
            with contextlib.suppress(OSError):
                tmp.unlink()
        raise StorageError(f"Failed to save markdown file: {path} ({e})") from e
    LOGGER.info("Wrote %s", path)
    return path
