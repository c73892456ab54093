from __future__ import annotations

import logging
from contextlib import ExitStack
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .config import Config, resolve_timezone
from .fetcher import HttpTransport, fetch_latest_news
from .models import Document, SearchQuery, SummaryResult
from .parser import SelectionResult, render_news, select_first_item
from .summarizers import GeminiSummarizer, SummarizeOptions
from .writer import build_document, make_timestamp, save_document

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DigestResult:
    selection: SelectionResult
    summary: SummaryResult
    document: Document
    path: Path


class NewsDigest:
    """
    High-level API: fetch the newest article for a keyword, summarize it and save it as markdown.

    Pipeline: search → select first item → summarize → write document

    TransportError and StorageError abort the run; a missing item or summary
    field is written into the document as placeholder text instead.
    """

    def __init__(
        self,
        config: Config,
        *,
        transport: Optional[HttpTransport] = None,
        summarizer: Optional[GeminiSummarizer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self._transport = transport
        self._summarizer = summarizer or GeminiSummarizer(
            api_key=config.gemini_api_key,
            options=SummarizeOptions(model=config.gemini_model, endpoint=config.generation_endpoint),
        )
        self._clock = clock
        # Fail before any network call rather than at write time
        resolve_timezone(config.timezone)

    def run(self) -> DigestResult:
        with ExitStack() as stack:
            transport = self._transport
            if transport is None:
                # Owned by this run; closed on every exit path
                transport = stack.enter_context(HttpTransport(timeout_sec=self.config.timeout_sec))
            query = SearchQuery.from_keyword(self.config.keyword)

            raw = fetch_latest_news(
                transport,
                endpoint=self.config.search_endpoint,
                query=query,
                client_id=self.config.client_id,
                client_secret=self.config.client_secret,
            )
            LOGGER.info("Fetched search response (%d chars)", len(raw))

            selection = select_first_item(raw)
            news_text = render_news(selection)
            LOGGER.info("Selected news item: %s", type(selection).__name__)

            summary = self._summarizer.summarize(news_text, transport)
            LOGGER.info("Summarized news item: %s", summary.status.value)

        now = self._clock() if self._clock else None
        doc = build_document(
            keyword=self.config.keyword,
            news_content=news_text,
            summary=summary.text,
            timestamp=make_timestamp(now, self.config.timezone),
        )
        path = save_document(doc, self.config.output_dir)
        LOGGER.info("Persisted digest to %s", path)
        return DigestResult(selection=selection, summary=summary, document=doc, path=path)
