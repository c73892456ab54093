from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from .models import SummaryResult, SummaryStatus

LOGGER = logging.getLogger(__name__)

TEXT_MARKER = "text"
# Skipped after the marker in addition to len(TEXT_MARKER); on `"text": "`
# the two skips together land on the first character of the value.
TEXT_KEY_SKIP = 4
TEXT_TERMINATOR = "\\n"

DEFAULT_PROMPT_PREFIX = "다음 뉴스를 100자 이내로 요약해줘:\n"
DEFAULT_GENERATION_ENDPOINT = "https://generativelanguage.googleapis.com/v1beta/models"


class Transport(Protocol):
    def post(self, url: str, json_body: Dict[str, Any], *, headers: Optional[Dict[str, str]] = None,
             params: Optional[Dict[str, str]] = None) -> Any:  # pragma: no cover - interface
        ...


@dataclass
class SummarizeOptions:
    model: str = "gemini-2.0-flash"
    endpoint: str = DEFAULT_GENERATION_ENDPOINT
    prompt_prefix: str = DEFAULT_PROMPT_PREFIX


def extract_summary(generation_response: str) -> SummaryResult:
    """
    Cut the generated text out of a generateContent response body.

    String offsets only: the value starts TEXT_KEY_SKIP + len(TEXT_MARKER)
    characters after the first "text" and ends at the first escaped newline.
    Misses come back as SummaryResult states, not exceptions.
    """
    marker_at = generation_response.find(TEXT_MARKER)
    if marker_at == -1:
        return SummaryResult(SummaryStatus.FIELD_MISSING)
    start = marker_at + TEXT_KEY_SKIP + len(TEXT_MARKER)
    end = generation_response.find(TEXT_TERMINATOR, start)
    if end == -1:
        return SummaryResult(SummaryStatus.TERMINATOR_MISSING)
    return SummaryResult.found(generation_response[start:end].replace(TEXT_TERMINATOR, " "))


def build_prompt(news_text: str, prefix: str = DEFAULT_PROMPT_PREFIX) -> str:
    return prefix + news_text


def build_request_body(prompt: str) -> Dict[str, Any]:
    return {"contents": [{"parts": [{"text": prompt}]}]}


class GeminiSummarizer:
    def __init__(self, *, api_key: str, options: Optional[SummarizeOptions] = None) -> None:
        self._api_key = api_key
        self.options = options or SummarizeOptions()

    @property
    def url(self) -> str:
        return f"{self.options.endpoint.rstrip('/')}/{self.options.model}:generateContent"

    def summarize(self, news_text: str, transport: Transport) -> SummaryResult:
        body = build_request_body(build_prompt(news_text, self.options.prompt_prefix))
        response = transport.post(
            self.url,
            body,
            headers={"Content-Type": "application/json"},
            params={"key": self._api_key},
        )
        LOGGER.debug("Gemini response = %s", response.text)
        result = extract_summary(response.text)
        if not result.ok:
            LOGGER.warning("Summary extraction missed: %s", result.status.value)
        return result
