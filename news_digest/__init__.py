"""
news_digest

Fetches the newest news article for a keyword, summarizes it with Gemini and
saves both as a timestamped markdown document.

Core ideas:
- Input: a keyword (fixed to "AI") and API credentials from the environment
- Process: search (Naver) → select first item → summarize (Gemini) → write markdown
- Output: news/latest_ai_news_<timestamp>.md

Response bodies are read with targeted substring extraction rather than a
JSON parser; missing fields turn into placeholder text, never errors.

Example
-------
from news_digest import NewsDigest, load_config

result = NewsDigest(load_config()).run()
print(result.path)
"""
from .config import Config, load_config
from .core import DigestResult, NewsDigest
from .models import NewsItem, SelectionMiss, SummaryResult, SummaryStatus

__all__ = [
    "Config",
    "DigestResult",
    "NewsDigest",
    "NewsItem",
    "SelectionMiss",
    "SummaryResult",
    "SummaryStatus",
    "load_config",
]
