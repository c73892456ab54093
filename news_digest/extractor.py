from __future__ import annotations

from typing import Optional


def unescape(value: str) -> str:
    """Undo the two JSON escapes the extractor cares about: \\" -> " and \\n -> space."""
    return value.replace('\\"', '"').replace("\\n", " ")


def extract_field(source: str, start_marker: str, end_marker: str) -> Optional[str]:
    """
    Return the text between the first `start_marker` and the next `end_marker`.

    Markers are matched literally. A missing marker yields None rather than an
    error so callers can substitute a placeholder. No JSON parsing happens here:
    a value that itself contains `end_marker` is cut at its first occurrence.
    """
    start = source.find(start_marker)
    if start == -1:
        return None
    start += len(start_marker)
    end = source.find(end_marker, start)
    if end == -1:
        return None
    return unescape(source[start:end])
