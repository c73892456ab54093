from __future__ import annotations

import pytest

from news_digest.extractor import extract_field


@pytest.mark.parametrize("source", ["", '{"link":"http://x"}', "title without quotes"])
def test_missing_start_marker_returns_none(source: str) -> None:
    assert extract_field(source, '"title":"', '"') is None


def test_missing_end_marker_returns_none() -> None:
    assert extract_field('{"title":"unterminated', '"title":"', '"') is None


def test_well_formed_fragment_returns_value() -> None:
    assert extract_field('{"title":"Hello world","link":"x"}', '"title":"', '"') == "Hello world"


def test_escaped_newline_becomes_space() -> None:
    assert extract_field('"description":"line one\\nline two"', '"description":"', '"') == "line one line two"


def test_escaped_quote_is_unescaped_when_end_marker_differs() -> None:
    source = 'start say \\"hi\\" end'
    assert extract_field(source, "start ", " end") == 'say "hi"'


def test_value_containing_end_marker_is_truncated() -> None:
    # The first end marker wins, even when it is an escaped quote inside the value
    source = '"title":"He said \\"AI\\" today"'
    assert extract_field(source, '"title":"', '"') == "He said \\"


def test_first_start_marker_wins() -> None:
    source = '"title":"first","title":"second"'
    assert extract_field(source, '"title":"', '"') == "first"


def test_empty_value() -> None:
    assert extract_field('"title":""', '"title":"', '"') == ""
