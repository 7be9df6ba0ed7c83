import pytest

from trendpages.utils.text import (
    clean_keyword,
    normalize_key,
    search_url,
    strip_bracket_prefix,
    trends_explore_url,
    truncate,
)
from trendpages.utils.traffic import format_count, parse_traffic


@pytest.mark.parametrize(
    "value, expected",
    [
        ("[Discussion] Foo", "Foo"),
        ("(Video) [OC] Bar baz", "Bar baz"),
        ("【速報】ニュース", "ニュース"),
        ("No prefix [here]", "No prefix [here]"),
    ],
)
def test_strip_bracket_prefix(value, expected):
    assert strip_bracket_prefix(value) == expected


def test_truncate_adds_marker_only_when_needed():
    assert truncate("short", 10) == "short"
    assert truncate("abcdefghijk", 5) == "abcde..."


def test_clean_keyword_handles_missing_and_whitespace():
    assert clean_keyword(None) == ""
    assert clean_keyword("   ") == ""
    assert clean_keyword("[Meta]", strip_prefix=True) == ""
    assert clean_keyword("  Big\n  News  ") == "Big News"


def test_normalize_key():
    assert normalize_key("Foo Bar") == "foobar"
    assert normalize_key("foo-bar!") == "foobar"
    assert normalize_key("#SuperBowl") == "superbowl"
    assert normalize_key("") == ""


def test_outbound_links_are_encoded():
    assert search_url("C++ & Rust") == "https://www.google.com/search?q=C%2B%2B+%26+Rust"
    assert trends_explore_url("Taylor Swift") == "https://trends.google.com/trends/explore?q=Taylor+Swift"


@pytest.mark.parametrize(
    "label, expected",
    [
        ("500+", 500),
        ("1.2K views", 1200),
        ("2M+", 2000000),
        ("345 pts", 345),
        ("12 ups", 12),
        ("★ 1,234 today", 1234),
        ("Rising", 0),
        ("🔥", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_parse_traffic(label, expected):
    assert parse_traffic(label) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(999, "999"), (1000, "1K"), (45000, "45K"), (1234567, "1.2M"), (3_000_000_000, "3B"), ("bad", "")],
)
def test_format_count(value, expected):
    assert format_count(value) == expected


def test_clean_keyword_keeps_bracketed_names_unless_asked():
    assert clean_keyword("(G)I-DLE") == "(G)I-DLE"
    assert clean_keyword("[Discussion] Rust 2.0", strip_prefix=True) == "Rust 2.0"
