import re
import unicodedata
from typing import Optional
from urllib.parse import quote_plus

SEARCH_URL_TEMPLATE = "https://www.google.com/search?q={query}"
TRENDS_EXPLORE_TEMPLATE = "https://trends.google.com/trends/explore?q={query}"

_BRACKET_PREFIX = re.compile(r"^\s*(?:\[[^\]]*\]|\([^)]*\)|【[^】]*】)\s*")
_WHITESPACE = re.compile(r"\s+")


def strip_bracket_prefix(value: str) -> str:
    """Drop leading tags such as ``[Discussion]`` or ``(Video)`` from a title."""
    previous = None
    while previous != value:
        previous = value
        value = _BRACKET_PREFIX.sub("", value, count=1)
    return value.strip()


def truncate(value: str, limit: int = 80, marker: str = "...") -> str:
    if len(value) <= limit:
        return value
    return value[:limit].rstrip() + marker


def clean_keyword(value: Optional[str], limit: int = 80, strip_prefix: bool = False) -> str:
    """Collapse whitespace and truncate.

    ``strip_prefix`` drops leading ``[Tag]`` style markers; only post titles
    carry those, so trend names such as ``(G)I-DLE`` are left alone by default.
    """
    if not value:
        return ""
    value = unicodedata.normalize("NFKC", str(value))
    value = _WHITESPACE.sub(" ", value).strip()
    if strip_prefix:
        value = strip_bracket_prefix(value)
    if not value:
        return ""
    return truncate(value, limit)


def normalize_key(keyword: str) -> str:
    # str.isalnum keeps non-latin scripts, so CJK keywords still dedupe
    return "".join(ch for ch in (keyword or "").lower() if ch.isalnum())


def word_count(keyword: str) -> int:
    return len(keyword.split())


def search_url(keyword: str) -> str:
    return SEARCH_URL_TEMPLATE.format(query=quote_plus(keyword))


def trends_explore_url(keyword: str) -> str:
    return TRENDS_EXPLORE_TEMPLATE.format(query=quote_plus(keyword))
