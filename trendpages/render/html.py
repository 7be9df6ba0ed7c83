from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from trendpages.models.trend import RunSlot, TrendRecord
from trendpages.render.environment import get_environment
from trendpages.utils.text import search_url, trends_explore_url, truncate

DEFAULT_COLOR = "#5fcde4"
SOURCE_COLORS = {
    "X": "#1da1f2",
    "TikTok": "#ee1d52",
    "Google": "#4285f4",
    "HN": "#ff6600",
    "Reddit": "#ff4500",
    "Wiki": "#636466",
    "GitHub": "#6e5494",
    "Curated": "#f4b41a",
}


def source_color(source: str) -> str:
    if source.startswith("r/"):
        return SOURCE_COLORS["Reddit"]
    return SOURCE_COLORS.get(source, DEFAULT_COLOR)


def page_title(records: Sequence[TrendRecord], label: str) -> str:
    keywords = [truncate(" ".join(record.keyword.split()[:3]), 25) for record in records[:3]]
    if not keywords:
        return f"Trends - {label}"
    return f"{' | '.join(keywords)} - {label}"


def page_description(records: Sequence[TrendRecord]) -> str:
    return "Trending: " + ", ".join(record.keyword[:30] for record in records[:5])


def build_rows(records: Sequence[TrendRecord], max_items: Optional[int] = 25) -> List[Dict[str, Any]]:
    rows = []
    for rank, record in enumerate(records[:max_items], start=1):
        rows.append(
            {
                "rank": rank,
                "keyword": record.keyword,
                "href": record.url or search_url(record.keyword),
                "source": record.source,
                "color": source_color(record.source),
                "traffic": record.traffic,
                "score": record.score,
                "search_url": search_url(record.keyword),
                "trends_url": trends_explore_url(record.keyword),
            }
        )
    return rows


def render_html(
    records: Sequence[TrendRecord],
    slot: RunSlot,
    site: Optional[Dict[str, Any]] = None,
    max_items: Optional[int] = 25,
) -> str:
    """Render one run's trend page. Output depends only on the arguments."""
    site = site or {}
    label = f"{slot.date} {slot.slot}:00 UTC" if slot.slot else slot.date
    rows = build_rows(records, max_items)
    sources = list(dict.fromkeys(row["source"] for row in rows))

    template = get_environment().get_template("trend_page.html")
    return template.render(
        title=page_title(records, label),
        description=page_description(records),
        heading=site.get("title", "TRENDING NOW"),
        label=label,
        rows=rows,
        sources=sources,
        home_url=site.get("home_url", "../"),
        author_url=site.get("author_url", ""),
    )
