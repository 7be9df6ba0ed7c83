from __future__ import annotations

import json
from typing import Any, Dict, List

import feedparser

from trendpages.connectors.base import BaseConnector, ConnectorError
from trendpages.models.trend import TrendRecord


class GoogleTrendsConnector(BaseConnector):
    """Daily trending searches from the public Google Trends RSS feed."""

    name = "google_trends"
    source = "Google"
    default_limit = 20
    RSS_URL = "https://trends.google.com/trending/rss"

    async def _fetch_impl(self) -> List[TrendRecord]:
        params = {"geo": self.config.get("geo", "US")}
        async with self._client() as client:
            xml = await self._get_text(client, self.config.get("url", self.RSS_URL), params=params)
        return self.parse(xml)

    def parse(self, xml: str) -> List[TrendRecord]:
        feed = feedparser.parse(xml)
        if feed.bozo and not feed.entries:
            raise ConnectorError(f"unreadable RSS: {feed.get('bozo_exception')}")

        return self.collect(
            self.make_record(
                entry.get("title"),
                traffic=entry.get("ht_approx_traffic", ""),
                url=entry.get("ht_news_item_url"),
            )
            for entry in feed.entries
        )


class GoogleRealtimeTrendsConnector(BaseConnector):
    """Realtime stories from the undocumented Google Trends JSON endpoint."""

    name = "google_trends_realtime"
    source = "Google"
    trend_type = "realtime"
    default_limit = 15
    API_URL = "https://trends.google.com/trends/api/realtimetrends"
    TRAFFIC_LABEL = "Rising"

    async def _fetch_impl(self) -> List[TrendRecord]:
        params = {
            "hl": "en-US",
            "tz": 0,
            "cat": self.config.get("category", "all"),
            "fi": 0,
            "fs": 0,
            "geo": self.config.get("geo", "US"),
            "ri": 300,
            "rs": 20,
            "sort": 0,
        }
        async with self._client() as client:
            raw_text = await self._get_text(client, self.config.get("url", self.API_URL), params=params)
        return self.parse(raw_text)

    def parse(self, raw_text: str) -> List[TrendRecord]:
        # Responses start with an anti-JSON-hijacking guard such as )]}'
        start = raw_text.find("{")
        if start < 0:
            raise ConnectorError("realtime trends payload has no JSON object")
        data: Dict[str, Any] = json.loads(raw_text[start:])

        stories = data.get("storySummaries", {}).get("trendingStories", [])
        return self.collect(self._story_record(story) for story in stories)

    def _story_record(self, story: Dict[str, Any]):
        entities = story.get("entityNames") or []
        keyword = entities[0] if entities else (story.get("title") or "").split(",")[0]
        articles = story.get("articles") or []
        url = story.get("shareUrl") or (articles[0].get("url") if articles else None)
        return self.make_record(keyword, self.TRAFFIC_LABEL, url=url)
