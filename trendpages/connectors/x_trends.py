from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord


class XTrendsConnector(BaseConnector):
    """Scrapes X/Twitter trend names from a trends24-style listing page."""

    name = "x_trends"
    source = "X"
    trend_type = "emerging"
    default_limit = 20
    TRENDS_URL = "https://trends24.in/united-states/"
    TRAFFIC_LABEL = "🔥"

    async def _fetch_impl(self) -> List[TrendRecord]:
        async with self._client() as client:
            html = await self._get_text(client, self.config.get("url", self.TRENDS_URL))
        return self.parse(html)

    def parse(self, html: str) -> List[TrendRecord]:
        soup = BeautifulSoup(html, "html.parser")

        # The first list on the page is the most recent hour
        names: List[str] = []
        for link in soup.select("ol li a"):
            text = link.get_text(strip=True)
            if text and text not in names:
                names.append(text)

        return self.collect(self.make_record(name, self.TRAFFIC_LABEL) for name in names)
