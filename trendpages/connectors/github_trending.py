from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord

_STARS_TODAY = re.compile(r"([\d,]+)\s+stars?\s+(?:today|this week|this month)")


class GitHubTrendingConnector(BaseConnector):
    """Repositories from the GitHub trending page."""

    name = "github_trending"
    source = "GitHub"
    default_limit = 10
    TRENDING_URL = "https://github.com/trending"
    FALLBACK_TRAFFIC = "★"

    async def _fetch_impl(self) -> List[TrendRecord]:
        params = {"since": self.config.get("since", "daily")}
        async with self._client() as client:
            html = await self._get_text(client, self.config.get("url", self.TRENDING_URL), params=params)
        return self.parse(html)

    def parse(self, html: str) -> List[TrendRecord]:
        soup = BeautifulSoup(html, "html.parser")
        records = []
        for row in soup.select("article.Box-row"):
            link = row.select_one("h2 a")
            if link is None:
                continue
            repo = "/".join(part.strip() for part in link.get_text().split("/") if part.strip())
            href = link.get("href") or ""
            stars = _STARS_TODAY.search(row.get_text(" ", strip=True))
            traffic = f"★ {stars.group(1)} today" if stars else self.FALLBACK_TRAFFIC
            records.append(
                self.make_record(
                    repo,
                    traffic=traffic,
                    url=f"https://github.com{href}" if href.startswith("/") else href or None,
                )
            )
        return self.collect(records)
