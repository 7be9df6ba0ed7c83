from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from urllib.parse import quote

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord
from trendpages.utils.traffic import format_count

SKIP_PREFIXES = ("Special:", "Wikipedia:", "File:", "Portal:", "Help:", "Talk:", "Template:", "Category:")
SKIP_ARTICLES = {"Main_Page", "-", "Undefined"}


class WikipediaConnector(BaseConnector):
    """Most viewed articles of the previous UTC day from the Wikimedia pageviews API."""

    name = "wikipedia"
    source = "Wiki"
    default_limit = 15
    API_URL = "https://wikimedia.org/api/rest_v1/metrics/pageviews/top/{project}/all-access/{day}"

    async def _fetch_impl(self) -> List[TrendRecord]:
        async with self._client() as client:
            payload = await self._get_json(client, self.day_url())
        return self.parse(payload)

    def day_url(self, day: Optional[date] = None) -> str:
        day = day or (datetime.now(timezone.utc).date() - timedelta(days=1))
        return self.API_URL.format(
            project=self.config.get("project", "en.wikipedia"),
            day=day.strftime("%Y/%m/%d"),
        )

    def parse(self, payload: Dict[str, Any]) -> List[TrendRecord]:
        items = (payload or {}).get("items") or []
        articles = items[0].get("articles", []) if items else []
        return self.collect(self._article_record(article) for article in articles)

    def _article_record(self, article: Dict[str, Any]):
        title = article.get("article") or ""
        if title in SKIP_ARTICLES or title.startswith(SKIP_PREFIXES):
            return None
        views = article.get("views")
        project = self.config.get("project", "en.wikipedia")
        return self.make_record(
            title.replace("_", " "),
            traffic=f"{format_count(views)} views" if views is not None else "",
            url=f"https://{project.split('.')[0]}.wikipedia.org/wiki/{quote(title)}",
        )
