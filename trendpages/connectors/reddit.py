from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

import httpx

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord

logger = logging.getLogger(__name__)


class RedditConnector(BaseConnector):
    """Posts from public subreddit listings (or subreddit search) via the JSON API."""

    name = "reddit"
    source = "Reddit"
    default_limit = 3
    BASE_URL = "https://www.reddit.com"

    async def _fetch_impl(self) -> List[TrendRecord]:
        subreddits = self.config.get("subreddits", [])
        if not subreddits:
            return []

        async with self._client() as client:
            tasks = [self._fetch_subreddit(client, name) for name in subreddits]
            results = await asyncio.gather(*tasks, return_exceptions=True)

        records: List[TrendRecord] = []
        for name, result in zip(subreddits, results):
            if isinstance(result, list):
                records.extend(result)
            else:
                logger.warning("Reddit connector r/%s fetch failed: %s", name, result)
        return records

    async def _fetch_subreddit(self, client: httpx.AsyncClient, name: str) -> List[TrendRecord]:
        query = self.config.get("query")
        fetch_size = max(self.limit, 5)
        if query:
            url = f"{self.BASE_URL}/r/{name}/search.json"
            params: Dict[str, Any] = {"q": query, "restrict_sr": 1, "sort": "hot", "limit": fetch_size}
        else:
            url = f"{self.BASE_URL}/r/{name}/{self.config.get('listing', 'rising')}.json"
            params = {"limit": fetch_size}
        payload = await self._get_json(client, url, params=params)
        return self.parse(payload, name)

    def parse(self, payload: Dict[str, Any], subreddit: str) -> List[TrendRecord]:
        children = (payload or {}).get("data", {}).get("children", [])
        return self.collect(self._post_record(child.get("data") or {}, subreddit) for child in children)

    def _post_record(self, post: Dict[str, Any], subreddit: str):
        score = post.get("score")
        permalink = post.get("permalink")
        return self.make_record(
            post.get("title"),
            traffic=f"{score} ups" if score is not None else "",
            url=f"https://reddit.com{permalink}" if permalink else post.get("url"),
            source=f"r/{subreddit}",
            strip_prefix=True,
        )
