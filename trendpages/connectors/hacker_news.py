from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List, Optional

import httpx

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord

logger = logging.getLogger(__name__)


class HackerNewsConnector(BaseConnector):
    """Top stories from the Hacker News Firebase API.

    Item requests run concurrently, bounded by ``concurrency``; ``asyncio.gather``
    keeps results in top-stories order.
    """

    name = "hacker_news"
    source = "HN"
    default_limit = 10
    API_URL = "https://hacker-news.firebaseio.com/v0"
    ITEM_PAGE = "https://news.ycombinator.com/item?id={id}"

    async def _fetch_impl(self) -> List[TrendRecord]:
        base_url = self.config.get("url", self.API_URL)
        semaphore = asyncio.Semaphore(int(self.config.get("concurrency", 5)))

        async with self._client() as client:
            ids = await self._get_json(client, f"{base_url}/topstories.json")
            ids = list(ids or [])[: self.limit]

            async def fetch_item(item_id: Any) -> Optional[Dict[str, Any]]:
                async with semaphore:
                    return await self._get_json(client, f"{base_url}/item/{item_id}.json")

            results = await asyncio.gather(*(fetch_item(item_id) for item_id in ids), return_exceptions=True)

        items: List[Dict[str, Any]] = []
        for item_id, result in zip(ids, results):
            if isinstance(result, BaseException):
                logger.warning("Hacker News item %s failed: %s", item_id, result)
            elif isinstance(result, dict):
                items.append(result)
        return self.parse(items)

    def parse(self, items: List[Dict[str, Any]]) -> List[TrendRecord]:
        return self.collect(self._item_record(item) for item in items)

    def _item_record(self, item: Dict[str, Any]):
        score = item.get("score")
        return self.make_record(
            item.get("title"),
            traffic=f"{score} pts" if score is not None else "",
            url=item.get("url") or self.ITEM_PAGE.format(id=item.get("id")),
            strip_prefix=True,
        )
