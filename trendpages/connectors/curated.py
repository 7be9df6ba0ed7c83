from __future__ import annotations

from typing import List

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord


class CuratedConnector(BaseConnector):
    """Hardcoded keyword list used as the fallback when live sources come back thin."""

    name = "curated"
    source = "Curated"
    TRAFFIC_LABEL = "📌"

    def __init__(self, config=None, http_config=None, transport=None) -> None:
        super().__init__(config, http_config, transport)
        self.keywords: List[str] = list(self.config.get("keywords", []))
        self.limit = int(self.config.get("limit", len(self.keywords) or 1))

    async def _fetch_impl(self) -> List[TrendRecord]:
        return self.parse(self.keywords)

    def parse(self, keywords: List[str]) -> List[TrendRecord]:
        return self.collect(self.make_record(keyword, self.TRAFFIC_LABEL) for keyword in keywords)
