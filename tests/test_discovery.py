import asyncio

import pytest

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord
from trendpages.services.trend_discovery_service import TrendDiscoveryService


class StaticConnector(BaseConnector):
    name = "static"

    def __init__(self, keywords, delay=0.0):
        super().__init__({})
        self.keywords = keywords
        self.delay = delay

    async def _fetch_impl(self):
        await asyncio.sleep(self.delay)
        return [TrendRecord(keyword=k, traffic="", source=self.name) for k in self.keywords]


class ExplodingConnector(BaseConnector):
    name = "exploding"

    async def fetch(self):
        raise RuntimeError("boom")

    async def _fetch_impl(self):
        return []


@pytest.mark.asyncio
async def test_discover_waits_for_all_and_keeps_connector_order():
    slow = StaticConnector(["Slow"], delay=0.05)
    fast = StaticConnector(["Fast"])
    per_source = await TrendDiscoveryService([slow, fast]).discover()

    assert [[r.keyword for r in records] for records in per_source] == [["Slow"], ["Fast"]]


@pytest.mark.asyncio
async def test_discover_turns_raising_connector_into_empty_list():
    per_source = await TrendDiscoveryService([ExplodingConnector(), StaticConnector(["Kept"])]).discover()

    assert per_source[0] == []
    assert [r.keyword for r in per_source[1]] == ["Kept"]
