from __future__ import annotations

import asyncio
import logging
from typing import List

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord

logger = logging.getLogger(__name__)


class TrendDiscoveryService:
    def __init__(self, connectors: List[BaseConnector]) -> None:
        self.connectors = connectors

    async def discover(self) -> List[List[TrendRecord]]:
        """Run every connector at once and return their results in priority order."""
        tasks = [connector.fetch() for connector in self.connectors]
        results = await asyncio.gather(*tasks, return_exceptions=True)

        per_source: List[List[TrendRecord]] = []
        for connector, result in zip(self.connectors, results, strict=False):
            if isinstance(result, BaseException):
                logger.warning("Connector %s returned error: %s", connector.name, result)
                per_source.append([])
                continue
            per_source.append(result)

        total = sum(len(records) for records in per_source)
        logger.info("Discovery finished: %d trends from %d connectors", total, len(self.connectors))
        return per_source
