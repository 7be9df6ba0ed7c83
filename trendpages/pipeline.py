from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from trendpages.connectors import build_fallback_connector, load_connectors
from trendpages.models.trend import RunSlot, TrendRecord
from trendpages.publishers import build_publishers
from trendpages.services.publish_service import PublishService
from trendpages.services.rising_score_service import RisingScoreService
from trendpages.services.trend_discovery_service import TrendDiscoveryService
from trendpages.services.trend_merge_service import TrendMergeService
from trendpages.settings import load_config

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PipelineResult:
    slot: RunSlot
    records: List[TrendRecord]
    written: List[Path] = field(default_factory=list)
    used_fallback: bool = False


class TrendPipeline:
    """Co-ordinates one fetch, merge, score and publish run."""

    def __init__(
        self,
        config: Dict[str, Any],
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config
        self.connectors = load_connectors(self.config.get("connectors") or {}, self.config.get("http") or {}, transport)
        self.discovery = TrendDiscoveryService(self.connectors)
        output_cfg = self.config.get("output") or {}
        self.merger = TrendMergeService(max_results=output_cfg.get("max_results"))

        fallback_cfg = self.config.get("fallback") or {}
        self.fallback = build_fallback_connector(fallback_cfg)
        self.min_results = int(fallback_cfg.get("min_results", 5))

        scoring_cfg = self.config.get("scoring") or {}
        self.scoring = RisingScoreService() if scoring_cfg.get("enabled", False) else None

        self.bucket_hours = int(output_cfg.get("bucket_hours", 4))
        self.publish_service = PublishService(build_publishers(output_cfg, self.config.get("site") or {}))

    async def run(self, now: Optional[datetime] = None) -> PipelineResult:
        slot = RunSlot.for_time(now, self.bucket_hours)
        logger.info("Generating trends for %s", slot.timestamp)

        per_source = await self.discovery.discover()
        records = self.merger.merge(per_source)

        used_fallback = False
        if len(records) < self.min_results:
            logger.warning(
                "Only %d trends from live sources (minimum %d), adding curated keywords",
                len(records),
                self.min_results,
            )
            records = self.merger.merge([await self.fallback.fetch()], seed=records)
            used_fallback = True
        if not records:
            logger.warning("No trends found from any source, publishing an empty page")

        if self.scoring:
            records = self.scoring.rank(records)

        written = await self.publish_service.publish(records, slot)
        return PipelineResult(slot=slot, records=records, written=written, used_fallback=used_fallback)


def run_sync(config_path: str | None = None, now: Optional[datetime] = None) -> PipelineResult:
    pipeline = TrendPipeline(load_config(config_path))
    return asyncio.run(pipeline.run(now))
