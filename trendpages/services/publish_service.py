from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from trendpages.models.trend import RunSlot, TrendRecord
from trendpages.publishers.base import BasePublisher

logger = logging.getLogger(__name__)


class PublishService:
    """Hands the final trend list to every configured publisher."""

    def __init__(self, publishers: List[BasePublisher]) -> None:
        self.publishers = publishers

    async def publish(self, records: Sequence[TrendRecord], slot: RunSlot) -> List[Path]:
        written: List[Path] = []
        for publisher in self.publishers:
            written.extend(await publisher.publish(records, slot))
        logger.info("Published %d trends for %s to %d files", len(records), slot.timestamp, len(written))
        return written
