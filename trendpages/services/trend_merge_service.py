from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Set

from trendpages.models.trend import TrendRecord
from trendpages.utils.text import normalize_key

logger = logging.getLogger(__name__)


class TrendMergeService:
    """Merges per-source results into one deduplicated list.

    Sources are walked in priority order and items in fetch order; the first
    record for a normalized keyword wins and later ones are dropped.
    """

    def __init__(self, min_key_length: int = 2, max_results: Optional[int] = None) -> None:
        self.min_key_length = min_key_length
        self.max_results = max_results

    def merge(
        self,
        sources: Iterable[Sequence[TrendRecord]],
        seed: Optional[Sequence[TrendRecord]] = None,
    ) -> List[TrendRecord]:
        merged: List[TrendRecord] = list(seed or [])
        seen: Set[str] = {normalize_key(record.keyword) for record in merged}
        received = dropped = 0

        for records in sources:
            for record in records:
                received += 1
                key = normalize_key(record.keyword)
                if len(key) < self.min_key_length or key in seen:
                    dropped += 1
                    continue
                seen.add(key)
                merged.append(record)

        if self.max_results is not None:
            merged = merged[: self.max_results]
        logger.info("Merge kept %d trends, dropped %d of %d", len(merged), dropped, received)
        return merged
