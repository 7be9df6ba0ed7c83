from __future__ import annotations

import dataclasses
import logging
from typing import List, Sequence

from trendpages.models.trend import TrendRecord
from trendpages.utils.text import word_count
from trendpages.utils.traffic import parse_traffic

logger = logging.getLogger(__name__)

BASE_SCORE = 50
TYPE_BONUS = {"realtime": 20, "emerging": 30}
# (minimum traffic, bonus), highest threshold first
TRAFFIC_BONUS = ((500, 20), (100, 10))
PHRASE_BONUS = 15
PHRASE_WORDS = (2, 4)
MAX_SCORE = 100


class RisingScoreService:
    """Heuristic 'rising keyword' score used to reorder trends for display."""

    def score(self, record: TrendRecord) -> int:
        value = BASE_SCORE + TYPE_BONUS.get(record.type, 0)

        traffic = parse_traffic(record.traffic)
        for threshold, bonus in TRAFFIC_BONUS:
            if traffic >= threshold:
                value += bonus
                break

        if PHRASE_WORDS[0] <= word_count(record.keyword) <= PHRASE_WORDS[1]:
            value += PHRASE_BONUS

        return min(value, MAX_SCORE)

    def rank(self, records: Sequence[TrendRecord]) -> List[TrendRecord]:
        scored = [dataclasses.replace(record, score=self.score(record)) for record in records]
        # sorted() is stable, so ties keep merge order
        scored = sorted(scored, key=lambda record: record.score, reverse=True)
        logger.info("RisingScoreService scored %d trends", len(scored))
        return scored
