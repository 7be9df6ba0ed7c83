from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from trendpages.models.trend import RunSlot, TrendRecord
from trendpages.publishers.base import BasePublisher
from trendpages.render.archive import build_archive_index, render_api_index
from trendpages.render.json_doc import build_json_document, render_json

logger = logging.getLogger(__name__)


class JsonApiPublisher(BasePublisher):
    name = "json"

    @property
    def api_dir(self) -> Path:
        return self.output_dir / "api"

    async def publish(self, records: Sequence[TrendRecord], slot: RunSlot) -> List[Path]:
        document_path = self._write(
            self.api_dir / f"{slot.timestamp}.json",
            render_json(build_json_document(records[: self.max_items], slot)),
        )
        logger.info("Wrote JSON document %s", document_path)

        index = build_archive_index(self._listing(self.api_dir), self.cutoff_days, suffix=".json")
        index_path = self._write(self.api_dir / "index.json", render_api_index(index))
        logger.info("Updated API index %s (%d endpoints)", index_path, len(index))
        return [document_path, index_path]
