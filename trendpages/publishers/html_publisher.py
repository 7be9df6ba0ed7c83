from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from trendpages.models.trend import RunSlot, TrendRecord
from trendpages.publishers.base import BasePublisher
from trendpages.render.archive import build_archive_index, render_archive_html
from trendpages.render.html import render_html

logger = logging.getLogger(__name__)


class HtmlPagePublisher(BasePublisher):
    name = "html"

    async def publish(self, records: Sequence[TrendRecord], slot: RunSlot) -> List[Path]:
        page = self.output_dir / f"{slot.timestamp}.html"
        html = render_html(records, slot, self.site, max_items=self.max_items)
        self._write(page, html)
        logger.info("Wrote trend page %s", page)

        index = build_archive_index(self._listing(self.output_dir), self.cutoff_days, suffix=".html")
        index_path = self._write(
            self.output_dir / "index.html",
            render_archive_html(index, self.site, self.cutoff_days),
        )
        logger.info("Updated archive index %s (%d pages)", index_path, len(index))
        return [page, index_path]
