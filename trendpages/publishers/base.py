from __future__ import annotations

import abc
from pathlib import Path
from typing import Any, Dict, List, Sequence

from trendpages.models.trend import RunSlot, TrendRecord


class BasePublisher(abc.ABC):
    """Abstract publisher that writes one output format for a run."""

    name: str = "base"

    def __init__(self, config: Dict[str, Any] | None = None, site: Dict[str, Any] | None = None) -> None:
        self.config = config or {}
        self.site = site or {}
        self.output_dir = Path(self.config.get("dir", "trends"))
        self.cutoff_days: int = int(self.config.get("archive_cutoff_days", 14))
        self.max_items: int = int(self.config.get("max_items", 25))

    @abc.abstractmethod
    async def publish(self, records: Sequence[TrendRecord], slot: RunSlot) -> List[Path]:
        raise NotImplementedError

    @staticmethod
    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    @staticmethod
    def _listing(directory: Path) -> List[str]:
        return sorted(child.name for child in directory.iterdir() if child.is_file())
