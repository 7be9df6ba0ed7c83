from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


@dataclass(slots=True, frozen=True)
class TrendRecord:
    """Normalized trend as produced by a connector, shared by every later stage."""

    keyword: str
    traffic: str
    source: str
    url: Optional[str] = None
    type: str = "daily"
    score: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "keyword": self.keyword,
            "traffic": self.traffic,
            "source": self.source,
        }
        if self.url:
            data["url"] = self.url
        if self.score is not None:
            data["score"] = self.score
        return data


@dataclass(slots=True, frozen=True)
class RunSlot:
    """Time bucket a run writes into."""

    date: str
    slot: Optional[str]
    timestamp: str
    generated: datetime

    @classmethod
    def for_time(cls, now: datetime | None = None, bucket_hours: int = 4) -> "RunSlot":
        if bucket_hours <= 0 or 24 % bucket_hours:
            raise ValueError(f"bucket_hours must divide 24, got {bucket_hours}")
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        now = now.astimezone(timezone.utc)

        date = now.strftime("%Y-%m-%d")
        if bucket_hours == 24:
            return cls(date=date, slot=None, timestamp=date, generated=now)

        slot = f"{(now.hour // bucket_hours) * bucket_hours:02d}"
        return cls(date=date, slot=slot, timestamp=f"{date}-{slot}", generated=now)


@dataclass(slots=True, frozen=True)
class ArchiveEntry:
    name: str
    timestamp: str
    date: str


@dataclass(slots=True)
class ArchiveIndex:
    recent: List[ArchiveEntry] = field(default_factory=list)
    older: List[ArchiveEntry] = field(default_factory=list)

    @property
    def latest(self) -> Optional[ArchiveEntry]:
        return self.recent[0] if self.recent else None

    def __len__(self) -> int:
        return len(self.recent) + len(self.older)
