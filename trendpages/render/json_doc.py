from __future__ import annotations

import json
from typing import Any, Dict, Sequence

from trendpages.models.trend import RunSlot, TrendRecord


def build_json_document(records: Sequence[TrendRecord], slot: RunSlot) -> Dict[str, Any]:
    return {
        "timestamp": slot.timestamp,
        "date": slot.date,
        "slot": slot.slot,
        "generated": slot.generated.isoformat(),
        "count": len(records),
        "sources": list(dict.fromkeys(record.source for record in records)),
        "trends": [record.to_dict() for record in records],
    }


def render_json(document: Dict[str, Any]) -> str:
    return json.dumps(document, ensure_ascii=False, indent=2) + "\n"
