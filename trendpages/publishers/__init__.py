from __future__ import annotations

from typing import Any, Dict, List

from trendpages.publishers.base import BasePublisher
from trendpages.publishers.html_publisher import HtmlPagePublisher
from trendpages.publishers.json_publisher import JsonApiPublisher

PUBLISHER_REGISTRY = {
    "html": HtmlPagePublisher,
    "json": JsonApiPublisher,
}


def build_publishers(output_config: Dict[str, Any], site: Dict[str, Any] | None = None) -> List[BasePublisher]:
    formats = (output_config or {}).get("formats") or ["html"]
    publishers: List[BasePublisher] = []
    for fmt in formats:
        publisher_cls = PUBLISHER_REGISTRY.get(str(fmt).lower())
        if not publisher_cls:
            raise ValueError(f"Unsupported output format: {fmt}")
        publishers.append(publisher_cls(output_config, site))
    return publishers


__all__ = ["PUBLISHER_REGISTRY", "build_publishers", "BasePublisher", "HtmlPagePublisher", "JsonApiPublisher"]
