from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from trendpages.connectors.base import BaseConnector, ConnectorError
from trendpages.connectors.curated import CuratedConnector
from trendpages.connectors.github_trending import GitHubTrendingConnector
from trendpages.connectors.google_trends import GoogleRealtimeTrendsConnector, GoogleTrendsConnector
from trendpages.connectors.hacker_news import HackerNewsConnector
from trendpages.connectors.reddit import RedditConnector
from trendpages.connectors.tiktok_hashtags import TikTokHashtagsConnector
from trendpages.connectors.wikipedia import WikipediaConnector
from trendpages.connectors.x_trends import XTrendsConnector

logger = logging.getLogger(__name__)

CONNECTOR_REGISTRY = {
    "x_trends": XTrendsConnector,
    "tiktok_hashtags": TikTokHashtagsConnector,
    "google_trends": GoogleTrendsConnector,
    "google_trends_realtime": GoogleRealtimeTrendsConnector,
    "reddit": RedditConnector,
    "hacker_news": HackerNewsConnector,
    "wikipedia": WikipediaConnector,
    "github_trending": GitHubTrendingConnector,
    "curated": CuratedConnector,
}


def load_connectors(
    connector_config: Dict[str, Dict],
    http_config: Optional[Dict[str, Any]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> List[BaseConnector]:
    """Instantiate connectors in mapping order, which is the merge priority order."""
    connectors: List[BaseConnector] = []
    for name, params in connector_config.items():
        connector_cls = CONNECTOR_REGISTRY.get(name)
        if not connector_cls:
            logger.warning("Unknown connector %s in config, skipping", name)
            continue
        connector = connector_cls(params or {}, http_config, transport)
        connectors.append(connector)
    return connectors


def build_fallback_connector(fallback_config: Optional[Dict[str, Any]]) -> CuratedConnector:
    return CuratedConnector(fallback_config or {})


__all__ = [
    "BaseConnector",
    "ConnectorError",
    "CONNECTOR_REGISTRY",
    "build_fallback_connector",
    "load_connectors",
]
