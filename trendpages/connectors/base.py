from __future__ import annotations

import abc
import logging
from typing import Any, Dict, Iterable, List, Optional

import httpx

from trendpages.models.trend import TrendRecord
from trendpages.utils.text import clean_keyword, normalize_key

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; TrendBot/1.0)"


class ConnectorError(Exception):
    pass


class BaseConnector(abc.ABC):
    """Abstract connector interface for pluggable trend sources.

    ``fetch`` never raises: any failure inside ``_fetch_impl`` is logged and the
    source contributes no records for the run.
    """

    name: str = "base"
    source: str = "base"
    trend_type: str = "daily"
    default_limit: int = 10

    def __init__(
        self,
        config: Dict[str, Any] | None = None,
        http_config: Dict[str, Any] | None = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or {}
        self.http_config = http_config or {}
        self.transport = transport
        self.enabled: bool = self.config.get("enabled", True)
        self.limit: int = int(self.config.get("limit", self.default_limit))
        self.skip = {normalize_key(term) for term in self.config.get("skip", [])}

    async def fetch(self) -> List[TrendRecord]:
        if not self.enabled:
            logger.info("Connector %s disabled via config", self.name)
            return []
        try:
            records = await self._fetch_impl()
        except Exception as err:  # pylint: disable=broad-except
            logger.warning("Connector %s failed: %s", self.name, err)
            return []
        logger.info("Connector %s produced %d trends", self.name, len(records))
        return records

    @abc.abstractmethod
    async def _fetch_impl(self) -> List[TrendRecord]:
        raise NotImplementedError

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.http_config.get("timeout", DEFAULT_TIMEOUT),
            headers={"User-Agent": self.http_config.get("user_agent", DEFAULT_USER_AGENT)},
            follow_redirects=True,
            transport=self.transport,
        )

    async def _get_text(self, client: httpx.AsyncClient, url: str, **kwargs: Any) -> str:
        resp = await client.get(url, **kwargs)
        resp.raise_for_status()
        return resp.text

    async def _get_json(self, client: httpx.AsyncClient, url: str, **kwargs: Any) -> Any:
        resp = await client.get(url, **kwargs)
        resp.raise_for_status()
        return resp.json()

    def is_skipped(self, keyword: str) -> bool:
        return normalize_key(keyword) in self.skip

    def make_record(
        self,
        keyword: Optional[str],
        traffic: str = "",
        url: Optional[str] = None,
        source: Optional[str] = None,
        max_chars: int = 80,
        strip_prefix: bool = False,
    ) -> Optional[TrendRecord]:
        cleaned = clean_keyword(keyword, max_chars, strip_prefix=strip_prefix)
        if not cleaned or self.is_skipped(cleaned):
            return None
        return TrendRecord(
            keyword=cleaned,
            traffic=traffic or "",
            source=source or self.source,
            url=url or None,
            type=self.trend_type,
        )

    def collect(self, records: Iterable[Optional[TrendRecord]]) -> List[TrendRecord]:
        """Drop skipped items and apply the per-source cap."""
        kept: List[TrendRecord] = []
        for record in records:
            if record is None:
                continue
            kept.append(record)
            if len(kept) >= self.limit:
                break
        return kept
