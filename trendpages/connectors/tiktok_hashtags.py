from __future__ import annotations

import json
import re
from typing import List
from urllib.parse import unquote, urlsplit

from bs4 import BeautifulSoup

from trendpages.connectors.base import BaseConnector
from trendpages.models.trend import TrendRecord

_HASHTAG_NAME = re.compile(r'"hashtag_name"\s*:\s*"((?:[^"\\]|\\.)+)"')


class TikTokHashtagsConnector(BaseConnector):
    """Extracts popular hashtags from the TikTok creative center page.

    The page ships its data as embedded JSON, so a regex over the raw text is
    enough; tag anchors are used when the embedded payload is missing.
    """

    name = "tiktok_hashtags"
    source = "TikTok"
    trend_type = "emerging"
    default_limit = 15
    HASHTAG_URL = "https://ads.tiktok.com/business/creativecenter/inspiration/popular/hashtag/pc/en"
    TRAFFIC_LABEL = "📈"

    async def _fetch_impl(self) -> List[TrendRecord]:
        async with self._client() as client:
            html = await self._get_text(client, self.config.get("url", self.HASHTAG_URL))
        return self.parse(html)

    def parse(self, html: str) -> List[TrendRecord]:
        names = [self._unescape(raw) for raw in _HASHTAG_NAME.findall(html)]
        if not names:
            names = self._tag_links(html)

        tags: List[str] = []
        for name in names:
            tag = "#" + name.strip().lstrip("#")
            if len(tag) > 1 and tag not in tags:
                tags.append(tag)

        return self.collect(self.make_record(tag, self.TRAFFIC_LABEL) for tag in tags)

    @staticmethod
    def _tag_links(html: str) -> List[str]:
        soup = BeautifulSoup(html, "html.parser")
        names: List[str] = []
        for link in soup.select('a[href*="/tag/"]'):
            path = urlsplit(link.get("href", "")).path
            segment = path.split("/tag/", 1)[-1].split("/", 1)[0]
            if segment:
                names.append(unquote(segment))
        return names

    @staticmethod
    def _unescape(raw: str) -> str:
        try:
            return json.loads(f'"{raw}"')
        except ValueError:
            return raw
