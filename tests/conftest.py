import json

import httpx
import pytest

from trendpages.models.trend import TrendRecord

GOOGLE_RSS = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:atom="http://www.w3.org/2005/Atom" xmlns:ht="https://trends.google.com/trending/rss" version="2.0">
  <channel>
    <title>Daily Search Trends</title>
    <link>https://trends.google.com/trending?geo=US</link>
    <item>
      <title>Solar Eclipse</title>
      <ht:approx_traffic>500+</ht:approx_traffic>
      <link>https://trends.google.com/trending/rss?geo=US</link>
      <ht:news_item>
        <ht:news_item_title>Eclipse viewing guide</ht:news_item_title>
        <ht:news_item_url>https://example.com/eclipse</ht:news_item_url>
      </ht:news_item>
    </item>
    <item>
      <title>NBA Finals</title>
      <ht:approx_traffic>200+</ht:approx_traffic>
      <link>https://trends.google.com/trending/rss?geo=US</link>
    </item>
  </channel>
</rss>
"""

X_TRENDS_HTML = """
<html><body>
  <div class="trend-card">
    <ol class="trend-card__list">
      <li><a href="/x/1">#SuperBowl</a></li>
      <li><a href="/x/2">Taylor Swift</a></li>
      <li><a href="/x/3">Trending</a></li>
      <li><a href="/x/4">#SuperBowl</a></li>
    </ol>
  </div>
</body></html>
"""

TIKTOK_HTML = """
<html><script id="__NEXT_DATA__">
{"props":{"list":[{"hashtag_name":"booktok","rank":1},{"hashtag_name":"fyp","rank":2},{"hashtag_name":"caf\\u00e9","rank":3}]}}
</script></html>
"""

GITHUB_HTML = """
<html><body>
  <article class="Box-row">
    <h2 class="h3 lh-condensed"><a href="/octo/rocket">octo /
      rocket</a></h2>
    <span class="d-inline-block float-sm-right">1,234 stars today</span>
  </article>
  <article class="Box-row">
    <h2><a href="/acme/widgets">acme / widgets</a></h2>
  </article>
</body></html>
"""

REALTIME_JSON = ")]}'\n" + json.dumps(
    {
        "storySummaries": {
            "trendingStories": [
                {
                    "title": "Mars Rover, NASA",
                    "entityNames": ["Mars Rover", "NASA"],
                    "shareUrl": "https://trends.google.com/story/1",
                    "articles": [{"url": "https://example.com/mars"}],
                },
                {"title": "Stock Market, Dow", "entityNames": [], "articles": [{"url": "https://example.com/dow"}]},
            ]
        }
    }
)


def reddit_listing(*posts):
    return {"data": {"children": [{"kind": "t3", "data": post} for post in posts]}}


WIKI_TOP = {
    "items": [
        {
            "project": "en.wikipedia",
            "articles": [
                {"article": "Main_Page", "views": 5000000, "rank": 1},
                {"article": "Special:Search", "views": 900000, "rank": 2},
                {"article": "Taylor_Swift", "views": 1234567, "rank": 3},
                {"article": "Solar_eclipse", "views": 45000, "rank": 4},
            ],
        }
    ]
}


def make_transport(routes):
    """Build a MockTransport from ``{"host/path-prefix": response-or-callable}``.

    The longest matching prefix wins; unmatched requests get a 404.
    """
    keys = sorted(routes, key=len, reverse=True)

    def handler(request: httpx.Request) -> httpx.Response:
        target = f"{request.url.host}{request.url.path}"
        for key in keys:
            if target.startswith(key):
                value = routes[key]
                return value(request) if callable(value) else value
        return httpx.Response(404, text="not found")

    return httpx.MockTransport(handler)


@pytest.fixture
def records():
    return [
        TrendRecord(keyword="Foo Bar", traffic="500+", source="A"),
        TrendRecord(keyword="foo-bar!", traffic="", source="B"),
        TrendRecord(keyword="Baz", traffic="12 pts", source="C", url="https://example.com/baz"),
    ]
