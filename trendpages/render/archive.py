"""
Archive index built purely from the output directory listing.

Filenames look like ``2024-05-01.html`` (daily buckets) or
``2024-05-01-08.html`` (bucket starting 08:00 UTC). Anything else, including
the index files themselves, is ignored. Entries older than ``cutoff_days``
relative to the newest entry are moved to the ``older`` section, so the same
listing always yields the same index.
"""

from __future__ import annotations

import json
import re
from datetime import date
from typing import Any, Dict, Iterable, Optional

from trendpages.models.trend import ArchiveEntry, ArchiveIndex
from trendpages.render.environment import get_environment

INDEX_FILES = {"index.html", "index.json"}
_ENTRY_NAME = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})(?:-(?P<slot>\d{2}))?\.(?P<ext>html|json)$")


def parse_entry(name: str, suffix: Optional[str] = None) -> Optional[ArchiveEntry]:
    if name in INDEX_FILES:
        return None
    match = _ENTRY_NAME.match(name)
    if not match or (suffix and not name.endswith(suffix)):
        return None
    try:
        date.fromisoformat(match.group("date"))
    except ValueError:
        return None
    timestamp = name.rsplit(".", 1)[0]
    return ArchiveEntry(name=name, timestamp=timestamp, date=match.group("date"))


def build_archive_index(
    filenames: Iterable[str],
    cutoff_days: int = 14,
    suffix: Optional[str] = ".html",
) -> ArchiveIndex:
    entries = {}
    for name in filenames:
        entry = parse_entry(name, suffix)
        if entry:
            entries[entry.name] = entry

    ordered = sorted(entries.values(), key=lambda e: (e.timestamp, e.name), reverse=True)
    index = ArchiveIndex()
    if not ordered:
        return index

    newest = date.fromisoformat(ordered[0].date)
    for entry in ordered:
        age = (newest - date.fromisoformat(entry.date)).days
        if age > cutoff_days:
            index.older.append(entry)
        else:
            index.recent.append(entry)
    return index


def _label(entry: ArchiveEntry) -> str:
    if entry.timestamp == entry.date:
        return entry.date
    return f"{entry.date} {entry.timestamp[len(entry.date) + 1:]}:00"


def render_archive_html(
    index: ArchiveIndex,
    site: Optional[Dict[str, Any]] = None,
    cutoff_days: int = 14,
) -> str:
    site = site or {}
    template = get_environment().get_template("archive.html")
    return template.render(
        heading=site.get("archive_title", "TRENDS ARCHIVE"),
        recent=[{"name": e.name, "label": _label(e)} for e in index.recent],
        older=[{"name": e.name, "label": _label(e)} for e in index.older],
        cutoff_days=cutoff_days,
        home_url=site.get("home_url", "../"),
    )


def build_api_index(index: ArchiveIndex) -> Dict[str, Any]:
    entries = index.recent + index.older
    return {
        "latest": index.latest.name if index.latest else None,
        "count": len(entries),
        "endpoints": [
            {
                "timestamp": entry.timestamp,
                "date": entry.date,
                "path": entry.name,
                "archived": entry in index.older,
            }
            for entry in entries
        ],
    }


def render_api_index(index: ArchiveIndex) -> str:
    return json.dumps(build_api_index(index), ensure_ascii=False, indent=2) + "\n"
