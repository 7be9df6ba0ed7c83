import re

_NUMBER = re.compile(r"(\d+(?:\.\d+)?)\s*([kmb]\b)?", re.IGNORECASE)
_MULTIPLIERS = {"k": 1_000, "m": 1_000_000, "b": 1_000_000_000}


def parse_traffic(label: str) -> int:
    """Convert a traffic label (e.g. '1.2K views', '200+', '345 pts') to an integer.

    Labels without a number ('Rising', emoji badges) count as 0.
    """
    if not label:
        return 0
    match = _NUMBER.search(str(label).replace(",", ""))
    if not match:
        return 0
    try:
        value = float(match.group(1))
    except ValueError:
        return 0
    suffix = (match.group(2) or "").lower()
    return int(round(value * _MULTIPLIERS.get(suffix, 1)))


def format_count(value: int) -> str:
    """Abbreviate a count for display: 1234567 -> '1.2M', 4321 -> '4.3K'."""
    try:
        value = int(value)
    except (TypeError, ValueError):
        return ""
    for suffix, size in (("B", 1_000_000_000), ("M", 1_000_000), ("K", 1_000)):
        if abs(value) >= size:
            return f"{value / size:.1f}".rstrip("0").rstrip(".") + suffix
    return str(value)
