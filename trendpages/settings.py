import os
from pathlib import Path
from typing import Any, Dict

import yaml

from trendpages.publishers import PUBLISHER_REGISTRY

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "config" / "trendpages.yaml"
CONFIG_ENV_VAR = "TRENDPAGES_CONFIG"
SECTIONS = ("http", "connectors", "fallback", "scoring", "output", "site")


class ConfigError(ValueError):
    pass


def load_config(path: str | os.PathLike[str] | None = None) -> Dict[str, Any]:
    config_path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)
    if not config_path.exists():
        raise ConfigError(f"Trendpages config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigError("Trendpages config must be a mapping")

    # an empty "output:" line loads as None
    for section in SECTIONS:
        if section in data and data[section] is None:
            data[section] = {}
        if not isinstance(data.get(section, {}), dict):
            raise ConfigError(f"'{section}' must be a mapping")

    output = data.get("output", {})
    bucket_hours = output.get("bucket_hours", 4)
    if not isinstance(bucket_hours, int) or bucket_hours <= 0 or 24 % bucket_hours:
        raise ConfigError(f"output.bucket_hours must divide 24, got {bucket_hours!r}")

    for fmt in output.get("formats") or []:
        if str(fmt).lower() not in PUBLISHER_REGISTRY:
            raise ConfigError(f"Unsupported output format: {fmt}")

    return data
