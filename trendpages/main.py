import argparse
import asyncio
import logging
import os
import sys
import time

from trendpages.pipeline import TrendPipeline
from trendpages.settings import ConfigError, load_config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(log_dir=None, level=logging.INFO):
    root = logging.getLogger()
    root.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(console_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(os.path.join(log_dir, "pipeline.log"), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(file_handler)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fetch trending keywords and publish static trend pages")
    parser.add_argument("--config", help="Path to a trendpages YAML config (defaults to the bundled one)")
    parser.add_argument("--output-dir", help="Override output.dir from the config")
    parser.add_argument("--log-dir", default=os.environ.get("TRENDPAGES_LOG_DIR"), help="Also write pipeline.log here")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_dir)

    try:
        config = load_config(args.config)
    except ConfigError as err:
        logging.error("Invalid configuration: %s", err)
        return 2

    if args.output_dir:
        config.setdefault("output", {})["dir"] = args.output_dir

    logging.info("========== TRENDPAGES START ==========")
    start = time.time()

    result = asyncio.run(TrendPipeline(config).run())

    duration = round(time.time() - start, 2)
    logging.info(
        "Published %d trends for %s in %ss (fallback=%s)",
        len(result.records),
        result.slot.timestamp,
        duration,
        result.used_fallback,
    )
    logging.info("========== TRENDPAGES END ==========")
    return 0


if __name__ == "__main__":
    sys.exit(main())
