"""
Demo script: render the dashboard charts via the public API.

Usage:
    uv run python scripts/render_dashboard.py                      # render outputs/dashboard.yaml
    uv run python scripts/render_dashboard.py --init               # (re)write the default config first
    uv run python scripts/render_dashboard.py --init --base https://example.com/data/
    uv run python scripts/render_dashboard.py path/to/dashboard.yaml

With --init (or when the config does not exist yet), the stock five-chart
config is generated pointing at --base (default: inputs/). Every chart is
then fetched, parsed and rendered concurrently; a chart that fails is
reported and the rest still render.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_CONFIG = "outputs/dashboard.yaml"
DEFAULT_BASE = "inputs"
OUTPUT_DIR = "outputs/charts"

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("render_dashboard")


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render CSV datasets as charts.")
    parser.add_argument("config", nargs="?", default=DEFAULT_CONFIG, help="dashboard.yaml path")
    parser.add_argument("--base", default=DEFAULT_BASE, help="directory or URL holding the CSVs")
    parser.add_argument("--init", action="store_true", help="write the default config first")
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    import csv_dashboard

    args = _parse_args(sys.argv[1:] if argv is None else argv)

    if args.init or not Path(args.config).exists():
        log.info("Writing default config to %s (base=%s)", args.config, args.base)
        outcomes = csv_dashboard.init(
            config_path=args.config,
            base=args.base,
            output_dir=OUTPUT_DIR,
        )
    else:
        outcomes = csv_dashboard.render(args.config)

    log.info("=" * 70)
    for outcome in outcomes:
        if outcome.ok:
            log.info("  %-24s %s (%d records)", outcome.name, outcome.image_path, outcome.records)
        else:
            log.warning("  %-24s %s  %s", outcome.name, outcome.status.upper(), outcome.error or "")
    log.info("=" * 70)

    failed = [o for o in outcomes if not o.ok]
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
