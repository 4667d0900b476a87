"""
Demo script: load one or more resources via the public API and log a summary.

Usage:
    uv run python scripts/run_load.py URL_OR_PATH [URL_OR_PATH ...]
    uv run python scripts/run_load.py --config loader.yaml data/chart.atsv

Each locator is loaded concurrently; a one-line summary is logged per
result (record count, plus metadata keys for annotated documents).
"""

from __future__ import annotations

import logging
import sys

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_load")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _describe(result: object) -> str:
    """One-line description of a parsed result."""
    from load_data import AnnotatedDocument

    if isinstance(result, AnnotatedDocument):
        return f"{len(result.data)} records, meta keys {sorted(result.meta)}"
    if isinstance(result, list):
        return f"{len(result)} items"
    return type(result).__name__


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import load_data

    args = sys.argv[1:]
    config = None
    if "--config" in args:
        idx = args.index("--config")
        config = args[idx + 1]
        del args[idx:idx + 2]

    if not args:
        log.error("Usage: run_load.py [--config FILE] URL_OR_PATH [URL_OR_PATH ...]")
        sys.exit(2)

    results = load_data.load_sync(args, config=config)
    if len(args) == 1:
        results = [results]

    for locator, result in zip(args, results):
        log.info("%s: %s", locator, _describe(result))

    log.info("All resources loaded.")


if __name__ == "__main__":
    main()
