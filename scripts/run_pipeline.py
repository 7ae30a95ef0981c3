"""
Demo script: run a YAML-declared pipeline over values from the command line.

Usage:
    uv run python scripts/run_pipeline.py pipeline.yaml VALUE [VALUE ...]

The built-in transforms are registered before the pipeline is built, so
any of their names may be used as steps. Each input and its result are
logged.

Example pipeline.yaml::

    name: yes-no
    steps:
      - to_string
      - to_boolean
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
log = logging.getLogger("run_pipeline")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import transproc.transforms  # noqa: F401  (registers built-ins)
    from transproc.config import load_pipeline

    if len(sys.argv) < 3:
        log.error("usage: run_pipeline.py PIPELINE.yaml VALUE [VALUE ...]")
        return 2

    config_path, values = sys.argv[1], sys.argv[2:]
    pipeline = load_pipeline(config_path)

    failures = 0
    for value in values:
        try:
            result = pipeline(value)
        except Exception as e:
            log.warning("%r -> failed: %s", value, e)
            failures += 1
            continue
        log.info("%r -> %r", value, result)

    log.info("Processed %d value(s), %d failed", len(values), failures)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
