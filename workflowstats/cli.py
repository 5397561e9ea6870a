"""Report how many workflow runs are stored."""

from __future__ import annotations

import argparse
import logging
import os

from sqlalchemy.engine import Connection

from workflowstats.db import connect, read

log = logging.getLogger(__name__)


def count_runs(conn: Connection) -> int:
    """Return the number of stored workflow runs."""
    return len(read(conn))


def main(argv: list[str] | None = None) -> int:
    """Connect, ensure the schema and log the number of workflow runs."""
    parser = argparse.ArgumentParser(
        prog="workflowstats", description="Count stored workflow runs."
    )
    parser.add_argument("--database-url", default=os.environ.get("DATABASE_URL"))
    args = parser.parse_args(argv)
    if not args.database_url:
        parser.error("DATABASE_URL is not set")

    logging.basicConfig(level=logging.INFO)
    engine = connect(args.database_url)
    try:
        with engine.connect() as conn:
            log.info("%d", count_runs(conn))
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())