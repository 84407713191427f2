"""Create (or drop and recreate) the Tech News tables."""
from __future__ import annotations

import argparse
import logging

from tech_news.db.session import create_tables, drop_tables, engine

logger = logging.getLogger(__name__)


def init_db(*, force: bool = False) -> None:
    """Initialize the database by creating all tables.

    With ``force`` every table is dropped first, discarding all data.
    """
    if force:
        drop_tables()
        logger.warning("Dropped all tables on %s", engine.url.render_as_string(hide_password=True))
    create_tables()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--force",
        action="store_true",
        help="drop existing tables before creating them",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    init_db(force=args.force)
    print("Database initialized.")


if __name__ == "__main__":
    main()
