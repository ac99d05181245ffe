# scripts/init_db.py
"""
Drop and recreate the wiki schema. Development only: existing rows are lost.
"""

import logging

from app.db.engine import get_engine
from app.db.schema import metadata
from app.log_config import configure_logging

logger = logging.getLogger(__name__)


def init_schema(engine=None) -> None:
    engine = engine or get_engine()
    metadata.drop_all(engine)
    metadata.create_all(engine)
    logger.info("Created tables: %s", ", ".join(sorted(metadata.tables)))


def main():
    configure_logging()
    init_schema()


if __name__ == "__main__":
    main()
