# app/db/engine.py

from functools import lru_cache

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

from app.config import settings


@lru_cache
def get_engine() -> Engine:
    # One engine (and connection pool) per process; pool sizing is left to
    # SQLAlchemy's defaults.
    return create_engine(settings.database_url, future=True, pool_pre_ping=True)


def ping(engine: Engine) -> None:
    """
    Run a trivial query; raises SQLAlchemyError when the database is unreachable.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1")).scalar_one()
