# tests/conftest.py

import os
import tempfile
from datetime import datetime, timedelta, timezone

# Settings are read on first import of app.config, so the test database
# has to be configured before anything from app is imported.
_DB_DIR = tempfile.mkdtemp(prefix="hayam-wiki-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_DB_DIR, "test.sqlite")
os.environ["DOMAIN"] = "test.hayamwiki.org"
os.environ["VERSION"] = "1.0.0"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from app.db.engine import get_engine
from app.db.schema import categories, metadata, pages
from app.main import app

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    eng = get_engine()
    metadata.drop_all(eng)
    metadata.create_all(eng)
    yield eng


@pytest.fixture
def client(engine):
    return TestClient(app)


@pytest.fixture
def broken_engine(tmp_path):
    """An engine whose database file lives in a directory that doesn't exist."""
    return create_engine(f"sqlite:///{tmp_path / 'missing' / 'db.sqlite'}", future=True)


def page_row(n: int, status: str = "published", **overrides) -> dict:
    row = {
        "title": f"Page {n}",
        "slug": f"page-{n}",
        "summary": f"Summary of page {n}",
        "status": status,
        "view_count": n,
        "created_at": BASE_TIME + timedelta(hours=n),
    }
    row.update(overrides)
    return row


@pytest.fixture
def insert_pages(engine):
    def _insert(rows):
        with engine.begin() as conn:
            conn.execute(pages.insert(), rows)
    return _insert


@pytest.fixture
def insert_categories(engine):
    def _insert(rows):
        with engine.begin() as conn:
            conn.execute(categories.insert(), rows)
    return _insert
