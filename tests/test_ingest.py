# tests/test_ingest.py

from datetime import datetime, timezone

import pytest
from sqlalchemy import select

from app.db.schema import categories, pages
from scripts.ingest import (
    load_into_db,
    parse_categories_csv,
    parse_pages_csv,
    parse_slug,
    parse_status,
    parse_timestamp,
)

PAGES_CSV = """title,slug,summary,status,view_count,created_at
Welcome,welcome,Hello,published,3,2024-01-05T09:00:00+00:00
Draft,draft-one,,draft,,2024-01-06T09:00:00
Bad Slug,Bad Slug!,x,published,1,2024-01-07T09:00:00+00:00
Bad Status,bad-status,x,archived,1,2024-01-07T09:00:00+00:00
Welcome again,welcome,Hello again,published,4,2024-01-08T09:00:00+00:00
"""

CATEGORIES_CSV = """name,slug,description
History,history,The past
Science,science,
"""


@pytest.fixture
def csv_files(tmp_path):
    pages_path = tmp_path / "pages.csv"
    categories_path = tmp_path / "categories.csv"
    pages_path.write_text(PAGES_CSV, encoding="utf-8")
    categories_path.write_text(CATEGORIES_CSV, encoding="utf-8")
    return str(pages_path), str(categories_path)


def test_parse_helpers():
    assert parse_slug(" Al-Khwarizmi ") == "al-khwarizmi"
    assert parse_status("") == "draft"
    assert parse_status("Published") == "published"
    assert parse_timestamp("2024-01-06T09:00:00").tzinfo == timezone.utc

    with pytest.raises(ValueError):
        parse_slug("two words")
    with pytest.raises(ValueError):
        parse_status("archived")


def test_parse_pages_counts_errors_and_duplicates(csv_files):
    pages_path, _ = csv_files

    records, stats = parse_pages_csv(pages_path)

    assert stats["n_rows"] == 5
    assert stats["n_errors"] == 2
    assert stats["n_duplicates"] == 1
    assert len(records) == 3

    draft = records[1]
    assert draft["summary"] is None
    assert draft["view_count"] == 0
    assert draft["status"] == "draft"


def test_load_is_idempotent_by_slug(engine, csv_files):
    pages_path, categories_path = csv_files
    page_records, _ = parse_pages_csv(pages_path)
    category_records, _ = parse_categories_csv(categories_path)

    load_into_db(page_records, category_records, engine=engine)
    load_into_db(page_records, category_records, engine=engine)

    with engine.connect() as conn:
        page_rows = conn.execute(select(pages.c.slug, pages.c.summary).order_by(pages.c.slug)).all()
        category_rows = conn.execute(select(categories.c.slug)).all()

    # The later "welcome" row overwrote the earlier one.
    assert [tuple(r) for r in page_rows] == [("draft-one", None), ("welcome", "Hello again")]
    assert len(category_rows) == 2


def test_loaded_pages_are_served(client, csv_files):
    pages_path, categories_path = csv_files
    page_records, _ = parse_pages_csv(pages_path)
    category_records, _ = parse_categories_csv(categories_path)
    load_into_db(page_records, category_records)

    slugs = [p["slug"] for p in client.get("/api/v1/pages").json()]
    assert slugs == ["welcome"]

    created = client.get("/api/v1/pages/welcome").json()["created_at"]
    assert datetime.fromisoformat(created).replace(tzinfo=None) == datetime(2024, 1, 8, 9, 0)
