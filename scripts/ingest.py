# scripts/ingest.py

import csv
import logging
import re
from datetime import datetime, timezone

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from app.db.engine import get_engine
from app.db.schema import PAGE_STATUSES, categories, pages
from app.log_config import configure_logging

logger = logging.getLogger(__name__)

PAGES_PATH = "data/pages.csv"
CATEGORIES_PATH = "data/categories.csv"

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


# ---- Helpers ----

def parse_slug(value: str) -> str:
    value = value.strip().lower()
    if not SLUG_RE.match(value):
        raise ValueError(f"invalid slug {value!r}")
    return value


def parse_status(value: str) -> str:
    value = (value or "").strip().lower() or "draft"
    if value not in PAGE_STATUSES:
        raise ValueError(f"invalid status {value!r}")
    return value


def parse_count(value: str) -> int:
    value = (value or "").strip()
    if value == "":
        return 0
    count = int(value)
    if count < 0:
        raise ValueError(f"negative view_count {count}")
    return count


def parse_timestamp(value: str):
    value = (value or "").strip()
    if not value:
        return datetime.now(timezone.utc)
    ts = datetime.fromisoformat(value)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts


def _insert_for(conn, table):
    if conn.dialect.name == "postgresql":
        return pg_insert(table)
    return sqlite_insert(table)


def upsert_by_slug(conn, table, record: dict) -> None:
    """
    Insert or update a row keyed by slug (idempotent ingest).
    """
    stmt = _insert_for(conn, table).values(**record)

    update_cols = {
        name: stmt.excluded[name] for name in record if name != "slug"
    }

    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.slug],
        set_=update_cols,
    )

    conn.execute(stmt)


def _read_rows(file_path: str, parse_row):
    records = []
    n_rows = 0
    error_examples = []
    n_errors = 0

    seen_slugs = set()
    duplicate_examples = []
    n_duplicates = 0

    with open(file_path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            try:
                record = parse_row(row)
            except (KeyError, ValueError) as e:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {"row_number": n_rows, "row": dict(row), "error": repr(e)}
                    )
                continue

            if record["slug"] in seen_slugs:
                n_duplicates += 1
                if len(duplicate_examples) < 5:
                    duplicate_examples.append(
                        f"Duplicate slug {record['slug']!r} at CSV row {n_rows}"
                    )
            else:
                seen_slugs.add(record["slug"])

            records.append(record)

    stats = {
        "n_rows": n_rows,
        "n_records": len(records),
        "n_errors": n_errors,
        "error_examples": error_examples,
        "n_duplicates": n_duplicates,
        "duplicate_examples": duplicate_examples,
    }
    return records, stats


def _page_row(row: dict) -> dict:
    title = row["title"].strip()
    if not title:
        raise ValueError("empty title")
    return {
        "title": title,
        "slug": parse_slug(row["slug"]),
        "summary": (row.get("summary") or "").strip() or None,
        "status": parse_status(row.get("status")),
        "view_count": parse_count(row.get("view_count")),
        "created_at": parse_timestamp(row.get("created_at")),
    }


def _category_row(row: dict) -> dict:
    name = row["name"].strip()
    if not name:
        raise ValueError("empty name")
    return {
        "name": name,
        "slug": parse_slug(row["slug"]),
        "description": (row.get("description") or "").strip() or None,
    }


def parse_pages_csv(file_path: str = PAGES_PATH):
    return _read_rows(file_path, _page_row)


def parse_categories_csv(file_path: str = CATEGORIES_PATH):
    return _read_rows(file_path, _category_row)


def load_into_db(pages_list, categories_list, engine=None):
    engine = engine or get_engine()
    with engine.begin() as conn:
        for page in pages_list:
            upsert_by_slug(conn, pages, page)
        for category in categories_list:
            upsert_by_slug(conn, categories, category)


def _report(label: str, stats: dict) -> None:
    logger.info("%s: CSV rows read:    %s", label, stats["n_rows"])
    logger.info("%s: records parsed:   %s", label, stats["n_records"])
    logger.info("%s: rows with errors: %s", label, stats["n_errors"])
    logger.info("%s: duplicate slugs:  %s", label, stats["n_duplicates"])
    for example in stats["duplicate_examples"]:
        logger.warning("Duplicate example: %s", example)
    for ex in stats["error_examples"]:
        logger.warning("Row %s: %s", ex["row_number"], ex["error"])


def main():
    configure_logging()

    pages_list, page_stats = parse_pages_csv(PAGES_PATH)
    categories_list, category_stats = parse_categories_csv(CATEGORIES_PATH)
    load_into_db(pages_list, categories_list)

    _report("pages", page_stats)
    _report("categories", category_stats)


if __name__ == "__main__":
    main()
