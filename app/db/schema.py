# app/db/schema.py

from sqlalchemy import (
    MetaData, Table, Column, Integer, String,
    DateTime, CheckConstraint, Text, func,
)

metadata = MetaData()

PAGE_STATUSES = ("draft", "published")

pages = Table(
    "pages",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("summary", Text),
    Column("status", String(16), nullable=False, server_default="draft"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    CheckConstraint(
        "status IN ('draft', 'published')", name="ck_pages_status_enum"
    ),
    CheckConstraint("view_count >= 0", name="ck_pages_view_count_nonneg"),
)

categories = Table(
    "categories",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("slug", String(255), nullable=False, unique=True),
    Column("description", Text),
)
