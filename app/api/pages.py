# app/api/pages.py

from typing import List

from fastapi import APIRouter, HTTPException, Query
from sqlalchemy import select

from app.db.engine import get_engine
from app.db.schema import pages
from app.models.pages import PageOut, PageStatus, PageSummaryOut

router = APIRouter(prefix="/api/v1/pages", tags=["pages"])

MAX_PAGES = 50


@router.get("", response_model=List[PageSummaryOut])
def list_pages(
    limit: int = Query(MAX_PAGES, ge=1, le=MAX_PAGES),
    offset: int = Query(0, ge=0),
) -> List[PageSummaryOut]:
    """
    Published pages, newest first.
    """
    engine = get_engine()

    with engine.connect() as conn:
        stmt = (
            select(
                pages.c.id,
                pages.c.title,
                pages.c.slug,
                pages.c.summary,
                pages.c.view_count,
                pages.c.created_at,
            )
            .where(pages.c.status == PageStatus.published.value)
            .order_by(pages.c.created_at.desc(), pages.c.id.desc())
            .limit(limit)
            .offset(offset)
        )

        rows = conn.execute(stmt).mappings().all()

    return [PageSummaryOut(**row) for row in rows]


@router.get("/{slug}", response_model=PageOut)
def get_page(slug: str) -> PageOut:
    """
    Look up a single published page by its slug.
    """
    engine = get_engine()

    with engine.connect() as conn:
        stmt = (
            select(
                pages.c.id,
                pages.c.title,
                pages.c.slug,
                pages.c.summary,
                pages.c.status,
                pages.c.view_count,
                pages.c.created_at,
            )
            .where(pages.c.slug == slug)
            .where(pages.c.status == PageStatus.published.value)
        )

        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Page not found")

    return PageOut(**row)
