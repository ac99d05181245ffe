# app/api/categories.py

from typing import List

from fastapi import APIRouter, HTTPException
from sqlalchemy import select

from app.db.engine import get_engine
from app.db.schema import categories
from app.models.categories import CategoryOut

router = APIRouter(prefix="/api/v1/categories", tags=["categories"])


def _category_columns():
    return (
        categories.c.id,
        categories.c.name,
        categories.c.slug,
        categories.c.description,
    )


@router.get("", response_model=List[CategoryOut])
def list_categories() -> List[CategoryOut]:
    """
    Return all categories, ordered by name.
    """
    engine = get_engine()

    with engine.connect() as conn:
        stmt = select(*_category_columns()).order_by(categories.c.name)
        rows = conn.execute(stmt).mappings().all()

    return [CategoryOut(**row) for row in rows]


@router.get("/{slug}", response_model=CategoryOut)
def get_category(slug: str) -> CategoryOut:
    engine = get_engine()

    with engine.connect() as conn:
        stmt = select(*_category_columns()).where(categories.c.slug == slug)
        row = conn.execute(stmt).mappings().first()

    if row is None:
        raise HTTPException(status_code=404, detail="Category not found")

    return CategoryOut(**row)
