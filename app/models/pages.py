# app/models/pages.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class PageStatus(str, Enum):
    draft = "draft"
    published = "published"


class PageSummaryOut(BaseModel):
    id: int
    title: str
    slug: str
    summary: Optional[str] = None
    view_count: int
    created_at: datetime


class PageOut(PageSummaryOut):
    status: PageStatus

    class Config:
        from_attributes = True
