# app/models/service.py

from typing import Optional

from pydantic import BaseModel


class HealthOut(BaseModel):
    status: str
    service: str
    timestamp: str
    database: str
    error: Optional[str] = None


class StatusOut(BaseModel):
    status: str
    version: str
    domain: str
