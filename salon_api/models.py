# salon_api/models.py

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_user_id() -> str:
    return uuid.uuid4().hex


class Product(SQLModel, table=True):
    # surrogate key; the public sequential id is assigned by the catalog
    pk: Optional[int] = Field(default=None, primary_key=True)

    id: int = Field(index=True)
    name: str
    image: str
    description: str
    created_at: datetime = Field(default_factory=_utcnow)


class User(SQLModel, table=True):
    id: str = Field(default_factory=_new_user_id, primary_key=True)
    name: str
    email: str = Field(index=True, unique=True)
    phone: str = Field(index=True, unique=True)
    username: str = Field(index=True, unique=True)
    password_hash: str
    created_at: datetime = Field(default_factory=_utcnow)

    first_login_done: bool = False
    treatments: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))
    treatment_info: str = ""
    product_info: str = ""
    treatment_type: str = "Diagnosis"  # Diagnosis or Treatment


class DayCalendar(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    day: str = Field(index=True, unique=True)
    # [{"time": "9:00am-10:00am", "booking": ""}, ...] sorted by start time
    times: List[Dict[str, str]] = Field(default_factory=list, sa_column=Column(JSON))
