from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Optional

from pydantic import field_validator
from sqlmodel import SQLModel, Field

# Bump when a table or column changes; init_db() records it in the store.
SCHEMA_VERSION = 1


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# -------------------------
# PRODUCT
# -------------------------

class ProductBase(SQLModel):
    name: str = Field(index=True)
    price: float

    @field_validator("price")
    @classmethod
    def _finite_price(cls, v: float) -> float:
        # json accepts NaN/Infinity literals; the price column cannot hold them
        if not math.isfinite(v):
            raise ValueError("price must be a finite number")
        return v


class Product(ProductBase, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=_utcnow)


class ProductCreate(ProductBase):
    """POST body. Unknown keys (including "id") are dropped."""


class ProductRead(ProductBase):
    id: int


# -------------------------
# SCHEMA BOOKKEEPING
# -------------------------

class SchemaVersion(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    version: int
    applied_at: datetime = Field(default_factory=_utcnow)
