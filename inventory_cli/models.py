# inventory_cli/models.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class Product(BaseModel):
    """A product row. Only id is guaranteed; the other columns are nullable in the table."""

    id: int = Field(..., description="Caller-assigned primary key")
    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None


class ProductChanges(BaseModel):
    """Columns to overwrite on an existing product. Unset fields are left alone."""

    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[Decimal] = None

    def as_values(self) -> dict:
        return self.model_dump(exclude_none=True)
