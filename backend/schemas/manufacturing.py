# backend/schemas/manufacturing.py
from pydantic import Field
from typing import Optional
from datetime import datetime

from schemas.common import ORMBase


class ManufacturingBase(ORMBase):
    supplier_id: int
    product_id: int
    quantity: int = Field(..., gt=0)


class ManufacturingCreate(ManufacturingBase):
    manufactured_at: Optional[datetime] = None


class ManufacturingUpdate(ORMBase):
    quantity: Optional[int] = Field(None, gt=0)
    manufactured_at: Optional[datetime] = None


class ManufacturingOut(ManufacturingBase):
    id: int
    manufactured_at: datetime
