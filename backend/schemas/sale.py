# backend/schemas/sale.py
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from models.status import SaleStatus
from schemas.common import ORMBase


class SaleBase(ORMBase):
    user_id: int
    product_id: int
    quantity: int = Field(..., gt=0)
    total: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    status: SaleStatus = SaleStatus.PENDING


class SaleCreate(SaleBase):
    # Left unset, the database stamps the current time
    sale_date: Optional[datetime] = None


# Status can move to any value of the domain; no ordering is enforced.
class SaleUpdate(ORMBase):
    quantity: Optional[int] = Field(None, gt=0)
    total: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    status: Optional[SaleStatus] = None
    sale_date: Optional[datetime] = None


class SaleOut(SaleBase):
    id: int
    sale_date: datetime
