# backend/schemas/supplier.py
from pydantic import Field
from typing import Optional
from datetime import datetime

from models.status import ActiveStatus
from schemas.common import ORMBase


class SupplierBase(ORMBase):
    name: str = Field(..., min_length=1, max_length=150)
    contact: Optional[str] = Field(None, max_length=150)
    address: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE


class SupplierCreate(SupplierBase):
    pass


class SupplierUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    contact: Optional[str] = Field(None, max_length=150)
    address: Optional[str] = None
    status: Optional[ActiveStatus] = None


class SupplierOut(SupplierBase):
    id: int
    registered_at: datetime
