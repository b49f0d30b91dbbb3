# backend/schemas/product.py
from pydantic import Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal

from models.status import ActiveStatus
from schemas.common import ORMBase


# Shared base attributes for product entities
class ProductBase(ORMBase):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    category_id: Optional[int] = None
    price: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0)
    status: ActiveStatus = ActiveStatus.ACTIVE
    release_date: Optional[date] = None


# Schema for creating a new product
class ProductCreate(ProductBase):
    pass


# Schema for partial product updates
class ProductUpdate(ORMBase):
    """Schema for partial updates - all fields optional."""
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    category_id: Optional[int] = None
    price: Optional[Decimal] = Field(None, gt=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(None, ge=0)
    status: Optional[ActiveStatus] = None
    release_date: Optional[date] = None


# Full product representation including ID and refresh timestamp
class ProductOut(ProductBase):
    id: int
    last_updated: datetime
