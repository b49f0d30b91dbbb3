# backend/schemas/material.py
from pydantic import Field
from typing import Optional
from datetime import datetime
from decimal import Decimal

from models.status import ActiveStatus
from schemas.common import ORMBase


class MaterialBase(ORMBase):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE


class MaterialCreate(MaterialBase):
    pass


class MaterialUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    status: Optional[ActiveStatus] = None


class MaterialOut(MaterialBase):
    id: int
    last_updated: datetime


# Bill-of-materials line linking a product to a material
class ProductMaterialCreate(ORMBase):
    product_id: int
    material_id: int
    quantity_used: Decimal = Field(..., max_digits=10, decimal_places=2)


class ProductMaterialUpdate(ORMBase):
    quantity_used: Decimal = Field(..., max_digits=10, decimal_places=2)


class ProductMaterialOut(ProductMaterialCreate):
    pass


# One row of a product's bill of materials, joined with the material itself
class BillOfMaterialsLine(ORMBase):
    material_id: int
    material_name: str
    material_status: ActiveStatus
    quantity_used: Decimal
