# backend/schemas/category.py
from pydantic import Field
from typing import Optional

from schemas.common import ORMBase


class CategoryBase(ORMBase):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryCreate(CategoryBase):
    pass


# Schema for partial category updates
class CategoryUpdate(ORMBase):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None


class CategoryOut(CategoryBase):
    id: int
