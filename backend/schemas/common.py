# backend/schemas/common.py
from pydantic import BaseModel, ConfigDict
from typing import Generic, List, TypeVar

T = TypeVar("T")


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Paginated response for list queries
class Page(ORMBase, Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int
