# backend/schemas/sensor.py
from pydantic import Field
from typing import Optional

from models.status import ActiveStatus
from schemas.common import ORMBase


class SensorBase(ORMBase):
    type: str = Field(..., min_length=1, max_length=100)
    specs: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE
    product_id: int


class SensorCreate(SensorBase):
    pass


class SensorUpdate(ORMBase):
    type: Optional[str] = Field(None, min_length=1, max_length=100)
    specs: Optional[str] = None
    status: Optional[ActiveStatus] = None
    product_id: Optional[int] = None


class SensorOut(SensorBase):
    id: int
