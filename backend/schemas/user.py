# backend/schemas/user.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from models.status import ActiveStatus
from schemas.common import ORMBase


def _normalize_email(value):
    # usuarios.email is compared case-sensitively, so store one spelling
    if isinstance(value, str):
        return value.strip().lower()
    return value


# Shared properties for user models
class UserBase(ORMBase):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    status: ActiveStatus = ActiveStatus.ACTIVE

    normalize_email = field_validator("email", mode="before")(_normalize_email)

# Schema for registering a customer
class UserCreate(UserBase):
    pass

# Schema for partial profile updates
class UserUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    status: Optional[ActiveStatus] = None

    normalize_email = field_validator("email", mode="before")(_normalize_email)

# Output schema for user profile details
class UserResponse(UserBase):
    id: int
    registered_at: datetime
