# backend/models/supplier.py
from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from database import Base
from models.status import ActiveStatus, status_column_type


class Supplier(Base):
    __tablename__ = "proveedores"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), unique=True, nullable=False)
    contact = Column(String(150), nullable=True)
    address = Column(Text, nullable=True)
    status = Column(
        status_column_type(ActiveStatus, "active_status"),
        nullable=False,
        default=ActiveStatus.ACTIVE,
        server_default=ActiveStatus.ACTIVE.value,
    )
    registered_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    manufacturing_runs = relationship(
        "Manufacturing", back_populates="supplier", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Supplier(id={self.id}, name='{self.name}')>"
