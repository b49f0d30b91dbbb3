# backend/models/sensor.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from database import Base
from models.status import ActiveStatus, status_column_type


# Sensor fitted to a product
class Sensor(Base):
    __tablename__ = "sensores"

    id = Column(Integer, primary_key=True, index=True)
    type = Column(String(100), nullable=False)
    specs = Column(Text, nullable=True)
    status = Column(
        status_column_type(ActiveStatus, "active_status"),
        nullable=False,
        default=ActiveStatus.ACTIVE,
        server_default=ActiveStatus.ACTIVE.value,
    )
    product_id = Column(Integer, ForeignKey("productos.id", ondelete="CASCADE"), nullable=False, index=True)

    product = relationship("Product", back_populates="sensors")
