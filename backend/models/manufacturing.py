# backend/models/manufacturing.py
from sqlalchemy import Column, Integer, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base


# A production batch of a product made by a supplier
class Manufacturing(Base):
    __tablename__ = "fabricacion"

    id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, ForeignKey("proveedores.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("productos.id", ondelete="CASCADE"), nullable=False, index=True)
    quantity = Column(Integer, CheckConstraint("quantity > 0", name="quantity_positive"), nullable=False)
    manufactured_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    supplier = relationship("Supplier", back_populates="manufacturing_runs")
    product = relationship("Product", back_populates="manufacturing_runs")
