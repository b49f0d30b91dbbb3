# backend/models/sale.py
from sqlalchemy import Column, Integer, Numeric, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base
from models.status import SaleStatus, status_column_type


# A user buying a quantity of one product
class Sale(Base):
    __tablename__ = "ventas"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("productos.id", ondelete="CASCADE"), nullable=False, index=True)

    quantity = Column(Integer, CheckConstraint("quantity > 0", name="quantity_positive"), nullable=False)
    sale_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    total = Column(
        Numeric(10, 2),
        CheckConstraint("total >= 0", name="total_non_negative"),
        CheckConstraint("round(total, 2) = total", name="total_scale"),
        nullable=False,
    )
    status = Column(
        status_column_type(SaleStatus, "sale_status"),
        nullable=False,
        default=SaleStatus.PENDING,
        server_default=SaleStatus.PENDING.value,
    )

    user = relationship("User", back_populates="sales")
    product = relationship("Product", back_populates="sales")
