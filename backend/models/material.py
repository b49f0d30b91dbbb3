# backend/models/material.py
from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base
from models.status import ActiveStatus, status_column_type


# Raw material that products are built from
class Material(Base):
    __tablename__ = "materiales"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)
    status = Column(
        status_column_type(ActiveStatus, "active_status"),
        nullable=False,
        default=ActiveStatus.ACTIVE,
        server_default=ActiveStatus.ACTIVE.value,
    )
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    product_links = relationship(
        "ProductMaterial", back_populates="material", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Material(id={self.id}, name='{self.name}')>"


# Bill-of-materials line: how much of a material goes into one product.
# Keyed by the (product, material) pair, so a material appears at most once per product.
class ProductMaterial(Base):
    __tablename__ = "producto_material"

    product_id = Column(Integer, ForeignKey("productos.id", ondelete="CASCADE"), primary_key=True)
    material_id = Column(Integer, ForeignKey("materiales.id", ondelete="CASCADE"), primary_key=True)
    quantity_used = Column(
        Numeric(10, 2), CheckConstraint("round(quantity_used, 2) = quantity_used", name="quantity_used_scale"),
        nullable=False,
    )

    product = relationship("Product", back_populates="material_links")
    material = relationship("Material", back_populates="product_links")
