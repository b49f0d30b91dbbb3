# backend/models/product.py
from sqlalchemy import Column, Integer, String, Text, Numeric, Date, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base
from models.status import ActiveStatus, status_column_type

# Model Product
# Catalog entry at the centre of the schema. Sensors, quality tests, sales,
# manufacturing runs and bill-of-materials links all hang off a product and
# disappear with it.
class Product(Base):
    __tablename__ = "productos"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(150), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    category_id = Column(
        Integer, ForeignKey("categorias.id", ondelete="SET NULL"), nullable=True, index=True
    )

    # Price and stock are guarded by check constraints. The scale checks keep
    # engines that store NUMERIC as binary floats (SQLite) at two decimals.
    price = Column(
        Numeric(10, 2),
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("round(price, 2) = price", name="price_scale"),
        nullable=False,
    )
    stock = Column(Integer, CheckConstraint("stock >= 0", name="stock_non_negative"), nullable=False, default=0)

    status = Column(
        status_column_type(ActiveStatus, "active_status"),
        nullable=False,
        default=ActiveStatus.ACTIVE,
        server_default=ActiveStatus.ACTIVE.value,
    )
    release_date = Column(Date, nullable=True)
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    category = relationship("Category", back_populates="products")
    sensors = relationship("Sensor", back_populates="product", cascade="all, delete-orphan", passive_deletes=True)
    tests = relationship("QualityTest", back_populates="product", cascade="all, delete-orphan", passive_deletes=True)
    sales = relationship("Sale", back_populates="product", cascade="all, delete-orphan", passive_deletes=True)
    manufacturing_runs = relationship(
        "Manufacturing", back_populates="product", cascade="all, delete-orphan", passive_deletes=True
    )
    material_links = relationship(
        "ProductMaterial", back_populates="product", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, stock={self.stock})>"
