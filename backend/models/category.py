# backend/models/category.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from database import Base


# Product family; deleting one leaves its products uncategorized
class Category(Base):
    __tablename__ = "categorias"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)
    description = Column(Text, nullable=True)

    # ON DELETE SET NULL is left to the database
    products = relationship("Product", back_populates="category", passive_deletes=True)

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"
