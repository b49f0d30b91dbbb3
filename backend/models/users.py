# backend/models/users.py
from sqlalchemy import Column, Integer, String, Text, DateTime, func
from sqlalchemy.orm import relationship
from database import Base
from models.status import ActiveStatus, status_column_type

# Represents a customer account that places sales
class User(Base):
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False)
    phone = Column(String(20), nullable=True)
    address = Column(Text, nullable=True)
    status = Column(
        status_column_type(ActiveStatus, "active_status"),
        nullable=False,
        default=ActiveStatus.ACTIVE,
        server_default=ActiveStatus.ACTIVE.value,
    )
    registered_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    sales = relationship("Sale", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
