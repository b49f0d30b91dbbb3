# backend/models/status.py
import enum
from sqlalchemy import Enum
from database import Base


# Lifecycle flag shared by catalog, customer and supplier rows
class ActiveStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


# Outcome of a quality test
class QualityTestStatus(str, enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


# Sale processing state
class SaleStatus(str, enum.Enum):
    COMPLETED = "completed"
    PENDING = "pending"
    CANCELLED = "cancelled"


def status_column_type(enum_cls, name):
    """Closed-set column type.

    Stored as the lowercase values, validated on the Python side and backed by
    a CHECK constraint (or a native enum on Postgres) in the database.
    """
    return Enum(
        enum_cls,
        name=name,
        values_callable=lambda e: [member.value for member in e],
        create_constraint=True,
        validate_strings=True,
        length=16,
        metadata=Base.metadata,
    )
