# backend/crud/customers.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from crud import base
from models.sale import Sale
from models.status import ActiveStatus, SaleStatus
from models.users import User
from schemas.sale import SaleCreate, SaleUpdate
from schemas.user import UserCreate, UserUpdate


# =========================
# USERS
# =========================
def create_user(db: Session, payload: UserCreate) -> User:
    return base.create(db, User, payload)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    # Emails are stored lowercased by the user schemas
    return db.query(User).filter(User.email == email.strip().lower()).first()


def list_users(
    db: Session,
    q: Optional[str] = None,
    status: Optional[ActiveStatus] = None,
    page: int = 1,
    page_size: int = 20,
    sort_by: str = "registered_at",
    order: str = "desc",
) -> Dict[str, Any]:
    query = db.query(User)

    # Filter by name or email
    if q:
        like = f"%{q}%"
        query = query.filter((User.name.ilike(like)) | (User.email.ilike(like)))
    if status is not None:
        query = query.filter(User.status == status)

    allowed = {"id": User.id, "name": User.name, "email": User.email, "registered_at": User.registered_at}
    query = base.apply_sort(query, allowed, sort_by, order, User.id)
    return base.paginate(query, page, page_size)


def update_user(db: Session, user_id: int, payload: UserUpdate) -> Optional[User]:
    user = get_user(db, user_id)
    if not user:
        return None
    return base.update(db, user, payload)


def delete_user(db: Session, user_id: int) -> bool:
    """Delete a user and every sale recorded against them."""
    user = get_user(db, user_id)
    if not user:
        return False
    base.delete(db, user)
    return True


# =========================
# SALES
# =========================
def create_sale(db: Session, payload: SaleCreate) -> Sale:
    return base.create(db, Sale, payload)


def get_sale(db: Session, sale_id: int) -> Optional[Sale]:
    return db.get(Sale, sale_id)


def list_sales(
    db: Session,
    user_id: Optional[int] = None,
    product_id: Optional[int] = None,
    status: Optional[SaleStatus] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    page: int = 1,
    page_size: int = 20,
    sort_by: str = "sale_date",
    order: str = "desc",
) -> Dict[str, Any]:
    query = db.query(Sale)

    if user_id is not None:
        query = query.filter(Sale.user_id == user_id)
    if product_id is not None:
        query = query.filter(Sale.product_id == product_id)
    if status is not None:
        query = query.filter(Sale.status == status)
    if date_from:
        query = query.filter(Sale.sale_date >= date_from)
    if date_to:
        query = query.filter(Sale.sale_date <= date_to)

    allowed = {"id": Sale.id, "sale_date": Sale.sale_date, "total": Sale.total, "quantity": Sale.quantity}
    # Tie-break on id so rows stamped in the same second keep insertion order
    query = base.apply_sort(query, allowed, sort_by, order, Sale.sale_date).order_by(Sale.id.asc())
    return base.paginate(query, page, page_size)


def list_sales_for_user(db: Session, user_id: int) -> List[Sale]:
    """A user's sales joined with the product bought, oldest first."""
    return (
        db.query(Sale)
        .join(Sale.product)
        .filter(Sale.user_id == user_id)
        .order_by(Sale.sale_date.asc(), Sale.id.asc())
        .all()
    )


def update_sale(db: Session, sale_id: int, payload: SaleUpdate) -> Optional[Sale]:
    sale = get_sale(db, sale_id)
    if not sale:
        return None
    return base.update(db, sale, payload)


def delete_sale(db: Session, sale_id: int) -> bool:
    sale = get_sale(db, sale_id)
    if not sale:
        return False
    base.delete(db, sale)
    return True
