# backend/crud/production.py
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from crud import base
from models.manufacturing import Manufacturing
from models.status import ActiveStatus
from models.supplier import Supplier
from schemas.manufacturing import ManufacturingCreate, ManufacturingUpdate
from schemas.supplier import SupplierCreate, SupplierUpdate


# =========================
# SUPPLIERS
# =========================
def create_supplier(db: Session, payload: SupplierCreate) -> Supplier:
    return base.create(db, Supplier, payload)


def get_supplier(db: Session, supplier_id: int) -> Optional[Supplier]:
    return db.get(Supplier, supplier_id)


def list_suppliers(
    db: Session,
    name: Optional[str] = None,
    status: Optional[ActiveStatus] = None,
    page: int = 1,
    page_size: int = 20,
) -> Dict[str, Any]:
    query = db.query(Supplier)
    if name:
        query = query.filter(Supplier.name.ilike(f"%{name}%"))
    if status is not None:
        query = query.filter(Supplier.status == status)
    return base.paginate(query.order_by(Supplier.name.asc()), page, page_size)


def update_supplier(db: Session, supplier_id: int, payload: SupplierUpdate) -> Optional[Supplier]:
    supplier = get_supplier(db, supplier_id)
    if not supplier:
        return None
    return base.update(db, supplier, payload)


def delete_supplier(db: Session, supplier_id: int) -> bool:
    """Delete a supplier and the manufacturing runs it delivered."""
    supplier = get_supplier(db, supplier_id)
    if not supplier:
        return False
    base.delete(db, supplier)
    return True


# =========================
# MANUFACTURING
# =========================
def create_manufacturing(db: Session, payload: ManufacturingCreate) -> Manufacturing:
    return base.create(db, Manufacturing, payload)


def get_manufacturing(db: Session, manufacturing_id: int) -> Optional[Manufacturing]:
    return db.get(Manufacturing, manufacturing_id)


def list_manufacturing(
    db: Session,
    supplier_id: Optional[int] = None,
    product_id: Optional[int] = None,
    date_from: Optional[datetime] = None,
    date_to: Optional[datetime] = None,
    page: int = 1,
    page_size: int = 20,
    order: str = "desc",
) -> Dict[str, Any]:
    query = db.query(Manufacturing)

    if supplier_id is not None:
        query = query.filter(Manufacturing.supplier_id == supplier_id)
    if product_id is not None:
        query = query.filter(Manufacturing.product_id == product_id)
    if date_from:
        query = query.filter(Manufacturing.manufactured_at >= date_from)
    if date_to:
        query = query.filter(Manufacturing.manufactured_at <= date_to)

    query = base.apply_sort(
        query, {"manufactured_at": Manufacturing.manufactured_at}, "manufactured_at", order,
        Manufacturing.manufactured_at,
    )
    return base.paginate(query, page, page_size)


def update_manufacturing(
    db: Session, manufacturing_id: int, payload: ManufacturingUpdate,
) -> Optional[Manufacturing]:
    run = get_manufacturing(db, manufacturing_id)
    if not run:
        return None
    return base.update(db, run, payload)


def delete_manufacturing(db: Session, manufacturing_id: int) -> bool:
    run = get_manufacturing(db, manufacturing_id)
    if not run:
        return False
    base.delete(db, run)
    return True
