# backend/crud/quality.py
from datetime import date
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from crud import base
from models.quality_test import QualityTest
from models.status import QualityTestStatus
from schemas.quality_test import QualityTestCreate, QualityTestUpdate


def create_test(db: Session, payload: QualityTestCreate) -> QualityTest:
    return base.create(db, QualityTest, payload)


def get_test(db: Session, test_id: int) -> Optional[QualityTest]:
    return db.get(QualityTest, test_id)


def list_tests(
    db: Session,
    product_id: Optional[int] = None,
    status: Optional[QualityTestStatus] = None,
    date_from: Optional[date] = None,
    date_to: Optional[date] = None,
    page: int = 1,
    page_size: int = 20,
    order: str = "desc",
) -> Dict[str, Any]:
    query = db.query(QualityTest)

    if product_id is not None:
        query = query.filter(QualityTest.product_id == product_id)
    if status is not None:
        query = query.filter(QualityTest.status == status)
    if date_from:
        query = query.filter(QualityTest.test_date >= date_from)
    if date_to:
        query = query.filter(QualityTest.test_date <= date_to)

    query = base.apply_sort(query, {"test_date": QualityTest.test_date}, "test_date", order, QualityTest.test_date)
    return base.paginate(query, page, page_size)


def update_test(db: Session, test_id: int, payload: QualityTestUpdate) -> Optional[QualityTest]:
    test = get_test(db, test_id)
    if not test:
        return None
    return base.update(db, test, payload)


def delete_test(db: Session, test_id: int) -> bool:
    test = get_test(db, test_id)
    if not test:
        return False
    base.delete(db, test)
    return True
