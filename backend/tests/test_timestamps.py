from datetime import datetime
from decimal import Decimal

from sqlalchemy import text

import crud
from schemas.material import MaterialUpdate
from schemas.product import ProductUpdate

LONG_AGO = datetime(2000, 1, 1)


def _backdate(db, table, row_id):
    db.execute(text(f"UPDATE {table} SET last_updated = '2000-01-01 00:00:00' WHERE id = :id"), {"id": row_id})
    db.commit()


def test_product_gets_timestamp_on_insert(db, product):
    assert product.last_updated is not None


def test_updating_product_refreshes_timestamp(db, product):
    _backdate(db, "productos", product.id)
    assert product.last_updated == LONG_AGO

    updated = crud.update_product(db, product.id, ProductUpdate(price=Decimal("3299.00")))

    assert updated.price == Decimal("3299.00")
    assert updated.last_updated > LONG_AGO


def test_any_field_update_refreshes_product_timestamp(db, product):
    previous = product.last_updated

    updated = crud.update_product(db, product.id, ProductUpdate(stock=95))

    assert updated.last_updated >= previous


def test_rewriting_same_value_still_refreshes_timestamp(db, product):
    _backdate(db, "productos", product.id)

    updated = crud.update_product(db, product.id, ProductUpdate(stock=100))

    assert updated.stock == 100
    assert updated.last_updated > LONG_AGO


def test_plain_orm_update_refreshes_timestamp(db, product):
    # Direct attribute writes rely on the column's onupdate
    _backdate(db, "productos", product.id)

    product.description = "Edición 2025"
    db.commit()

    assert product.last_updated > LONG_AGO


def test_updating_material_refreshes_timestamp(db, material):
    _backdate(db, "materiales", material.id)

    updated = crud.update_material(db, material.id, MaterialUpdate(description="Grado alimenticio"))

    assert updated.description == "Grado alimenticio"
    assert updated.last_updated > LONG_AGO


def test_empty_update_leaves_timestamp_alone(db, product):
    _backdate(db, "productos", product.id)

    crud.update_product(db, product.id, ProductUpdate())

    assert crud.get_product(db, product.id).last_updated == LONG_AGO


def test_registration_timestamps_are_set(db, user, supplier):
    assert user.registered_at is not None
    assert supplier.registered_at is not None
