from decimal import Decimal

import crud
from models import Sale
from schemas.category import CategoryCreate
from schemas.product import ProductCreate, ProductOut
from schemas.sale import SaleCreate
from schemas.user import UserCreate


def test_product_read_back_matches_insert(db):
    deportivos = crud.create_category(db, CategoryCreate(name="Deportivos"))
    created = crud.create_product(
        db,
        ProductCreate(name="TermoFlex Pro Sport", category_id=deportivos.id, price=Decimal("3500.99"), stock=100),
    )
    product_id, category_id = created.id, deportivos.id
    db.expunge_all()

    stored = crud.get_product(db, product_id)

    assert stored.name == "TermoFlex Pro Sport"
    assert stored.price == Decimal("3500.99")
    assert stored.stock == 100
    assert stored.status == "active"
    assert stored.category_id == category_id
    assert stored.category.name == "Deportivos"

    out = ProductOut.model_validate(stored)
    assert out.price == Decimal("3500.99")
    assert out.category_id == category_id


def test_sale_disappears_with_its_product(db, product):
    buyer = crud.create_user(db, UserCreate(name="María López", email="maria.lopez@correo.mx"))
    sale = crud.create_sale(
        db, SaleCreate(user_id=buyer.id, product_id=product.id, quantity=2, total=Decimal("5001.50"))
    )
    sale_id = sale.id
    assert sale.status == "pending"

    crud.delete_product(db, product.id)

    assert crud.get_sale(db, sale_id) is None
    assert db.query(Sale).count() == 0
    assert crud.get_user(db, buyer.id) is not None
