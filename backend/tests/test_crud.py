from datetime import date, datetime
from decimal import Decimal

import pytest

import crud
from models import ActiveStatus, QualityTestStatus, SaleStatus
from schemas.category import CategoryCreate, CategoryOut, CategoryUpdate
from schemas.common import Page
from schemas.manufacturing import ManufacturingCreate, ManufacturingOut, ManufacturingUpdate
from schemas.material import (
    MaterialCreate, MaterialOut, ProductMaterialCreate, ProductMaterialOut, ProductMaterialUpdate,
)
from schemas.product import ProductCreate, ProductOut, ProductUpdate
from schemas.quality_test import QualityTestCreate, QualityTestOut, QualityTestUpdate
from schemas.sale import SaleCreate, SaleOut, SaleUpdate
from schemas.sensor import SensorCreate, SensorOut, SensorUpdate
from schemas.supplier import SupplierOut, SupplierUpdate
from schemas.user import UserCreate, UserResponse, UserUpdate


@pytest.fixture
def catalog(db, category):
    hogar = crud.create_category(db, CategoryCreate(name="Hogar"))
    rows = [
        ("TermoFlex Pro Sport", category.id, "3500.99", 100, ActiveStatus.ACTIVE),
        ("TermoFlex Pro Home", hogar.id, "2500.75", 50, ActiveStatus.ACTIVE),
        ("TermoFlex Mini", hogar.id, "899.00", 0, ActiveStatus.INACTIVE),
    ]
    return [
        crud.create_product(
            db, ProductCreate(name=name, category_id=cat, price=Decimal(price), stock=stock, status=status)
        )
        for name, cat, price, stock, status in rows
    ]


def test_get_missing_rows_returns_none(db):
    assert crud.get_product(db, 42) is None
    assert crud.get_category(db, 42) is None
    assert crud.get_product_material(db, 1, 2) is None
    assert crud.get_user_by_email(db, "nadie@correo.mx") is None


def test_update_missing_rows_returns_none(db):
    assert crud.update_product(db, 42, ProductUpdate(stock=1)) is None
    assert crud.update_category(db, 42, CategoryUpdate(name="X")) is None
    assert crud.update_sensor(db, 42, SensorUpdate(specs="x")) is None
    assert crud.update_supplier(db, 42, SupplierUpdate(contact="x")) is None


def test_list_products_filters(db, catalog):
    hogar = crud.get_category_by_name(db, "Hogar")

    assert crud.list_products(db, name="home")["total"] == 1
    assert crud.list_products(db, category_id=hogar.id)["total"] == 2
    assert crud.list_products(db, status=ActiveStatus.INACTIVE)["items"][0].name == "TermoFlex Mini"
    assert crud.list_products(db, in_stock=False)["total"] == 1
    assert crud.list_products(db, in_stock=True)["total"] == 2

    priced = crud.list_products(db, min_price=Decimal("1000"), max_price=Decimal("3000"))
    assert [p.name for p in priced["items"]] == ["TermoFlex Pro Home"]


def test_list_products_sorting_and_pagination(db, catalog):
    page = crud.list_products(db, sort_by="price", order="desc", page=1, page_size=2)

    assert page["total"] == 3
    assert page["page"] == 1
    assert page["page_size"] == 2
    assert [p.name for p in page["items"]] == ["TermoFlex Pro Sport", "TermoFlex Pro Home"]

    last = crud.list_products(db, sort_by="price", order="desc", page=2, page_size=2)
    assert [p.name for p in last["items"]] == ["TermoFlex Mini"]

    validated = Page[ProductOut].model_validate(page)
    assert validated.items[0].price == Decimal("3500.99")


def test_list_products_rejects_bad_order(db):
    with pytest.raises(ValueError):
        crud.list_products(db, order="sideways")
    with pytest.raises(ValueError):
        crud.list_products(db, page=0)


def test_partial_update_keeps_other_fields(db, product):
    updated = crud.update_product(db, product.id, ProductUpdate(description="Nueva edición"))

    assert updated.description == "Nueva edición"
    assert updated.price == Decimal("3500.99")
    assert updated.stock == 100


def test_product_can_be_detached_from_category(db, product):
    updated = crud.update_product(db, product.id, ProductUpdate(category_id=None))
    assert updated.category_id is None


def test_bill_of_materials(db, product, material):
    plastico = crud.create_material(db, MaterialCreate(name="Polipropileno libre de BPA"))
    crud.create_product_material(
        db, ProductMaterialCreate(product_id=product.id, material_id=material.id, quantity_used=Decimal("0.45"))
    )
    crud.create_product_material(
        db, ProductMaterialCreate(product_id=product.id, material_id=plastico.id, quantity_used=Decimal("0.10"))
    )

    bom = crud.get_bill_of_materials(db, product.id)
    assert [(line.material_name, line.quantity_used) for line in bom] == [
        ("Acero inoxidable 18/8", Decimal("0.45")),
        ("Polipropileno libre de BPA", Decimal("0.10")),
    ]

    link = crud.update_product_material(db, product.id, plastico.id, ProductMaterialUpdate(quantity_used=Decimal("0.12")))
    assert link.quantity_used == Decimal("0.12")

    assert [p.id for p in crud.list_products_for_material(db, material.id)] == [product.id]

    assert crud.delete_product_material(db, product.id, material.id) is True
    assert len(crud.get_bill_of_materials(db, product.id)) == 1


def test_sensors_and_tests_per_product(db, product):
    crud.create_sensor(db, SensorCreate(type="Temperatura", product_id=product.id))
    sensor = crud.create_sensor(db, SensorCreate(type="Nivel de líquido", product_id=product.id))

    crud.update_sensor(db, sensor.id, SensorUpdate(status=ActiveStatus.INACTIVE))
    assert crud.list_sensors(db, product_id=product.id)["total"] == 2
    assert crud.list_sensors(db, status=ActiveStatus.INACTIVE)["items"][0].type == "Nivel de líquido"

    crud.create_test(
        db, QualityTestCreate(product_id=product.id, description="Retención", test_date=date(2024, 1, 10))
    )
    late = crud.create_test(
        db, QualityTestCreate(product_id=product.id, description="Caída", test_date=date(2024, 2, 20))
    )
    listing = crud.list_tests(db, product_id=product.id)
    assert [t.id for t in listing["items"]][0] == late.id
    assert crud.list_tests(db, date_from=date(2024, 2, 1))["total"] == 1


def test_test_status_can_move_freely(db, product):
    test = crud.create_test(
        db, QualityTestCreate(product_id=product.id, description="Retención", test_date=date(2024, 1, 10))
    )
    for status in (QualityTestStatus.FAILED, QualityTestStatus.PENDING, QualityTestStatus.COMPLETED):
        test = crud.update_test(db, test.id, QualityTestUpdate(status=status))
        assert test.status == status


def test_sale_status_has_no_transition_order(db, user, product):
    sale = crud.create_sale(
        db,
        SaleCreate(user_id=user.id, product_id=product.id, quantity=1, total=Decimal("3500.99"),
                   status=SaleStatus.COMPLETED),
    )

    sale = crud.update_sale(db, sale.id, SaleUpdate(status=SaleStatus.PENDING))
    assert sale.status == SaleStatus.PENDING

    sale = crud.update_sale(db, sale.id, SaleUpdate(status=SaleStatus.CANCELLED))
    assert sale.status == SaleStatus.CANCELLED


def test_sales_listing_and_user_join(db, user, product):
    maria = crud.create_user(db, UserCreate(name="María López", email="maria.lopez@correo.mx"))
    crud.create_sale(db, SaleCreate(user_id=user.id, product_id=product.id, quantity=1, total=Decimal("10.00"),
                                    sale_date=datetime(2024, 1, 5, 10, 0)))
    crud.create_sale(db, SaleCreate(user_id=user.id, product_id=product.id, quantity=3, total=Decimal("30.00"),
                                    sale_date=datetime(2024, 3, 5, 10, 0), status=SaleStatus.COMPLETED))
    crud.create_sale(db, SaleCreate(user_id=maria.id, product_id=product.id, quantity=2, total=Decimal("20.00"),
                                    sale_date=datetime(2024, 2, 5, 10, 0)))

    assert crud.list_sales(db, user_id=user.id)["total"] == 2
    assert crud.list_sales(db, status=SaleStatus.COMPLETED)["items"][0].quantity == 3
    assert crud.list_sales(db, date_from=datetime(2024, 2, 1))["total"] == 2

    newest_first = crud.list_sales(db)["items"]
    assert [s.quantity for s in newest_first] == [3, 2, 1]

    history = crud.list_sales_for_user(db, user.id)
    assert [s.quantity for s in history] == [1, 3]
    assert history[0].product.name == "TermoFlex Pro Sport"


def test_user_lookup_and_update(db, user):
    assert crud.get_user_by_email(db, "  Juan.Perez@correo.mx ").id == user.id

    updated = crud.update_user(db, user.id, UserUpdate(phone="555-0101", status=ActiveStatus.INACTIVE))
    assert updated.phone == "555-0101"
    assert updated.status == ActiveStatus.INACTIVE

    assert crud.list_users(db, q="juan")["total"] == 1
    assert crud.list_users(db, status=ActiveStatus.ACTIVE)["total"] == 0


def test_manufacturing_runs(db, supplier, product):
    run = crud.create_manufacturing(db, ManufacturingCreate(supplier_id=supplier.id, product_id=product.id, quantity=500))
    assert run.manufactured_at is not None

    run = crud.update_manufacturing(db, run.id, ManufacturingUpdate(quantity=450))
    assert run.quantity == 450

    assert crud.list_manufacturing(db, supplier_id=supplier.id)["total"] == 1
    assert crud.list_manufacturing(db, product_id=product.id + 1)["total"] == 0
    assert crud.list_suppliers(db, name="norte")["items"][0].id == supplier.id


def test_read_back_rows_fit_their_output_schemas(db, category, product, material, user, supplier):
    link = crud.create_product_material(
        db, ProductMaterialCreate(product_id=product.id, material_id=material.id, quantity_used=Decimal("0.45"))
    )
    sensor = crud.create_sensor(db, SensorCreate(type="Temperatura", product_id=product.id))
    test = crud.create_test(
        db, QualityTestCreate(product_id=product.id, description="Retención", test_date=date(2024, 1, 10))
    )
    sale = crud.create_sale(db, SaleCreate(user_id=user.id, product_id=product.id, quantity=2, total=Decimal("7001.98")))
    run = crud.create_manufacturing(db, ManufacturingCreate(supplier_id=supplier.id, product_id=product.id, quantity=500))

    assert CategoryOut.model_validate(category).name == "Deportivos"
    assert MaterialOut.model_validate(material).last_updated is not None
    assert ProductMaterialOut.model_validate(link).quantity_used == Decimal("0.45")
    assert SensorOut.model_validate(sensor).status is ActiveStatus.ACTIVE
    assert QualityTestOut.model_validate(test).status is QualityTestStatus.PENDING
    assert SaleOut.model_validate(sale).total == Decimal("7001.98")
    assert SupplierOut.model_validate(supplier).registered_at is not None
    assert ManufacturingOut.model_validate(run).quantity == 500
    assert UserResponse.model_validate(user).email == "juan.perez@correo.mx"
