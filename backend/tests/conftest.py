from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker

import crud
from database import build_engine, init_db
from schemas.category import CategoryCreate
from schemas.material import MaterialCreate
from schemas.product import ProductCreate
from schemas.supplier import SupplierCreate
from schemas.user import UserCreate


@pytest.fixture
def engine(tmp_path):
    """Fresh SQLite file database per test, foreign keys on."""
    eng = build_engine(f"sqlite:///{tmp_path / 'termoflexpro_test.db'}")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def db(engine):
    TestingSession = sessionmaker(autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def category(db):
    return crud.create_category(db, CategoryCreate(name="Deportivos", description="Termos deportivos"))


@pytest.fixture
def product(db, category):
    return crud.create_product(
        db,
        ProductCreate(
            name="TermoFlex Pro Sport",
            category_id=category.id,
            price=Decimal("3500.99"),
            stock=100,
            release_date=date(2024, 1, 15),
        ),
    )


@pytest.fixture
def material(db):
    return crud.create_material(db, MaterialCreate(name="Acero inoxidable 18/8"))


@pytest.fixture
def user(db):
    return crud.create_user(db, UserCreate(name="Juan Pérez", email="juan.perez@correo.mx"))


@pytest.fixture
def supplier(db):
    return crud.create_supplier(db, SupplierCreate(name="Aceros del Norte", contact="Luis Fernández"))
