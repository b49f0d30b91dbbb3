import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Dict

from sqlalchemy.orm import Session

from config import settings
from database import SessionLocal, engine, init_db
from models import (
    Category, Product, Sensor, Material, ProductMaterial, QualityTest,
    User, Sale, Supplier, Manufacturing,
    ActiveStatus, QualityTestStatus, SaleStatus,
)

logger = logging.getLogger(__name__)

# Seed dataset
CATEGORIES = [
    {"name": "Deportivos", "description": "Termos para actividades deportivas y al aire libre"},
    {"name": "Hogar", "description": "Termos y contenedores para uso doméstico"},
]

PRODUCTS = [
    {
        "name": "TermoFlex Pro Sport",
        "description": "Termo inteligente de acero inoxidable con sensor de temperatura",
        "category": "Deportivos",
        "price": Decimal("3500.99"),
        "stock": 100,
        "release_date": date(2024, 1, 15),
    },
    {
        "name": "TermoFlex Pro Home",
        "description": "Termo de gran capacidad con indicador de nivel",
        "category": "Hogar",
        "price": Decimal("2500.75"),
        "stock": 50,
        "release_date": date(2024, 3, 1),
    },
]

SENSORS = [
    {"product": "TermoFlex Pro Sport", "type": "Temperatura", "specs": "Rango -10°C a 100°C, precisión ±0.5°C"},
    {"product": "TermoFlex Pro Home", "type": "Nivel de líquido", "specs": "Capacitivo, resolución 10 ml"},
]

MATERIALS = [
    {"name": "Acero inoxidable 18/8", "description": "Cuerpo y pared interior del termo"},
    {"name": "Polipropileno libre de BPA", "description": "Tapa y componentes plásticos"},
]

# (product, material, quantity used per unit)
PRODUCT_MATERIALS = [
    ("TermoFlex Pro Sport", "Acero inoxidable 18/8", Decimal("0.45")),
    ("TermoFlex Pro Sport", "Polipropileno libre de BPA", Decimal("0.10")),
    ("TermoFlex Pro Home", "Acero inoxidable 18/8", Decimal("0.80")),
    ("TermoFlex Pro Home", "Polipropileno libre de BPA", Decimal("0.25")),
]

TESTS = [
    {
        "product": "TermoFlex Pro Sport",
        "description": "Retención térmica durante 12 horas",
        "results": "Mantuvo 78°C tras 12 horas partiendo de 95°C",
        "status": QualityTestStatus.COMPLETED,
        "test_date": date(2024, 1, 10),
    },
    {
        "product": "TermoFlex Pro Home",
        "description": "Prueba de caída desde 1.5 metros",
        "results": None,
        "status": QualityTestStatus.PENDING,
        "test_date": date(2024, 2, 20),
    },
]

USERS = [
    {"name": "Juan Pérez", "email": "juan.perez@correo.mx", "phone": "555-0101", "address": "Av. Reforma 123, Ciudad de México"},
    {"name": "María López", "email": "maria.lopez@correo.mx", "phone": "555-0102", "address": "Calle Juárez 45, Guadalajara"},
    {"name": "Carlos García", "email": "carlos.garcia@correo.mx", "phone": None, "address": "Blvd. Díaz Ordaz 890, Monterrey"},
    {"name": "Ana Martínez", "email": "ana.martinez@correo.mx", "phone": "555-0104", "address": "Calle 60 No. 500, Mérida"},
]

SALES = [
    {"user": "juan.perez@correo.mx", "product": "TermoFlex Pro Sport", "quantity": 2,
     "total": Decimal("7001.98"), "status": SaleStatus.COMPLETED, "sale_date": datetime(2024, 2, 1, 10, 30)},
    {"user": "maria.lopez@correo.mx", "product": "TermoFlex Pro Home", "quantity": 1,
     "total": Decimal("2500.75"), "status": SaleStatus.COMPLETED, "sale_date": datetime(2024, 3, 5, 16, 0)},
    {"user": "carlos.garcia@correo.mx", "product": "TermoFlex Pro Sport", "quantity": 1,
     "total": Decimal("3500.99"), "status": SaleStatus.PENDING, "sale_date": datetime(2024, 3, 12, 9, 15)},
    {"user": "ana.martinez@correo.mx", "product": "TermoFlex Pro Home", "quantity": 3,
     "total": Decimal("7502.25"), "status": SaleStatus.CANCELLED, "sale_date": datetime(2024, 3, 18, 18, 45)},
]

SUPPLIERS = [
    {"name": "Aceros y Polímeros del Norte S.A.", "contact": "Luis Fernández <ventas@apnorte.mx>",
     "address": "Parque Industrial Apodaca, Nuevo León"},
]


def seed_database(db: Session) -> Dict[str, int]:
    """Insert the seed rows and return the number inserted per table."""
    categories = {}
    for row in CATEGORIES:
        categories[row["name"]] = Category(**row)
    db.add_all(categories.values())
    db.flush()

    products = {}
    for row in PRODUCTS:
        data = dict(row)
        category = categories[data.pop("category")]
        products[row["name"]] = Product(category_id=category.id, status=ActiveStatus.ACTIVE, **data)
    db.add_all(products.values())
    db.flush()

    sensors = [
        Sensor(product_id=products[row["product"]].id, type=row["type"], specs=row["specs"])
        for row in SENSORS
    ]

    materials = {row["name"]: Material(**row) for row in MATERIALS}
    db.add_all(materials.values())
    db.flush()

    links = [
        ProductMaterial(product_id=products[p].id, material_id=materials[m].id, quantity_used=qty)
        for p, m, qty in PRODUCT_MATERIALS
    ]

    tests = []
    for row in TESTS:
        data = dict(row)
        product = products[data.pop("product")]
        tests.append(QualityTest(product_id=product.id, **data))

    users = {row["email"]: User(**row) for row in USERS}
    db.add_all(users.values())
    db.flush()

    sales = []
    for row in SALES:
        data = dict(row)
        user = users[data.pop("user")]
        product = products[data.pop("product")]
        sales.append(Sale(user_id=user.id, product_id=product.id, **data))

    suppliers = [Supplier(**row) for row in SUPPLIERS]

    db.add_all(sensors + links + tests + sales + suppliers)
    db.commit()

    counts = {
        Category.__tablename__: len(categories),
        Product.__tablename__: len(products),
        Sensor.__tablename__: len(sensors),
        Material.__tablename__: len(materials),
        ProductMaterial.__tablename__: len(links),
        QualityTest.__tablename__: len(tests),
        User.__tablename__: len(users),
        Sale.__tablename__: len(sales),
        Supplier.__tablename__: len(suppliers),
    }
    logger.info("Seeded %s", counts)
    return counts


def clear_database(db: Session) -> None:
    """Remove every row, dependents first."""
    for model in (Manufacturing, Sale, QualityTest, ProductMaterial, Sensor,
                  Product, Category, Material, User, Supplier):
        deleted = db.query(model).delete()
        logger.debug("Cleared %s rows from %s", deleted, model.__tablename__)
    db.commit()


def populate_database():
    """Main execution function to populate database."""
    init_db(engine)

    session = SessionLocal()
    try:
        clear_database(session)
        seed_database(session)
    finally:
        session.close()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(levelname)s - %(message)s")
    populate_database()
