# backend/crud/catalog.py
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from crud import base
from models.category import Category
from models.material import Material, ProductMaterial
from models.product import Product
from models.sensor import Sensor
from models.status import ActiveStatus
from schemas.category import CategoryCreate, CategoryUpdate
from schemas.material import (
    BillOfMaterialsLine, MaterialCreate, MaterialUpdate, ProductMaterialCreate, ProductMaterialUpdate,
)
from schemas.product import ProductCreate, ProductUpdate
from schemas.sensor import SensorCreate, SensorUpdate


# =========================
# CATEGORIES
# =========================
def create_category(db: Session, payload: CategoryCreate) -> Category:
    return base.create(db, Category, payload)


def get_category(db: Session, category_id: int) -> Optional[Category]:
    return db.get(Category, category_id)


def get_category_by_name(db: Session, name: str) -> Optional[Category]:
    return db.query(Category).filter(Category.name == name).first()


def list_categories(
    db: Session, name: Optional[str] = None, page: int = 1, page_size: int = 20,
) -> Dict[str, Any]:
    query = db.query(Category)
    if name:
        query = query.filter(Category.name.ilike(f"%{name}%"))
    return base.paginate(query.order_by(Category.name.asc()), page, page_size)


def update_category(db: Session, category_id: int, payload: CategoryUpdate) -> Optional[Category]:
    category = get_category(db, category_id)
    if not category:
        return None
    return base.update(db, category, payload)


def delete_category(db: Session, category_id: int) -> bool:
    """Delete a category. Its products stay, with ``category_id`` set to NULL."""
    category = get_category(db, category_id)
    if not category:
        return False
    base.delete(db, category)
    return True


# =========================
# PRODUCTS
# =========================
def create_product(db: Session, payload: ProductCreate) -> Product:
    return base.create(db, Product, payload)


def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.get(Product, product_id)


def get_product_by_name(db: Session, name: str) -> Optional[Product]:
    return db.query(Product).filter(Product.name == name).first()


def list_products(
    db: Session,
    name: Optional[str] = None,
    category_id: Optional[int] = None,
    status: Optional[ActiveStatus] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    in_stock: Optional[bool] = None,
    page: int = 1,
    page_size: int = 20,
    sort_by: str = "id",
    order: str = "asc",
) -> Dict[str, Any]:
    query = db.query(Product)

    if name: query = query.filter(Product.name.ilike(f"%{name}%"))
    if category_id is not None: query = query.filter(Product.category_id == category_id)
    if status is not None: query = query.filter(Product.status == status)
    if min_price is not None: query = query.filter(Product.price >= min_price)
    if max_price is not None: query = query.filter(Product.price <= max_price)
    if in_stock is True: query = query.filter(Product.stock > 0)
    if in_stock is False: query = query.filter(Product.stock == 0)

    allowed = {
        "id": Product.id, "name": Product.name, "price": Product.price,
        "stock": Product.stock, "release_date": Product.release_date,
        "last_updated": Product.last_updated,
    }
    query = base.apply_sort(query, allowed, sort_by, order, Product.id)
    return base.paginate(query, page, page_size)


def list_uncategorized_products(db: Session) -> List[Product]:
    """Products left without a category, e.g. after their category was deleted."""
    return db.query(Product).filter(Product.category_id.is_(None)).order_by(Product.id).all()


def update_product(db: Session, product_id: int, payload: ProductUpdate) -> Optional[Product]:
    product = get_product(db, product_id)
    if not product:
        return None
    return base.update(db, product, payload)


def delete_product(db: Session, product_id: int) -> bool:
    """Delete a product together with its sensors, tests, sales,
    manufacturing runs and bill-of-materials lines."""
    product = get_product(db, product_id)
    if not product:
        return False
    base.delete(db, product)
    return True


# =========================
# SENSORS
# =========================
def create_sensor(db: Session, payload: SensorCreate) -> Sensor:
    return base.create(db, Sensor, payload)


def get_sensor(db: Session, sensor_id: int) -> Optional[Sensor]:
    return db.get(Sensor, sensor_id)


def list_sensors(
    db: Session,
    product_id: Optional[int] = None,
    type: Optional[str] = None,
    status: Optional[ActiveStatus] = None,
    page: int = 1,
    page_size: int = 20,
) -> Dict[str, Any]:
    query = db.query(Sensor)
    if product_id is not None:
        query = query.filter(Sensor.product_id == product_id)
    if type:
        query = query.filter(Sensor.type.ilike(f"%{type}%"))
    if status is not None:
        query = query.filter(Sensor.status == status)
    return base.paginate(query.order_by(Sensor.id.asc()), page, page_size)


def update_sensor(db: Session, sensor_id: int, payload: SensorUpdate) -> Optional[Sensor]:
    sensor = get_sensor(db, sensor_id)
    if not sensor:
        return None
    return base.update(db, sensor, payload)


def delete_sensor(db: Session, sensor_id: int) -> bool:
    sensor = get_sensor(db, sensor_id)
    if not sensor:
        return False
    base.delete(db, sensor)
    return True


# =========================
# MATERIALS
# =========================
def create_material(db: Session, payload: MaterialCreate) -> Material:
    return base.create(db, Material, payload)


def get_material(db: Session, material_id: int) -> Optional[Material]:
    return db.get(Material, material_id)


def list_materials(
    db: Session,
    name: Optional[str] = None,
    status: Optional[ActiveStatus] = None,
    page: int = 1,
    page_size: int = 20,
) -> Dict[str, Any]:
    query = db.query(Material)
    if name:
        query = query.filter(Material.name.ilike(f"%{name}%"))
    if status is not None:
        query = query.filter(Material.status == status)
    return base.paginate(query.order_by(Material.name.asc()), page, page_size)


def update_material(db: Session, material_id: int, payload: MaterialUpdate) -> Optional[Material]:
    material = get_material(db, material_id)
    if not material:
        return None
    return base.update(db, material, payload)


def delete_material(db: Session, material_id: int) -> bool:
    material = get_material(db, material_id)
    if not material:
        return False
    base.delete(db, material)
    return True


# =========================
# BILL OF MATERIALS
# =========================
def create_product_material(db: Session, payload: ProductMaterialCreate) -> ProductMaterial:
    return base.create(db, ProductMaterial, payload)


def get_product_material(db: Session, product_id: int, material_id: int) -> Optional[ProductMaterial]:
    return db.get(ProductMaterial, (product_id, material_id))


def update_product_material(
    db: Session, product_id: int, material_id: int, payload: ProductMaterialUpdate,
) -> Optional[ProductMaterial]:
    link = get_product_material(db, product_id, material_id)
    if not link:
        return None
    return base.update(db, link, payload)


def delete_product_material(db: Session, product_id: int, material_id: int) -> bool:
    link = get_product_material(db, product_id, material_id)
    if not link:
        return False
    base.delete(db, link)
    return True


def get_bill_of_materials(db: Session, product_id: int) -> List[BillOfMaterialsLine]:
    rows = (
        db.query(Material.id, Material.name, Material.status, ProductMaterial.quantity_used)
        .join(ProductMaterial, ProductMaterial.material_id == Material.id)
        .filter(ProductMaterial.product_id == product_id)
        .order_by(Material.name.asc())
        .all()
    )
    return [
        BillOfMaterialsLine(
            material_id=material_id,
            material_name=material_name,
            material_status=material_status,
            quantity_used=quantity_used,
        )
        for material_id, material_name, material_status, quantity_used in rows
    ]


def list_products_for_material(db: Session, material_id: int) -> List[Product]:
    return (
        db.query(Product)
        .join(ProductMaterial, ProductMaterial.product_id == Product.id)
        .filter(ProductMaterial.material_id == material_id)
        .order_by(Product.id.asc())
        .all()
    )
