from .status import ActiveStatus, QualityTestStatus, SaleStatus
from .category import Category
from .product import Product
from .sensor import Sensor
from .material import Material, ProductMaterial
from .quality_test import QualityTest
from .users import User
from .sale import Sale
from .supplier import Supplier
from .manufacturing import Manufacturing

__all__ = [
    "ActiveStatus", "QualityTestStatus", "SaleStatus",
    "Category", "Product", "Sensor", "Material", "ProductMaterial",
    "QualityTest", "User", "Sale", "Supplier", "Manufacturing",
]
