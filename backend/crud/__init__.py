from .catalog import (
    create_category, get_category, get_category_by_name, list_categories, update_category, delete_category,
    create_product, get_product, get_product_by_name, list_products, list_uncategorized_products,
    update_product, delete_product,
    create_sensor, get_sensor, list_sensors, update_sensor, delete_sensor,
    create_material, get_material, list_materials, update_material, delete_material,
    create_product_material, get_product_material, update_product_material, delete_product_material,
    get_bill_of_materials, list_products_for_material,
)
from .quality import create_test, get_test, list_tests, update_test, delete_test
from .customers import (
    create_user, get_user, get_user_by_email, list_users, update_user, delete_user,
    create_sale, get_sale, list_sales, list_sales_for_user, update_sale, delete_sale,
)
from .production import (
    create_supplier, get_supplier, list_suppliers, update_supplier, delete_supplier,
    create_manufacturing, get_manufacturing, list_manufacturing, update_manufacturing, delete_manufacturing,
)
