"""Create TermoFlexPro schema

Revision ID: 3f1c2a9d7e10
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '3f1c2a9d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


# Closed status domains; CHECK constraint names come from the metadata naming convention
active_status = sa.Enum('active', 'inactive', name='active_status', create_constraint=True, length=16)
test_status = sa.Enum('pending', 'completed', 'failed', name='test_status', create_constraint=True, length=16)
sale_status = sa.Enum('completed', 'pending', 'cancelled', name='sale_status', create_constraint=True, length=16)


def upgrade() -> None:
    """Upgrade schema."""
    # Tables without outbound foreign keys
    op.create_table('categorias',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_categorias')),
        sa.UniqueConstraint('name', name=op.f('uq_categorias_name')),
    )
    op.create_index(op.f('ix_categorias_id'), 'categorias', ['id'], unique=False)

    op.create_table('usuarios',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=150), nullable=False),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('status', active_status, server_default='active', nullable=False),
        sa.Column('registered_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_usuarios')),
        sa.UniqueConstraint('email', name=op.f('uq_usuarios_email')),
    )
    op.create_index(op.f('ix_usuarios_id'), 'usuarios', ['id'], unique=False)

    op.create_table('proveedores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('contact', sa.String(length=150), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('status', active_status, server_default='active', nullable=False),
        sa.Column('registered_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_proveedores')),
        sa.UniqueConstraint('name', name=op.f('uq_proveedores_name')),
    )
    op.create_index(op.f('ix_proveedores_id'), 'proveedores', ['id'], unique=False)

    op.create_table('materiales',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', active_status, server_default='active', nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_materiales')),
        sa.UniqueConstraint('name', name=op.f('uq_materiales_name')),
    )
    op.create_index(op.f('ix_materiales_id'), 'materiales', ['id'], unique=False)

    # Products; deleting a category only detaches its products
    op.create_table('productos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('status', active_status, server_default='active', nullable=False),
        sa.Column('release_date', sa.Date(), nullable=True),
        sa.Column('last_updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('price > 0', name='price_positive'),
        sa.CheckConstraint('round(price, 2) = price', name='price_scale'),
        sa.CheckConstraint('stock >= 0', name='stock_non_negative'),
        sa.ForeignKeyConstraint(['category_id'], ['categorias.id'],
                                name=op.f('fk_productos_category_id_categorias'), ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_productos')),
        sa.UniqueConstraint('name', name=op.f('uq_productos_name')),
    )
    op.create_index(op.f('ix_productos_id'), 'productos', ['id'], unique=False)
    op.create_index(op.f('ix_productos_category_id'), 'productos', ['category_id'], unique=False)

    # Product dependents, all removed together with their product
    op.create_table('sensores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=100), nullable=False),
        sa.Column('specs', sa.Text(), nullable=True),
        sa.Column('status', active_status, server_default='active', nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['productos.id'],
                                name=op.f('fk_sensores_product_id_productos'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_sensores')),
    )
    op.create_index(op.f('ix_sensores_id'), 'sensores', ['id'], unique=False)
    op.create_index(op.f('ix_sensores_product_id'), 'sensores', ['product_id'], unique=False)

    op.create_table('producto_material',
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('material_id', sa.Integer(), nullable=False),
        sa.Column('quantity_used', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.CheckConstraint('round(quantity_used, 2) = quantity_used', name='quantity_used_scale'),
        sa.ForeignKeyConstraint(['material_id'], ['materiales.id'],
                                name=op.f('fk_producto_material_material_id_materiales'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['product_id'], ['productos.id'],
                                name=op.f('fk_producto_material_product_id_productos'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('product_id', 'material_id', name=op.f('pk_producto_material')),
    )

    op.create_table('pruebas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('results', sa.Text(), nullable=True),
        sa.Column('status', test_status, server_default='pending', nullable=False),
        sa.Column('test_date', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['product_id'], ['productos.id'],
                                name=op.f('fk_pruebas_product_id_productos'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_pruebas')),
    )
    op.create_index(op.f('ix_pruebas_id'), 'pruebas', ['id'], unique=False)
    op.create_index(op.f('ix_pruebas_product_id'), 'pruebas', ['product_id'], unique=False)

    op.create_table('ventas',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('sale_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('total', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('status', sale_status, server_default='pending', nullable=False),
        sa.CheckConstraint('quantity > 0', name='quantity_positive'),
        sa.CheckConstraint('total >= 0', name='total_non_negative'),
        sa.CheckConstraint('round(total, 2) = total', name='total_scale'),
        sa.ForeignKeyConstraint(['product_id'], ['productos.id'],
                                name=op.f('fk_ventas_product_id_productos'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['usuarios.id'],
                                name=op.f('fk_ventas_user_id_usuarios'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ventas')),
    )
    op.create_index(op.f('ix_ventas_id'), 'ventas', ['id'], unique=False)
    op.create_index(op.f('ix_ventas_user_id'), 'ventas', ['user_id'], unique=False)
    op.create_index(op.f('ix_ventas_product_id'), 'ventas', ['product_id'], unique=False)

    op.create_table('fabricacion',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('supplier_id', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('manufactured_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('quantity > 0', name='quantity_positive'),
        sa.ForeignKeyConstraint(['product_id'], ['productos.id'],
                                name=op.f('fk_fabricacion_product_id_productos'), ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['supplier_id'], ['proveedores.id'],
                                name=op.f('fk_fabricacion_supplier_id_proveedores'), ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_fabricacion')),
    )
    op.create_index(op.f('ix_fabricacion_id'), 'fabricacion', ['id'], unique=False)
    op.create_index(op.f('ix_fabricacion_supplier_id'), 'fabricacion', ['supplier_id'], unique=False)
    op.create_index(op.f('ix_fabricacion_product_id'), 'fabricacion', ['product_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop dependents before the tables they reference
    op.drop_index(op.f('ix_fabricacion_product_id'), table_name='fabricacion')
    op.drop_index(op.f('ix_fabricacion_supplier_id'), table_name='fabricacion')
    op.drop_index(op.f('ix_fabricacion_id'), table_name='fabricacion')
    op.drop_table('fabricacion')

    op.drop_index(op.f('ix_ventas_product_id'), table_name='ventas')
    op.drop_index(op.f('ix_ventas_user_id'), table_name='ventas')
    op.drop_index(op.f('ix_ventas_id'), table_name='ventas')
    op.drop_table('ventas')

    op.drop_index(op.f('ix_pruebas_product_id'), table_name='pruebas')
    op.drop_index(op.f('ix_pruebas_id'), table_name='pruebas')
    op.drop_table('pruebas')

    op.drop_table('producto_material')

    op.drop_index(op.f('ix_sensores_product_id'), table_name='sensores')
    op.drop_index(op.f('ix_sensores_id'), table_name='sensores')
    op.drop_table('sensores')

    op.drop_index(op.f('ix_productos_category_id'), table_name='productos')
    op.drop_index(op.f('ix_productos_id'), table_name='productos')
    op.drop_table('productos')

    op.drop_index(op.f('ix_materiales_id'), table_name='materiales')
    op.drop_table('materiales')
    op.drop_index(op.f('ix_proveedores_id'), table_name='proveedores')
    op.drop_table('proveedores')
    op.drop_index(op.f('ix_usuarios_id'), table_name='usuarios')
    op.drop_table('usuarios')
    op.drop_index(op.f('ix_categorias_id'), table_name='categorias')
    op.drop_table('categorias')

    # Native enum types only exist on Postgres; this is a no-op elsewhere
    bind = op.get_bind()
    for enum_type in (sale_status, test_status, active_status):
        enum_type.drop(bind, checkfirst=True)
