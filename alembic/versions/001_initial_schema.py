"""Initial schema: inventory, stock movements, suppliers, leads, deliveries

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    ]


def upgrade():
    op.create_table('inventory_items',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('sku', sa.String(100), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('reorder_level', sa.Integer(), nullable=False, server_default='10'),
        sa.Column('unit_price', sa.Float(), nullable=True),
        sa.Column('cost_price', sa.Float(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('barcode', sa.String(100), nullable=True),
        sa.Column('supplier', sa.String(255), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('critical', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('company_id', 'sku', name='uq_inventory_company_sku')
    )
    op.create_index('ix_inventory_company', 'inventory_items', ['company_id'], unique=False)
    op.create_index('ix_inventory_category', 'inventory_items', ['category'], unique=False)

    op.create_table('stock_movements',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('item_id', sa.String(36), nullable=False),
        sa.Column('movement_type', sa.String(20), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('previous_quantity', sa.Integer(), nullable=False),
        sa.Column('new_quantity', sa.Integer(), nullable=False),
        sa.Column('reason', sa.Text(), nullable=True),
        sa.Column('performed_by', sa.String(64), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['item_id'], ['inventory_items.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table('suppliers',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('address', sa.JSON(), nullable=True),
        sa.Column('contact_person', sa.String(255), nullable=True),
        sa.Column('tax_id', sa.String(100), nullable=True),
        sa.Column('payment_terms', sa.String(100), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_by', sa.String(64), nullable=True),
        sa.Column('updated_by', sa.String(64), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_suppliers_company_name', 'suppliers', ['company_id', 'name'], unique=False)

    op.create_table('leads',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('company', sa.String(255), nullable=True),
        sa.Column('source', sa.String(50), nullable=True, server_default='other'),
        sa.Column('status', sa.String(50), nullable=True, server_default='new'),
        sa.Column('assigned_to', sa.String(64), nullable=True),
        sa.Column('estimated_value', sa.Float(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_leads_company', 'leads', ['company_id'], unique=False)
    op.create_index('ix_leads_status', 'leads', ['status'], unique=False)

    op.create_table('deliveries',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('company_id', sa.String(64), nullable=False),
        sa.Column('delivery_number', sa.String(50), nullable=False),
        sa.Column('customer_name', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('status', sa.String(30), nullable=True, server_default='scheduled'),
        sa.Column('scheduled_date', sa.String(30), nullable=True),
        sa.Column('driver_name', sa.String(255), nullable=True),
        sa.Column('items', sa.JSON(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_deliveries_company', 'deliveries', ['company_id'], unique=False)


def downgrade():
    op.drop_index('ix_deliveries_company', table_name='deliveries')
    op.drop_table('deliveries')
    op.drop_index('ix_leads_status', table_name='leads')
    op.drop_index('ix_leads_company', table_name='leads')
    op.drop_table('leads')
    op.drop_index('ix_suppliers_company_name', table_name='suppliers')
    op.drop_table('suppliers')
    op.drop_table('stock_movements')
    op.drop_index('ix_inventory_category', table_name='inventory_items')
    op.drop_index('ix_inventory_company', table_name='inventory_items')
    op.drop_table('inventory_items')
