"""create category and item tables

Revision ID: 3f2a9c1d7b40
Revises:
Create Date: 2024-11-02 10:14:27.518204

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f2a9c1d7b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'category',
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('category_name', sa.String(length=255), nullable=False),
        sa.Column('category_image_link', sa.String(length=2048), nullable=False),
        sa.PrimaryKeyConstraint('category_id'),
    )
    op.create_index(op.f('ix_category_category_id'), 'category', ['category_id'], unique=False)

    op.create_table(
        'item',
        sa.Column('item_id', sa.Integer(), nullable=False),
        sa.Column('item_name', sa.String(length=255), nullable=False),
        sa.Column('item_desc', sa.Text(), nullable=False),
        sa.Column('item_price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('item_stock', sa.Integer(), nullable=False),
        sa.Column('item_status', sa.Boolean(), nullable=False),
        sa.Column('item_image_link', sa.String(length=2048), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.CheckConstraint('item_price >= 0', name='ck_item_price_non_negative'),
        sa.CheckConstraint('item_stock >= 0', name='ck_item_stock_non_negative'),
        sa.ForeignKeyConstraint(['category_id'], ['category.category_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('item_id'),
    )
    op.create_index(op.f('ix_item_item_id'), 'item', ['item_id'], unique=False)
    op.create_index(op.f('ix_item_item_name'), 'item', ['item_name'], unique=False)
    op.create_index(op.f('ix_item_category_id'), 'item', ['category_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_item_category_id'), table_name='item')
    op.drop_index(op.f('ix_item_item_name'), table_name='item')
    op.drop_index(op.f('ix_item_item_id'), table_name='item')
    op.drop_table('item')
    op.drop_index(op.f('ix_category_category_id'), table_name='category')
    op.drop_table('category')
