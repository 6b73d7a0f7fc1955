"""initial_schema

Revision ID: a1c2e3g4i5k6
Revises:
Create Date: 2026-10-19 10:00:00.000000

초기 스키마 생성: members, addresses, refresh_tokens, brands, products,
product_images, product_sizes, trades.
Create the initial schema for the shoe resale marketplace.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3g4i5k6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # members — 회원 (Members, email unique)
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', sa.String(10), nullable=False),
        sa.Column('shoe_size', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    # addresses — 배송지 (one base address per member)
    op.create_table(
        'addresses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(30), nullable=False),
        sa.Column('address_line', sa.String(255), nullable=False),
        sa.Column('detail', sa.String(255), nullable=True),
        sa.Column('zip_code', sa.String(10), nullable=False),
        sa.Column('is_base', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    )
    op.create_index('ix_addresses_member_id', 'addresses', ['member_id'])

    # refresh_tokens — 리프레시 토큰 (Stored refresh tokens)
    op.create_table(
        'refresh_tokens',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('token', sa.String(512), nullable=False, unique=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    # brands — 브랜드 (Brand name unique)
    op.create_table(
        'brands',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    # products — 상품 (Korean and English names unique)
    op.create_table(
        'products',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('kor_name', sa.String(255), nullable=False, unique=True),
        sa.Column('eng_name', sa.String(255), nullable=False, unique=True),
        sa.Column('code', sa.String(100), nullable=True),
        sa.Column('color', sa.String(100), nullable=True),
        sa.Column('release_price', sa.Integer(), nullable=True),
        sa.Column('brand_id', sa.Integer(), sa.ForeignKey('brands.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_products_brand_id', 'products', ['brand_id'])

    # product_images — 상품 이미지 (Image names per product)
    op.create_table(
        'product_images',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_product_images_product_id', 'product_images', ['product_id'])

    # product_sizes — 상품 사이즈 (17 buckets 220..300 per product)
    op.create_table(
        'product_sizes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('product_id', sa.Integer(), sa.ForeignKey('products.id', ondelete='CASCADE'), nullable=False),
    )
    op.create_index('ix_product_sizes_product_id', 'product_sizes', ['product_id'])

    # trades — 입찰 (BUY / SELL / DONE)
    op.create_table(
        'trades',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('price', sa.Integer(), nullable=False),
        sa.Column('trade_state', sa.String(10), nullable=False),
        sa.Column('product_size_id', sa.Integer(), sa.ForeignKey('product_sizes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('member_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('counterparty_id', sa.Integer(), sa.ForeignKey('members.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_modified_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_trades_product_size_id', 'trades', ['product_size_id'])
    op.create_index('ix_trades_member_id', 'trades', ['member_id'])
    op.create_index('ix_trades_trade_state', 'trades', ['trade_state'])


def downgrade() -> None:
    op.drop_index('ix_trades_trade_state', table_name='trades')
    op.drop_index('ix_trades_member_id', table_name='trades')
    op.drop_index('ix_trades_product_size_id', table_name='trades')
    op.drop_table('trades')
    op.drop_index('ix_product_sizes_product_id', table_name='product_sizes')
    op.drop_table('product_sizes')
    op.drop_index('ix_product_images_product_id', table_name='product_images')
    op.drop_table('product_images')
    op.drop_index('ix_products_brand_id', table_name='products')
    op.drop_table('products')
    op.drop_table('brands')
    op.drop_table('refresh_tokens')
    op.drop_index('ix_addresses_member_id', table_name='addresses')
    op.drop_table('addresses')
    op.drop_table('members')
