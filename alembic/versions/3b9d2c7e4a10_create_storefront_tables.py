"""create_storefront_tables

Revision ID: 3b9d2c7e4a10
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3b9d2c7e4a10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

availability_status = sa.Enum('available', 'sold', 'reserved', name='availability_status')
condition = sa.Enum('excellent', 'very_good', 'good', 'fair', 'needs_restoration', name='condition')


def upgrade() -> None:
    op.create_table('antique_items',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.Column('origin', sa.Text(), nullable=True),
        sa.Column('price', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('availability_status', availability_status, nullable=False, server_default='available'),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('condition', condition, nullable=False),
        sa.Column('dimensions', sa.Text(), nullable=True),
        sa.Column('material', sa.Text(), nullable=True),
        sa.Column('main_image_url', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_antique_items_id'), 'antique_items', ['id'], unique=False)

    op.create_table('gallery_images',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=False),
        sa.Column('alt_text', sa.Text(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_gallery_images_id'), 'gallery_images', ['id'], unique=False)
    # Index on display_order for efficient ordering
    op.create_index(op.f('ix_gallery_images_display_order'), 'gallery_images', ['display_order'], unique=False)

    op.create_table('page_content',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('page_slug', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('meta_description', sa.Text(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('page_slug')
    )
    op.create_index(op.f('ix_page_content_id'), 'page_content', ['id'], unique=False)

    op.create_table('contact_forms',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('phone', sa.Text(), nullable=True),
        sa.Column('subject', sa.Text(), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_contact_forms_id'), 'contact_forms', ['id'], unique=False)

    # Singleton: the only allowed row has id = 1
    op.create_table('store_settings',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('store_name', sa.Text(), nullable=False),
        sa.Column('store_description', sa.Text(), nullable=True),
        sa.Column('contact_email', sa.Text(), nullable=False),
        sa.Column('contact_phone', sa.Text(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('business_hours', sa.Text(), nullable=True),
        sa.Column('google_maps_embed_url', sa.Text(), nullable=True),
        sa.Column('social_facebook', sa.Text(), nullable=True),
        sa.Column('social_instagram', sa.Text(), nullable=True),
        sa.Column('social_twitter', sa.Text(), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint('id = 1', name='ck_store_settings_singleton'),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('store_settings')
    op.drop_index(op.f('ix_contact_forms_id'), table_name='contact_forms')
    op.drop_table('contact_forms')
    op.drop_index(op.f('ix_page_content_id'), table_name='page_content')
    op.drop_table('page_content')
    op.drop_index(op.f('ix_gallery_images_display_order'), table_name='gallery_images')
    op.drop_index(op.f('ix_gallery_images_id'), table_name='gallery_images')
    op.drop_table('gallery_images')
    op.drop_index(op.f('ix_antique_items_id'), table_name='antique_items')
    op.drop_table('antique_items')
    condition.drop(op.get_bind(), checkfirst=True)
    availability_status.drop(op.get_bind(), checkfirst=True)
