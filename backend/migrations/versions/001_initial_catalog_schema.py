"""initial catalog schema

Revision ID: 001_initial_catalog_schema
Revises:
Create Date: 2026-10-19

Tables:
1. users - local mirror of identity-provider accounts
2. materials - material grades and datasheet properties
3. vendors
4. material_vendors - per-vendor pricing for a material
5. favorites - unique per (user, material)
6. reviews / review_helpful

Dependents of a material are removed with it (ON DELETE CASCADE).
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial_catalog_schema'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(255), primary_key=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('profile_image_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('email'),
    )

    op.create_table(
        'materials',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('manufacturer', sa.String(255), nullable=False),
        sa.Column('material_type', sa.String(50), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        # Mechanical
        sa.Column('tensile_strength', sa.Numeric(8, 2), nullable=True),
        sa.Column('flexural_strength', sa.Numeric(8, 2), nullable=True),
        sa.Column('impact_strength', sa.Numeric(8, 2), nullable=True),
        sa.Column('elongation_at_break', sa.Numeric(8, 2), nullable=True),
        # Thermal
        sa.Column('melting_temperature', sa.Numeric(8, 2), nullable=True),
        sa.Column('heat_deflection_temp', sa.Numeric(8, 2), nullable=True),
        sa.Column('vicat_softening_point', sa.Numeric(8, 2), nullable=True),
        sa.Column('thermal_expansion', sa.Numeric(12, 8), nullable=True),
        # Physical
        sa.Column('density', sa.Numeric(8, 3), nullable=True),
        sa.Column('mfr', sa.Numeric(8, 2), nullable=True),
        sa.Column('water_absorption', sa.Numeric(8, 2), nullable=True),
        sa.Column('shore_hardness', sa.Integer(), nullable=True),
        # Appearance
        sa.Column('color', sa.String(100), nullable=True),
        sa.Column('transparency', sa.String(50), nullable=True),
        # Certifications
        sa.Column('fda_approved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('ul94_rating', sa.String(10), nullable=True),
        sa.Column('rohs_compliant', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('reach_compliant', sa.Boolean(), nullable=False, server_default=sa.false()),
        # Documentation
        sa.Column('technical_data_sheet_url', sa.String(500), nullable=True),
        sa.Column('safety_data_sheet_url', sa.String(500), nullable=True),
        sa.Column('processing_guidelines_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_materials_id', 'materials', ['id'])
    op.create_index('ix_materials_manufacturer', 'materials', ['manufacturer'])
    op.create_index('ix_materials_material_type', 'materials', ['material_type'])
    op.create_index('ix_materials_created_at_id', 'materials', ['created_at', 'id'])

    op.create_table(
        'vendors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('contact_email', sa.String(255), nullable=True),
        sa.Column('contact_phone', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_vendors_id', 'vendors', ['id'])

    op.create_table(
        'material_vendors',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('material_id', sa.Integer(), sa.ForeignKey('materials.id', ondelete='CASCADE'), nullable=False),
        sa.Column('vendor_id', sa.Integer(), sa.ForeignKey('vendors.id'), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=True),
        sa.Column('currency', sa.String(3), nullable=False, server_default='USD'),
        sa.Column('minimum_order', sa.Numeric(10, 2), nullable=True),
        sa.Column('availability', sa.String(50), nullable=False, server_default='in_stock'),
        sa.Column('product_url', sa.String(500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_material_vendors_id', 'material_vendors', ['id'])
    op.create_index('ix_material_vendors_material', 'material_vendors', ['material_id'])
    op.create_index('ix_material_vendors_vendor_id', 'material_vendors', ['vendor_id'])

    op.create_table(
        'favorites',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('material_id', sa.Integer(), sa.ForeignKey('materials.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'material_id', name='uq_favorite_user_material'),
    )
    op.create_index('ix_favorites_id', 'favorites', ['id'])
    op.create_index('ix_favorites_user_id', 'favorites', ['user_id'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('material_id', sa.Integer(), sa.ForeignKey('materials.id', ondelete='CASCADE'), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('application', sa.String(255), nullable=True),
        sa.Column('processing_method', sa.String(100), nullable=True),
        sa.Column('verified_purchase', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('helpful_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_review_rating_range'),
    )
    op.create_index('ix_reviews_id', 'reviews', ['id'])
    op.create_index('ix_reviews_user_id', 'reviews', ['user_id'])
    op.create_index('ix_reviews_material_created', 'reviews', ['material_id', 'created_at'])

    op.create_table(
        'review_helpful',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('review_id', sa.Integer(), sa.ForeignKey('reviews.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.String(255), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('review_id', 'user_id', name='uq_review_helpful_user'),
    )
    op.create_index('ix_review_helpful_id', 'review_helpful', ['id'])


def downgrade():
    op.drop_table('review_helpful')
    op.drop_table('reviews')
    op.drop_table('favorites')
    op.drop_table('material_vendors')
    op.drop_table('vendors')
    op.drop_table('materials')
    op.drop_table('users')
