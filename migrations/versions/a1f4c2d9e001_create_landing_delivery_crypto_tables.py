"""create landing, profile and crypto tables

Revision ID: a1f4c2d9e001
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1f4c2d9e001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated_only=False):
    cols = [sa.Column('updated_at', sa.DateTime(), nullable=True)]
    if not updated_only:
        cols.insert(0, sa.Column('created_at', sa.DateTime(), nullable=True))
    return cols


def upgrade():
    op.create_table(
        'landing_testimonials',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), nullable=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('quote', sa.Text(), nullable=False),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('metrics', sa.JSON(), nullable=True),
        sa.Column('category', sa.Text(), nullable=False, server_default='general'),
        sa.Column('rating', sa.Integer(), nullable=True, server_default='5'),
        sa.Column('is_verified', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('is_featured', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('order', sa.Integer(), nullable=True, server_default='0'),
        *_timestamps(),
    )
    op.create_index('landing_testimonials_category_idx', 'landing_testimonials', ['category'])
    op.create_index('landing_testimonials_featured_idx', 'landing_testimonials', ['is_featured'])
    op.create_index('landing_testimonials_order_idx', 'landing_testimonials', ['order'])

    op.create_table(
        'landing_faqs',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('category', sa.Text(), nullable=False, server_default='general'),
        sa.Column('order', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=True, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('landing_faqs_category_idx', 'landing_faqs', ['category'])
    op.create_index('landing_faqs_active_idx', 'landing_faqs', ['is_active'])
    op.create_index('landing_faqs_order_idx', 'landing_faqs', ['order'])

    op.create_table(
        'landing_use_cases',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_type', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('results', sa.JSON(), nullable=True),
        sa.Column('timeline_weeks', sa.Integer(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('order', sa.Integer(), nullable=True, server_default='0'),
        *_timestamps(),
    )
    op.create_index('landing_use_cases_user_type_idx', 'landing_use_cases', ['user_type'])
    op.create_index('landing_use_cases_featured_idx', 'landing_use_cases', ['is_featured'])
    op.create_index('landing_use_cases_order_idx', 'landing_use_cases', ['order'])

    op.create_table(
        'landing_social_proof_stats',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('metric_name', sa.Text(), nullable=False, unique=True),
        sa.Column('current_value', sa.Numeric(20, 0), nullable=False),
        sa.Column('unit', sa.Text(), nullable=False),
        sa.Column('display_format', sa.Text(), nullable=True, server_default='number'),
        sa.Column('label', sa.Text(), nullable=False),
        sa.Column('icon', sa.Text(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=True, server_default='0'),
        *_timestamps(updated_only=True),
    )
    op.create_index('landing_stats_metric_name_idx', 'landing_social_proof_stats', ['metric_name'])

    op.create_table(
        'landing_comparison_matrix',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('feature_name', sa.Text(), nullable=False),
        sa.Column('category', sa.Text(), nullable=False),
        sa.Column('eloity_has', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('feature_description', sa.Text(), nullable=True),
        sa.Column('competitors', sa.JSON(), nullable=True),
        sa.Column('order', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('is_active', sa.Boolean(), nullable=True, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('landing_comparison_category_idx', 'landing_comparison_matrix', ['category'])
    op.create_index('landing_comparison_active_idx', 'landing_comparison_matrix', ['is_active'])

    op.create_table(
        'landing_waitlist_leads',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(length=320), nullable=False, unique=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('user_type_interested', sa.String(length=50), nullable=True, server_default='not_sure'),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('message', sa.Text(), nullable=True),
        sa.Column('source', sa.String(length=50), nullable=True, server_default='homepage'),
        sa.Column('lead_score', sa.Integer(), nullable=True, server_default='0'),
        sa.Column('is_verified', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('conversion_status', sa.String(length=30), nullable=True, server_default='waitlist'),
        *_timestamps(),
    )
    op.create_index('landing_waitlist_email_idx', 'landing_waitlist_leads', ['email'])
    op.create_index('landing_waitlist_status_idx', 'landing_waitlist_leads', ['conversion_status'])
    op.create_index('landing_waitlist_score_idx', 'landing_waitlist_leads', ['lead_score'])
    op.create_index('landing_waitlist_created_idx', 'landing_waitlist_leads', ['created_at'])

    op.create_table(
        'profiles',
        sa.Column('user_id', sa.String(length=36), primary_key=True),
        sa.Column('username', sa.String(length=50), nullable=True, unique=True),
        sa.Column('full_name', sa.String(length=100), nullable=True),
        sa.Column('avatar_url', sa.Text(), nullable=True),
        sa.Column('location', sa.String(length=100), nullable=True),
        sa.Column('role', sa.String(length=20), nullable=True, server_default='user'),
        sa.Column('is_verified', sa.Boolean(), nullable=True, server_default=sa.false()),
        sa.Column('is_delivery_provider', sa.Boolean(), nullable=True, server_default=sa.false()),
        *_timestamps(),
    )

    op.create_table(
        'crypto_market_tickers',
        sa.Column('id', sa.BigInteger(), primary_key=True),
        sa.Column('symbol', sa.String(length=20), nullable=False),
        sa.Column('last_price', sa.Float(), nullable=False),
        sa.Column('volume_24h', sa.Float(), nullable=True),
        sa.Column('price_24h_change', sa.Float(), nullable=True),
        sa.Column('high_24h', sa.Float(), nullable=True),
        sa.Column('low_24h', sa.Float(), nullable=True),
        sa.Column('source', sa.String(length=20), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_crypto_market_tickers_symbol', 'crypto_market_tickers', ['symbol'], unique=True)
    op.create_index('ix_market_ticker_expires', 'crypto_market_tickers', ['expires_at'])

    op.create_table(
        'p2p_orders',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('type', sa.String(length=4), nullable=False),
        sa.Column('cryptocurrency', sa.String(length=10), nullable=False),
        sa.Column('fiat_currency', sa.String(length=10), nullable=False),
        sa.Column('price', sa.Numeric(18, 2), nullable=False),
        sa.Column('amount', sa.Numeric(28, 8), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=True, server_default='active'),
        *_timestamps(),
    )
    op.create_index('ix_p2p_orders_user_id', 'p2p_orders', ['user_id'])
    op.create_index('ix_p2p_pair_type_status', 'p2p_orders', ['cryptocurrency', 'fiat_currency', 'type', 'status'])


def downgrade():
    op.drop_table('p2p_orders')
    op.drop_table('crypto_market_tickers')
    op.drop_table('profiles')
    op.drop_table('landing_waitlist_leads')
    op.drop_table('landing_comparison_matrix')
    op.drop_table('landing_social_proof_stats')
    op.drop_table('landing_use_cases')
    op.drop_table('landing_faqs')
    op.drop_table('landing_testimonials')
