"""Create users, campaigns and donations tables

Revision ID: 4f2a9c1d7e10
Revises:
Create Date: 2025-10-06 10:12:44.118402

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('full_name', sa.Text(), nullable=True),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column('password_hash', sa.Text(), nullable=False),
        sa.Column('user_type', sa.String(length=20), nullable=False),
        sa.Column('account_type', sa.String(length=20), nullable=True),
        sa.Column('mobile_number', sa.String(length=15), nullable=True),
        sa.Column('ngo_id', sa.String(length=100), nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('city', sa.Text(), nullable=True),
        sa.Column('pincode', sa.String(length=10), nullable=True),
        sa.Column('country', sa.Text(), nullable=True),
        sa.Column('occupation', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "mobile_number IS NULL OR (char_length(mobile_number) = 10 AND mobile_number ~ '^[0-9]+$')",
            name='chk_mobile_length',
        ),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'campaigns',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('target_amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('raised_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('creator_name', sa.String(length=255), nullable=False),
        sa.Column('image', sa.String(length=255), nullable=False),
        sa.Column('days_left', sa.Integer(), nullable=False),
        sa.Column('supporters', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('target_amount > 0', name='chk_campaign_target_positive'),
        sa.CheckConstraint('raised_amount >= 0', name='chk_campaign_raised_non_negative'),
        sa.CheckConstraint('supporters >= 0', name='chk_campaign_supporters_non_negative'),
        sa.CheckConstraint('days_left >= 0', name='chk_campaign_days_left_non_negative'),
    )
    op.create_index('idx_campaigns_created_at', 'campaigns', ['created_at'])

    op.create_table(
        'donations',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text('gen_random_uuid()')),
        sa.Column(
            'campaign_id',
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey('campaigns.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('donor_name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP')),
        sa.CheckConstraint('amount > 0', name='chk_donation_amount_positive'),
    )
    op.create_index('idx_donations_campaign_id_created_at', 'donations', ['campaign_id', 'created_at'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_donations_campaign_id_created_at', table_name='donations')
    op.drop_table('donations')
    op.drop_index('idx_campaigns_created_at', table_name='campaigns')
    op.drop_table('campaigns')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
