"""Initial migration with users, mortgage calculations and properties

Revision ID: 3f9a1c2d7b40
Revises: 
Create Date: 2026-10-19 10:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9a1c2d7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - Create users, mortgage_calculations and real_estate_properties tables."""
    op.create_table(
        'users',
        sa.Column('id', sa.String(24), primary_key=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        # Weak back-references (id lists), no foreign keys
        sa.Column('mortgage_calculations', sa.JSON(), nullable=False),
        sa.Column('real_estate_properties', sa.JSON(), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'mortgage_calculations',
        sa.Column('id', sa.String(24), primary_key=True),
        sa.Column('loan_amount', sa.Float(), nullable=True),
        sa.Column('interest_rate', sa.Float(), nullable=True),
        sa.Column('term', sa.Float(), nullable=True),
        sa.Column('property_value', sa.Float(), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True),
    )

    op.create_table(
        'real_estate_properties',
        sa.Column('id', sa.String(24), primary_key=True),
        sa.Column('property_address', sa.String(), nullable=True),
        sa.Column('purchase_price', sa.Float(), nullable=True),
        sa.Column('purchase_date', sa.DateTime(), nullable=True),
        sa.Column('original_loan_amount', sa.Float(), nullable=True),
        sa.Column('current_loan_amount', sa.Float(), nullable=True),
        sa.Column('interest_rate', sa.Float(), nullable=True),
        sa.Column('home_type', sa.String(), nullable=True),
        sa.Column('user_id', sa.String(24), nullable=True),
    )
    op.create_index('ix_real_estate_properties_user_id', 'real_estate_properties', ['user_id'])


def downgrade() -> None:
    """Downgrade schema - Drop tables."""
    op.drop_index('ix_real_estate_properties_user_id', table_name='real_estate_properties')
    op.drop_table('real_estate_properties')
    op.drop_table('mortgage_calculations')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
