"""Create rental tables

Revision ID: 001
Revises:
Create Date: 2024-05-01 10:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, rentals and movies tables"""

    # 1. Create users table
    op.create_table('users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('national_id', sa.String(20), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('national_id', name='uq_users_national_id'),
    )

    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2. Create rentals table
    op.create_table('rentals',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('closed', sa.Boolean(), server_default=sa.text('false'), nullable=False),

        sa.PrimaryKeyConstraint('id', name='pk_rentals'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], name='fk_rentals_user_id_users', ondelete='CASCADE'),
        sa.CheckConstraint('end_date >= start_date', name='ck_rentals_period'),
    )

    op.create_index('ix_rentals_user_id', 'rentals', ['user_id'])
    # At most one open rental per user
    op.create_index(
        'uq_rentals_user_id_open',
        'rentals',
        ['user_id'],
        unique=True,
        postgresql_where=sa.text('closed = false'),
    )

    # 3. Create movies table
    op.create_table('movies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('adults_only', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('rental_id', sa.Integer(), nullable=True),

        sa.PrimaryKeyConstraint('id', name='pk_movies'),
        sa.ForeignKeyConstraint(['rental_id'], ['rentals.id'], name='fk_movies_rental_id_rentals', ondelete='SET NULL'),
    )

    op.create_index('ix_movies_rental_id', 'movies', ['rental_id'])


def downgrade() -> None:
    """Drop rental tables"""
    op.drop_index('ix_movies_rental_id', table_name='movies')
    op.drop_table('movies')

    op.drop_index('uq_rentals_user_id_open', table_name='rentals')
    op.drop_index('ix_rentals_user_id', table_name='rentals')
    op.drop_table('rentals')

    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
