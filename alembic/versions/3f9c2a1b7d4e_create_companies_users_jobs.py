"""create_companies_users_jobs

Creates the companies, users and jobs tables.

Revision ID: 3f9c2a1b7d4e
Revises:
Create Date: 2026-10-18 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a1b7d4e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'companies',
        sa.Column('handle', sa.String(length=25), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False, unique=True),
        sa.Column('num_employees', sa.Integer(), sa.CheckConstraint('num_employees >= 0'), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
    )

    op.create_table(
        'users',
        sa.Column('username', sa.String(length=25), primary_key=True, nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('salary', sa.Integer(), sa.CheckConstraint('salary >= 0'), nullable=True),
        sa.Column('equity', sa.Numeric(), sa.CheckConstraint('equity <= 1.0'), nullable=True),
        sa.Column('company_handle', sa.String(length=25), nullable=False),
        sa.ForeignKeyConstraint(['company_handle'], ['companies.handle'], ondelete='CASCADE'),
    )
    op.create_index('ix_jobs_id', 'jobs', ['id'])
    op.create_index('ix_jobs_title', 'jobs', ['title'])
    op.create_index('ix_jobs_company_handle', 'jobs', ['company_handle'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_jobs_company_handle', table_name='jobs')
    op.drop_index('ix_jobs_title', table_name='jobs')
    op.drop_index('ix_jobs_id', table_name='jobs')
    op.drop_table('jobs')
    op.drop_table('users')
    op.drop_table('companies')
