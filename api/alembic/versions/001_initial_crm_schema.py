"""initial_crm_schema

Revision ID: 001
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Crea companies, contacts y sync_runs."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('companies'):
        op.create_table('companies',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('hubspot_id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('domain', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_companies_hubspot_id'), 'companies', ['hubspot_id'], unique=True)

    if not inspector.has_table('contacts'):
        op.create_table('contacts',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('hubspot_id', sa.String(length=64), nullable=False),
        sa.Column('firstname', sa.String(length=255), nullable=True),
        sa.Column('lastname', sa.String(length=255), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('company_id', sa.String(length=36), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_contacts_hubspot_id'), 'contacts', ['hubspot_id'], unique=True)
        op.create_index(op.f('ix_contacts_email'), 'contacts', ['email'], unique=True)
        op.create_index(op.f('ix_contacts_company_id'), 'contacts', ['company_id'], unique=False)

    if not inspector.has_table('sync_runs'):
        op.create_table('sync_runs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('started_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('companies_processed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('contacts_processed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('contacts_skipped', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('error_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('last_error', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_sync_runs_status'), 'sync_runs', ['status'], unique=False)


def downgrade() -> None:
    """Elimina las tablas en orden inverso a las FK."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if inspector.has_table('sync_runs'):
        op.drop_index(op.f('ix_sync_runs_status'), table_name='sync_runs')
        op.drop_table('sync_runs')

    if inspector.has_table('contacts'):
        op.drop_index(op.f('ix_contacts_company_id'), table_name='contacts')
        op.drop_index(op.f('ix_contacts_email'), table_name='contacts')
        op.drop_index(op.f('ix_contacts_hubspot_id'), table_name='contacts')
        op.drop_table('contacts')

    if inspector.has_table('companies'):
        op.drop_index(op.f('ix_companies_hubspot_id'), table_name='companies')
        op.drop_table('companies')
