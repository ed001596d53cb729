"""create companies

Revision ID: 0001_create_companies
Revises:
Create Date: 2026-10-17 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision = '0001_create_companies'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('ceo', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('founded_year', sa.Integer(), nullable=True),
        sa.Column('logo_data', sa.LargeBinary(), nullable=True),
        sa.Column('logo_type', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        schema='company',
    )
    op.create_index(op.f('ix_company_companies_name'), 'companies', ['name'], unique=False, schema='company')
    op.create_index(op.f('ix_company_companies_founded_year'), 'companies', ['founded_year'], unique=False, schema='company')


def downgrade() -> None:
    op.drop_index(op.f('ix_company_companies_founded_year'), table_name='companies', schema='company')
    op.drop_index(op.f('ix_company_companies_name'), table_name='companies', schema='company')
    op.drop_table('companies', schema='company')
