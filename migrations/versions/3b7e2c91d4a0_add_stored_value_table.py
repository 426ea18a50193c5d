"""Add stored_value table for the key-value store

Revision ID: 3b7e2c91d4a0
Revises:
Create Date: 2026-10-19 10:12:40.118302

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b7e2c91d4a0'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'stored_value',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=100), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    with op.batch_alter_table('stored_value', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_stored_value_key'), ['key'], unique=True)


def downgrade():
    with op.batch_alter_table('stored_value', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_stored_value_key'))
    op.drop_table('stored_value')
