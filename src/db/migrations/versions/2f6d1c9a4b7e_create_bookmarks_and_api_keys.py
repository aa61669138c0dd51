"""
Create bookmarks and api_keys tables.

Revision ID: 2f6d1c9a4b7e
Revises:
Create Date: 2026-10-19 10:12:41.305118

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = '2f6d1c9a4b7e'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'bookmarks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('url', sa.Text(), nullable=False),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'api_keys',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column(
            'key_value',
            sa.String(length=255),
            nullable=False,
            comment="Value clients send in the 'apikey' header (not unique)",
        ),
        sa.Column('company', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_api_keys_key_value'), 'api_keys', ['key_value'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_api_keys_key_value'), table_name='api_keys')
    op.drop_table('api_keys')
    op.drop_table('bookmarks')
