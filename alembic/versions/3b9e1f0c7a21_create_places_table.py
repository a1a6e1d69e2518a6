"""create_places_table

Revision ID: 3b9e1f0c7a21
Revises:
Create Date: 2026-10-19 10:12:04.318227

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '3b9e1f0c7a21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('places',
        sa.Column('internal_id', sa.Integer(), nullable=False),
        sa.Column('location_latitude', sa.Float(), nullable=True),
        sa.Column('location_longitude', sa.Float(), nullable=True),
        sa.Column('viewport_northeast_latitude', sa.Float(), nullable=True),
        sa.Column('viewport_northeast_longitude', sa.Float(), nullable=True),
        sa.Column('viewport_southwest_latitude', sa.Float(), nullable=True),
        sa.Column('viewport_southwest_longitude', sa.Float(), nullable=True),
        sa.Column('business_status', sa.Text(), nullable=True),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('place_id', sa.Text(), nullable=True),
        sa.Column('reference', sa.Text(), nullable=True),
        sa.Column(
            'types',
            sa.JSON(none_as_null=True).with_variant(postgresql.ARRAY(sa.Text()), 'postgresql'),
            nullable=True,
        ),
        sa.Column('vicinity', sa.Text(), nullable=True),
        sa.Column('opening_hours', sa.JSON(none_as_null=True), nullable=True),
        sa.PrimaryKeyConstraint('internal_id'),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f('ix_places_internal_id'), 'places', ['internal_id'], unique=False)
    op.create_index(op.f('ix_places_place_id'), 'places', ['place_id'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_places_place_id'), table_name='places')
    op.drop_index(op.f('ix_places_internal_id'), table_name='places')
    op.drop_table('places')
