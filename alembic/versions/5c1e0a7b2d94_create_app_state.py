"""create app_state

Revision ID: 5c1e0a7b2d94
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '5c1e0a7b2d94'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    # init_db may have created it already
    if 'app_state' in inspector.get_table_names():
        return

    op.create_table('app_state',
        sa.Column('id', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('products_json', sa.JSON(), nullable=True),
        sa.Column('history_json', sa.JSON(), nullable=True),
        sa.Column('start_date', sa.String(length=10), nullable=True),
        sa.Column('is_dark_theme', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade() -> None:
    op.drop_table('app_state')
