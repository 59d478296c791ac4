"""Create artist and song tables

Revision ID: 3f1c2b7a9d10
Revises:
Create Date: 2026-10-19 10:12:41.530217

"""

# revision identifiers, used by Alembic.
revision = '3f1c2b7a9d10'
down_revision = None

from alembic import op
import sqlalchemy as sa

def upgrade():
    op.create_table('Artist',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )
    op.create_table('Song',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('released', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('singerId', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['singerId'], ['Artist.id']),
        sa.PrimaryKeyConstraint('id'),
    )


def downgrade():
    op.drop_table('Song')
    op.drop_table('Artist')
