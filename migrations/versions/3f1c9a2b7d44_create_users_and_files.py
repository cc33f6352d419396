"""create_users_and_files

Revision ID: 3f1c9a2b7d44
Revises:
Create Date: 2026-10-19 10:12:31.418204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d44'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'files',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.Enum('folder', 'file', 'image', name='file_type'), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        sa.Column('parent_id', sa.Integer(), nullable=True),
        sa.Column('local_path', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.CheckConstraint(
            "(type = 'folder') = (local_path IS NULL)",
            name='ck_files_local_path_iff_content',
        ),
    )
    op.create_index('ix_files_id', 'files', ['id'])
    op.create_index('ix_files_owner_id', 'files', ['owner_id'])
    op.create_index('ix_files_parent_id', 'files', ['parent_id'])

def downgrade():
    op.drop_table('files')
    op.drop_table('users')
    sa.Enum(name='file_type').drop(op.get_bind(), checkfirst=True)
