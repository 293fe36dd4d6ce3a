"""Create portfolio tables

Revision ID: 3b1f6c2a9d10
Revises:
Create Date: 2026-10-19 10:12:41.508113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3b1f6c2a9d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('short_description', sa.Text(), nullable=False),
        sa.Column('project_type', sa.String(length=128), nullable=False),
        sa.Column('cover_image', sa.String(length=1024), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_projects_created_at', 'projects', [sa.text('created_at DESC')])

    # Media rows go with their project
    op.create_table(
        'project_media',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('project_id', sa.String(length=64), nullable=False),
        sa.Column('media_type', sa.String(length=16), nullable=False),
        sa.Column('media_path', sa.String(length=1024), nullable=False),
        sa.Column('media_description', sa.Text(), nullable=False),
        sa.Column('sort_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['project_id'], ['projects.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_project_media_order', 'project_media', ['project_id', 'sort_order', 'created_at'])

    op.create_table(
        'admin_session',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('token', sa.String(length=512), nullable=False),
        sa.Column('can_edit', sa.Boolean(), nullable=False),
        sa.Column('ip_address', sa.String(length=128), nullable=True),
        sa.Column('user_agent', sa.String(length=512), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_admin_session_token', 'admin_session', ['token'], unique=True)
    op.create_index('idx_admin_session_expires_at', 'admin_session', ['expires_at'])


def downgrade() -> None:
    op.drop_index('idx_admin_session_expires_at', table_name='admin_session')
    op.drop_index('ix_admin_session_token', table_name='admin_session')
    op.drop_table('admin_session')
    op.drop_index('idx_project_media_order', table_name='project_media')
    op.drop_table('project_media')
    op.drop_index('idx_projects_created_at', table_name='projects')
    op.drop_table('projects')
