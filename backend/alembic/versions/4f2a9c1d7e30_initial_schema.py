"""Initial schema: users, categories, notes, shares, attachments

Revision ID: 4f2a9c1d7e30
Revises:
Create Date: 2025-10-02 18:20:11.402113

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from notekeeper.core.models.types import GUID


# revision identifiers, used by Alembic.
revision: str = '4f2a9c1d7e30'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('username', sa.String(length=30), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(username) <= 30', name='ck_users_username_len'),
        sa.CheckConstraint('username = lower(username)', name='ck_users_username_lowercase'),
        sa.CheckConstraint('email = lower(email)', name='ck_users_email_lowercase'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username'),
        sa.UniqueConstraint('email'),
    )
    op.create_index('idx_users_username', 'users', ['username'])
    op.create_index('idx_users_email', 'users', ['email'])

    op.create_table(
        'categories',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('color', sa.String(length=6), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'name', name='uq_categories_user_name'),
    )
    op.create_index('idx_categories_user_id', 'categories', ['user_id'])

    op.create_table(
        'notes',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('body', sa.Text(), nullable=False),
        sa.Column('color', sa.String(length=6), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('length(title) <= 200', name='ck_notes_title_len'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_notes_user_id', 'notes', ['user_id'])
    op.create_index('idx_notes_user_title', 'notes', ['user_id', 'title'])
    op.create_index('idx_notes_updated_at', 'notes', ['updated_at'])

    op.create_table(
        'note_categories',
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('category_id', GUID(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('note_id', 'category_id'),
    )
    op.create_index('idx_note_categories_category_id', 'note_categories', ['category_id'])

    op.create_table(
        'note_shares',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('user_id', GUID(), nullable=False),
        sa.Column('permission', sa.String(length=10), nullable=False),
        *_timestamps(),
        sa.CheckConstraint("permission IN ('view', 'edit')", name='ck_note_shares_permission'),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('note_id', 'user_id', name='uq_note_shares_note_user'),
    )
    op.create_index('idx_note_shares_note_id', 'note_shares', ['note_id'])
    op.create_index('idx_note_shares_user_id', 'note_shares', ['user_id'])

    op.create_table(
        'note_attachments',
        sa.Column('id', GUID(), nullable=False),
        sa.Column('note_id', GUID(), nullable=False),
        sa.Column('filename', sa.String(length=255), nullable=False),
        sa.Column('original_name', sa.String(length=255), nullable=False),
        sa.Column('mime_type', sa.String(length=127), nullable=False),
        sa.Column('size', sa.Integer(), nullable=False),
        sa.Column('path', sa.String(length=500), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('size >= 0 AND size <= 1048576', name='ck_attachments_size'),
        sa.ForeignKeyConstraint(['note_id'], ['notes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_note_attachments_note_id', 'note_attachments', ['note_id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('note_attachments')
    op.drop_table('note_shares')
    op.drop_table('note_categories')
    op.drop_table('notes')
    op.drop_table('categories')
    op.drop_table('users')
