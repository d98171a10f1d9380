"""create users, posts, comments, likes and bookmarks

Revision ID: 4c1f0e9a7b21
Revises:
Create Date: 2026-10-18 09:12:44.120931

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1f0e9a7b21'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(with_updated_at: bool = True):
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]
    if with_updated_at:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True)
        )
    return columns


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('hashed_password', sa.String(255), nullable=False),
        sa.Column('avatar_url', sa.String(500), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='users_pkey'),
    )
    op.create_index('users_id_idx', 'users', ['id'])
    op.create_index('users_email_idx', 'users', ['email'], unique=True)

    op.create_table('posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('cover_image', sa.String(512), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=False),
        sa.Column('reading_time', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name='posts_pkey'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], name='posts_author_id_fkey', ondelete='CASCADE'),
    )
    op.create_index('posts_id_idx', 'posts', ['id'])
    op.create_index('posts_slug_idx', 'posts', ['slug'])
    op.create_index('posts_author_id_idx', 'posts', ['author_id'])

    op.create_table('comments',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('post_id', sa.Integer(), nullable=False),
        sa.Column('author_id', sa.Integer(), nullable=False),
        *_timestamps(with_updated_at=False),
        sa.PrimaryKeyConstraint('id', name='comments_pkey'),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id'], name='comments_post_id_fkey', ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['author_id'], ['users.id'], name='comments_author_id_fkey', ondelete='CASCADE'),
    )
    op.create_index('comments_id_idx', 'comments', ['id'])
    op.create_index('comments_post_id_idx', 'comments', ['post_id'])
    op.create_index('comments_author_id_idx', 'comments', ['author_id'])

    # One like / one bookmark per (user, post): the toggle relies on these
    for table, constraint in (
        ('post_likes', 'unique_user_post_like'),
        ('post_bookmarks', 'unique_user_post_bookmark'),
    ):
        op.create_table(table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('post_id', sa.Integer(), nullable=False),
            *_timestamps(with_updated_at=False),
            sa.PrimaryKeyConstraint('id', name=f'{table}_pkey'),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], name=f'{table}_user_id_fkey', ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['post_id'], ['posts.id'], name=f'{table}_post_id_fkey', ondelete='CASCADE'),
            sa.UniqueConstraint('user_id', 'post_id', name=constraint),
        )
        op.create_index(f'{table}_id_idx', table, ['id'])
        op.create_index(f'{table}_post_id_idx', table, ['post_id'])


def downgrade() -> None:
    """Downgrade schema."""
    for table in ('post_bookmarks', 'post_likes'):
        op.drop_index(f'{table}_post_id_idx', table_name=table)
        op.drop_index(f'{table}_id_idx', table_name=table)
        op.drop_table(table)

    op.drop_index('comments_author_id_idx', table_name='comments')
    op.drop_index('comments_post_id_idx', table_name='comments')
    op.drop_index('comments_id_idx', table_name='comments')
    op.drop_table('comments')

    op.drop_index('posts_author_id_idx', table_name='posts')
    op.drop_index('posts_slug_idx', table_name='posts')
    op.drop_index('posts_id_idx', table_name='posts')
    op.drop_table('posts')

    op.drop_index('users_email_idx', table_name='users')
    op.drop_index('users_id_idx', table_name='users')
    op.drop_table('users')
