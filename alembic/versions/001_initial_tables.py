"""initial_tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-17 12:00:00

Create translation storage and API users:
- translations(key, locale) indexed for lookup/locale queries
- translation_tags(tag) indexed for tag membership queries
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'translations',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('key', sa.String(length=255), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('locale', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_translations_key', 'translations', ['key'], unique=False)
    op.create_index('ix_translations_locale', 'translations', ['locale'], unique=False)
    
    op.create_table(
        'translation_tags',
        sa.Column('translation_id', sa.String(length=36), nullable=False),
        sa.Column('tag', sa.String(), nullable=False),
        sa.ForeignKeyConstraint(['translation_id'], ['translations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('translation_id', 'tag'),
    )
    op.create_index('ix_translation_tags_tag', 'translation_tags', ['tag'], unique=False)
    
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)


def downgrade():
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
    op.drop_index('ix_translation_tags_tag', table_name='translation_tags')
    op.drop_table('translation_tags')
    op.drop_index('ix_translations_locale', table_name='translations')
    op.drop_index('ix_translations_key', table_name='translations')
    op.drop_table('translations')
