'''Initial schema: users, content awaiting approval, contact messages, community groups'''
from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import func

# revision identifiers, used by Alembic.
revision = '0001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _approvable_columns():
    return [
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('approved', sa.Boolean(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=func.now(), nullable=False),
        sa.Column('updated_at', sa.TIMESTAMP(timezone=True), server_default=func.now(), nullable=False),
    ]


def _owner_columns():
    return [
        sa.Column('created_by', sa.String(length=36), nullable=True),
        sa.ForeignKeyConstraint(['created_by'], ['users.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    ]


def upgrade():
    op.create_table('users',
                    *_approvable_columns(),
                    sa.Column('username', sa.String(length=80), nullable=False),
                    sa.Column('email', sa.String(length=255), nullable=False),
                    sa.Column('mobile', sa.String(length=20), nullable=True),
                    sa.Column('password', sa.String(length=255), nullable=False),
                    sa.Column('role', sa.Enum('ADMIN', 'COORDINATOR', 'MEMBER', name='userrole'), nullable=False),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('username'),
                    sa.UniqueConstraint('email')
                   )

    op.create_table('events',
                    *_approvable_columns(),
                    sa.Column('title', sa.String(length=255), nullable=False),
                    sa.Column('description', sa.Text(), nullable=False),
                    sa.Column('date', sa.Date(), nullable=False),
                    sa.Column('time', sa.String(length=50), nullable=True),
                    sa.Column('location', sa.String(length=255), nullable=True),
                    sa.Column('category', sa.Enum('WORSHIP', 'FELLOWSHIP', 'COMMUNITY', 'YOUTH', name='eventcategory'), nullable=False),
                    *_owner_columns()
                   )
    op.create_index('ix_events_date', 'events', ['date'])
    op.create_index('ix_events_created_by', 'events', ['created_by'])

    op.create_table('sermons',
                    *_approvable_columns(),
                    sa.Column('title', sa.String(length=255), nullable=False),
                    sa.Column('description', sa.Text(), nullable=False),
                    sa.Column('pastor', sa.String(length=255), nullable=False),
                    sa.Column('date', sa.Date(), nullable=False),
                    sa.Column('duration', sa.String(length=50), nullable=True),
                    sa.Column('audio_url', sa.String(length=1024), nullable=True),
                    sa.Column('thumbnail_url', sa.String(length=1024), nullable=True),
                    *_owner_columns()
                   )
    op.create_index('ix_sermons_date', 'sermons', ['date'])
    op.create_index('ix_sermons_created_by', 'sermons', ['created_by'])

    op.create_table('gallery_items',
                    *_approvable_columns(),
                    sa.Column('title', sa.String(length=255), nullable=False),
                    sa.Column('description', sa.Text(), nullable=True),
                    sa.Column('image_url', sa.String(length=1024), nullable=False),
                    sa.Column('category', sa.Enum('RECENT', 'WORSHIP', 'SERVICE', 'YOUTH', name='gallerycategory'), nullable=False),
                    sa.Column('is_video', sa.Boolean(), nullable=False),
                    *_owner_columns()
                   )
    op.create_index('ix_gallery_items_created_by', 'gallery_items', ['created_by'])

    op.create_table('contact_messages',
                    sa.Column('id', sa.String(length=36), nullable=False),
                    sa.Column('first_name', sa.String(length=100), nullable=False),
                    sa.Column('last_name', sa.String(length=100), nullable=False),
                    sa.Column('email', sa.String(length=255), nullable=False),
                    sa.Column('phone', sa.String(length=30), nullable=True),
                    sa.Column('subject', sa.String(length=255), nullable=False),
                    sa.Column('message', sa.Text(), nullable=False),
                    sa.Column('newsletter_opt_in', sa.Boolean(), nullable=False),
                    sa.Column('created_at', sa.TIMESTAMP(timezone=True), server_default=func.now(), nullable=False),
                    sa.PrimaryKeyConstraint('id')
                   )

    op.create_table('community_groups',
                    sa.Column('id', sa.String(length=64), nullable=False),
                    sa.Column('name', sa.String(length=255), nullable=False),
                    sa.Column('description', sa.Text(), nullable=False),
                    sa.Column('leader', sa.String(length=255), nullable=False),
                    sa.Column('meeting_time', sa.String(length=100), nullable=False),
                    sa.Column('location', sa.String(length=255), nullable=False),
                    sa.Column('category', sa.Enum('SUNDAY_SCHOOL', 'YOUTH', 'WOMEN', 'MEN', name='groupcategory'), nullable=False),
                    sa.Column('icon', sa.String(length=100), nullable=False),
                    sa.Column('color', sa.String(length=100), nullable=False),
                    sa.PrimaryKeyConstraint('id'),
                    sa.UniqueConstraint('name')
                   )


def downgrade():
    op.drop_table('community_groups')
    op.drop_table('contact_messages')
    op.drop_table('gallery_items')
    op.drop_table('sermons')
    op.drop_table('events')
    op.drop_table('users')
    for enum_name in ('groupcategory', 'gallerycategory', 'eventcategory', 'userrole'):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
