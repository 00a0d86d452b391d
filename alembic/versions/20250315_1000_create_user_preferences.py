"""create user preferences

Revision ID: 20250315_1000_create_user_preferences
Revises: 20250301_0900_create_travel_schema
Create Date: 2025-03-15 10:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20250315_1000_create_user_preferences'
down_revision = '20250301_0900_create_travel_schema'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'user_preferences',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('theme', sa.String(), server_default='light', nullable=False),
        sa.Column('language', sa.String(), server_default='en', nullable=False),
        sa.Column('time_format', sa.String(), server_default='12h', nullable=False),
        sa.Column('email_notifications', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('push_notifications', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('trip_reminders', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('marketing_emails', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('show_profile', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('share_trips', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('allow_friend_requests', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('two_factor_enabled', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('receive_login_alerts', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.UniqueConstraint('user_id', name='user_preferences_user_id_unique'),
    )
    op.create_index('ix_user_preferences_id', 'user_preferences', ['id'])


def downgrade() -> None:
    op.drop_index('ix_user_preferences_id', table_name='user_preferences')
    op.drop_table('user_preferences')
