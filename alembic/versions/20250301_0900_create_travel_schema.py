"""create travel schema

Revision ID: 20250301_0900_create_travel_schema
Revises:
Create Date: 2025-03-01 09:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20250301_0900_create_travel_schema'
down_revision = None
branch_labels = None
depends_on = None


def _lookup_table(name: str) -> None:
    op.create_table(
        name,
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('label', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('colour', sa.String(), nullable=True),
        sa.UniqueConstraint('label', name=f'{name}_label_unique'),
    )
    op.create_index(f'ix_{name}_id', name, ['id'])


def _status_priority_columns():
    return [
        sa.Column(
            'status_id', sa.Integer(),
            sa.ForeignKey('travel_statuses.id', ondelete='RESTRICT', onupdate='CASCADE'),
            nullable=False,
        ),
        sa.Column(
            'priority_id', sa.Integer(),
            sa.ForeignKey('travel_priority_levels.id', ondelete='RESTRICT', onupdate='CASCADE'),
            nullable=False,
        ),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
    ]


def _address_columns():
    return [
        sa.Column(column, sa.String(), nullable=True)
        for column in (
            'address_street', 'address_line2', 'address_city',
            'address_region', 'address_postcode', 'address_country',
        )
    ]


def _owned_indexes(table: str) -> None:
    for column in ('id', 'status_id', 'priority_id', 'user_id'):
        op.create_index(f'ix_{table}_{column}', table, [column])


def upgrade() -> None:
    _lookup_table('travel_statuses')
    _lookup_table('travel_priority_levels')

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('avatar', sa.String(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
        sa.Column('login_count', sa.Integer(), server_default='0', nullable=False),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'destinations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('country', sa.String(), nullable=False),
        sa.Column('region', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('image', sa.String(), nullable=False),
        *_status_priority_columns(),
    )
    _owned_indexes('destinations')

    op.create_table(
        'activities',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column(
            'destination_id', sa.Integer(),
            sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('image', sa.String(), nullable=True),
        *_status_priority_columns(),
        *_address_columns(),
    )
    _owned_indexes('activities')
    op.create_index('ix_activities_destination_id', 'activities', ['destination_id'])

    op.create_table(
        'accommodations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column(
            'destination_id', sa.Integer(),
            sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.Column('image', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_status_priority_columns(),
        *_address_columns(),
    )
    _owned_indexes('accommodations')
    op.create_index('ix_accommodations_destination_id', 'accommodations', ['destination_id'])

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), server_default='', nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=False),
        sa.Column('image', sa.String(), nullable=True),
        *_status_priority_columns(),
    )
    _owned_indexes('trips')
    op.create_index('ix_trips_start_date', 'trips', ['start_date'])

    op.create_table(
        'trip_destinations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('trip_id', sa.Integer(), sa.ForeignKey('trips.id', ondelete='CASCADE'), nullable=False),
        sa.Column(
            'destination_id', sa.Integer(),
            sa.ForeignKey('destinations.id', ondelete='CASCADE'), nullable=False,
        ),
        sa.UniqueConstraint('trip_id', 'destination_id', name='trip_destinations_trip_destination_unique'),
    )
    op.create_index('ix_trip_destinations_id', 'trip_destinations', ['id'])
    op.create_index('ix_trip_destinations_trip_id', 'trip_destinations', ['trip_id'])
    op.create_index('ix_trip_destinations_destination_id', 'trip_destinations', ['destination_id'])


def downgrade() -> None:
    for table in ('trip_destinations', 'trips', 'accommodations', 'activities', 'destinations', 'users'):
        op.drop_table(table)
    op.drop_table('travel_priority_levels')
    op.drop_table('travel_statuses')
