"""Initial Myymotto schema

Revision ID: 4f1c2a9e7b3d
Revises:
Create Date: 2026-10-18 09:00:00.000000

Tables: users, vehicles, document_expiries, notifications.

notifications carries a unique constraint on (vehicle_id, type, message_key)
so two expiry sweeps running at once cannot store the same reminder twice.
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '4f1c2a9e7b3d'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=150), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('mobile', sa.String(length=20), nullable=True),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('user_id'),
        sa.UniqueConstraint('username'),
    )
    op.create_index('ix_users_user_id', 'users', ['user_id'])

    op.create_table(
        'vehicles',
        sa.Column('vehicle_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('make', sa.String(length=100), nullable=False),
        sa.Column('model', sa.String(length=100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('color', sa.String(length=50), nullable=False),
        sa.Column('license_plate', sa.String(length=20), nullable=False),
        sa.Column('chassis_number', sa.String(length=50), nullable=True),
        sa.Column('engine_number', sa.String(length=50), nullable=True),
        sa.Column('owner_name', sa.String(length=150), nullable=False),
        sa.Column('owner_phone', sa.String(length=20), nullable=True),
        sa.Column('insurance_expiry', sa.Date(), nullable=True),
        sa.Column('emission_expiry', sa.Date(), nullable=True),
        sa.Column('rc_expiry', sa.Date(), nullable=True),
        sa.Column('last_service_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('vehicle_id'),
        sa.UniqueConstraint('license_plate'),
    )
    op.create_index('ix_vehicles_vehicle_id', 'vehicles', ['vehicle_id'])
    op.create_index('ix_vehicles_user_id', 'vehicles', ['user_id'])

    op.create_table(
        'document_expiries',
        sa.Column('document_expiry_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('vehicle_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('document_type', sa.String(length=30), nullable=False),
        sa.Column('expiry_date', sa.Date(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('issue_date', sa.Date(), nullable=True),
        sa.Column('reminder_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['vehicle_id'], ['vehicles.vehicle_id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('document_expiry_id'),
    )
    op.create_index('ix_document_expiries_document_expiry_id', 'document_expiries', ['document_expiry_id'])
    op.create_index('ix_document_expiries_user_id', 'document_expiries', ['user_id'])
    op.create_index(
        'ix_document_expiries_vehicle_type', 'document_expiries', ['vehicle_id', 'document_type', 'is_active']
    )

    op.create_table(
        'notifications',
        sa.Column('notification_id', sa.Integer(), nullable=False),
        sa.Column('vehicle_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('message_key', sa.String(length=100), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['vehicle_id'], ['vehicles.vehicle_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('notification_id'),
        sa.UniqueConstraint('vehicle_id', 'type', 'message_key', name='uq_notification_vehicle_type_key'),
    )
    op.create_index('ix_notifications_notification_id', 'notifications', ['notification_id'])
    op.create_index('ix_notifications_vehicle_id', 'notifications', ['vehicle_id'])


def downgrade() -> None:
    op.drop_index('ix_notifications_vehicle_id', table_name='notifications')
    op.drop_index('ix_notifications_notification_id', table_name='notifications')
    op.drop_table('notifications')
    op.drop_index('ix_document_expiries_vehicle_type', table_name='document_expiries')
    op.drop_index('ix_document_expiries_user_id', table_name='document_expiries')
    op.drop_index('ix_document_expiries_document_expiry_id', table_name='document_expiries')
    op.drop_table('document_expiries')
    op.drop_index('ix_vehicles_user_id', table_name='vehicles')
    op.drop_index('ix_vehicles_vehicle_id', table_name='vehicles')
    op.drop_table('vehicles')
    op.drop_index('ix_users_user_id', table_name='users')
    op.drop_table('users')
