"""Profiles, emergency contacts, documents and maintenance schedules

Revision ID: 9b2e6d4c1a07
Revises: 4f1c2a9e7b3d
Create Date: 2026-10-18 12:00:00.000000

Tables: user_profiles, emergency_contacts, documents, maintenance_schedules.

document_expiries.document_type now stores the enum value ("road_tax")
rather than its name ("ROAD_TAX"); existing rows are rewritten.
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '9b2e6d4c1a07'
down_revision = '4f1c2a9e7b3d'
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'user_profiles',
        sa.Column('profile_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=150), nullable=False),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('blood_group', sa.String(length=5), nullable=False),
        sa.Column('state', sa.String(length=100), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=False),
        sa.Column('pin_code', sa.String(length=6), nullable=False),
        sa.Column('alternate_phone', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('profile_id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_user_profiles_profile_id', 'user_profiles', ['profile_id'])

    op.create_table(
        'emergency_contacts',
        sa.Column('contact_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('emergency_name', sa.String(length=150), nullable=True),
        sa.Column('emergency_phone', sa.String(length=20), nullable=True),
        sa.Column('insurance_name', sa.String(length=150), nullable=True),
        sa.Column('insurance_phone', sa.String(length=20), nullable=True),
        sa.Column('roadside_phone', sa.String(length=20), nullable=True),
        sa.Column('service_centre_name', sa.String(length=150), nullable=True),
        sa.Column('service_centre_phone', sa.String(length=20), nullable=True),
        sa.Column('spare_parts_name', sa.String(length=150), nullable=True),
        sa.Column('spare_parts_phone', sa.String(length=20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['user_id'], ['users.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('contact_id'),
        sa.UniqueConstraint('user_id'),
    )
    op.create_index('ix_emergency_contacts_contact_id', 'emergency_contacts', ['contact_id'])

    op.create_table(
        'documents',
        sa.Column('document_id', sa.Integer(), nullable=False),
        sa.Column('vehicle_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False, server_default='other'),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('file_path', sa.String(length=500), nullable=False),
        sa.Column('file_size', sa.Integer(), nullable=False),
        sa.Column('mime_type', sa.String(length=100), nullable=False),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['vehicle_id'], ['vehicles.vehicle_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('document_id'),
    )
    op.create_index('ix_documents_document_id', 'documents', ['document_id'])
    op.create_index('ix_documents_vehicle_id', 'documents', ['vehicle_id'])

    op.create_table(
        'maintenance_schedules',
        sa.Column('schedule_id', sa.Integer(), nullable=False),
        sa.Column('make', sa.String(length=100), nullable=False),
        sa.Column('model', sa.String(length=100), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('driving_condition', sa.String(length=10), nullable=False, server_default='normal'),
        sa.Column('schedule_data', sa.JSON(), nullable=False),
        sa.Column('source', sa.String(length=20), nullable=False, server_default='manual'),
        sa.Column('last_updated', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('schedule_id'),
        sa.UniqueConstraint('make', 'model', 'year', 'driving_condition', name='uq_maintenance_schedule_vehicle'),
    )
    op.create_index('ix_maintenance_schedules_schedule_id', 'maintenance_schedules', ['schedule_id'])

    op.execute("UPDATE document_expiries SET document_type = lower(document_type)")


def downgrade() -> None:
    op.execute("UPDATE document_expiries SET document_type = upper(document_type)")

    op.drop_index('ix_maintenance_schedules_schedule_id', table_name='maintenance_schedules')
    op.drop_table('maintenance_schedules')
    op.drop_index('ix_documents_vehicle_id', table_name='documents')
    op.drop_index('ix_documents_document_id', table_name='documents')
    op.drop_table('documents')
    op.drop_index('ix_emergency_contacts_contact_id', table_name='emergency_contacts')
    op.drop_table('emergency_contacts')
    op.drop_index('ix_user_profiles_profile_id', table_name='user_profiles')
    op.drop_table('user_profiles')
