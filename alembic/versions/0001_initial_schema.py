"""Create students, ledgers, attendance and monthly_accounts

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-16 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'students',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('hostel_code', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('address', sa.String()),
        sa.Column('course', sa.String()),
        sa.Column('phone', sa.String()),
        sa.Column('room_number', sa.String()),
        sa.Column('room_type', sa.String()),
        sa.Column('food_option', sa.String()),
        sa.Column('monthly_rent', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('advance_paid', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('advance_remaining', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('date_join', sa.String()),
        sa.Column('date_leave', sa.String()),
        sa.Column('photo_path', sa.String(), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('idx_students_hostel', 'students', ['hostel_code'])
    op.create_index('idx_students_room', 'students', ['hostel_code', 'room_number'])

    op.create_table(
        'rent_payments',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.String()),
        sa.Column('rent_paid', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('remaining', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('idx_rent_payments_student', 'rent_payments', ['student_id'])

    op.create_table(
        'extra_food',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.String()),
        sa.Column('amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('remaining', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('idx_extra_food_student', 'extra_food', ['student_id'])

    op.create_table(
        'attendance',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('hostel_code', sa.String(), nullable=False),
        sa.Column('date', sa.String(), nullable=False),
        sa.Column('room_number', sa.String(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(), nullable=False),
        sa.UniqueConstraint('hostel_code', 'date', 'room_number', 'student_id', name='uq_attendance'),
    )
    op.create_index('idx_attendance_student', 'attendance', ['student_id', 'date'])
    op.create_index('idx_attendance_room', 'attendance', ['hostel_code', 'room_number', 'date'])

    op.create_table(
        'monthly_accounts',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('hostel_code', sa.String(), nullable=False),
        sa.Column('student_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.String(), nullable=False),
        sa.Column('room_number', sa.String()),
        sa.Column('rent_paid', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('rent_remaining', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('eb_share', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('eb_paid', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('eb_remaining', sa.Integer(), nullable=False, server_default='0'),
        sa.UniqueConstraint('hostel_code', 'student_id', 'date', name='uq_monthly_accounts'),
    )
    op.create_index('idx_monthly_accounts_student', 'monthly_accounts', ['student_id', 'date'])
    op.create_index('idx_monthly_accounts_room', 'monthly_accounts', ['hostel_code', 'room_number', 'date'])


def downgrade() -> None:
    op.drop_table('monthly_accounts')
    op.drop_table('attendance')
    op.drop_table('extra_food')
    op.drop_table('rent_payments')
    op.drop_table('students')
