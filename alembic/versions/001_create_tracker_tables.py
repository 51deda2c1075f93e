"""Create schools, users, courses, study plans, todos and focus sessions

Revision ID: 001
Revises:
Create Date: 2025-01-01 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    ]


def upgrade() -> None:
    op.create_table('schools',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('total_points', sa.Integer(), server_default='0', nullable=False),
        sa.Column('student_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('logo_url', sa.String(), server_default='', nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index(op.f('ix_schools_total_points'), 'schools', ['total_points'], unique=False)

    op.create_table('users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('school_id', sa.Uuid(), nullable=True),
        sa.Column('total_points', sa.Integer(), server_default='0', nullable=False),
        sa.Column('avatar_url', sa.String(), server_default='', nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['school_id'], ['schools.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_school_id'), 'users', ['school_id'], unique=False)
    op.create_index(op.f('ix_users_total_points'), 'users', ['total_points'], unique=False)

    op.create_table('courses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('day', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('location', sa.String(), server_default='', nullable=False),
        sa.Column('color', sa.String(length=64), server_default='bg-blue-400', nullable=False),
        *_timestamps(),
        sa.CheckConstraint('day >= 0 AND day <= 6', name='ck_courses_day_of_week'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_courses_user_id'), 'courses', ['user_id'], unique=False)
    op.create_index(op.f('ix_courses_day'), 'courses', ['day'], unique=False)

    op.create_table('study_plans',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('course_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('start_time', sa.Time(), nullable=False),
        sa.Column('end_time', sa.Time(), nullable=False),
        sa.Column('reminder_time', sa.Time(), nullable=True),
        sa.Column('location', sa.String(), server_default='', nullable=False),
        sa.Column('target_minutes', sa.Integer(), server_default='0', nullable=False),
        sa.Column('completed_minutes', sa.Integer(), server_default='0', nullable=False),
        sa.Column('pomodoro_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('target_minutes >= 0', name='ck_study_plans_target_non_negative'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_study_plans_user_id'), 'study_plans', ['user_id'], unique=False)
    op.create_index(op.f('ix_study_plans_course_id'), 'study_plans', ['course_id'], unique=False)
    op.create_index(op.f('ix_study_plans_date'), 'study_plans', ['date'], unique=False)
    op.create_index(op.f('ix_study_plans_completed'), 'study_plans', ['completed'], unique=False)

    op.create_table('todos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('course_id', sa.Uuid(), nullable=True),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('todo_type', sa.String(length=20), server_default='memo', nullable=False),
        sa.Column('completed', sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_todos_user_id'), 'todos', ['user_id'], unique=False)
    op.create_index(op.f('ix_todos_course_id'), 'todos', ['course_id'], unique=False)
    op.create_index(op.f('ix_todos_date'), 'todos', ['date'], unique=False)
    op.create_index(op.f('ix_todos_todo_type'), 'todos', ['todo_type'], unique=False)
    op.create_index(op.f('ix_todos_completed'), 'todos', ['completed'], unique=False)

    op.create_table('focus_sessions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('plan_id', sa.Uuid(), nullable=True),
        sa.Column('course_id', sa.Uuid(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('minutes', sa.Integer(), nullable=False),
        sa.Column('points_earned', sa.Integer(), server_default='0', nullable=False),
        sa.Column('location', sa.String(), server_default='', nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('minutes >= 1', name='ck_focus_sessions_minutes_positive'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plan_id'], ['study_plans.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['course_id'], ['courses.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_focus_sessions_user_id'), 'focus_sessions', ['user_id'], unique=False)
    op.create_index(op.f('ix_focus_sessions_plan_id'), 'focus_sessions', ['plan_id'], unique=False)
    op.create_index(op.f('ix_focus_sessions_date'), 'focus_sessions', ['date'], unique=False)
    op.create_index(op.f('ix_focus_sessions_created_at'), 'focus_sessions', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_table('focus_sessions')
    op.drop_table('todos')
    op.drop_table('study_plans')
    op.drop_table('courses')
    op.drop_table('users')
    op.drop_table('schools')
