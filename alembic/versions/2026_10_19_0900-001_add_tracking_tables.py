"""Add exercise weight, monthly progress, daily workout and user setting tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create tracking tables with their upsert conflict targets."""
    op.create_table('exercise_weights', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('exercise_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('current_weight', sa.Float(), nullable=False, server_default='0'),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'exercise_name', name='uq_exercise_weight_user_exercise'))
    op.create_index(op.f('ix_exercise_weights_user_id'), 'exercise_weights', ['user_id'], unique=False)

    op.create_table('monthly_progress', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('exercise_name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('max_weight', sa.Float(), nullable=False),
        sa.Column('auto_saved', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint('month BETWEEN 1 AND 12', name='ck_monthly_progress_month'),
        sa.UniqueConstraint('user_id', 'year', 'month', 'exercise_name',
                            name='uq_monthly_progress_user_period_exercise'))
    op.create_index(op.f('ix_monthly_progress_user_id'), 'monthly_progress', ['user_id'], unique=False)
    op.create_index(op.f('ix_monthly_progress_year'), 'monthly_progress', ['year'], unique=False)

    op.create_table('daily_workouts', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('worked_out', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('workout_type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='uq_daily_workout_user_date'))
    op.create_index(op.f('ix_daily_workouts_user_id'), 'daily_workouts', ['user_id'], unique=False)
    op.create_index(op.f('ix_daily_workouts_date'), 'daily_workouts', ['date'], unique=False)

    op.create_table('user_settings', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('key', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('value', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'key', name='uq_user_setting_user_key'))
    op.create_index(op.f('ix_user_settings_user_id'), 'user_settings', ['user_id'], unique=False)


def downgrade() -> None:
    """Drop tracking tables."""
    op.drop_index(op.f('ix_user_settings_user_id'), table_name='user_settings')
    op.drop_table('user_settings')
    op.drop_index(op.f('ix_daily_workouts_date'), table_name='daily_workouts')
    op.drop_index(op.f('ix_daily_workouts_user_id'), table_name='daily_workouts')
    op.drop_table('daily_workouts')
    op.drop_index(op.f('ix_monthly_progress_year'), table_name='monthly_progress')
    op.drop_index(op.f('ix_monthly_progress_user_id'), table_name='monthly_progress')
    op.drop_table('monthly_progress')
    op.drop_index(op.f('ix_exercise_weights_user_id'), table_name='exercise_weights')
    op.drop_table('exercise_weights')
