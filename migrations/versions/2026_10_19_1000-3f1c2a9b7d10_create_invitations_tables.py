"""Create invitees, events and rsvp_responses tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 10:00:00

"""
from typing import Union

from alembic import op
import sqlalchemy as sa
import sqlalchemy_utils

# revision identifiers, used by Alembic.
revision: str = '3f1c2a9b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, None] = None
depends_on: Union[str, None] = None


def timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'invitees',
        sa.Column('uuid', sqlalchemy_utils.types.uuid.UUIDType(), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=False),
        *timestamps(),
    )
    op.create_index('ix_invitees_email', 'invitees', ['email'], unique=True)

    op.create_table(
        'events',
        sa.Column('uuid', sqlalchemy_utils.types.uuid.UUIDType(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('location', sa.String(500), nullable=True),
        sa.Column('capacity', sa.Integer, nullable=True),
        sa.Column('starts_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('ends_at', sa.DateTime(timezone=True), nullable=True),
        *timestamps(),
    )

    op.create_table(
        'rsvp_responses',
        sa.Column('uuid', sqlalchemy_utils.types.uuid.UUIDType(), primary_key=True),
        sa.Column(
            'event_id',
            sqlalchemy_utils.types.uuid.UUIDType(),
            sa.ForeignKey('events.uuid', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column(
            'response',
            sa.Enum('going', 'not-going', 'pending', name='rsvp_answer_enum'),
            nullable=False,
        ),
        *timestamps(),
    )
    op.create_index('ix_rsvp_responses_event_id', 'rsvp_responses', ['event_id'])
    op.create_index('ix_rsvp_responses_email', 'rsvp_responses', ['email'])


def downgrade() -> None:
    op.drop_index('ix_rsvp_responses_email', table_name='rsvp_responses')
    op.drop_index('ix_rsvp_responses_event_id', table_name='rsvp_responses')
    op.drop_table('rsvp_responses')
    sa.Enum(name='rsvp_answer_enum').drop(op.get_bind(), checkfirst=True)
    op.drop_table('events')
    op.drop_index('ix_invitees_email', table_name='invitees')
    op.drop_table('invitees')
