"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates all tables: users, events, attendees, teachers, subjects,
subject_teachers.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

attendee_answer = sa.Enum("accepted", "maybe", "rejected", name="attendeeanswer")
gender = sa.Enum("male", "female", "other", name="gender")


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False, unique=True),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
    )

    # --- events ---
    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("when", sa.DateTime, nullable=False),
        sa.Column("address", sa.String(255), nullable=False),
        sa.Column("organizer_id", sa.Integer, sa.ForeignKey("users.id"), nullable=True),
    )

    # --- attendees ---
    op.create_table(
        "attendees",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.Integer, sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False),
        sa.Column("answer", attendee_answer, nullable=False, server_default="accepted"),
    )
    op.create_index("ix_attendees_event_id", "attendees", ["event_id"])
    op.create_index("ix_attendees_user_id", "attendees", ["user_id"])

    # --- teachers ---
    op.create_table(
        "teachers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("age", sa.Integer, nullable=False),
        sa.Column("gender", gender, nullable=False, server_default="other"),
    )

    # --- subjects ---
    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
    )

    # --- subject_teachers ---
    op.create_table(
        "subject_teachers",
        sa.Column("subject_id", sa.Integer, sa.ForeignKey("subjects.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("teacher_id", sa.Integer, sa.ForeignKey("teachers.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("subject_teachers")
    op.drop_table("subjects")
    op.drop_table("teachers")
    op.drop_index("ix_attendees_user_id", table_name="attendees")
    op.drop_index("ix_attendees_event_id", table_name="attendees")
    op.drop_table("attendees")
    op.drop_table("events")
    op.drop_table("users")
    attendee_answer.drop(op.get_bind(), checkfirst=True)
    gender.drop(op.get_bind(), checkfirst=True)
