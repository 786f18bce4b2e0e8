"""game_core_data_model

Revision ID: 3c1e9a7b5d20
Revises:
Create Date: 2026-10-19 10:00:00.000000
"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "3c1e9a7b5d20"
down_revision: str | None = None
branch_labels: Sequence[str] | None = None
depends_on: Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("balance", sa.BigInteger(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("balance >= 0", name="ck_users_balance_non_negative"),
    )
    op.create_index("idx_users_balance", "users", ["balance"])
    op.create_index("idx_users_created_at", "users", ["created_at"])

    op.create_table(
        "questions",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("answer1", sa.Text(), nullable=False),
        sa.Column("answer2", sa.Text(), nullable=False),
        sa.Column("answer3", sa.Text(), nullable=False),
        sa.Column("answer4", sa.Text(), nullable=False),
        sa.Column("level", sa.SmallInteger(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.CheckConstraint("level >= 0 AND level <= 14", name="ck_questions_level_range"),
    )
    op.create_index("idx_questions_level", "questions", ["level"])
    op.create_index("uq_questions_text_lower", "questions", [sa.text("lower(text)")], unique=True)

    op.create_table(
        "game_sessions",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("current_level", sa.SmallInteger(), nullable=False),
        sa.Column("is_failed", sa.Boolean(), nullable=False),
        sa.Column("prize", sa.BigInteger(), nullable=False),
        sa.Column("audience_help_used", sa.Boolean(), nullable=False),
        sa.Column("fifty_fifty_used", sa.Boolean(), nullable=False),
        sa.Column("friend_call_used", sa.Boolean(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("finished_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.CheckConstraint("current_level >= 0 AND current_level <= 15", name="ck_game_sessions_current_level_range"),
        sa.CheckConstraint("prize >= 0", name="ck_game_sessions_prize_non_negative"),
        sa.CheckConstraint("(NOT is_failed) OR finished_at IS NOT NULL", name="ck_game_sessions_failed_is_finished"),
        sa.CheckConstraint("version >= 0", name="ck_game_sessions_version_non_negative"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
    )
    op.create_index("idx_game_sessions_user_created", "game_sessions", ["user_id", "created_at"])
    op.create_index(
        "uq_game_sessions_user_active",
        "game_sessions",
        ["user_id"],
        unique=True,
        postgresql_where=sa.text("finished_at IS NULL"),
    )

    op.create_table(
        "game_questions",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("game_session_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("question_id", sa.BigInteger(), nullable=False),
        sa.Column("position", sa.SmallInteger(), nullable=False),
        sa.Column("slot_a", sa.SmallInteger(), nullable=False),
        sa.Column("slot_b", sa.SmallInteger(), nullable=False),
        sa.Column("slot_c", sa.SmallInteger(), nullable=False),
        sa.Column("slot_d", sa.SmallInteger(), nullable=False),
        sa.Column(
            "hint_state",
            postgresql.JSONB(astext_type=sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.CheckConstraint(
            "slot_a BETWEEN 1 AND 4 AND slot_b BETWEEN 1 AND 4 "
            "AND slot_c BETWEEN 1 AND 4 AND slot_d BETWEEN 1 AND 4",
            name="ck_game_questions_slot_range",
        ),
        sa.CheckConstraint(
            "slot_a + slot_b + slot_c + slot_d = 10 AND slot_a * slot_b * slot_c * slot_d = 24",
            name="ck_game_questions_slot_permutation",
        ),
        sa.CheckConstraint("position >= 0 AND position <= 14", name="ck_game_questions_position_range"),
        sa.ForeignKeyConstraint(["game_session_id"], ["game_sessions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["question_id"], ["questions.id"]),
        sa.UniqueConstraint("game_session_id", "position", name="uq_game_questions_session_position"),
    )
    op.create_index("idx_game_questions_question", "game_questions", ["question_id"])

    op.create_table(
        "ledger_entries",
        sa.Column("id", sa.BigInteger(), primary_key=True),
        sa.Column("user_id", sa.BigInteger(), nullable=False),
        sa.Column("game_session_id", postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column("entry_type", sa.String(32), nullable=False),
        sa.Column("direction", sa.String(8), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("balance_after", sa.BigInteger(), nullable=False),
        sa.Column("idempotency_key", sa.String(96), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("amount > 0", name="ck_ledger_entries_amount_positive"),
        sa.CheckConstraint("entry_type IN ('GAME_PRIZE')", name="ck_ledger_entries_entry_type"),
        sa.CheckConstraint("direction IN ('CREDIT','DEBIT')", name="ck_ledger_entries_direction"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["game_session_id"], ["game_sessions.id"]),
        sa.UniqueConstraint("idempotency_key", name="uq_ledger_entries_idempotency_key"),
    )
    op.create_index("idx_ledger_user_created", "ledger_entries", ["user_id", "created_at"])
    op.create_index("idx_ledger_game_session", "ledger_entries", ["game_session_id"])


def downgrade() -> None:
    op.drop_index("idx_ledger_game_session", table_name="ledger_entries")
    op.drop_index("idx_ledger_user_created", table_name="ledger_entries")
    op.drop_table("ledger_entries")
    op.drop_index("idx_game_questions_question", table_name="game_questions")
    op.drop_table("game_questions")
    op.drop_index("uq_game_sessions_user_active", table_name="game_sessions")
    op.drop_index("idx_game_sessions_user_created", table_name="game_sessions")
    op.drop_table("game_sessions")
    op.drop_index("uq_questions_text_lower", table_name="questions")
    op.drop_index("idx_questions_level", table_name="questions")
    op.drop_table("questions")
    op.drop_index("idx_users_created_at", table_name="users")
    op.drop_index("idx_users_balance", table_name="users")
    op.drop_table("users")
