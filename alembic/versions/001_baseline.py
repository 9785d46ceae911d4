"""Baseline: schools, users, survey, micro-rituals, score snapshots.

Revision ID: 001_baseline
Revises: None
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # --- Schools & users ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS schools (
            id VARCHAR(36) PRIMARY KEY,
            name TEXT NOT NULL,
            district TEXT NOT NULL,
            city TEXT NOT NULL,
            state TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id VARCHAR(36) PRIMARY KEY,
            school_id VARCHAR(36) NOT NULL REFERENCES schools(id) ON DELETE CASCADE,
            role VARCHAR(32) NOT NULL,
            access_code VARCHAR(4) UNIQUE NOT NULL,
            last_assessment_date TIMESTAMPTZ,
            created_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_users_school_id ON users(school_id)")

    # --- Survey ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS questions (
            id VARCHAR(36) PRIMARY KEY,
            role VARCHAR(32) NOT NULL,
            category TEXT NOT NULL,
            text TEXT NOT NULL,
            options JSON NOT NULL,
            "order" INTEGER NOT NULL
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_questions_role ON questions(role)")
    op.execute("""
        CREATE TABLE IF NOT EXISTS responses (
            id VARCHAR(36) PRIMARY KEY,
            user_id VARCHAR(36) NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            question_id VARCHAR(36) NOT NULL REFERENCES questions(id),
            answer TEXT NOT NULL,
            submitted_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_responses_user_id ON responses(user_id)")
    op.execute("CREATE INDEX IF NOT EXISTS idx_responses_submitted_at ON responses(submitted_at)")

    # --- Micro-rituals ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS micro_rituals (
            id VARCHAR(36) PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT NOT NULL,
            category TEXT NOT NULL,
            target_relationship TEXT NOT NULL,
            time_required TEXT NOT NULL,
            participant_count TEXT NOT NULL,
            difficulty VARCHAR(16) NOT NULL,
            steps JSON NOT NULL,
            expected_outcome TEXT NOT NULL,
            applicable_roles JSON NOT NULL
        )
    """)
    op.execute("""
        CREATE TABLE IF NOT EXISTS micro_ritual_completions (
            id VARCHAR(36) PRIMARY KEY,
            user_id VARCHAR(36) NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            micro_ritual_id VARCHAR(36) NOT NULL REFERENCES micro_rituals(id),
            completed_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute(
        "CREATE INDEX IF NOT EXISTS ix_micro_ritual_completions_user_id ON micro_ritual_completions(user_id)"
    )
    op.execute("""
        CREATE TABLE IF NOT EXISTS micro_ritual_attempts (
            id VARCHAR(36) PRIMARY KEY,
            user_id VARCHAR(36) NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            attempted_rituals TEXT NOT NULL,
            attempted_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute("CREATE INDEX IF NOT EXISTS ix_micro_ritual_attempts_user_id ON micro_ritual_attempts(user_id)")

    # --- Score snapshots ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS school_scores (
            id VARCHAR(36) PRIMARY KEY,
            school_id VARCHAR(36) NOT NULL REFERENCES schools(id) ON DELETE CASCADE,
            overall_score INTEGER NOT NULL,
            category_scores JSON NOT NULL,
            calculated_at TIMESTAMPTZ NOT NULL
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_school_scores_school_calculated
        ON school_scores(school_id, calculated_at)
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS school_scores CASCADE")
    op.execute("DROP TABLE IF EXISTS micro_ritual_attempts CASCADE")
    op.execute("DROP TABLE IF EXISTS micro_ritual_completions CASCADE")
    op.execute("DROP TABLE IF EXISTS micro_rituals CASCADE")
    op.execute("DROP TABLE IF EXISTS responses CASCADE")
    op.execute("DROP TABLE IF EXISTS questions CASCADE")
    op.execute("DROP TABLE IF EXISTS users CASCADE")
    op.execute("DROP TABLE IF EXISTS schools CASCADE")
