"""reputation_schema

Create the reputation engine schema:
- Point balances (one row per actor, capped at 999999)
- Point actions log (append-only, indexed for the rate-limit window)
- Votables (vote counters and cached hot score for threads and replies)
- Votes (one live vote per voter per votable)
- Users (display names; created only when the platform has not already)

Revision ID: 3f1c9a2b7d4e
Revises:
Create Date: 2025-11-04 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2b7d4e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # POINT_BALANCES table
    # ========================================================================
    op.create_table(
        "point_balances",
        sa.Column("actor_id", sa.String(length=255), nullable=False),
        sa.Column("points", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "points >= 0 AND points <= 999999", name="point_balances_points_range"
        ),
        sa.PrimaryKeyConstraint("actor_id"),
    )
    op.create_index(
        "idx_point_balances_points",
        "point_balances",
        [sa.text("points DESC")],
    )

    # ========================================================================
    # POINT_ACTIONS_LOG table
    # ========================================================================
    op.create_table(
        "point_actions_log",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("actor_id", sa.String(length=255), nullable=False),
        sa.Column("action_type", sa.String(length=50), nullable=False),
        sa.Column("reference_id", sa.String(length=255), nullable=False),
        sa.Column("points_awarded", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "points_awarded >= 0", name="point_actions_log_points_positive"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_point_actions_log_window",
        "point_actions_log",
        ["actor_id", "action_type", sa.text("created_at DESC")],
    )

    # ========================================================================
    # VOTABLES table
    # ========================================================================
    op.create_table(
        "votables",
        sa.Column("votable_type", sa.String(length=20), nullable=False),
        sa.Column("votable_id", sa.String(length=255), nullable=False),
        sa.Column("upvote_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("downvote_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column("reply_count", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("hot_score", sa.Float(), server_default="0", nullable=False),
        sa.CheckConstraint(
            "votable_type IN ('thread', 'reply')", name="votables_votable_type_check"
        ),
        sa.CheckConstraint(
            "upvote_count >= 0 AND downvote_count >= 0 AND reply_count >= 0",
            name="votables_counts_non_negative",
        ),
        sa.PrimaryKeyConstraint("votable_type", "votable_id", name="votables_pkey"),
    )
    op.create_index(
        "idx_votables_hot_score",
        "votables",
        [sa.text("hot_score DESC")],
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("votable_type", sa.String(length=20), nullable=False),
        sa.Column("votable_id", sa.String(length=255), nullable=False),
        sa.Column("voter_id", sa.String(length=255), nullable=False),
        sa.Column("vote_type", sa.String(length=20), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "vote_type IN ('upvote', 'downvote')", name="votes_vote_type_check"
        ),
        sa.PrimaryKeyConstraint(
            "votable_type", "votable_id", "voter_id", name="votes_pkey"
        ),
    )

    # ========================================================================
    # USERS table (normally owned by the platform)
    # ========================================================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id VARCHAR(255) PRIMARY KEY,
            name VARCHAR(255)
        )
    """)


def downgrade() -> None:
    """Downgrade schema.

    The users table is left in place; it may belong to the platform.
    """
    op.drop_table("votes")
    op.drop_index("idx_votables_hot_score", table_name="votables")
    op.drop_table("votables")
    op.drop_index("idx_point_actions_log_window", table_name="point_actions_log")
    op.drop_table("point_actions_log")
    op.drop_index("idx_point_balances_points", table_name="point_balances")
    op.drop_table("point_balances")
