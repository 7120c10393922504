"""SQLAlchemy table definitions for the reputation engine.

These tables are used with SQLAlchemy Core (no ORM mapping).
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Float,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POINT BALANCES TABLE (one row per actor, created lazily)
# ============================================================================
point_balances_table = Table(
    "point_balances",
    metadata,
    Column("actor_id", String(255), primary_key=True),
    Column("points", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "points >= 0 AND points <= 999999", name="point_balances_points_range"
    ),
)

Index("idx_point_balances_points", point_balances_table.c.points.desc())

# ============================================================================
# POINT ACTIONS LOG TABLE (append-only audit trail and rate-limit window)
# ============================================================================
point_actions_log_table = Table(
    "point_actions_log",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("actor_id", String(255), nullable=False),
    Column("action_type", String(50), nullable=False),
    Column("reference_id", String(255), nullable=False),
    Column("points_awarded", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("points_awarded >= 0", name="point_actions_log_points_positive"),
)

Index(
    "idx_point_actions_log_window",
    point_actions_log_table.c.actor_id,
    point_actions_log_table.c.action_type,
    point_actions_log_table.c.created_at.desc(),
)

# ============================================================================
# VOTABLES TABLE (vote counters and cached hot score)
# ============================================================================
votables_table = Table(
    "votables",
    metadata,
    Column("votable_type", String(20), nullable=False),
    Column("votable_id", String(255), nullable=False),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("downvote_count", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("hot_score", Float, nullable=False, server_default="0"),
    PrimaryKeyConstraint("votable_type", "votable_id", name="votables_pkey"),
    CheckConstraint(
        "votable_type IN ('thread', 'reply')", name="votables_votable_type_check"
    ),
    CheckConstraint(
        "upvote_count >= 0 AND downvote_count >= 0 AND reply_count >= 0",
        name="votables_counts_non_negative",
    ),
)

Index("idx_votables_hot_score", votables_table.c.hot_score.desc())

# ============================================================================
# VOTES TABLE (one live vote per voter per votable)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("votable_type", String(20), nullable=False),
    Column("votable_id", String(255), nullable=False),
    Column("voter_id", String(255), nullable=False),
    Column("vote_type", String(20), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("votable_type", "votable_id", "voter_id", name="votes_pkey"),
    CheckConstraint(
        "vote_type IN ('upvote', 'downvote')", name="votes_vote_type_check"
    ),
)

# ============================================================================
# USERS TABLE (owned by the platform; read for display names only)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("name", String(255), nullable=True),
)
