"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
rather than through an ORM.
"""

from typing import Any, Dict

from reputation.domain.model import (
    ActionLogEntry,
    LeaderboardEntry,
    PointBalance,
    Votable,
    Vote,
)
from reputation.domain.value import (
    ActionLogId,
    ActionType,
    ActorId,
    VotableId,
    VotableRef,
    VotableType,
    VoteType,
)


def row_to_point_balance(row: Dict[str, Any]) -> PointBalance:
    """Convert database row to PointBalance domain model."""
    return PointBalance(
        actor_id=ActorId(row["actor_id"]),
        points=row["points"],
        updated_at=row["updated_at"],
    )


def row_to_action_log_entry(row: Dict[str, Any]) -> ActionLogEntry:
    """Convert database row to ActionLogEntry domain model."""
    return ActionLogEntry(
        id=ActionLogId(row["id"]),
        actor_id=ActorId(row["actor_id"]),
        action_type=ActionType(row["action_type"]),
        reference_id=row["reference_id"],
        points_awarded=row["points_awarded"],
        created_at=row["created_at"],
    )


def action_log_entry_to_dict(entry: ActionLogEntry) -> Dict[str, Any]:
    """Convert ActionLogEntry to a dict for insertion."""
    return {
        "id": entry.id,
        "actor_id": entry.actor_id,
        "action_type": entry.action_type.value,
        "reference_id": entry.reference_id,
        "points_awarded": entry.points_awarded,
        "created_at": entry.created_at,
    }


def row_to_leaderboard_entry(row: Dict[str, Any]) -> LeaderboardEntry:
    """Convert a ranked balance row (joined with users) to LeaderboardEntry."""
    return LeaderboardEntry(
        actor_id=ActorId(row["actor_id"]),
        display_name=row.get("display_name"),
        points=row["points"],
        rank=row["rank"],
    )


def row_to_votable(row: Dict[str, Any]) -> Votable:
    """Convert database row to Votable domain model."""
    return Votable(
        ref=VotableRef(
            votable_type=VotableType(row["votable_type"]),
            votable_id=VotableId(row["votable_id"]),
        ),
        upvote_count=row["upvote_count"],
        downvote_count=row["downvote_count"],
        reply_count=row["reply_count"],
        created_at=row["created_at"],
        hot_score=row["hot_score"],
    )


def votable_to_dict(votable: Votable) -> Dict[str, Any]:
    """Convert Votable to a dict for insertion."""
    return {
        "votable_type": votable.ref.votable_type.value,
        "votable_id": votable.ref.votable_id,
        "upvote_count": votable.upvote_count,
        "downvote_count": votable.downvote_count,
        "reply_count": votable.reply_count,
        "created_at": votable.created_at,
        "hot_score": votable.hot_score,
    }


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        votable=VotableRef(
            votable_type=VotableType(row["votable_type"]),
            votable_id=VotableId(row["votable_id"]),
        ),
        voter_id=ActorId(row["voter_id"]),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote to a dict for insertion."""
    return {
        "votable_type": vote.votable.votable_type.value,
        "votable_id": vote.votable.votable_id,
        "voter_id": vote.voter_id,
        "vote_type": vote.vote_type.value,
        "created_at": vote.created_at,
        "updated_at": vote.updated_at,
    }
