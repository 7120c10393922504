"""Leaderboard read models."""

from typing import Optional

from pydantic import Field

from reputation.domain.model.common import DomainModel
from reputation.domain.value import ActorId


class LeaderboardEntry(DomainModel):
    """One ranked actor.

    ``rank`` is a competition rank over the whole population: tied
    balances share a rank and the next lower balance skips past them.
    """

    actor_id: ActorId
    display_name: Optional[str] = None
    points: int = Field(ge=0)
    rank: int = Field(ge=1)


class LeaderboardPage(DomainModel):
    """A page of the leaderboard plus the size of the ranked population."""

    entries: list[LeaderboardEntry]
    total: int = Field(ge=0)
    limit: int
    offset: int


def ordinal(rank: Optional[int]) -> str:
    """Format a rank as ``1st``, ``2nd``, ``3rd``, ``11th``...

    Returns an empty string for missing or non-positive ranks.
    """
    if not rank or rank < 1:
        return ""
    if 11 <= rank % 100 <= 13:
        return f"{rank}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(rank % 10, "th")
    return f"{rank}{suffix}"
