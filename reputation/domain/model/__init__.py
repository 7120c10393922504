"""Domain model entities for the reputation engine."""

from reputation.domain.model.points import MAX_POINTS, ActionLogEntry, PointBalance
from reputation.domain.model.policy import (
    ActionPolicy,
    ActionPolicyTable,
    apply_diminishing_returns,
)
from reputation.domain.model.standing import LeaderboardEntry, LeaderboardPage, ordinal
from reputation.domain.model.votable import Votable
from reputation.domain.model.vote import Vote, VoteTally, VoteTransition, resolve_vote

__all__ = [
    "MAX_POINTS",
    "ActionLogEntry",
    "ActionPolicy",
    "ActionPolicyTable",
    "LeaderboardEntry",
    "LeaderboardPage",
    "PointBalance",
    "Votable",
    "Vote",
    "VoteTally",
    "VoteTransition",
    "apply_diminishing_returns",
    "ordinal",
    "resolve_vote",
]
