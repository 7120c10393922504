"""Domain services."""

from .base import Service
from .hot_score_service import HotScoreCalculator, HotScoreService
from .point_ledger_service import PointLedgerService
from .ranking_service import RankingService
from .vote_service import VoteService

__all__ = [
    "HotScoreCalculator",
    "HotScoreService",
    "PointLedgerService",
    "RankingService",
    "Service",
    "VoteService",
]
