"""
Scoreboard engine for icpcboard.

This package contains the entity store, the scoring state machine, the
ranking comparator, the scroll (reveal) procedure and the contest facade
tying them together.
"""

from .contest import Contest, RankingQuery
from .errors import (
    AlreadyFrozenError,
    AlreadyStartedError,
    DuplicateNameError,
    NotFrozenError,
    ScoreboardError,
    TeamNotFoundError,
)
from .ledger import MATCH_ANY, query_submission
from .ranking import compare_teams, rank_teams
from .reveal import RankChange, RevealController, RevealResult
from .scoreboard import Board, ScoreboardEngine
from .store import EntityStore

__all__ = [
    "Contest",
    "RankingQuery",
    "AlreadyFrozenError",
    "AlreadyStartedError",
    "DuplicateNameError",
    "NotFrozenError",
    "ScoreboardError",
    "TeamNotFoundError",
    "MATCH_ANY",
    "query_submission",
    "compare_teams",
    "rank_teams",
    "RankChange",
    "RevealController",
    "RevealResult",
    "Board",
    "ScoreboardEngine",
    "EntityStore",
]
