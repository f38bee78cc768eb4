"""
Models package for the ICPC scoreboard.

This package contains the records the scoreboard engine works on: teams,
their per-problem states and their submission history.
"""

from .models import (
    BoardRow,
    ProblemPhase,
    ProblemState,
    Submission,
    SubmissionStatus,
    Team,
    problem_index,
)

__all__ = [
    "BoardRow",
    "ProblemPhase",
    "ProblemState",
    "Submission",
    "SubmissionStatus",
    "Team",
    "problem_index",
]
