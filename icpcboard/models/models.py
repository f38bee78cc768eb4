from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class SubmissionStatus(str, Enum):
    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong_Answer"
    RUNTIME_ERROR = "Runtime_Error"
    TIME_LIMIT_EXCEEDED = "Time_Limit_Exceed"

    @property
    def is_rejection(self) -> bool:
        return self is not SubmissionStatus.ACCEPTED


class ProblemPhase(str, Enum):
    """Visibility regime of a single problem on the board."""

    LIVE = "live"
    HIDDEN_PENDING = "hidden_pending"


def problem_index(letter: str) -> int:
    """Map a problem letter ('A', 'B', ...) to its zero-based index"""
    return ord(letter[0].upper()) - ord("A")


@dataclass(frozen=True)
class Submission:
    """A single judged submission. Never mutated after creation."""

    problem: str
    status: SubmissionStatus
    time: int

    def to_dict(self) -> Dict:
        return {
            "problem": self.problem,
            "status": self.status.value,
            "time": self.time,
        }


class ProblemState:
    """Scoring state of one team on one problem.

    The phase is derived from the freeze latch and the hidden buffer, so a
    problem solved before the freeze can never become hidden.
    """

    def __init__(self):
        self.wrong_before_accept = 0
        self.first_accept_time: Optional[int] = None

        # Freeze shadow fields, reset every time a freeze begins
        self.wrong_before_freeze = 0
        self.solved_before_freeze = False
        self.hidden_submissions: List[Submission] = []

    @property
    def solved(self) -> bool:
        return self.first_accept_time is not None

    @property
    def hidden_submission_count(self) -> int:
        return len(self.hidden_submissions)

    @property
    def phase(self) -> ProblemPhase:
        if self.hidden_submissions and not self.solved_before_freeze:
            return ProblemPhase.HIDDEN_PENDING
        return ProblemPhase.LIVE

    @property
    def is_hidden(self) -> bool:
        return self.phase is ProblemPhase.HIDDEN_PENDING

    def record(self, submission: Submission) -> None:
        """Apply a submission as a live update; only the first acceptance counts."""
        if self.solved:
            return
        if submission.status is SubmissionStatus.ACCEPTED:
            self.first_accept_time = submission.time
        else:
            self.wrong_before_accept += 1

    def hide(self, submission: Submission) -> None:
        self.hidden_submissions.append(submission)

    def latch_freeze(self) -> None:
        self.solved_before_freeze = self.solved
        self.wrong_before_freeze = self.wrong_before_accept
        self.hidden_submissions = []

    def replay_hidden(self) -> None:
        """Replay buffered post-freeze submissions in arrival order and clear them."""
        if not self.solved_before_freeze:
            for submission in self.hidden_submissions:
                self.record(submission)
        self.hidden_submissions = []

    def penalty(self, penalty_per_reject: int) -> int:
        return penalty_per_reject * self.wrong_before_accept + self.first_accept_time


class Team:
    def __init__(self, name: str, problem_count: int = 0):
        self.name = name
        self.problems: List[ProblemState] = [ProblemState() for _ in range(problem_count)]
        self.submissions: List[Submission] = []

        # Visible metrics, rebuilt from problem states on every board read
        self.solved_count = 0
        self.penalty_sum = 0
        self.solve_times: List[int] = []  # descending

    def reset_problems(self, problem_count: int) -> None:
        self.problems = [ProblemState() for _ in range(problem_count)]

    @property
    def has_hidden_results(self) -> bool:
        return any(state.is_hidden for state in self.problems)

    def first_hidden_problem(self) -> Optional[int]:
        for index, state in enumerate(self.problems):
            if state.is_hidden:
                return index
        return None

    def __repr__(self) -> str:
        return f"Team({self.name!r}, solved={self.solved_count}, penalty={self.penalty_sum})"


@dataclass
class BoardRow:
    name: str
    rank: int
    solved: int
    penalty: int
    cells: List[str] = field(default_factory=list)

    def to_line(self) -> str:
        return " ".join([self.name, str(self.rank), str(self.solved), str(self.penalty), *self.cells])

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "rank": self.rank,
            "solved": self.solved,
            "penalty": self.penalty,
            "cells": list(self.cells),
        }
