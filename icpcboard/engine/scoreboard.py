"""
Scoreboard engine.

Applies submissions and freeze transitions to the problem states held by
the entity store, and rebuilds every team's visible metrics from scratch
whenever the board has to be read.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from ..models.models import BoardRow, ProblemState, Submission, Team, problem_index
from ..utils.logger_config import get_logger
from .errors import AlreadyFrozenError
from .store import EntityStore

logger = get_logger("scoreboard")

DEFAULT_PENALTY_PER_REJECT = 20


@dataclass
class Board:
    rows: List[BoardRow] = field(default_factory=list)

    def to_lines(self) -> List[str]:
        return [row.to_line() for row in self.rows]

    def to_dict(self) -> Dict:
        return {"rows": [row.to_dict() for row in self.rows]}


class ScoreboardEngine:
    def __init__(self, store: EntityStore, penalty_per_reject: int = DEFAULT_PENALTY_PER_REJECT):
        self.store = store
        self.penalty_per_reject = penalty_per_reject
        self.frozen = False

    def apply_submission(self, team: Team, submission: Submission) -> None:
        """
        Record a submission and update the team's problem state.

        While frozen, submissions on problems unsolved at freeze time are
        buffered instead of scored; everything else is a live update.
        """
        team.submissions.append(submission)

        index = problem_index(submission.problem)
        if not 0 <= index < len(team.problems):
            logger.warning(f"Submission on unknown problem {submission.problem} by {team.name} kept in history only")
            return

        state = team.problems[index]
        if self.frozen and not state.solved_before_freeze:
            state.hide(submission)
            logger.debug(f"{team.name} {submission.problem} hidden ({state.hidden_submission_count} after freeze)")
        else:
            state.record(submission)
            logger.debug(f"{team.name} {submission.problem} {submission.status.value} at {submission.time}")

    def begin_freeze(self) -> None:
        if self.frozen:
            raise AlreadyFrozenError("Freeze")
        for team in self.store.all_teams():
            for state in team.problems:
                state.latch_freeze()
        self.frozen = True
        logger.info("Scoreboard frozen")

    def end_freeze(self) -> None:
        """Leave the frozen regime and drop any residual hidden bookkeeping"""
        for team in self.store.all_teams():
            for state in team.problems:
                state.hidden_submissions = []
        self.frozen = False

    def reveal_problem(self, team: Team, index: int) -> ProblemState:
        state = team.problems[index]
        state.replay_hidden()
        logger.debug(f"Revealed {team.name} problem #{index}: solved={state.solved} wrong={state.wrong_before_accept}")
        return state

    def recompute_visible_metrics(self) -> None:
        for team in self.store.all_teams():
            team.solved_count = 0
            team.penalty_sum = 0
            team.solve_times = []
            for state in team.problems:
                if self.frozen and state.is_hidden:
                    continue
                if state.solved:
                    team.solved_count += 1
                    team.penalty_sum += state.penalty(self.penalty_per_reject)
                    team.solve_times.append(state.first_accept_time)
            team.solve_times.sort(reverse=True)

    def render_cell(self, state: ProblemState) -> str:
        if self.frozen and state.is_hidden:
            wrong = state.wrong_before_freeze
            hidden = state.hidden_submission_count
            if wrong > 0:
                return f"-{wrong}/{hidden}"
            return f"0/{hidden}" if hidden > 0 else "."
        if state.solved:
            return f"+{state.wrong_before_accept}" if state.wrong_before_accept else "+"
        return f"-{state.wrong_before_accept}" if state.wrong_before_accept else "."

    def render_board(self, order: List[Team]) -> Board:
        """Render teams in the given order; metrics must already be recomputed"""
        return Board([
            BoardRow(
                name=team.name,
                rank=rank,
                solved=team.solved_count,
                penalty=team.penalty_sum,
                cells=[self.render_cell(state) for state in team.problems],
            )
            for rank, team in enumerate(order, start=1)
        ])
