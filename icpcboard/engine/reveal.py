"""
Scroll procedure: unfreeze hidden results one problem at a time.

Each step picks the worst-ranked team that still has hidden results,
reveals its lowest-indexed hidden problem and re-ranks the board, so the
next pick always reflects the effect of the previous reveal.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..models.models import Team
from ..utils.logger_config import get_logger
from .errors import NotFrozenError
from .ranking import position_of, rank_teams
from .scoreboard import Board, ScoreboardEngine

logger = get_logger("reveal")


@dataclass(frozen=True)
class RankChange:
    """One narrated reveal step: `team` climbed into the slot `displaced` held."""

    team: str
    displaced: str
    solved: int
    penalty: int

    def to_line(self) -> str:
        return f"{self.team} {self.displaced} {self.solved} {self.penalty}"

    def to_dict(self) -> Dict:
        return {
            "team": self.team,
            "displaced": self.displaced,
            "solved": self.solved,
            "penalty": self.penalty,
        }


@dataclass
class RevealResult:
    before: Board
    changes: List[RankChange] = field(default_factory=list)
    after: Board = field(default_factory=Board)
    final_order: List[Team] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "before": self.before.to_dict(),
            "changes": [change.to_dict() for change in self.changes],
            "after": self.after.to_dict(),
        }


class RevealController:
    def __init__(self, engine: ScoreboardEngine):
        self.engine = engine

    def _worst_with_hidden(self, order: List[Team]) -> Optional[Team]:
        for team in reversed(order):
            if team.has_hidden_results:
                return team
        return None

    def _step(self, order: List[Team], team: Team) -> Tuple[List[Team], Optional[RankChange]]:
        """Reveal one problem of `team`; returns the new order and the narration, if any"""
        index = team.first_hidden_problem()
        self.engine.reveal_problem(team, index)
        self.engine.recompute_visible_metrics()
        new_order = rank_teams(self.engine.store.all_teams())

        old_position = position_of(order, team)
        new_position = position_of(new_order, team)
        if new_position >= old_position:
            return new_order, None

        change = RankChange(
            team=team.name,
            displaced=order[new_position].name,
            solved=team.solved_count,
            penalty=team.penalty_sum,
        )
        logger.debug(f"{team.name} moved from #{old_position + 1} to #{new_position + 1}")
        return new_order, change

    def scroll(self) -> RevealResult:
        if not self.engine.frozen:
            raise NotFrozenError("Scroll")

        self.engine.recompute_visible_metrics()
        order = rank_teams(self.engine.store.all_teams())
        result = RevealResult(before=self.engine.render_board(order))

        while True:
            team = self._worst_with_hidden(order)
            if team is None:
                break
            order, change = self._step(order, team)
            if change is not None:
                result.changes.append(change)

        result.after = self.engine.render_board(order)
        result.final_order = order
        self.engine.end_freeze()
        logger.info(f"Scroll finished with {len(result.changes)} ranking changes")
        return result
