"""
Contest facade.

Holds the global contest state (started, frozen, last published board) and
drives the store, the scoreboard engine and the reveal controller. Every
operation either applies fully or raises a ScoreboardError before touching
any state.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from ..models.models import Submission, SubmissionStatus, Team
from ..utils.logger_config import get_logger
from .errors import AlreadyStartedError
from .ledger import MATCH_ANY, query_submission
from .ranking import lexicographic_order, position_of, rank_teams
from .reveal import RevealController, RevealResult
from .scoreboard import DEFAULT_PENALTY_PER_REJECT, Board, ScoreboardEngine
from .store import EntityStore

logger = get_logger("contest")


@dataclass(frozen=True)
class RankingQuery:
    team: str
    rank: int
    frozen: bool

    def to_dict(self) -> Dict:
        return {"team": self.team, "rank": self.rank, "frozen": self.frozen}


class Contest:
    def __init__(self, penalty_per_reject: int = DEFAULT_PENALTY_PER_REJECT):
        self.store = EntityStore()
        self.engine = ScoreboardEngine(self.store, penalty_per_reject)
        self.reveal = RevealController(self.engine)

        self.started = False
        self.ended = False
        self.duration = 0
        self.problem_count = 0

        self.has_published = False
        self.last_published_order: List[Team] = []

    @property
    def frozen(self) -> bool:
        return self.engine.frozen

    def add_team(self, name: str) -> Team:
        return self.store.add_team(name)

    def start(self, duration: int, problem_count: int) -> None:
        if self.started:
            raise AlreadyStartedError("Start")
        self.store.seal(problem_count)
        self.started = True
        self.duration = duration
        self.problem_count = problem_count
        logger.info(f"Contest started: {len(self.store)} teams, {problem_count} problems, duration {duration}")

    def submit(self, problem: str, team_name: str, status: Union[str, SubmissionStatus], time: int) -> Submission:
        team = self.store.get_team(team_name, "Submit")
        submission = Submission(problem=problem, status=SubmissionStatus(status), time=time)
        self.engine.apply_submission(team, submission)
        return submission

    def _publish(self, order: List[Team]) -> None:
        self.last_published_order = order
        self.has_published = True

    def board(self) -> Board:
        """Render the current board without publishing it"""
        self.engine.recompute_visible_metrics()
        return self.engine.render_board(rank_teams(self.store.all_teams()))

    def flush(self) -> Board:
        self.engine.recompute_visible_metrics()
        order = rank_teams(self.store.all_teams())
        self._publish(order)
        logger.debug("Scoreboard flushed")
        return self.engine.render_board(order)

    def freeze(self) -> None:
        self.engine.begin_freeze()

    def scroll(self) -> RevealResult:
        result = self.reveal.scroll()
        self._publish(result.final_order)
        return result

    def query_ranking(self, team_name: str) -> RankingQuery:
        team = self.store.get_team(team_name, "Query ranking")
        if self.has_published:
            order = self.last_published_order
        else:
            order = lexicographic_order(self.store.all_teams())
        return RankingQuery(team=team.name, rank=position_of(order, team) + 1, frozen=self.frozen)

    def query_submission(self, team_name: str, problem: str = MATCH_ANY, status: str = MATCH_ANY) -> Optional[Submission]:
        team = self.store.get_team(team_name, "Query submission")
        return query_submission(team, problem, status)

    def end(self) -> None:
        self.ended = True
        logger.info("Contest ended")
