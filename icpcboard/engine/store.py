from typing import Dict, List, Optional

from ..models.models import Team
from ..utils.logger_config import get_logger
from .errors import AlreadyStartedError, DuplicateNameError, TeamNotFoundError

logger = get_logger("store")


class EntityStore:
    """
    Owns every Team and its ProblemState records.

    Teams can only be registered until the store is sealed at contest start;
    sealing sizes every team's problem states exactly once.
    """

    def __init__(self):
        self._teams: Dict[str, Team] = {}
        self.sealed = False
        self.problem_count = 0

    def add_team(self, name: str) -> Team:
        if self.sealed:
            raise AlreadyStartedError("Add")
        if name in self._teams:
            raise DuplicateNameError("Add")
        team = Team(name, self.problem_count)
        self._teams[name] = team
        logger.debug(f"Registered team {name}")
        return team

    def seal(self, problem_count: int) -> None:
        if self.sealed:
            raise AlreadyStartedError("Start")
        self.sealed = True
        self.problem_count = problem_count
        for team in self._teams.values():
            team.reset_problems(problem_count)

    def find_team(self, name: str) -> Optional[Team]:
        return self._teams.get(name)

    def get_team(self, name: str, operation: str) -> Team:
        """Look up a team, raising TeamNotFoundError on behalf of `operation`"""
        team = self._teams.get(name)
        if team is None:
            raise TeamNotFoundError(operation)
        return team

    def all_teams(self) -> List[Team]:
        """All teams, ordered by name. This is an iteration order, not a ranking."""
        return [self._teams[name] for name in sorted(self._teams)]

    def __len__(self) -> int:
        return len(self._teams)
