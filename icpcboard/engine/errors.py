"""Named rejections raised by the contest engine.

Every rejection is raised before any state is touched, so a rejected event
leaves the contest exactly as it was.
"""

from typing import Optional


class ScoreboardError(Exception):
    """Base class for rejected contest events"""

    reason = "operation rejected"

    def __init__(self, operation: str, reason: Optional[str] = None):
        self.operation = operation
        if reason is not None:
            self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.operation} failed: {self.reason}."


class DuplicateNameError(ScoreboardError):
    reason = "duplicated team name"


class AlreadyStartedError(ScoreboardError):
    reason = "competition has started"


class TeamNotFoundError(ScoreboardError):
    reason = "cannot find the team"


class AlreadyFrozenError(ScoreboardError):
    reason = "scoreboard has been frozen"


class NotFrozenError(ScoreboardError):
    reason = "scoreboard has not been frozen"
