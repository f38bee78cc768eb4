from typing import Optional

from ..models.models import Submission, Team

MATCH_ANY = "ALL"


def query_submission(team: Team, problem: str = MATCH_ANY, status: str = MATCH_ANY) -> Optional[Submission]:
    """
    Find the most recent submission of a team matching both filters.

    Args:
        team: Team whose history is scanned
        problem: Problem letter, or "ALL" to match any problem
        status: Status name as written on the wire (e.g. "Wrong_Answer"), or "ALL"

    Returns:
        The latest matching submission, or None
    """
    for submission in reversed(team.submissions):
        if problem != MATCH_ANY and submission.problem != problem:
            continue
        if status != MATCH_ANY and submission.status.value != status:
            continue
        return submission
    return None
