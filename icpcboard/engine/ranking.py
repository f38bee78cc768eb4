from functools import cmp_to_key
from itertools import zip_longest
from typing import Iterable, List

from ..models.models import Team

# Pads the shorter solve-time list; smaller than any real submission time
_NO_SOLVE = -1


def compare_teams(a: Team, b: Team) -> int:
    """
    Strict total order over teams by their visible metrics.

    More solves first, then lower penalty, then the solve times compared
    from the latest down (earlier wins), then team name.
    """
    if a.solved_count != b.solved_count:
        return -1 if a.solved_count > b.solved_count else 1
    if a.penalty_sum != b.penalty_sum:
        return -1 if a.penalty_sum < b.penalty_sum else 1
    for time_a, time_b in zip_longest(a.solve_times, b.solve_times, fillvalue=_NO_SOLVE):
        if time_a != time_b:
            return -1 if time_a < time_b else 1
    if a.name != b.name:
        return -1 if a.name < b.name else 1
    return 0


team_sort_key = cmp_to_key(compare_teams)


def rank_teams(teams: Iterable[Team]) -> List[Team]:
    return sorted(teams, key=team_sort_key)


def lexicographic_order(teams: Iterable[Team]) -> List[Team]:
    return sorted(teams, key=lambda team: team.name)


def position_of(order: List[Team], team: Team) -> int:
    """Zero-based position of `team` in `order` (len(order) when absent)"""
    for index, candidate in enumerate(order):
        if candidate is team:
            return index
    return len(order)
