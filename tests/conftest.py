from __future__ import annotations

from typing import Callable, List

import pytest

from icpcboard.engine.contest import Contest


@pytest.fixture
def contest() -> Contest:
    return Contest()


@pytest.fixture
def started_contest() -> Callable[..., Contest]:
    """Build a started contest with the given teams and problem count."""

    def _build(teams: List[str], problem_count: int = 3, duration: int = 300) -> Contest:
        built = Contest()
        for name in teams:
            built.add_team(name)
        built.start(duration, problem_count)
        return built

    return _build
