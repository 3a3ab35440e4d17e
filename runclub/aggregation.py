"""
Summary figures derived from a ledger snapshot.
"""
from dataclasses import dataclass
from typing import Iterable, Sequence

from runclub.config import NO_PLEDGE
from runclub.ledger import Run

NO_ACTIVE_PLEDGE = "None"


@dataclass(frozen=True)
class Summary:
    total_distance: float = 0.0
    total_wealth: float = 0.0
    active_pledge: str = NO_ACTIVE_PLEDGE


@dataclass(frozen=True)
class LeaderboardFigures:
    total_distance: float
    total_wealth: float


def _wealth_value(run: Run) -> float:
    try:
        return float(run.wealth)
    except (TypeError, ValueError):
        return 0.0


def _totals(runs: Iterable[Run]) -> tuple[float, float]:
    total_distance = 0.0
    total_wealth = 0.0
    for run in runs:
        total_distance += run.distance
        if run.pledge != NO_PLEDGE:
            total_wealth += _wealth_value(run)
    return total_distance, total_wealth


def summarize(runs: Sequence[Run]) -> Summary:
    if not runs:
        return Summary()
    total_distance, total_wealth = _totals(runs)
    newest = runs[0]
    active = newest.pledge if newest.pledge != NO_PLEDGE else NO_ACTIVE_PLEDGE
    return Summary(total_distance=total_distance, total_wealth=total_wealth, active_pledge=active)


def leaderboard_figures(runs: Sequence[Run]) -> LeaderboardFigures:
    total_distance, total_wealth = _totals(runs)
    return LeaderboardFigures(total_distance=total_distance, total_wealth=total_wealth)
