# party_core/solver_heuristic.py
from __future__ import annotations
from typing import List, Tuple
import logging
import numpy as np

from .history import History
from .models import GenerationOptions, Metrics, Team
from .scoring import calculate_metrics

logger = logging.getLogger(__name__)


def _copy_teams(teams: List[Team]) -> List[Team]:
    return [Team(members=list(t.members)) for t in teams]


def _swap(teams: List[Team], a: int, b: int, ma: int, mb: int) -> List[Team]:
    """Trial partition with member ma of team a exchanged with member mb of team b."""
    members_a = list(teams[a].members)
    members_b = list(teams[b].members)
    members_a[ma], members_b[mb] = members_b[mb], members_a[ma]
    out = list(teams)
    out[a] = Team(members=members_a)
    out[b] = Team(members=members_b)
    return out


def local_search_trace(
    teams: List[Team],
    iterations: int,
    history: History,
    options: GenerationOptions,
    rng: np.random.Generator,
) -> Tuple[List[Team], Metrics, List[float]]:
    """Randomised hill-climbing over pairwise member swaps.

    Only strictly better trials are accepted, so the returned score trace is
    strictly decreasing after its first entry (the starting score).
    """
    current = _copy_teams(teams)
    current_metrics = calculate_metrics(current, history, options)
    trace = [current_metrics.total_score]

    n = len(current)
    if n < 2:
        return current, current_metrics, trace

    for _ in range(iterations):
        a = int(rng.integers(n))
        b = int(rng.integers(n - 1))
        if b >= a:
            b += 1
        ma = int(rng.integers(len(current[a].members)))
        mb = int(rng.integers(len(current[b].members)))

        trial = _swap(current, a, b, ma, mb)
        trial_metrics = calculate_metrics(trial, history, options)
        if trial_metrics.total_score < current_metrics.total_score:
            current = trial
            current_metrics = trial_metrics
            trace.append(current_metrics.total_score)

    logger.debug("local search: %d iterations, %d accepted, final score %.1f",
                 iterations, len(trace) - 1, current_metrics.total_score)
    return current, current_metrics, trace


def improve_teams(
    teams: List[Team],
    iterations: int,
    history: History,
    options: GenerationOptions,
    rng: np.random.Generator,
) -> List[Team]:
    improved, _, _ = local_search_trace(teams, iterations, history, options, rng)
    return improved
