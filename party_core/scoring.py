# party_core/scoring.py
from __future__ import annotations
from typing import List
import numpy as np

from .constants import SPREAD_FACTOR
from .history import History, team_pairs
from .models import GenerationOptions, Metrics, Team


def balance_terms(teams: List[Team]):
    """
    Return (max_sum, min_sum, average_sum, variance) of the team sums.
    variance is the plain sum of squared deviations (not divided by count),
    so larger rosters pay more for the same relative spread.
    """
    sums = np.array([t.sum for t in teams], dtype=float)
    if sums.size == 0:
        return 0, 0, 0.0, 0.0
    mean = float(sums.mean())
    variance = float(((sums - mean) ** 2).sum())
    return int(sums.max()), int(sums.min()), mean, variance


def diversity_penalty(teams: List[Team], history: History) -> float:
    total = 0
    for team in teams:
        for a, b in team_pairs(team.members):
            total += (history.pair_count(a, b) + 1) ** 2
    return float(total)


def leader_penalty(teams: List[Team], history: History) -> float:
    total = 0
    for team in teams:
        leader = team.leader
        if leader is None:
            continue
        total += (history.leader_count(leader.id) + 1) ** 2
    return float(total)


def hard_penalty(teams: List[Team], history: History, constant: float) -> float:
    # exact composition repeats
    return float(sum(constant for t in teams if history.team_count(t.key) > 0))


def calculate_metrics(teams: List[Team], history: History, options: GenerationOptions) -> Metrics:
    """Score a partition against the current (pre-round) history. Never mutates history."""
    max_sum, min_sum, average_sum, variance = balance_terms(teams)
    balance = (max_sum - min_sum) * SPREAD_FACTOR + variance
    diversity = diversity_penalty(teams, history)
    leader = leader_penalty(teams, history)
    hard = hard_penalty(teams, history, options.hard_penalty)

    total = (
        options.balance_weight * balance
        + options.diversity_weight * diversity
        + options.leader_weight * leader
        + hard
    )
    return Metrics(
        balance_penalty=balance,
        diversity_penalty=diversity,
        leader_penalty=leader,
        hard_penalty=hard,
        total_score=total,
        max_sum=max_sum,
        min_sum=min_sum,
        average_sum=average_sum,
        variance=variance,
    )
