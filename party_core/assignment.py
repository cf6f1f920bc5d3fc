# party_core/assignment.py
from __future__ import annotations
from typing import List
import math

from .constants import TEAM_SIZE
from .history import History
from .models import Player, Team


def _placement_cost(members: List[Player], team_sum: int, player: Player, history: History) -> int:
    """
    Greedy cost of adding `player` to a partial team:
    team sum + player score + sum over members of (pair_count + 1)^2.
    """
    increment = 0
    for m in members:
        increment += (history.pair_count(m.id, player.id) + 1) ** 2
    return team_sum + player.score + increment


def greedy_assign(players: List[Player], history: History) -> List[Team]:
    """Initial partition:
    - strongest players first (stable order for equal scores)
    - each goes to the open team with the lowest placement cost
    - ties go to the lowest team index
    """
    if len(players) % TEAM_SIZE != 0:
        raise ValueError(f"Roster size {len(players)} is not a multiple of {TEAM_SIZE}.")

    team_count = len(players) // TEAM_SIZE
    buckets: List[List[Player]] = [[] for _ in range(team_count)]
    sums = [0] * team_count

    for player in sorted(players, key=lambda p: -p.score):
        best_idx = -1
        best_cost = math.inf
        for idx, members in enumerate(buckets):
            if len(members) >= TEAM_SIZE:
                continue
            cost = _placement_cost(members, sums[idx], player, history)
            if cost < best_cost:
                best_cost = cost
                best_idx = idx
        buckets[best_idx].append(player)
        sums[best_idx] += player.score

    return [Team(members=members) for members in buckets]
