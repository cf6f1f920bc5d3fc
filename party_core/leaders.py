# party_core/leaders.py
from __future__ import annotations
from typing import List
import numpy as np

from .history import History
from .models import Team


def order_leaders(teams: List[Team], history: History, rng: np.random.Generator) -> List[Team]:
    """
    Reorder each team so the member with the fewest past leaderships sits in
    position 0. Members with equal counts are shuffled by the injected rng.
    """
    out: List[Team] = []
    for team in teams:
        jitter = rng.random(len(team.members))
        keyed = sorted(
            zip(team.members, jitter),
            key=lambda mj: (history.leader_count(mj[0].id), mj[1]),
        )
        out.append(Team(members=[m for m, _ in keyed]))
    return out
