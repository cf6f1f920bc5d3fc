# party_core/history.py
from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Tuple
from pydantic import BaseModel, Field

from .models import Player, Team

PairKey = Tuple[int, int]
TeamKey = Tuple[int, ...]


def pair_key(a: int, b: int) -> PairKey:
    """Unordered pair of player ids; key(a, b) == key(b, a)."""
    return (a, b) if a < b else (b, a)


def team_key(members: Iterable[Player]) -> TeamKey:
    return tuple(sorted(p.id for p in members))


def team_pairs(members: Sequence[Player]) -> List[PairKey]:
    out = []
    for i in range(len(members)):
        for j in range(i + 1, len(members)):
            out.append(pair_key(members[i].id, members[j].id))
    return out


class History(BaseModel):
    """
    Cross-round counters for one generation run.

    Entries are created lazily (missing == 0) and only ever incremented,
    once per round, by record_round() after the round's winner is final.
    """
    pair_counts: Dict[PairKey, int] = Field(default_factory=dict)
    team_counts: Dict[TeamKey, int] = Field(default_factory=dict)
    leader_counts: Dict[int, int] = Field(default_factory=dict)
    rounds_recorded: int = 0

    def pair_count(self, a: int, b: int) -> int:
        return self.pair_counts.get(pair_key(a, b), 0)

    def team_count(self, key: TeamKey) -> int:
        return self.team_counts.get(tuple(sorted(key)), 0)

    def leader_count(self, pid: int) -> int:
        return self.leader_counts.get(pid, 0)

    def record_round(self, teams: List[Team]) -> None:
        for team in teams:
            for k in team_pairs(team.members):
                self.pair_counts[k] = self.pair_counts.get(k, 0) + 1
            tk = team_key(team.members)
            self.team_counts[tk] = self.team_counts.get(tk, 0) + 1
            leader = team.leader
            if leader is not None:
                self.leader_counts[leader.id] = self.leader_counts.get(leader.id, 0) + 1
        self.rounds_recorded += 1

    def snapshot(self) -> "History":
        return self.model_copy(deep=True)
