"""
Internal helpers for tests (not imported by the app).
"""
from __future__ import annotations
from typing import List, Sequence
from .models import Player, Team


def quick_players(ranks: Sequence[str], prefix: str = "P") -> List[Player]:
    return [Player(id=i, name=f"{prefix}{i}", rank=r) for i, r in enumerate(ranks)]


def quick_teams(players: List[Player], size: int = 4) -> List[Team]:
    return [Team(members=players[i:i + size]) for i in range(0, len(players), size)]
