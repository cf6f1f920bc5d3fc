# party_core/fairness.py
from __future__ import annotations
from typing import Dict, List
import pandas as pd

from .history import History
from .models import Player, Summary

# max - min leader count at which the summary raises a warning
LEADER_SPREAD_WARNING = 2


def check_leader_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) < LEADER_SPREAD_WARNING)


def build_summary(players: List[Player], history: History) -> Summary:
    """Cross-round fairness statistics over the final history."""
    pair_duplicate_total = 0
    max_pair_count = 0
    for count in history.pair_counts.values():
        pair_duplicate_total += max(count - 1, 0)
        max_pair_count = max(max_pair_count, count)

    duplicate_teams = sum(1 for count in history.team_counts.values() if count > 1)

    leader_counts: Dict[str, int] = {}
    counts: List[int] = []
    for p in players:
        c = history.leader_count(p.id)
        leader_counts[p.name] = c
        counts.append(c)

    max_leader = max(counts) if counts else 0
    min_leader = min(counts) if counts else 0

    return Summary(
        pair_duplicate_total=pair_duplicate_total,
        max_pair_count=max_pair_count,
        duplicate_teams=duplicate_teams,
        leader_counts=leader_counts,
        max_leader_count=max_leader,
        min_leader_count=min_leader,
        leader_warning=not check_leader_evenness(counts),
    )


def leader_counts_df(summary: Summary) -> pd.DataFrame:
    df = pd.DataFrame(
        [{"name": name, "leader_count": c} for name, c in summary.leader_counts.items()],
        columns=["name", "leader_count"],
    )
    return df.sort_values(["leader_count", "name"], ascending=[False, True]).reset_index(drop=True)


def pair_counts_df(players: List[Player], history: History) -> pd.DataFrame:
    """Recorded teammate pairs, most repeated first."""
    pid_to_name = {p.id: p.name for p in players}
    rows = []
    for (a, b), c in history.pair_counts.items():
        rows.append({
            "player_a": pid_to_name.get(a, f"#{a}"),
            "player_b": pid_to_name.get(b, f"#{b}"),
            "count": c,
        })
    df = pd.DataFrame(rows, columns=["player_a", "player_b", "count"])
    return df.sort_values(["count", "player_a", "player_b"], ascending=[False, True, True]).reset_index(drop=True)
