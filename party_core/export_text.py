# party_core/export_text.py
from __future__ import annotations
from typing import List

from .models import RoundResult, Team


def format_number(x: float) -> str:
    """Integral values without a decimal point, otherwise the shortest repr."""
    x = float(x)
    if x.is_integer():
        return str(int(x))
    return repr(x)


def format_diff(diff: float) -> str:
    if diff == 0:
        return "±0"
    if diff > 0:
        return f"+{format_number(diff)}"
    return format_number(diff)


def format_members(team: Team) -> str:
    return " / ".join(
        f"{'(L)' if idx == 0 else ''}{m.name}({m.rank})" for idx, m in enumerate(team.members)
    )


def format_round_text(round_result: RoundResult) -> str:
    """
    Clipboard text for one round:

        [Round r]
        Party 1 (sum=S, diff=D): (L)name(rank) / name(rank) / ...
        Matchups:
        - Party 1 vs Party 2
        - Party 3 vs Party 4
    """
    average = round_result.metrics.average_sum
    lines: List[str] = [f"[Round {round_result.round}]"]
    for idx, team in enumerate(round_result.teams, start=1):
        diff = format_diff(team.sum - average)
        lines.append(f"Party {idx} (sum={team.sum}, diff={diff}): {format_members(team)}")

    # lines are numbered by pair position; a bye team gets no line
    lines.append("Matchups:")
    for idx in range(len(round_result.matchups)):
        lines.append(f"- Party {idx * 2 + 1} vs Party {idx * 2 + 2}")
    return "\n".join(lines)
