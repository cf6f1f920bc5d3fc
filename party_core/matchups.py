# party_core/matchups.py
from __future__ import annotations
from typing import List, Optional, Tuple
import numpy as np

from .models import Team


def generate_matchups(teams: List[Team], rng: np.random.Generator) -> List[Tuple[Team, Team]]:
    """Uniform shuffle, then pair neighbours (0-1, 2-3, ...). Viewing schedule only.

    With an odd team count the last shuffled team sits out (see bye_team).
    """
    order = rng.permutation(len(teams))
    shuffled = [teams[int(i)] for i in order]
    return [(shuffled[i], shuffled[i + 1]) for i in range(0, len(shuffled) - 1, 2)]


def bye_team(teams: List[Team], matchups: List[Tuple[Team, Team]]) -> Optional[Team]:
    paired = {t.key for pair in matchups for t in pair}
    rest = [t for t in teams if t.key not in paired]
    return rest[0] if rest else None
