from __future__ import annotations
from typing import Dict, List

# -----------------------------
# Ranks (S strongest .. D weakest)
# -----------------------------
RANKS: List[str] = ["S", "A", "B", "C", "D"]

RANK_SCORE: Dict[str, int] = {"S": 5, "A": 4, "B": 3, "C": 2, "D": 1}

# -----------------------------
# Party layout
# -----------------------------
TEAM_SIZE = 4
ALLOWED_ROSTER_SIZES: List[int] = [8, 12, 16, 20]

# Balance term multiplies the max/min spread by this factor
SPREAD_FACTOR = 10

# -----------------------------
# Validation messages
# -----------------------------
MSG_EMPTY_ROSTER = "Enter at least one participant."
MSG_BAD_LINE = "Each line must be 'name, rank'."
MSG_BAD_RANK = "Rank must be one of S/A/B/C/D."
MSG_BAD_SIZE = "Participant count must be 8/12/16/20 (a multiple of 4)."
MSG_DUPLICATE_ID = "Duplicate player id: {ids}"

# -----------------------------
# Roster CSV columns
# -----------------------------
CSV_HEADERS: List[str] = ["id", "name", "rank"]
HEADER_ALIASES: Dict[str, set] = {
    # canonical -> set of aliases
    "id": {"id", "player_id", "pid"},
    "name": {"name", "player", "full name"},
    "rank": {"rank", "tier", "grade"},
}


def normalize_rank(r: str) -> str:
    if r is None:
        return ""
    return str(r).strip().upper()
