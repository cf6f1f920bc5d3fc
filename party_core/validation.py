# party_core/validation.py
from __future__ import annotations
from collections import Counter
from typing import List, Sequence, Union

from .constants import (
    ALLOWED_ROSTER_SIZES, RANKS,
    MSG_BAD_LINE, MSG_BAD_RANK, MSG_BAD_SIZE, MSG_DUPLICATE_ID, MSG_EMPTY_ROSTER,
    normalize_rank,
)
from .models import Player, RosterRow, ValidationResult


def validate_players(rows: Sequence[Union[RosterRow, Player]]) -> ValidationResult:
    """
    Check a roster before generation. Problems are collected as messages,
    never raised; generation must not run unless `ok` is True.
    """
    errs: List[str] = []
    if not rows:
        errs.append(MSG_EMPTY_ROSTER)
        return ValidationResult(ok=False, errors=errs)

    for r in rows:
        name = (r.name or "").strip()
        rank = normalize_rank(r.rank)
        if not name or not rank:
            errs.append(MSG_BAD_LINE)
            break
        if rank not in RANKS:
            errs.append(MSG_BAD_RANK)
            break

    if len(rows) not in ALLOWED_ROSTER_SIZES:
        errs.append(MSG_BAD_SIZE)

    dupes = sorted(pid for pid, n in Counter(r.id for r in rows).items() if n > 1)
    if dupes:
        errs.append(MSG_DUPLICATE_ID.format(ids=", ".join(str(d) for d in dupes)))

    return ValidationResult(ok=not errs, errors=errs)
