# party_core/io.py
from __future__ import annotations
import io
import re
from typing import Dict, Iterable, List, Sequence, Tuple, Union
import yaml
import pandas as pd

from .config import DEFAULT_OPTIONS, DEFAULT_ROUNDS
from .constants import CSV_HEADERS, HEADER_ALIASES, normalize_rank
from .export_text import format_round_text
from .models import GenerationOptions, GenerationResult, Player, RosterRow

LINE_SPLIT = re.compile(r"\r?\n")


def parse_roster_text(text: str) -> List[RosterRow]:
    """One 'name, rank' per non-blank line; ids are the line positions."""
    lines = [ln.strip() for ln in LINE_SPLIT.split(text or "")]
    lines = [ln for ln in lines if ln]
    rows: List[RosterRow] = []
    for idx, line in enumerate(lines):
        parts = line.split(",")
        name = parts[0].strip() if parts else ""
        rank = normalize_rank(parts[1]) if len(parts) > 1 else ""
        rows.append(RosterRow(id=idx, name=name, rank=rank))
    return rows


def _header_map(cols: Iterable[str]) -> Dict[str, str]:
    """
    Build a mapping from provided column -> canonical header.
    Case-insensitive, uses HEADER_ALIASES, leaves unknown columns untouched.
    """
    out = {}
    for c in cols:
        lc = str(c).strip().lower()
        mapped = None
        for k, aliases in HEADER_ALIASES.items():
            if lc == k or lc in aliases:
                mapped = k
                break
        out[c] = mapped if mapped else c
    return out


def load_roster_csv(file_like) -> List[RosterRow]:
    """Parse a roster CSV (path, bytes or file-like) with name/rank and optional id columns."""
    if isinstance(file_like, (bytes, bytearray)):
        df = pd.read_csv(io.BytesIO(file_like), dtype=str, keep_default_na=False)
    else:
        df = pd.read_csv(file_like, dtype=str, keep_default_na=False)

    df = df.rename(columns=_header_map(df.columns))
    for k in ("name", "rank"):
        if k not in df.columns:
            raise ValueError(f"Missing required column: {k}")

    if "id" in df.columns:
        ids = pd.to_numeric(df["id"], errors="coerce")
        if ids.isna().any():
            raise ValueError("Column 'id' must contain integers.")
        df["id"] = ids.astype(int)
    else:
        df["id"] = range(len(df))

    df["name"] = df["name"].astype(str).str.strip()
    df["rank"] = df["rank"].map(normalize_rank)

    return [
        RosterRow(id=int(r["id"]), name=r["name"], rank=r["rank"])
        for r in df[CSV_HEADERS].to_dict(orient="records")
    ]


def load_roster_file(path: str) -> List[RosterRow]:
    if path.lower().endswith(".csv"):
        return load_roster_csv(path)
    with open(path, "r", encoding="utf-8") as f:
        return parse_roster_text(f.read())


def rows_to_players(rows: Sequence[Union[RosterRow, Player]]) -> List[Player]:
    """Convert validated rows; raises pydantic.ValidationError on bad ranks."""
    return [
        r if isinstance(r, Player) else Player(id=r.id, name=r.name.strip(), rank=normalize_rank(r.rank))
        for r in rows
    ]


def load_options_yaml(path: str) -> Tuple[GenerationOptions, int]:
    """Return (options, rounds) from a YAML file; missing keys take defaults."""
    with open(path, "r", encoding="utf-8") as f:
        obj = yaml.safe_load(f) or {}
    if not isinstance(obj, dict):
        raise ValueError(f"Options file {path} must contain a mapping.")
    unknown = sorted(set(obj) - set(DEFAULT_OPTIONS) - {"rounds"})
    if unknown:
        raise ValueError(f"Unknown option keys: {unknown}")
    rounds = int(obj.pop("rounds", DEFAULT_ROUNDS))
    if rounds < 1:
        raise ValueError("rounds must be >= 1")
    return GenerationOptions(**{**DEFAULT_OPTIONS, **obj}), rounds


def save_options_yaml(path: str, options: GenerationOptions, rounds: int = DEFAULT_ROUNDS):
    data = {"rounds": rounds, **options.model_dump()}
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def save_rounds_text(result: GenerationResult) -> str:
    """Clipboard payload: every round's export text separated by a blank line."""
    return "\n\n".join(r.rendered_text or format_round_text(r) for r in result.rounds)
