"""Command-line entry point: read a roster, print every round's party text."""

import argparse
import logging
import sys
from typing import List, Optional

from party_core.config import DEFAULT_OPTIONS, DEFAULT_ROUNDS
from party_core.fairness import leader_counts_df, pair_counts_df
from party_core.history import History
from party_core.io import load_options_yaml, load_roster_file, rows_to_players, save_rounds_text
from party_core.models import GenerationOptions, GenerationResult, Player
from party_core.scheduler import generate_all_rounds

logger = logging.getLogger(__name__)


def _int_at_least(value: str, minimum: int) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"'{value}' is not an integer")
    if n < minimum:
        raise argparse.ArgumentTypeError(f"{value} must be >= {minimum}")
    return n


def _positive_int(value: str) -> int:
    return _int_at_least(value, 1)


def _non_negative_int(value: str) -> int:
    return _int_at_least(value, 0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="party_core",
        description="Build balanced 4-player parties over several rounds.",
    )
    parser.add_argument("roster", help="Roster file: 'name, rank' per line, or a .csv with name/rank columns")
    parser.add_argument("--config", help="YAML options file (see assets/options.yaml)")
    parser.add_argument("--rounds", type=_positive_int, help=f"Number of rounds (default {DEFAULT_ROUNDS})")
    parser.add_argument("--attempts", type=_non_negative_int, help="Candidate attempts per round")
    parser.add_argument("--iterations", type=_non_negative_int, help="Swap iterations per attempt")
    parser.add_argument("--seed", type=int, help="Random seed for reproducible output")
    parser.add_argument("--workers", type=int, help="Threads used for candidate attempts")
    parser.add_argument("--summary", action="store_true", help="Print the cross-round summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def format_summary(result: GenerationResult, players: List[Player], history: History) -> str:
    s = result.summary
    lines = [
        "Summary:",
        f"  duplicate pairings: {s.pair_duplicate_total} (max pair count {s.max_pair_count})",
        f"  repeated parties: {s.duplicate_teams}",
        f"  leader counts: max {s.max_leader_count}, min {s.min_leader_count}"
        + ("  [uneven]" if s.leader_warning else ""),
    ]
    df = leader_counts_df(s)
    if not df.empty:
        lines.append(df.to_string(index=False))
    pairs = pair_counts_df(players, history)
    repeated = pairs[pairs["count"] > 1]
    if not repeated.empty:
        lines.append("Repeated pairings:")
        lines.append(repeated.to_string(index=False))
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.config:
        try:
            options, rounds = load_options_yaml(args.config)
        except (OSError, ValueError) as e:
            logger.error("Failed to load configuration: %s", e)
            return 2
        logger.info("Loaded configuration from: %s", args.config)
    else:
        options, rounds = GenerationOptions(**DEFAULT_OPTIONS), DEFAULT_ROUNDS

    overrides = {
        "candidate_attempts": args.attempts,
        "swap_iterations": args.iterations,
        "random_seed": args.seed,
        "max_workers": args.workers,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        try:
            options = GenerationOptions(**{**options.model_dump(), **overrides})
        except ValueError as e:
            logger.error("Invalid options: %s", e)
            return 2
    if args.rounds is not None:
        rounds = args.rounds

    try:
        rows = load_roster_file(args.roster)
    except (OSError, ValueError) as e:
        logger.error("Failed to read roster %s: %s", args.roster, e)
        return 2

    history = History()
    result = generate_all_rounds(rows, rounds, options, history=history)
    if not result.ok:
        for msg in result.errors:
            print(msg, file=sys.stderr)
        return 1

    print(save_rounds_text(result))
    if args.summary:
        print()
        print(format_summary(result, rows_to_players(rows), history))
    return 0
