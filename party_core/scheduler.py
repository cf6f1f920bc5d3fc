# party_core/scheduler.py
from __future__ import annotations
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence, Tuple, Union
import logging
import numpy as np

from .assignment import greedy_assign
from .export_text import format_round_text
from .fairness import build_summary
from .history import History
from .io import rows_to_players
from .leaders import order_leaders
from .matchups import bye_team, generate_matchups
from .models import (
    GenerationOptions, GenerationResult, Metrics, Player, RosterRow, RoundResult, Team,
)
from .scoring import calculate_metrics
from .solver_heuristic import improve_teams
from .validation import validate_players

logger = logging.getLogger(__name__)

Attempt = Tuple[List[Team], Metrics]


def run_attempt(
    players: List[Player],
    history: History,
    options: GenerationOptions,
    rng: np.random.Generator,
) -> Attempt:
    """One candidate: greedy build -> local search -> leader order -> score."""
    initial = greedy_assign(players, history)
    improved = improve_teams(initial, options.swap_iterations, history, options, rng)
    ordered = order_leaders(improved, history, rng)
    return ordered, calculate_metrics(ordered, history, options)


def pick_best(results: Sequence[Attempt]) -> Optional[Attempt]:
    """Lowest total score wins; equal scores go to the earliest attempt."""
    if not results:
        return None
    best_idx = min(range(len(results)), key=lambda i: (results[i][1].total_score, i))
    return results[best_idx]


def generate_round_teams(
    players: List[Player],
    history: History,
    options: GenerationOptions,
    rng: np.random.Generator,
) -> Attempt:
    """
    Best of `candidate_attempts` independent attempts. Each attempt gets its
    own child generator spawned up front, so the outcome does not depend on
    max_workers. History is only read here.
    """
    n = options.candidate_attempts
    child_rngs = rng.spawn(n) if n > 0 else []

    if options.max_workers > 1 and n > 1:
        with ThreadPoolExecutor(max_workers=options.max_workers, thread_name_prefix="party-attempt") as executor:
            results = list(executor.map(lambda g: run_attempt(players, history, options, g), child_rngs))
    else:
        results = [run_attempt(players, history, options, g) for g in child_rngs]

    for i, (_, m) in enumerate(results):
        logger.debug("attempt %d: total=%.1f balance=%.1f diversity=%.1f leader=%.1f hard=%.1f",
                     i, m.total_score, m.balance_penalty, m.diversity_penalty,
                     m.leader_penalty, m.hard_penalty)

    best = pick_best(results)
    if best is not None:
        return best

    logger.warning("No graded attempt available; using a single unoptimised assignment.")
    fallback = order_leaders(greedy_assign(players, history), history, rng)
    return fallback, calculate_metrics(fallback, history, options)


def generate_all_rounds(
    roster: Sequence[Union[RosterRow, Player]],
    rounds: int,
    options: Optional[GenerationOptions] = None,
    rng: Optional[np.random.Generator] = None,
    history: Optional[History] = None,
) -> GenerationResult:
    """
    Validate the roster, then build `rounds` sequential rounds.

    Round k+1 is scored against the history left by rounds 1..k; the history
    is updated exactly once per round after its winner and matchups are fixed.
    """
    if rounds < 0:
        raise ValueError(f"rounds must be >= 0, got {rounds}")
    options = options or GenerationOptions()

    validation = validate_players(roster)
    if not validation.ok:
        logger.warning("Roster rejected: %s", "; ".join(validation.errors))
        return GenerationResult(errors=validation.errors)

    players = rows_to_players(roster)
    rng = rng if rng is not None else np.random.default_rng(options.random_seed)
    history = history if history is not None else History()

    results: List[RoundResult] = []
    for r in range(1, rounds + 1):
        teams, metrics = generate_round_teams(players, history, options, rng)
        matchups = generate_matchups(teams, rng)
        rest = bye_team(teams, matchups)
        if rest is not None:
            logger.debug("round %d: party with leader %s sits out", r, rest.leader.name)

        round_result = RoundResult(round=r, teams=teams, matchups=matchups, metrics=metrics)
        round_result.rendered_text = format_round_text(round_result)
        results.append(round_result)

        history.record_round(teams)
        logger.info("round %d: total=%.1f sums=%s", r, metrics.total_score, [t.sum for t in teams])

    summary = build_summary(players, history)
    if summary.leader_warning:
        logger.warning("Leader counts uneven: max %d, min %d",
                       summary.max_leader_count, summary.min_leader_count)
    return GenerationResult(rounds=results, summary=summary)
