import pytest

from party_core.history import History
from party_core.models import GenerationOptions
from party_core.scoring import balance_terms, calculate_metrics
from party_core.testing_helpers import quick_players, quick_teams


def test_balance_uses_unnormalised_variance():
    # sums 15, 12, 9 -> mean 12, squared deviations 9 + 0 + 9
    teams = quick_teams(quick_players("SSAD" "AABD" "BBCD"))
    assert balance_terms(teams) == (15, 9, 12.0, pytest.approx(18.0))
    m = calculate_metrics(teams, History(), GenerationOptions())
    assert m.balance_penalty == pytest.approx(6 * 10 + 18.0)
    assert m.variance == pytest.approx(18.0)


def test_first_round_baseline_terms():
    teams = quick_teams(quick_players("SABCDSABCDSA"))
    m = calculate_metrics(teams, History(), GenerationOptions())
    assert m.diversity_penalty == 6 * len(teams)
    assert m.leader_penalty == len(teams)
    assert m.hard_penalty == 0


def test_repeat_composition_adds_hard_penalty():
    teams = quick_teams(quick_players("SABCSABC"))
    history = History()
    history.record_round(teams)

    with_hard = calculate_metrics(teams, history, GenerationOptions())
    without = calculate_metrics(teams, history, GenerationOptions(hard_penalty=0))
    assert with_hard.hard_penalty == 2 * 10000
    assert with_hard.total_score - without.total_score == pytest.approx(20000)


def test_quadratic_diversity_and_leader_terms():
    teams = quick_teams(quick_players("SABCSABC"))
    history = History()
    history.record_round(teams)
    history.record_round(teams)
    m = calculate_metrics(teams, history, GenerationOptions())
    # every pair seen twice -> (2 + 1)^2 each; both leaders seen twice -> 9 each
    assert m.diversity_penalty == 12 * 9
    assert m.leader_penalty == 2 * 9


def test_weights_apply_to_soft_terms_only():
    teams = quick_teams(quick_players("SSAD" "BBCD"))
    history = History()
    history.record_round(teams)
    o = GenerationOptions(balance_weight=2, diversity_weight=3, leader_weight=0.5, hard_penalty=7)
    m = calculate_metrics(teams, history, o)
    expected = 2 * m.balance_penalty + 3 * m.diversity_penalty + 0.5 * m.leader_penalty + 14
    assert m.total_score == pytest.approx(expected)


def test_scoring_does_not_touch_history():
    teams = quick_teams(quick_players("SABCSABC"))
    history = History()
    history.record_round(teams)
    before = history.snapshot()
    calculate_metrics(teams, history, GenerationOptions())
    assert history.pair_counts == before.pair_counts
    assert history.team_counts == before.team_counts
    assert history.leader_counts == before.leader_counts
