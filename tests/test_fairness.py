from party_core.fairness import (
    build_summary, check_leader_evenness, leader_counts_df, pair_counts_df,
)
from party_core.history import History
from party_core.testing_helpers import quick_players


def _history():
    return History(
        pair_counts={(0, 1): 3, (0, 2): 1, (1, 2): 2},
        team_counts={(0, 1, 2, 3): 2, (4, 5, 6, 7): 1},
        leader_counts={0: 2},
    )


def test_summary_arithmetic():
    s = build_summary(quick_players("SABC"), _history())
    assert s.pair_duplicate_total == 2 + 0 + 1
    assert s.max_pair_count == 3
    assert s.duplicate_teams == 1
    assert s.leader_counts == {"P0": 2, "P1": 0, "P2": 0, "P3": 0}
    assert (s.max_leader_count, s.min_leader_count) == (2, 0)
    assert s.leader_warning


def test_summary_empty_history():
    s = build_summary(quick_players("SABCSABC"), History())
    assert (s.pair_duplicate_total, s.max_pair_count, s.duplicate_teams) == (0, 0, 0)
    assert (s.max_leader_count, s.min_leader_count) == (0, 0)
    assert not s.leader_warning


def test_summary_empty_roster():
    s = build_summary([], History())
    assert s.leader_counts == {}
    assert (s.max_leader_count, s.min_leader_count) == (0, 0)


def test_leader_evenness():
    assert check_leader_evenness([1, 1, 2, 1])
    assert not check_leader_evenness([0, 2, 1])
    assert check_leader_evenness([])


def test_report_frames():
    players = quick_players("SABC")
    df = leader_counts_df(build_summary(players, _history()))
    assert df.iloc[0].to_dict() == {"name": "P0", "leader_count": 2}
    assert len(df) == 4

    pairs = pair_counts_df(players, _history())
    assert list(pairs.columns) == ["player_a", "player_b", "count"]
    assert pairs["count"].tolist() == [3, 2, 1]
    assert (pairs.iloc[0]["player_a"], pairs.iloc[0]["player_b"]) == ("P0", "P1")
