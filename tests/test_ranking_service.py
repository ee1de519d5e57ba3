import math

import pytest

from lineupstar.config import UnknownStrategyError
from lineupstar.confidence import ConfidenceLevel
from lineupstar.models import PlayerStats
from lineupstar.ranking import (
    generate_lineup,
    has_situational_data,
    rank_lineup,
    score_slot,
    select_eligible,
    situational_confidence,
)


def _player(player_id: str, **stats) -> PlayerStats:
    stats.setdefault("pa", 20)
    return PlayerStats.model_validate({"id": player_id, "name": f"Player {player_id}", **stats})


def _clean_roster() -> list[PlayerStats]:
    # (obp, slg); ops is obp + slg
    splits = {
        "A": (0.500, 0.400),
        "B": (0.350, 0.700),
        "C": (0.450, 0.550),
        "D": (0.420, 0.600),
        "E": (0.400, 0.480),
        "F": (0.380, 0.450),
        "G": (0.300, 0.520),
        "H": (0.330, 0.420),
        "I": (0.310, 0.380),
    }
    return [
        _player(player_id, avg=0.300, obp=obp, slg=slg, ops=obp + slg)
        for player_id, (obp, slg) in splits.items()
    ]


def _ids(players: list[PlayerStats]) -> list[str]:
    return [player.id for player in players]


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_empty_roster_returns_empty_lineup(strategy):
    assert generate_lineup([], strategy) == []


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_roster_without_stats_returns_empty_lineup(strategy):
    roster = [_player("x"), _player("y", pa=0)]

    assert generate_lineup(roster, strategy) == []


def test_traditional_clean_roster_fills_slots_by_priority():
    lineup = generate_lineup(_clean_roster(), "traditional")

    # slot 1 best OBP, slot 4 best SLG, slot 2 best OPS left, slot 5 best SLG
    # left, slot 3 best OPS left, then 6-9 by OPS
    assert _ids(lineup) == ["A", "D", "E", "B", "C", "F", "G", "H", "I"]


def test_traditional_fill_order_reported_per_slot():
    result = rank_lineup(_clean_roster(), "traditional")

    assert [entry.slot for entry in result.entries] == list(range(1, 10))
    assert result.entries[0].role == "Leadoff"
    assert result.entries[3].role == "Cleanup"
    assert result.entries[0].score == pytest.approx(0.500)
    assert result.entries[3].score == pytest.approx(0.700)
    assert all(entry.confidence is ConfidenceLevel.HIGH for entry in result.entries)


def test_traditional_recomputes_ops_from_obp_and_slg():
    roster = [
        _player("inflated", avg=0.2, obp=0.300, slg=0.300, ops=5.0),
        _player("honest", avg=0.2, obp=0.310, slg=0.350, ops=0.660),
        _player("leadoff", avg=0.2, obp=0.600, slg=0.100, ops=0.700),
        _player("power", avg=0.2, obp=0.200, slg=0.900, ops=1.100),
    ]

    lineup = generate_lineup(roster, "traditional")

    # slot 2 goes to the best recomputed OPS among the two left
    assert _ids(lineup) == ["leadoff", "honest", "power", "inflated"]


def test_short_roster_yields_partial_lineup_in_slot_order():
    roster = _clean_roster()[:3]

    traditional = rank_lineup(roster, "traditional")
    situational = rank_lineup(roster, "situational")

    assert [entry.slot for entry in traditional.entries] == [1, 2, 4]
    assert [entry.slot for entry in situational.entries] == [1, 2, 3]
    assert _ids(traditional.players) == ["A", "C", "B"]


def test_penalty_affects_ranking_but_not_returned_stats():
    roster = [
        _player("veteran", avg=0.300, obp=0.400, slg=0.400),
        _player("rookie", avg=0.400, obp=0.500, slg=0.400, pa=8),
    ]

    lineup = generate_lineup(roster, "traditional")

    # rookie's OBP .500 is discounted to .425 and still leads off
    assert _ids(lineup) == ["rookie", "veteran"]
    assert lineup[0].avg == pytest.approx(0.400)
    assert lineup[0] is roster[1]

    roster[1] = _player("rookie", avg=0.400, obp=0.450, slg=0.400, pa=8)
    lineup = generate_lineup(roster, "traditional")

    # .450 * 0.85 = .3825 drops below the veteran's undiscounted .400
    assert _ids(lineup) == ["veteran", "rookie"]


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_remap_returns_original_records(strategy):
    roster = [_player("medium", avg=0.400, obp=0.450, slg=0.500, pa=8, abRisp=1, baRisp=0.5)]

    lineup = generate_lineup(roster, strategy)

    assert len(lineup) == 1
    assert lineup[0].avg == 0.400
    assert lineup[0].ba_risp == 0.5
    assert lineup[0] is roster[0]


def test_low_pa_players_are_dropped_when_others_qualify():
    roster = [
        _player("regular", avg=0.250, obp=0.300, slg=0.300),
        _player("cameo", avg=0.900, obp=0.900, slg=0.900, pa=3),
    ]

    eligible, used_fallback = select_eligible(roster)

    assert _ids(eligible) == ["regular"]
    assert used_fallback is False
    assert _ids(generate_lineup(roster, "traditional")) == ["regular"]


def test_all_excluded_roster_falls_back_to_players_with_stats():
    roster = [
        _player("p1", avg=0.300, obp=0.350, slg=0.400, pa=2),
        _player("p2", pa=2),
        _player("p3", avg=0.250, pa=3),
    ]

    result = rank_lineup(roster, "traditional")

    assert result.used_fallback is True
    assert result.eligible_count == 2
    # every score is discounted to zero, so input order breaks the ties
    assert [entry.score for entry in result.entries] == [0.0, 0.0]
    assert _ids(result.players) == ["p1", "p3"]
    assert [entry.slot for entry in result.entries] == [1, 4]
    assert all(entry.confidence is ConfidenceLevel.EXCLUDED for entry in result.entries)


@pytest.mark.parametrize(
    ("strategy", "expected"),
    [
        # traditional fills slot 1, then 4, then 2
        ("traditional", ["first", "third", "second"]),
        ("situational", ["first", "second", "third"]),
    ],
)
def test_ties_go_to_first_player_in_roster_order(strategy, expected):
    roster = [
        _player("first", avg=0.300, obp=0.400, slg=0.500),
        _player("second", avg=0.300, obp=0.400, slg=0.500),
        _player("third", avg=0.300, obp=0.400, slg=0.500),
    ]

    assert _ids(generate_lineup(roster, strategy)) == expected


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_large_roster_is_capped_and_unique(strategy):
    roster = [
        _player(f"p{i}", avg=0.2 + i / 100, obp=0.3 + (i % 5) / 50, slg=0.3 + (i % 7) / 40, abRisp=i % 6)
        for i in range(15)
    ]

    lineup = generate_lineup(roster, strategy)

    assert len(lineup) == 9
    assert len(set(_ids(lineup))) == 9


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_generation_is_deterministic(strategy):
    roster = _clean_roster()

    assert _ids(generate_lineup(roster, strategy)) == _ids(generate_lineup(list(roster), strategy))


def test_roster_is_not_mutated():
    roster = _clean_roster()
    snapshot = [player.model_dump() for player in roster]

    generate_lineup(roster, "situational")

    assert [player.model_dump() for player in roster] == snapshot


def test_duplicate_ids_remap_to_first_record():
    roster = [
        _player("dup", avg=0.300, obp=0.300, slg=0.300),
        _player("dup", avg=0.350, obp=0.500, slg=0.500),
    ]

    lineup = generate_lineup(roster, "traditional")

    assert all(player is roster[0] for player in lineup)


def test_situational_leadoff_prefers_speed_and_contact():
    roster = [
        _player("slugger", avg=0.350, obp=0.420, slg=0.800, sbPercent=0.0, contactPercent=0.5),
        _player("speedster", avg=0.300, obp=0.400, slg=0.350, sbPercent=0.9, contactPercent=0.8),
    ]

    result = rank_lineup(roster, "situational")

    assert _ids(result.players) == ["speedster", "slugger"]
    assert result.entries[0].score == pytest.approx(0.4 * 0.4 + 0.3 * 0.9 + 0.2 * 0.8 + 0.1 * 0.3)
    assert result.entries[1].role == "Table Setter"


def test_situational_cleanup_rewards_clutch_hitting():
    base = {"avg": 0.300, "obp": 0.350, "slg": 0.450, "contactPercent": 0.7, "qabPercent": 0.5}
    roster = [
        _player("one", **base),
        _player("two", **base),
        _player("three", **base),
        _player("clutch", **{**base, "contactPercent": 0.3, "qabPercent": 0.2}, abRisp=6, baRisp=0.800, twoOutRbi=5),
        _player("bystander", **base),
    ]

    lineup = generate_lineup(roster, "situational")

    assert lineup[3].id == "clutch"


def test_situational_helpers():
    assert situational_confidence(_player("a", abRisp=5)) == 1.0
    assert situational_confidence(_player("a", abRisp=3)) == 0.7
    assert situational_confidence(_player("a", abRisp=2)) == 0.3
    assert has_situational_data(_player("a", abRisp=2)) is True
    assert has_situational_data(_player("a", abRisp=1)) is False


def test_cleanup_without_situational_data_uses_fallback_formula():
    player = _player("p", avg=0.300, obp=0.400, slg=0.500, ops=0.900, abRisp=1, baRisp=0.9, twoOutRbi=1)

    assert score_slot(player, 4) == pytest.approx(0.50 * 0.500 + 0.30 * 0.900 + 0.20 * 0.300)


def test_cleanup_with_situational_data_blends_risp():
    player = _player("p", avg=0.300, obp=0.400, slg=0.500, ops=0.900, abRisp=4, baRisp=0.400, twoOutRbi=2)
    sc = 0.7

    expected = 0.45 * 0.400 * sc + 0.35 * 0.500 + 0.20 * 0.5 * sc + 0.15 * 0.900 * (1 - sc)
    assert score_slot(player, 4) == pytest.approx(expected)


@pytest.mark.parametrize(
    ("slot", "expected"),
    [
        (2, 0.5 * 0.8 + 0.3 * 0.3 + 0.2 * 0.6),
        (3, 0.5 * 0.9 + 0.3 * 0.5 + 0.2 * 0.6),
        (5, 0.50 * 0.5 + 0.30 * 0.9 + 0.20 * 0.3),
        (7, 0.9),
    ],
)
def test_slot_scores_without_situational_data(slot, expected):
    player = _player("p", avg=0.3, obp=0.4, slg=0.5, ops=0.9, contactPercent=0.8, qabPercent=0.6)

    assert score_slot(player, slot) == pytest.approx(expected)


@pytest.mark.parametrize(("ab_risp", "sc"), [(2, 0.3), (3, 0.7), (5, 1.0)])
@pytest.mark.parametrize("slot", [2, 3, 5])
def test_slot_scores_with_situational_data(slot, ab_risp, sc):
    player = _player(
        "p",
        avg=0.3,
        obp=0.4,
        slg=0.5,
        ops=0.9,
        contactPercent=0.8,
        qabPercent=0.6,
        abRisp=ab_risp,
        baRisp=0.4,
        twoOutRbi=1,
    )
    two_out_rate = 1 / ab_risp
    expected = {
        2: 0.4 * 0.8 + 0.3 * 0.4 * sc + 0.2 * 0.6 + 0.1 * 0.3 * (1 - sc),
        3: 0.3 * 0.9 + 0.2 * 0.5 + 0.25 * 0.4 * sc + 0.15 * 0.6 + 0.1 * 0.3 * (1 - sc),
        5: 0.35 * 0.5 + 0.35 * 0.4 * sc + 0.20 * two_out_rate * sc + 0.10 * 0.9 * (1 - sc),
    }[slot]

    assert situational_confidence(player) == sc
    assert score_slot(player, slot) == pytest.approx(expected)


def test_score_slot_rejects_out_of_range_slot():
    with pytest.raises(ValueError):
        score_slot(_player("p"), 10)


@pytest.mark.parametrize("strategy", ["random", "", "TRADITIONALISH"])
def test_unknown_strategy_fails_fast(strategy):
    with pytest.raises(UnknownStrategyError):
        generate_lineup([], strategy)


def test_unknown_strategy_is_a_value_error():
    with pytest.raises(ValueError):
        rank_lineup(_clean_roster(), "moneyball")


def test_strategy_aliases_match_canonical_keys():
    roster = _clean_roster()

    assert _ids(generate_lineup(roster, "mlb-level")) == _ids(generate_lineup(roster, "traditional"))
    assert _ids(generate_lineup(roster, "Jacks-Custom-Local-League")) == _ids(
        generate_lineup(roster, "situational")
    )
    assert rank_lineup(roster, "MLB-LEVEL").strategy == "traditional"


@pytest.mark.parametrize("strategy", ["traditional", "situational"])
def test_extreme_rates_keep_scores_finite(strategy):
    roster = [
        _player("huge", avg=1e308, obp=1e308, slg=1e308),
        *_clean_roster()[:3],
    ]

    result = rank_lineup(roster, strategy)

    assert len(result.entries) == 4
    assert all(math.isfinite(entry.score) for entry in result.entries)
    assert "huge" in _ids(result.players)
