import pytest

from tradeval.ingest import load_roster
from tradeval.trade import AggregateCache, aggregate_group


@pytest.fixture
def index(sample_roster_text: str):
    return load_roster(sample_roster_text).index


def test_aggregate_sums_resolved_players(index):
    group = aggregate_group(["Connor McDavid", "Cale Makar"], index, label="A")

    assert group.label == "A"
    assert group.count == 2
    assert group.total_score == pytest.approx(185.0)
    assert group.total_salary == pytest.approx(21_500_000)
    assert group.total_age == pytest.approx(53.0)
    assert group.average_age == pytest.approx(26.5)
    assert group.total_relative_value == pytest.approx(2.5)
    assert group.stat_totals == {"goals": 53, "assists": 169, "pim": 50, "ppp": 80, "sog": 540}
    assert group.position_counts == {"C": 1, "D": 1}
    assert group.player_names == ["Connor McDavid", "Cale Makar"]


def test_blank_and_unknown_entries_are_skipped(index):
    group = aggregate_group(["", "   ", "Wayne Gretzky", "cale makar"], index)

    assert group.count == 1
    assert group.total_score == pytest.approx(85.0)
    assert group.total_salary == pytest.approx(9_000_000)
    assert group.average_age == pytest.approx(26.0)
    assert group.total_relative_value == pytest.approx(0.5)
    assert group.player_names == ["Cale Makar"]


def test_totals_do_not_depend_on_selection_order(index):
    names = ["Leon Draisaitl", "Artemi Panarin", "Tage Thompson", "Quinn Hughes"]
    forward = aggregate_group(names, index)
    backward = aggregate_group(list(reversed(names)), index)

    assert forward.total_score == backward.total_score
    assert forward.total_salary == backward.total_salary
    assert forward.total_relative_value == backward.total_relative_value
    assert forward.stat_totals == backward.stat_totals
    assert forward.position_counts == backward.position_counts
    assert forward.player_names == names
    assert backward.player_names == list(reversed(names))


def test_multi_position_players_count_toward_each_tag(index):
    group = aggregate_group(["Leon Draisaitl", "Tage Thompson", "Matthew Tkachuk"], index)

    assert group.position_counts == {"C": 2, "LW": 2, "RW": 2}


def test_empty_selection_aggregates_to_zero(index):
    group = aggregate_group(["", "Nobody"], index)

    assert group.count == 0
    assert group.total_score == 0.0
    assert group.average_age == 0.0
    assert group.average_age_display == "0.0"
    assert group.position_counts == {}
    assert group.stat_totals == {"goals": 0, "assists": 0, "pim": 0, "ppp": 0, "sog": 0}
    assert group.players == ()


def test_average_age_display_uses_one_decimal(index):
    group = aggregate_group(["Connor McDavid", "Leon Draisaitl", "Nathan MacKinnon"], index)
    assert group.average_age_display == "28.0"


def test_duplicate_selection_entries_count_twice(index):
    group = aggregate_group(["Cale Makar", "cale makar"], index)
    assert group.count == 2
    assert group.total_score == pytest.approx(170.0)


def test_custom_tracked_stats(index):
    group = aggregate_group(["Connor McDavid"], index, tracked_stats=["goals"])
    assert group.stat_totals == {"goals": 32}


def test_aggregate_cache_memoizes_on_selection(index):
    cache = AggregateCache(index)

    first = cache.get(["Connor McDavid"], label="A")
    again = cache.get(["Connor McDavid"], label="A")
    other = cache.get(["Connor McDavid", "Cale Makar"], label="A")

    assert first is again
    assert other is not first
    assert len(cache) == 1


def test_aggregate_cache_keeps_one_entry_per_label(index):
    cache = AggregateCache(index)

    for i in range(1000):
        cache.get(["Connor McDavid", f"typo{i}"], label="A")
    cache.get(["Cale Makar"], label="B")

    assert len(cache) == 2
    assert cache.get(["Connor McDavid", "typo999"], label="A").count == 1
    assert len(cache) == 2


def test_aggregate_mappings_are_read_only(index):
    cache = AggregateCache(index)
    group = cache.get(["Connor McDavid", "Cale Makar"], label="A")

    with pytest.raises(TypeError):
        group.stat_totals["goals"] = 0.0
    with pytest.raises(TypeError):
        group.position_counts["C"] = 99

    assert cache.get(["Connor McDavid", "Cale Makar"], label="A").position_counts == {"C": 1, "D": 1}
