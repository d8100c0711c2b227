"""
Tests for trend_skills.trends.ranker
"""
from trend_skills.models.news import RankedEntry, TrendCounts
from trend_skills.trends.ranker import MAX_RANKED, rank, rank_trends


def test_threshold_excludes_low_counts():
    ranked = rank({"a": 1, "b": 2, "c": 3}, min_count=2)

    assert ranked == [RankedEntry("c", 3), RankedEntry("b", 2)]


def test_output_capped_at_ten():
    counts = {f"s{i}": 2 + i for i in range(25)}

    ranked = rank(counts)

    assert len(ranked) == MAX_RANKED == 10
    assert ranked[0] == RankedEntry("s24", 26)


def test_every_entry_meets_threshold():
    counts = {"x": 5, "y": 4, "z": 3, "w": 1}

    for threshold in (1, 2, 4, 6):
        assert all(e.mentions >= threshold for e in rank(counts, threshold))


def test_sorted_non_increasing():
    ranked = rank({"a": 2, "b": 7, "c": 3, "d": 7, "e": 5})

    mentions = [e.mentions for e in ranked]
    assert mentions == sorted(mentions, reverse=True)


def test_ties_keep_discovery_order():
    counts = {"first": 3, "second": 5, "third": 3, "fourth": 5}

    ranked = rank(counts)

    assert [e.subject for e in ranked] == ["second", "fourth", "first", "third"]


def test_empty_input_yields_empty_output():
    assert rank({}) == []


def test_rank_trends_ranks_both_tables():
    counts = TrendCounts(keywords={"earnings": 3, "ipo": 1}, tickers={"NVDA": 2})

    summary = rank_trends(counts)

    assert summary.topics == (RankedEntry("earnings", 3),)
    assert summary.tickers == (RankedEntry("NVDA", 2),)


def test_rank_trends_empty_counts():
    summary = rank_trends(TrendCounts())

    assert summary.topics == ()
    assert summary.tickers == ()
