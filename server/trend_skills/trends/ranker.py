"""
Trend Ranker

Turns frequency tables into short ranked lists.
"""
from __future__ import annotations

from typing import Mapping

from trend_skills.models.news import RankedEntry, TrendCounts, TrendSummary

DEFAULT_MIN_COUNT = 2
MAX_RANKED = 10


def rank(
    counts: Mapping[str, int],
    min_count: int = DEFAULT_MIN_COUNT,
    limit: int = MAX_RANKED,
) -> list[RankedEntry]:
    """
    Rank subjects by mention count.

    Keeps entries with count >= min_count, sorts descending and returns at
    most limit entries. sorted() is stable, so ties keep the mapping's
    insertion (discovery) order.
    """
    eligible = [(subject, count) for subject, count in counts.items() if count >= min_count]
    eligible.sort(key=lambda item: item[1], reverse=True)
    return [RankedEntry(subject=subject, mentions=count) for subject, count in eligible[:limit]]


def rank_trends(counts: TrendCounts, min_count: int = DEFAULT_MIN_COUNT) -> TrendSummary:
    """Rank both the keyword and ticker tables."""
    return TrendSummary(
        topics=tuple(rank(counts.keywords, min_count)),
        tickers=tuple(rank(counts.tickers, min_count)),
    )
