"""
Trend Engine

Deduplication, phrase/ticker extraction and ranking.

Usage:
    from trend_skills.trends import dedupe_by_title, extract_trends, rank_trends

    unique = dedupe_by_title(articles)
    summary = rank_trends(extract_trends(unique))
"""
from .extractor import (
    TRACKED_PHRASES,
    dedupe_by_title,
    extract_trends,
    find_phrases,
    find_tickers,
)
from .ranker import DEFAULT_MIN_COUNT, MAX_RANKED, rank, rank_trends

__all__ = [
    "DEFAULT_MIN_COUNT",
    "MAX_RANKED",
    "TRACKED_PHRASES",
    "dedupe_by_title",
    "extract_trends",
    "find_phrases",
    "find_tickers",
    "rank",
    "rank_trends",
]
