"""
Trend Extractor

Deduplicates a batch of articles by title and tallies how often a fixed
finance/tech vocabulary and ticker-like tokens appear across it.
"""
from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from trend_skills.models.news import Article, TrendCounts

logger = logging.getLogger(__name__)

TRACKED_PHRASES: tuple[str, ...] = (
    "federal reserve",
    "interest rate",
    "earnings",
    "ai",
    "artificial intelligence",
    "layoffs",
    "acquisition",
    "merger",
    "ipo",
    "buyback",
    "dividend",
    "inflation",
    "recession",
    "bull market",
    "bear market",
    "rally",
    "sell-off",
    "volatility",
    "options",
    "short squeeze",
    "insider",
)

# Must run on original-case text
TICKER_PATTERN = re.compile(r"\b[A-Z]{1,5}\b")
MIN_TICKER_LENGTH = 2


def dedupe_by_title(articles: Iterable[Article]) -> list[Article]:
    """
    Drop articles whose exact title was already seen.

    First occurrence wins and order is preserved. Titles are compared
    verbatim, so casing or whitespace variants count as distinct.
    """
    seen: set[str] = set()
    unique: list[Article] = []
    for article in articles:
        if article.title in seen:
            continue
        seen.add(article.title)
        unique.append(article)
    return unique


def find_tickers(text: str) -> list[str]:
    """Ticker candidates in text, one entry per match."""
    return [t for t in TICKER_PATTERN.findall(text) if len(t) >= MIN_TICKER_LENGTH]


def find_phrases(text: str, phrases: Sequence[str] = TRACKED_PHRASES) -> list[str]:
    """Tracked phrases contained in text. Each phrase appears at most once."""
    lowered = text.lower()
    return [phrase for phrase in phrases if phrase in lowered]


def extract_trends(
    articles: Iterable[Article],
    phrases: Sequence[str] = TRACKED_PHRASES,
) -> TrendCounts:
    """
    Build keyword and ticker frequency tables for a batch.

    Phrases count once per article; tickers count once per match.
    Callers are expected to dedupe the batch first.
    """
    keywords: dict[str, int] = {}
    tickers: dict[str, int] = {}
    scanned = 0

    for article in articles:
        scanned += 1
        text = article.text

        for ticker in find_tickers(text):
            tickers[ticker] = tickers.get(ticker, 0) + 1

        for phrase in find_phrases(text, phrases):
            keywords[phrase] = keywords.get(phrase, 0) + 1

    logger.debug(
        "Extracted trends",
        extra={
            "articles": scanned,
            "keywords": len(keywords),
            "tickers": len(tickers),
        },
    )
    return TrendCounts(keywords=keywords, tickers=tickers)
