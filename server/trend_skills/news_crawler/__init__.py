"""
News Crawler Skill

Scans news categories for trending topics and tickers.
"""
from .scanner import CATEGORY_QUERIES, TrendScanner

__all__ = [
    "CATEGORY_QUERIES",
    "TrendScanner",
]
