"""
News and Trend Data Models

Canonical article shape produced at the client boundary, plus the
ranking and report structures built from it.
All models use frozen dataclasses with __post_init__ validation.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class ArticleOrigin(str, Enum):
    """Upstream API an article was fetched from."""

    BRAVE_NEWS = "brave_news"
    BRAVE_WEB = "brave_web"
    POLYGON = "polygon"


class Category(str, Enum):
    """Named group of news queries scanned for trends."""

    MARKETS = "markets"
    TECH = "tech"
    CRYPTO = "crypto"
    ECONOMY = "economy"
    OPTIONS = "options"

    @classmethod
    def from_string(cls, value: str) -> "Category":
        """Convert string to Category, defaulting to MARKETS."""
        v = (value or "").strip().lower()
        for member in cls:
            if member.value == v:
                return member
        return cls.MARKETS


@dataclass(frozen=True)
class Article:
    """
    Article-like record normalized from any upstream search API.

    Brave exposes the outlet as source.name or meta_url.hostname and a
    relative age string; Polygon exposes publisher.name and published_utc.
    Both collapse into this one shape.
    """

    title: str
    url: str = ""
    description: str = ""
    source: str = "Unknown"
    age: str = "recent"
    published: Optional[datetime] = None
    tickers: tuple[str, ...] = ()
    origin: ArticleOrigin = ArticleOrigin.BRAVE_NEWS

    def __post_init__(self) -> None:
        """Validate fields."""
        if self.published is not None and self.published.tzinfo is None:
            raise ValueError("published must be timezone-aware")

    @property
    def text(self) -> str:
        """Title and description joined for scanning."""
        return f"{self.title} {self.description}"


@dataclass(frozen=True)
class TrendCounts:
    """Per-batch frequency tables, insertion ordered by first discovery."""

    keywords: dict[str, int] = field(default_factory=dict)
    tickers: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class RankedEntry:
    """One ranked subject (phrase or ticker) and its mention count."""

    subject: str
    mentions: int

    def __post_init__(self) -> None:
        if self.mentions < 0:
            raise ValueError(f"mentions must be non-negative, got {self.mentions}")


@dataclass(frozen=True)
class TrendSummary:
    """Ranked topics and tickers for one batch of articles."""

    topics: tuple[RankedEntry, ...] = ()
    tickers: tuple[RankedEntry, ...] = ()


@dataclass(frozen=True)
class CategoryReport:
    """Result of scanning one category."""

    category: Category
    article_count: int
    trends: TrendSummary
    top_articles: tuple[Article, ...] = ()
