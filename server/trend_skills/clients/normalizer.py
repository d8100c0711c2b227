"""
Upstream Data Normalizer

Transforms raw Brave Search and Polygon JSON records into the canonical
Article shape. Source-specific field names stop here.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Optional
from urllib.parse import urlparse

from trend_skills.core.types import ValidationError
from trend_skills.models.news import Article, ArticleOrigin

logger = logging.getLogger(__name__)

UNKNOWN_SOURCE = "Unknown"
DEFAULT_AGE = "recent"


def parse_timestamp(ts: str) -> datetime:
    """
    Parse ISO 8601 timestamp to UTC datetime.

    Args:
        ts: Timestamp string in format "2025-07-24T17:06:15Z"

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValidationError: If timestamp format is invalid
    """
    if not ts:
        raise ValidationError("Timestamp is empty", field="ts")

    try:
        # Handle 'Z' suffix (Zulu time = UTC)
        if ts.endswith("Z"):
            ts = ts[:-1] + "+00:00"

        dt = datetime.fromisoformat(ts)

        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)

        return dt.astimezone(timezone.utc)

    except ValueError as e:
        raise ValidationError(
            f"Invalid timestamp format: {ts}",
            field="ts",
            value=ts,
        ) from e


def _optional_timestamp(ts: Any) -> Optional[datetime]:
    """Parse a timestamp when present, dropping unparseable values."""
    if not ts or not isinstance(ts, str):
        return None
    try:
        return parse_timestamp(ts)
    except ValidationError:
        logger.debug("Ignoring unparseable timestamp", extra={"value": ts})
        return None


def hostname_of(url: str) -> str:
    """Return the host part of a URL, or an empty string."""
    if not url:
        return ""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def resolve_source(raw: dict[str, Any]) -> str:
    """
    Pick the outlet name from whichever field the upstream used.

    Order: source.name, meta_url.hostname, publisher.name, url hostname.
    """
    for key in ("source", "meta_url", "publisher"):
        nested = raw.get(key)
        if isinstance(nested, dict):
            name = nested.get("name") or nested.get("hostname")
            if name:
                return str(name)
        elif isinstance(nested, str) and nested and key == "source":
            return nested

    host = hostname_of(raw.get("url") or raw.get("article_url") or "")
    return host or UNKNOWN_SOURCE


def validate_record(raw: Any) -> None:
    """
    Validate raw upstream record structure.

    Raises:
        ValidationError: If the record is not a dict or has no title
    """
    if not isinstance(raw, dict):
        raise ValidationError(
            f"Expected dict, got {type(raw).__name__}",
            field="record",
            value=raw,
        )

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ValidationError("Missing or empty required field: title", field="title")


def normalize_brave_result(
    raw: dict[str, Any],
    origin: ArticleOrigin = ArticleOrigin.BRAVE_NEWS,
) -> Article:
    """
    Transform one Brave news or web result into an Article.

    Raises:
        ValidationError: If the record is invalid
    """
    validate_record(raw)

    return Article(
        title=raw["title"],
        url=raw.get("url") or "",
        description=raw.get("description") or "",
        source=resolve_source(raw),
        age=raw.get("age") or DEFAULT_AGE,
        published=_optional_timestamp(raw.get("page_age")),
        tickers=(),
        origin=origin,
    )


def normalize_polygon_result(raw: dict[str, Any]) -> Article:
    """
    Transform one Polygon reference news record into an Article.

    Raises:
        ValidationError: If the record is invalid
    """
    validate_record(raw)

    tickers = raw.get("tickers", [])
    published_utc = raw.get("published_utc") or ""

    return Article(
        title=raw["title"],
        url=raw.get("article_url") or "",
        description=raw.get("description") or "",
        source=resolve_source(raw),
        age=published_utc or DEFAULT_AGE,
        published=_optional_timestamp(published_utc),
        tickers=tuple(str(t) for t in tickers) if isinstance(tickers, list) else (),
        origin=ArticleOrigin.POLYGON,
    )


def normalize_many(
    records: Iterable[Any],
    origin: ArticleOrigin,
) -> list[Article]:
    """Normalize a result list, skipping malformed records with a warning."""
    articles: list[Article] = []
    for raw in records:
        try:
            if origin is ArticleOrigin.POLYGON:
                articles.append(normalize_polygon_result(raw))
            else:
                articles.append(normalize_brave_result(raw, origin))
        except ValidationError as e:
            logger.warning(
                "Skipping malformed search result",
                extra={"origin": origin.value, "error": str(e), "field": e.field},
            )
    return articles
