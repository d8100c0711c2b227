"""
Tests for trend_skills.clients.normalizer
"""
from datetime import datetime, timezone

import pytest

from trend_skills.clients.normalizer import (
    normalize_brave_result,
    normalize_many,
    normalize_polygon_result,
    parse_timestamp,
    resolve_source,
)
from trend_skills.core.types import ValidationError
from trend_skills.models.news import ArticleOrigin


class TestParseTimestamp:
    def test_zulu_suffix(self):
        dt = parse_timestamp("2026-10-18T13:05:00Z")

        assert dt == datetime(2026, 10, 18, 13, 5, tzinfo=timezone.utc)

    def test_naive_is_assumed_utc(self):
        assert parse_timestamp("2026-10-18T13:05:00").tzinfo is not None

    def test_empty_raises(self):
        with pytest.raises(ValidationError, match="empty"):
            parse_timestamp("")

    def test_garbage_raises(self):
        with pytest.raises(ValidationError, match="Invalid timestamp"):
            parse_timestamp("2 hours ago")


class TestResolveSource:
    def test_source_name(self):
        assert resolve_source({"source": {"name": "Reuters"}}) == "Reuters"

    def test_meta_url_hostname(self):
        assert resolve_source({"meta_url": {"hostname": "www.cnbc.com"}}) == "www.cnbc.com"

    def test_publisher_name(self):
        assert resolve_source({"publisher": {"name": "Benzinga"}}) == "Benzinga"

    def test_falls_back_to_url_host(self):
        assert resolve_source({"url": "https://example.com/a/b"}) == "example.com"

    def test_unknown(self):
        assert resolve_source({}) == "Unknown"


class TestNormalizeBrave:
    def test_news_result(self):
        raw = {
            "title": "Stocks rally",
            "description": "S&P 500 climbs",
            "url": "https://news.test/1",
            "meta_url": {"hostname": "news.test"},
            "age": "12 minutes ago",
            "page_age": "2026-10-18T12:00:00",
        }

        article = normalize_brave_result(raw)

        assert article.title == "Stocks rally"
        assert article.source == "news.test"
        assert article.age == "12 minutes ago"
        assert article.published == datetime(2026, 10, 18, 12, tzinfo=timezone.utc)
        assert article.origin is ArticleOrigin.BRAVE_NEWS

    def test_defaults_for_missing_fields(self):
        article = normalize_brave_result({"title": "Bare"})

        assert article.description == ""
        assert article.age == "recent"
        assert article.published is None
        assert article.source == "Unknown"

    def test_missing_title_raises(self):
        with pytest.raises(ValidationError, match="title"):
            normalize_brave_result({"description": "no title"})


class TestNormalizePolygon:
    def test_polygon_record(self):
        raw = {
            "title": "Chipmaker beats",
            "publisher": {"name": "MarketWatch"},
            "article_url": "https://mw.test/x",
            "tickers": ["NVDA", "AMD"],
            "published_utc": "2026-10-18T13:00:00Z",
        }

        article = normalize_polygon_result(raw)

        assert article.source == "MarketWatch"
        assert article.url == "https://mw.test/x"
        assert article.tickers == ("NVDA", "AMD")
        assert article.published == datetime(2026, 10, 18, 13, tzinfo=timezone.utc)
        assert article.origin is ArticleOrigin.POLYGON


def test_normalize_many_skips_malformed_records():
    records = [{"title": "ok"}, {"title": ""}, "not a dict", {"title": "also ok"}]

    articles = normalize_many(records, ArticleOrigin.BRAVE_WEB)

    assert [a.title for a in articles] == ["ok", "also ok"]
    assert all(a.origin is ArticleOrigin.BRAVE_WEB for a in articles)
