"""
Tests for trend_skills.news_crawler.scanner

Brave and Polygon clients are replaced with AsyncMock; pacing is recorded,
never slept.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from conftest import FakeResponse, FakeSession, make_article

from trend_skills.clients.brave import BraveSearchClient
from trend_skills.core.types import ConfigurationError, PacingPolicy
from trend_skills.models.news import Category, RankedEntry
from trend_skills.news_crawler.scanner import CATEGORY_QUERIES, TrendScanner


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def pacing(sleeps):
    async def record(seconds):
        sleeps.append(seconds)

    return PacingPolicy(interval_seconds=0.2, sleep=record)


@pytest.fixture
def brave():
    client = MagicMock()
    client.configured = True
    client.search_news = AsyncMock(return_value=[])
    return client


@pytest.fixture
def polygon():
    client = MagicMock()
    client.market_news = AsyncMock(return_value=[])
    return client


# ── get_trending_news() ───────────────────────────────────────────────────────

async def test_issues_every_category_query_in_order(brave, pacing):
    scanner = TrendScanner(brave, query_pacing=pacing)

    await scanner.get_trending_news(Category.CRYPTO)

    queries = [c.args[0] for c in brave.search_news.call_args_list]
    assert queries == list(CATEGORY_QUERIES[Category.CRYPTO])
    assert all(c.args[1] == 5 for c in brave.search_news.call_args_list)


async def test_pauses_after_each_query(brave, pacing, sleeps):
    scanner = TrendScanner(brave, query_pacing=pacing)

    await scanner.get_trending_news("markets")

    assert sleeps == [0.2] * len(CATEGORY_QUERIES[Category.MARKETS])


async def test_unknown_category_falls_back_to_markets(brave, pacing):
    report = await TrendScanner(brave, query_pacing=pacing).get_trending_news("sports")

    assert report.category is Category.MARKETS


async def test_failed_query_does_not_abort_remaining(brave, pacing):
    # The client turns a non-OK response into [], simulated here per query
    brave.search_news.side_effect = [
        [make_article("Inflation cools", "CPI data")],
        [],
        [make_article("Inflation sticky", "CPI again")],
        [make_article("Crypto ETF", "")],
    ]
    scanner = TrendScanner(brave, query_pacing=pacing)

    report = await scanner.get_trending_news(Category.CRYPTO)

    assert brave.search_news.call_count == 4
    assert report.article_count == 3
    assert RankedEntry("inflation", 2) in report.trends.topics
    assert RankedEntry("CPI", 2) in report.trends.tickers


async def test_duplicate_titles_count_once(brave, pacing):
    brave.search_news.return_value = [make_article("Earnings beat at NVDA", "")]
    scanner = TrendScanner(brave, query_pacing=pacing)

    report = await scanner.get_trending_news(Category.CRYPTO)

    assert report.article_count == 1
    # one unique article never meets the default threshold of 2
    assert report.trends.topics == ()


async def test_top_articles_capped_at_five(brave, pacing):
    brave.search_news.side_effect = [
        [make_article(f"story {q}-{i}") for i in range(3)] for q in range(4)
    ]

    report = await TrendScanner(brave, query_pacing=pacing).get_trending_news(Category.CRYPTO)

    assert report.article_count == 12
    assert [a.title for a in report.top_articles] == [
        "story 0-0", "story 0-1", "story 0-2", "story 1-0", "story 1-1",
    ]


async def test_no_results_renders_empty_report(brave, pacing):
    report = await TrendScanner(brave, query_pacing=pacing).get_trending_news(Category.TECH)

    assert report.article_count == 0
    assert report.trends.topics == ()
    assert report.trends.tickers == ()
    assert report.top_articles == ()


async def test_unconfigured_brave_raises(brave, pacing):
    brave.configured = False

    with pytest.raises(ConfigurationError):
        await TrendScanner(brave, query_pacing=pacing).get_trending_news()

    brave.search_news.assert_not_called()


# ── get_full_trend_report() ───────────────────────────────────────────────────

async def test_full_report_covers_every_category(brave):
    category_pacing = PacingPolicy.disabled()
    scanner = TrendScanner(
        brave, query_pacing=PacingPolicy.disabled(), category_pacing=category_pacing
    )

    report = await scanner.get_full_trend_report()

    assert list(report) == list(Category)
    assert category_pacing.waits == len(Category)


# ── get_breaking_market_news() ────────────────────────────────────────────────

async def test_breaking_merges_polygon_then_brave_and_dedupes(brave, polygon):
    polygon.market_news.return_value = [
        make_article("Fed decision", tickers=("SPY",)),
        make_article("Oil spikes"),
    ]
    brave.search_news.return_value = [make_article("Fed decision"), make_article("Gold rallies")]

    breaking = await TrendScanner(brave, polygon).get_breaking_market_news()

    assert [a.title for a in breaking] == ["Fed decision", "Oil spikes", "Gold rallies"]
    assert breaking[0].tickers == ("SPY",)
    polygon.market_news.assert_awaited_once_with(limit=20)
    brave.search_news.assert_awaited_once_with("stock market breaking news", 10)


async def test_breaking_capped_at_fifteen(brave, polygon):
    polygon.market_news.return_value = [make_article(f"p{i}") for i in range(20)]
    brave.search_news.return_value = [make_article(f"b{i}") for i in range(10)]

    breaking = await TrendScanner(brave, polygon).get_breaking_market_news()

    assert len(breaking) == 15


async def test_breaking_skips_unconfigured_brave(brave, polygon):
    polygon.market_news.return_value = [make_article("Only polygon")]
    brave.search_news.side_effect = ConfigurationError("BRAVE_SEARCH_API_KEY not configured")

    breaking = await TrendScanner(brave, polygon).get_breaking_market_news()

    assert [a.title for a in breaking] == ["Only polygon"]


# ── search_topic_news() ───────────────────────────────────────────────────────

async def test_search_topic_news_passes_limit(brave):
    brave.search_news.return_value = [make_article("Chip rules")]

    results = await TrendScanner(brave).search_topic_news("export controls", limit=3)

    assert results[0].title == "Chip rules"
    brave.search_news.assert_awaited_once_with("export controls", 3)


# ── End to end through BraveSearchClient ──────────────────────────────────────

async def test_non_ok_response_mid_scan_with_real_client(brave_config):
    def page(*titles):
        return FakeResponse(payload={"results": [{"title": t} for t in titles]})

    session = FakeSession(
        page("TSLA recall widens", "Bitcoin ETF inflows"),
        FakeResponse(status=503),
        page("TSLA shares slide", "Bitcoin ETF inflows"),
        page("Blockchain bill advances"),
    )
    brave = BraveSearchClient(brave_config, session)
    scanner = TrendScanner(brave, query_pacing=PacingPolicy.disabled())

    report = await scanner.get_trending_news(Category.CRYPTO)

    assert len(session.calls) == 4
    assert report.article_count == 4
    assert report.trends.tickers == (RankedEntry("TSLA", 2),)
