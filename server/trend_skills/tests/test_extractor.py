"""
Tests for trend_skills.trends.extractor

Pure unit tests; no HTTP, no mocking required.
"""
from conftest import make_article

from trend_skills.trends.extractor import (
    dedupe_by_title,
    extract_trends,
    find_phrases,
    find_tickers,
)


# ── dedupe_by_title() ─────────────────────────────────────────────────────────

def test_dedupe_keeps_first_occurrence_in_order():
    a1 = make_article("A", "first")
    b = make_article("B")
    a2 = make_article("A", "second")

    unique = dedupe_by_title([a1, b, a2])

    assert [a.title for a in unique] == ["A", "B"]
    assert unique[0].description == "first"


def test_dedupe_is_exact_match_only():
    articles = [make_article("Fed holds"), make_article("fed holds"), make_article("Fed holds ")]

    assert len(dedupe_by_title(articles)) == 3


def test_dedupe_empty():
    assert dedupe_by_title([]) == []


# ── find_tickers() / find_phrases() ───────────────────────────────────────────

def test_tickers_match_original_case_text():
    assert find_tickers("NVDA and AMD rally while TSLA slips") == ["NVDA", "AMD", "TSLA"]


def test_single_letter_and_long_tokens_are_not_tickers():
    assert find_tickers("A big move in F and GOOGLEX today") == []


def test_lowercase_words_are_not_tickers():
    assert find_tickers("nvda earnings beat") == []


def test_phrases_are_case_insensitive_substrings():
    found = find_phrases("Federal Reserve signals Inflation risk")

    assert "federal reserve" in found
    assert "inflation" in found


# ── extract_trends() ──────────────────────────────────────────────────────────

def test_phrase_counts_once_per_article():
    article = make_article("Inflation worries", "inflation keeps rising, inflation everywhere")

    counts = extract_trends([article])

    assert counts.keywords["inflation"] == 1


def test_phrases_accumulate_across_articles():
    articles = [
        make_article("Earnings season", "big earnings"),
        make_article("More earnings", ""),
        make_article("Merger talk", ""),
    ]

    counts = extract_trends(articles)

    assert counts.keywords["earnings"] == 2
    assert counts.keywords["merger"] == 1


def test_tickers_count_per_mention():
    article = make_article("AAPL beats", "AAPL shares jump as AAPL guides higher")

    counts = extract_trends([article])

    assert counts.tickers["AAPL"] == 3


def test_tickers_found_in_title_and_description():
    counts = extract_trends([make_article("MSFT up", "while META falls")])

    assert counts.tickers == {"MSFT": 1, "META": 1}


def test_empty_batch_yields_empty_tables():
    counts = extract_trends([])

    assert counts.keywords == {}
    assert counts.tickers == {}


def test_tables_keep_discovery_order():
    articles = [
        make_article("QQQ rally", "recession fears"),
        make_article("SPY dips", "earnings"),
    ]

    counts = extract_trends(articles)

    assert list(counts.tickers) == ["QQQ", "SPY"]
    assert list(counts.keywords) == ["recession", "rally", "earnings"]
