"""
Trend Skills Data Models

Frozen dataclasses shared by the clients, the trend engine and the jobs.
"""
from trend_skills.models.news import (
    Article,
    ArticleOrigin,
    Category,
    CategoryReport,
    RankedEntry,
    TrendCounts,
    TrendSummary,
)
from trend_skills.models.opportunity import Idea, OpportunityCategory, OpportunityReport
from trend_skills.models.results import JobResult, PostResult

__all__ = [
    "Article",
    "ArticleOrigin",
    "Category",
    "CategoryReport",
    "Idea",
    "JobResult",
    "OpportunityCategory",
    "OpportunityReport",
    "PostResult",
    "RankedEntry",
    "TrendCounts",
    "TrendSummary",
]
