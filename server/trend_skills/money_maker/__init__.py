"""
Money Maker Skill

Finds trending products, services and money-making opportunities.
"""
from .finder import (
    OPPORTUNITY_QUERIES,
    OPPORTUNITY_TIPS,
    REPORT_CATEGORIES,
    OpportunityFinder,
    extract_ideas,
)

__all__ = [
    "OPPORTUNITY_QUERIES",
    "OPPORTUNITY_TIPS",
    "REPORT_CATEGORIES",
    "OpportunityFinder",
    "extract_ideas",
]
