"""
Opportunity Data Models

Categories, ideas and reports produced by the money-maker skill.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OpportunityCategory(str, Enum):
    """Money-making opportunity category."""

    PRODUCTS = "products"
    SERVICES = "services"
    SIDE_HUSTLES = "side_hustles"
    DIGITAL = "digital"
    AFFILIATE = "affiliate"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def emoji(self) -> str:
        return _EMOJI[self]


_LABELS = {
    OpportunityCategory.PRODUCTS: "Trending Products",
    OpportunityCategory.SERVICES: "In-Demand Services",
    OpportunityCategory.SIDE_HUSTLES: "Side Hustles",
    OpportunityCategory.DIGITAL: "Digital Products",
    OpportunityCategory.AFFILIATE: "Affiliate Marketing",
}

_EMOJI = {
    OpportunityCategory.PRODUCTS: "🛍️",
    OpportunityCategory.SERVICES: "💼",
    OpportunityCategory.SIDE_HUSTLES: "💰",
    OpportunityCategory.DIGITAL: "💻",
    OpportunityCategory.AFFILIATE: "🔗",
}


@dataclass(frozen=True)
class Idea:
    """One opportunity lead pulled from a web search result."""

    title: str
    description: str
    url: str
    source: str


@dataclass(frozen=True)
class OpportunityReport:
    """Ideas and fixed tips for one category."""

    category: OpportunityCategory
    ideas: tuple[Idea, ...] = ()
    tips: tuple[str, ...] = ()
