"""
Upstream Clients Module

HTTP clients for Brave Search, Polygon news and Discord, plus the
normalizer that maps their payloads onto Article.
"""
from trend_skills.clients.brave import BraveSearchClient
from trend_skills.clients.discord import DiscordPoster
from trend_skills.clients.normalizer import (
    normalize_brave_result,
    normalize_many,
    normalize_polygon_result,
)
from trend_skills.clients.polygon import PolygonNewsClient

__all__ = [
    "BraveSearchClient",
    "DiscordPoster",
    "PolygonNewsClient",
    "normalize_brave_result",
    "normalize_many",
    "normalize_polygon_result",
]
