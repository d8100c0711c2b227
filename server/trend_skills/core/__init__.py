"""
Trend Skills Core Utilities

Exceptions and pacing shared across the skills.
"""
from trend_skills.core.types import (
    ConfigurationError,
    PacingPolicy,
    SearchError,
    TrendSkillsError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "PacingPolicy",
    "SearchError",
    "TrendSkillsError",
    "ValidationError",
]
