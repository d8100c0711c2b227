"""
Core Type Definitions and Exceptions

Service-wide exceptions and the pacing policy shared by every orchestrator.
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

SleepFunc = Callable[[float], Awaitable[None]]


class TrendSkillsError(Exception):
    """Base exception for all trend skills errors."""

    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(TrendSkillsError):
    """Raised when required configuration is missing or invalid."""


class ValidationError(TrendSkillsError):
    """Raised when an upstream record cannot be normalized."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        ctx = context or {}
        if field:
            ctx["field"] = field
        if value is not None:
            ctx["value"] = repr(value)[:100]  # Truncate long values
        super().__init__(message, ctx)
        self.field = field
        self.value = value


class SearchError(TrendSkillsError):
    """Raised when an upstream search response cannot be used."""

    def __init__(
        self,
        message: str,
        service: str,
        status: Optional[int] = None,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        ctx = context or {}
        ctx["service"] = service
        if status is not None:
            ctx["status"] = status
        super().__init__(message, ctx)
        self.service = service
        self.status = status


@dataclass
class PacingPolicy:
    """
    Minimum interval between sequential upstream calls.

    A fixed pause, not an adaptive limiter. interval_seconds=0 disables it.
    """

    interval_seconds: float = 0.2
    sleep: SleepFunc = asyncio.sleep
    waits: int = 0

    @classmethod
    def from_ms(cls, interval_ms: int, sleep: Optional[SleepFunc] = None) -> "PacingPolicy":
        """Build a policy from a millisecond interval."""
        return cls(interval_seconds=interval_ms / 1000.0, sleep=sleep or asyncio.sleep)

    @classmethod
    def disabled(cls) -> "PacingPolicy":
        return cls(interval_seconds=0.0)

    async def wait(self) -> None:
        """Pause for the configured interval."""
        self.waits += 1
        if self.interval_seconds <= 0:
            return
        await self.sleep(self.interval_seconds)
