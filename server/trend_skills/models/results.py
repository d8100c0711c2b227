"""
Result Models

Outcome objects returned by the Discord poster and the scheduled jobs.
Failures are values here, not exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class PostResult:
    """Outcome of one Discord message post."""

    success: bool
    status: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, status: int) -> "PostResult":
        return cls(success=True, status=status)

    @classmethod
    def failed(cls, error: str, status: Optional[int] = None) -> "PostResult":
        return cls(success=False, status=status, error=error)


@dataclass(frozen=True)
class JobResult:
    """Outcome of one scheduled job run."""

    success: bool = False
    error: Optional[str] = None
    skipped: bool = False
    reason: Optional[str] = None
    posted: Optional[int] = None

    @classmethod
    def from_post(cls, result: PostResult) -> "JobResult":
        if result.success:
            return cls(success=True)
        return cls(error=result.error)

    @classmethod
    def failed(cls, error: str) -> "JobResult":
        return cls(error=error)

    @classmethod
    def skip(cls, reason: str) -> "JobResult":
        return cls(success=True, skipped=True, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        """Compact dict form, only the fields that carry information."""
        if self.error:
            return {"error": self.error}
        if self.skipped:
            return {"skipped": True, "reason": self.reason}
        if self.posted is not None:
            data: dict[str, Any] = {"posted": self.posted}
            if self.reason:
                data["reason"] = self.reason
            return data
        return {"success": self.success}
