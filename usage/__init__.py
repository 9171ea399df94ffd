"""Free-tier usage limiting."""
from __future__ import annotations

from .limiter import FEATURES, InMemoryUsageStore, UsageLimiter, UsageStore

__all__ = ["UsageLimiter", "UsageStore", "InMemoryUsageStore", "FEATURES"]
