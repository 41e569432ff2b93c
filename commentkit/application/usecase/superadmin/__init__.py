"""Superadmin use cases."""

from .get_global_stats import (
    GetGlobalStatsRequest,
    GetGlobalStatsResponse,
    GetGlobalStatsUseCase,
)

__all__ = ["GetGlobalStatsRequest", "GetGlobalStatsResponse", "GetGlobalStatsUseCase"]
