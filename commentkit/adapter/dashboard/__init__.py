"""Owner dashboard API client."""

from .client import DashboardClient, DashboardSnapshot, SiteBundle

__all__ = ["DashboardClient", "DashboardSnapshot", "SiteBundle"]
