"""Domain ownership verification adapters."""

from .well_known import MockDomainVerifier, WellKnownDomainVerifier

__all__ = ["MockDomainVerifier", "WellKnownDomainVerifier"]
