"""Mock domain verification provider for testing."""

from dishka import Scope, provide

from commentkit.adapter.verification import MockDomainVerifier
from commentkit.domain.service import DomainVerifier
from commentkit.util.di.infrastructure.verification import VerificationProvider


class MockVerificationProvider(VerificationProvider):
    """Mock verifier. Tests add domains to `verified_domains` to make them pass."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_domain_verifier(self) -> DomainVerifier:
        return MockDomainVerifier()
