"""Domain verification infrastructure providers."""

from dishka import Scope, provide

from commentkit.adapter.verification import WellKnownDomainVerifier
from commentkit.config import VerificationSettings
from commentkit.domain.service import DomainVerifier
from commentkit.util.di.base import ProviderBase


class VerificationProvider(ProviderBase):
    """Domain verification component base."""

    __mock_component__ = "verification"


class ProdVerificationProvider(VerificationProvider):
    """Production verifier fetching the well-known file over HTTPS."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_domain_verifier(
        self, verification_settings: VerificationSettings
    ) -> DomainVerifier:
        return WellKnownDomainVerifier(
            well_known_path=verification_settings.well_known_path,
            timeout=verification_settings.timeout_seconds,
        )
