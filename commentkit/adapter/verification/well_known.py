"""Domain ownership check through a well-known file.

The site owner publishes the site's verification token at
https://<domain>/.well-known/commentkit-verification.txt.
"""

import httpx
import logfire

from commentkit.domain.service.site_service import DomainVerifier
from commentkit.domain.value import Domain


class WellKnownDomainVerifier(DomainVerifier):
    """Fetches the verification file over HTTPS and compares its content."""

    def __init__(
        self,
        well_known_path: str = "/.well-known/commentkit-verification.txt",
        timeout: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize verifier.

        Args:
            well_known_path: Path of the verification file on the domain
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.well_known_path = well_known_path
        self.timeout = timeout
        self.transport = transport

    def verification_url(self, domain: Domain) -> str:
        return f"https://{domain.root}{self.well_known_path}"

    async def verify(self, domain: Domain, token: str) -> bool:
        """Return True when the file's first line equals the token.

        Network failures and non-200 responses count as not verified.
        """
        url = self.verification_url(domain)
        with logfire.span("domain_verifier.verify", domain=domain.root):
            try:
                async with httpx.AsyncClient(
                    transport=self.transport, follow_redirects=True
                ) as client:
                    response = await client.get(url, timeout=self.timeout)
            except httpx.HTTPError as e:
                logfire.warn("Verification file fetch failed", url=url, error=str(e))
                return False

            if response.status_code != 200:
                logfire.warn(
                    "Verification file not found",
                    url=url,
                    status_code=response.status_code,
                )
                return False

            lines = response.text.strip().splitlines()
            published = lines[0].strip() if lines else ""
            matched = published == token
            logfire.info("Verification file checked", url=url, matched=matched)
            return matched


class MockDomainVerifier(DomainVerifier):
    """Domain verifier for testing.

    Domains listed in `verified_domains` pass; everything else fails.
    """

    def __init__(self, verified_domains: set[str] | None = None) -> None:
        self.verified_domains = verified_domains or set()
        self.checked: list[str] = []

    async def verify(self, domain: Domain, token: str) -> bool:
        self.checked.append(domain.root)
        return domain.root in self.verified_domains
