"""Unit tests for the well-known file domain verifier."""

import httpx
import pytest

from commentkit.adapter.verification import WellKnownDomainVerifier
from commentkit.domain.value import Domain

TOKEN = "commentkit-verify-0123456789abcdef"


def verifier_with(handler) -> WellKnownDomainVerifier:
    return WellKnownDomainVerifier(transport=httpx.MockTransport(handler))


class TestWellKnownDomainVerifier:
    def test_verification_url(self):
        verifier = WellKnownDomainVerifier()

        assert (
            verifier.verification_url(Domain("blog.example.com"))
            == "https://blog.example.com/.well-known/commentkit-verification.txt"
        )

    @pytest.mark.asyncio
    async def test_matching_token(self):
        requested = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested.append(str(request.url))
            return httpx.Response(200, text=f"{TOKEN}\n")

        assert await verifier_with(handler).verify(Domain("blog.example.com"), TOKEN)
        assert requested == [
            "https://blog.example.com/.well-known/commentkit-verification.txt"
        ]

    @pytest.mark.asyncio
    async def test_only_first_line_counts(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text=f"something else\n{TOKEN}\n")

        assert not await verifier_with(handler).verify(Domain("blog.example.com"), TOKEN)

    @pytest.mark.asyncio
    async def test_missing_file(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404)

        assert not await verifier_with(handler).verify(Domain("blog.example.com"), TOKEN)

    @pytest.mark.asyncio
    async def test_unreachable_domain(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("no route", request=request)

        assert not await verifier_with(handler).verify(Domain("blog.example.com"), TOKEN)

    @pytest.mark.asyncio
    async def test_follows_redirect(self):
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "blog.example.com":
                return httpx.Response(
                    301, headers={"Location": "https://www.blog.example.com/.well-known/x"}
                )
            return httpx.Response(200, text=TOKEN)

        assert await verifier_with(handler).verify(Domain("blog.example.com"), TOKEN)
