"""Dashboard aggregation client.

Loads every site an owner has, then fetches each site's detail, pages and
recent activity concurrently. A site whose fetch fails carries an error
instead of data; it never fails the whole snapshot.
"""

import asyncio
from typing import Any

import httpx
import logfire
from pydantic import BaseModel

from commentkit.adapter.error import AdapterError

SITES_PATH = "/api/v1/admin/sites"


class SiteBundle(BaseModel):
    """Everything the dashboard shows for one site."""

    site_id: int | None
    overview: dict[str, Any]
    detail: dict[str, Any] | None = None
    pages: list[dict[str, Any]] = []
    activity: list[dict[str, Any]] = []
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class DashboardSnapshot(BaseModel):
    sites: list[SiteBundle]
    aggregated: dict[str, Any] = {}

    @property
    def failed_sites(self) -> list[SiteBundle]:
        return [s for s in self.sites if not s.ok]


class DashboardClient:
    """HTTP client for the owner dashboard endpoints."""

    def __init__(
        self,
        base_url: str,
        session_token: str,
        cookie_name: str = "ck_auth",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize dashboard client.

        Args:
            base_url: API base URL, e.g. https://api.commentkit.dev
            session_token: Session JWT issued by magic-link verification
            cookie_name: Session cookie name
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.session_token = session_token
        self.cookie_name = cookie_name
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            cookies={self.cookie_name: self.session_token},
            timeout=self.timeout,
            transport=self.transport,
        )

    async def _get(
        self, client: httpx.AsyncClient, path: str, **params: Any
    ) -> dict[str, Any]:
        try:
            response = await client.get(path, params=params or None)
        except httpx.HTTPError as e:
            raise AdapterError(f"HTTP error fetching {path}: {e}")

        if response.status_code != 200:
            try:
                message = response.json().get("error", response.text)
            except (ValueError, AttributeError):
                message = response.text
            raise AdapterError(f"{path} returned {response.status_code}: {message}")

        try:
            body = response.json()
        except ValueError:
            raise AdapterError(f"{path} returned a non-JSON body")
        if not isinstance(body, dict):
            raise AdapterError(f"{path} returned an unexpected body")
        return body

    async def load_overview(self) -> dict[str, Any]:
        """Site list with per-site stats and aggregated totals.

        Raises:
            AdapterError: If the overview cannot be loaded
        """
        async with self._client() as client:
            return await self._get(client, f"{SITES_PATH}/overview")

    async def load_site(
        self, client: httpx.AsyncClient, overview: dict[str, Any]
    ) -> SiteBundle:
        """Fetch detail, pages and activity of one site concurrently.

        Any failure, including a malformed site entry or response body, is
        reported on the returned bundle.
        """
        site_id = _site_id(overview)
        if not isinstance(overview, dict):
            overview = {}

        try:
            if site_id is None:
                raise AdapterError("Site entry has no valid id")
            base = f"{SITES_PATH}/{site_id}"

            results = await asyncio.gather(
                self._get(client, base),
                self._get(client, f"{base}/pages"),
                self._get(client, f"{base}/activity"),
                return_exceptions=True,
            )
            for result in results:
                if isinstance(result, BaseException):
                    raise result

            detail, pages, activity = results
            return SiteBundle(
                site_id=site_id,
                overview=overview,
                detail=detail,
                pages=pages.get("pages", []),
                activity=activity.get("activity", []),
            )
        except (AdapterError, KeyError, TypeError, ValueError) as e:
            logfire.warn("Dashboard site fetch failed", site_id=site_id, error=str(e))
            return SiteBundle(site_id=site_id, overview=overview, error=str(e))

    async def load_all(self) -> DashboardSnapshot:
        """Load the full dashboard for every site the owner has.

        Only a failure of the overview itself raises; per-site failures are
        reported on the site's bundle.

        Raises:
            AdapterError: If the overview cannot be loaded
        """
        with logfire.span("dashboard_client.load_all"):
            async with self._client() as client:
                overview = await self._get(client, f"{SITES_PATH}/overview")
                sites = overview.get("sites", [])
                if not isinstance(sites, list):
                    raise AdapterError("Overview returned an unexpected site list")

                bundles = await asyncio.gather(
                    *(self.load_site(client, site) for site in sites)
                )

            snapshot = DashboardSnapshot(
                sites=list(bundles), aggregated=overview.get("aggregated", {})
            )
            logfire.info(
                "Dashboard loaded",
                sites=len(snapshot.sites),
                failed=len(snapshot.failed_sites),
            )
            return snapshot


def _site_id(overview: Any) -> int | None:
    try:
        return int(overview["id"])
    except (KeyError, TypeError, ValueError):
        return None
