"""
HTTP client for the hosted community workflows API.

Each lookup is a single GET bounded by a deadline. Upstream failures are
raised as typed errors so the API layer can map them to local responses.
"""

import asyncio
import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from workflow_proxy.config import Settings
from workflow_proxy.upstream.errors import (
    UpstreamStatusError,
    UpstreamTimeout,
    WorkflowNotFound,
)

logger = logging.getLogger(__name__)

# Characters left unescaped when encoding a single URI component
URI_COMPONENT_SAFE = "!*'()"


class CommunityWorkflowsClient:
    """
    Client for loading single community workflows from the upstream service.

    The underlying httpx.AsyncClient is shared across requests; the client
    itself keeps no per-request state.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        timeout_seconds: float = 90.0,
        revalidate_seconds: int = 600,
        owns_http_client: bool = False,
    ):
        """
        Initialize the upstream client.

        Args:
            http_client: Shared async HTTP client
            base_url: Base URL of the community workflows API
            timeout_seconds: Deadline for one lookup, covering connect and body
            revalidate_seconds: Revalidation hint for a caching transport
            owns_http_client: Close http_client in aclose()
        """
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.revalidate_seconds = revalidate_seconds
        self._owns_http_client = owns_http_client

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> "CommunityWorkflowsClient":
        """
        Build a client from application settings.

        When no http_client is given, one is created and owned by the result.
        """
        owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                follow_redirects=True,
                timeout=settings.request_timeout_seconds,
            )

        return cls(
            http_client=http_client,
            base_url=settings.community_workflows_api_url,
            timeout_seconds=settings.request_timeout_seconds,
            revalidate_seconds=settings.cache_revalidate_seconds,
            owns_http_client=owns_http_client,
        )

    def build_url(self, workflow_id: str) -> str:
        """
        Build the upstream URL for a workflow.

        The ID is encoded as one path segment, so '/', '?', '#' and spaces
        cannot change the shape of the outbound URL.
        """
        return f"{self.base_url}/{quote(workflow_id, safe=URI_COMPONENT_SAFE)}"

    async def _get(self, url: str) -> httpx.Response:
        return await self.http_client.get(
            url,
            headers={"Accept": "application/json"},
            extensions={"revalidate": self.revalidate_seconds},
        )

    async def fetch_workflow(self, workflow_id: str) -> Any:
        """
        Load a single workflow.

        Args:
            workflow_id: Raw (not encoded) workflow identifier

        Returns:
            Parsed JSON body from the upstream service, unmodified

        Raises:
            WorkflowNotFound: Upstream answered 404
            UpstreamStatusError: Upstream answered any other non-2xx status
            UpstreamTimeout: The lookup did not settle before the deadline
        """
        url = self.build_url(workflow_id)

        # wait_for cancels the in-flight request when the deadline fires
        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.timeout_seconds)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise UpstreamTimeout(self.timeout_seconds)

        if response.status_code == 404:
            raise WorkflowNotFound(workflow_id)

        if not response.is_success:
            raise UpstreamStatusError(response.status_code, response.reason_phrase)

        data = response.json()
        logger.debug(f"Loaded community workflow {workflow_id} from {url}")
        return data

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client and not self.http_client.is_closed:
            await self.http_client.aclose()
