"""
Pytest fixtures and configuration for testing.
"""

from typing import AsyncGenerator, Callable, Optional

import httpx
import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from workflow_proxy.api.dependencies import get_workflows_client
from workflow_proxy.main import create_app
from workflow_proxy.upstream import CommunityWorkflowsClient


UPSTREAM_BASE_URL = "https://upstream.test/api/public/community-workflows"


class FakeUpstream:
    """
    Stand-in for the hosted community workflows API.

    Tests set `handler` to shape the response; every request that reaches
    the transport is recorded in `requests`.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler: Optional[Callable] = None

    def respond_with(self, status_code: int, json=None, **kwargs) -> None:
        """Answer every request with a fixed response."""
        self.handler = lambda request: httpx.Response(status_code, json=json, **kwargs)

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.handler is None:
            return httpx.Response(200, json={"success": True})
        response = self.handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response


@pytest.fixture
def upstream() -> FakeUpstream:
    """Create a fake upstream service."""
    return FakeUpstream()


@pytest_asyncio.fixture
async def workflows_client(
    upstream: FakeUpstream,
) -> AsyncGenerator[CommunityWorkflowsClient, None]:
    """Create an upstream client wired to the fake upstream."""
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(upstream),
        follow_redirects=True,
    )
    client = CommunityWorkflowsClient(
        http_client=http_client,
        base_url=UPSTREAM_BASE_URL,
        timeout_seconds=90.0,
        revalidate_seconds=600,
    )

    yield client

    await http_client.aclose()


@pytest_asyncio.fixture
async def test_client(
    workflows_client: CommunityWorkflowsClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client for the app, backed by the fake upstream."""
    app = create_app()
    app.dependency_overrides[get_workflows_client] = lambda: workflows_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
