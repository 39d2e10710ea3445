"""
FastAPI dependencies for the API layer.
"""

from fastapi import Path, Request

from workflow_proxy.upstream import CommunityWorkflowsClient


async def get_workflows_client(request: Request) -> CommunityWorkflowsClient:
    """Return the upstream client created in the application lifespan."""
    return request.app.state.workflows_client


async def get_workflow_id(
    id: str = Path(description="Community workflow ID"),
) -> str:
    """Resolve the workflow ID path parameter."""
    return id
