"""
FastAPI router with the community workflow endpoints.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from workflow_proxy.api.dependencies import get_workflow_id, get_workflows_client
from workflow_proxy.api.schemas import ErrorResponse, HealthResponse
from workflow_proxy.config import settings
from workflow_proxy.upstream import (
    CommunityWorkflowsClient,
    UpstreamStatusError,
    UpstreamTimeout,
    WorkflowNotFound,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error envelope with the given status."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get(
    "/community-workflows/{id:path}",
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def get_community_workflow(
    workflow_id: str = Depends(get_workflow_id),
    client: CommunityWorkflowsClient = Depends(get_workflows_client),
):
    """
    Load a single community workflow from the hosted service.

    The upstream JSON body is returned unchanged on success. Every failure
    is answered with a {"success": false, "error": ...} envelope:
    1. Upstream 404 -> 404 naming the workflow
    2. Other upstream errors -> the upstream status code
    3. Deadline exceeded -> 504
    4. Anything else -> 500
    """
    try:
        data = await client.fetch_workflow(workflow_id)
        return JSONResponse(content=data)

    except WorkflowNotFound as e:
        return error_response(404, e.message)
    except UpstreamStatusError as e:
        logger.error(
            f"Error fetching community workflow: {e.status_code} {e.reason}"
        )
        return error_response(e.status_code, "Failed to load workflow")
    except UpstreamTimeout:
        logger.error("Community workflow fetch timed out")
        return error_response(504, "Request timed out")
    except Exception as e:
        logger.exception(f"Error loading community workflow: {e}")
        return error_response(500, "Failed to load workflow")


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.
    """
    return HealthResponse(
        status="healthy",
        app_name=settings.app_name,
        version=settings.app_version,
        upstream_url=settings.community_workflows_api_url,
    )
