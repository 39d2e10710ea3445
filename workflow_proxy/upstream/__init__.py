"""
Upstream module for the hosted community workflows API.
Provides the HTTP client and the errors it raises.
"""

from workflow_proxy.upstream.client import CommunityWorkflowsClient
from workflow_proxy.upstream.errors import (
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeout,
    WorkflowNotFound,
)

__all__ = [
    "CommunityWorkflowsClient",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamTimeout",
    "WorkflowNotFound",
]
