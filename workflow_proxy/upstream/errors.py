"""
Errors raised while loading a workflow from the upstream service.
"""


class UpstreamError(Exception):
    """Base exception for failed upstream workflow lookups."""

    def __init__(self, message: str, error_type: str):
        self.message = message
        self.error_type = error_type
        super().__init__(self.message)


class WorkflowNotFound(UpstreamError):
    """The upstream service has no workflow with the requested ID."""

    def __init__(self, workflow_id: str):
        self.workflow_id = workflow_id
        super().__init__(
            f"Workflow not found: {workflow_id}",
            error_type="not_found",
        )


class UpstreamStatusError(UpstreamError):
    """The upstream service answered with a non-success status."""

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"Upstream returned {status_code} {reason}".rstrip(),
            error_type="upstream_status",
        )


class UpstreamTimeout(UpstreamError):
    """The upstream lookup did not settle before the deadline."""

    def __init__(self, timeout_seconds: float):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Upstream request exceeded {timeout_seconds:g}s deadline",
            error_type="timeout",
        )
