"""
FastAPI API layer for community workflows.
Provides the workflow proxy endpoint and service health checks.
"""

from workflow_proxy.api.router import router

__all__ = ["router"]
