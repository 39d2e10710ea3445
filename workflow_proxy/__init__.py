"""
Community Workflow Proxy

A small FastAPI service that serves community workflows by proxying
lookups to the hosted community workflows API.
"""

__version__ = "1.0.0"
