"""
Tool invocation orchestration.
"""

from .pipeline import ToolInvocationPipeline, build_request
from .factory import create_client, create_pipeline

__all__ = [
    "ToolInvocationPipeline",
    "build_request",
    "create_client",
    "create_pipeline"
]
