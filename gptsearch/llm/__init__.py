"""
Remote completion API client interfaces and implementations.
"""

from .base import BaseResponsesClient
from .factory import ResponsesClientFactory
from .providers import OpenAIResponsesClient, MockResponsesClient, build_text_response

__all__ = [
    "BaseResponsesClient",
    "ResponsesClientFactory",
    "OpenAIResponsesClient",
    "MockResponsesClient",
    "build_text_response"
]
