"""
Remote client implementations.
"""

from .openai_client import OpenAIResponsesClient
from .mock_client import MockResponsesClient, build_text_response

__all__ = [
    "OpenAIResponsesClient",
    "MockResponsesClient",
    "build_text_response"
]
