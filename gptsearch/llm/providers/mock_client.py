"""
Mock remote client for testing purposes.
"""

import asyncio
import time
import uuid
from typing import Any, Dict, List, Optional, Sequence, Union

from ..base import BaseResponsesClient
from ...core.types import ResponseRequest


def build_text_response(*texts: str, model: str = "mock-model") -> Dict[str, Any]:
    """
    Build a completed response payload with one message item per text.

    Args:
        *texts: Texts of the message items, in order
        model: Model name recorded in the payload

    Returns:
        Dict[str, Any]: Response payload in the upstream shape
    """
    return {
        "id": f"resp_{uuid.uuid4().hex[:12]}",
        "object": "response",
        "created_at": time.time(),
        "status": "completed",
        "model": model,
        "output": [
            {
                "id": f"msg_{i}",
                "type": "message",
                "status": "completed",
                "role": "assistant",
                "content": [{"type": "output_text", "text": text, "annotations": []}],
            }
            for i, text in enumerate(texts)
        ],
    }


class MockResponsesClient(BaseResponsesClient):
    """Mock client replaying scripted responses and failures."""

    def __init__(
        self,
        responses: Optional[Sequence[Union[Dict[str, Any], BaseException]]] = None,
        response_delay: float = 0.0,
        **kwargs
    ):
        """
        Initialize the mock client.

        Args:
            responses: Results for successive calls; exceptions are raised
            response_delay: Simulated network latency in seconds
            **kwargs: Additional configuration options
        """
        super().__init__(**kwargs)
        self.responses: List[Union[Dict[str, Any], BaseException]] = list(responses or [])
        self.response_delay = response_delay
        self.requests: List[ResponseRequest] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    async def create_response(self, request: ResponseRequest) -> Dict[str, Any]:
        self.requests.append(request)

        if self.response_delay > 0:
            await asyncio.sleep(self.response_delay)

        if not self.responses:
            return build_text_response(f"Mock response to: {request.input}", model=request.model)

        result = self.responses.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result

    def get_supported_models(self) -> List[str]:
        return ["mock-model"]
