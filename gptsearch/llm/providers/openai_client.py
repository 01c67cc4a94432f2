import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI

from ..base import BaseResponsesClient
from ...core.types import ResponseRequest
from ...resilience.errors import ClassifiedError, classify_error


logger = logging.getLogger(__name__)


class OpenAIResponsesClient(BaseResponsesClient):
    """OpenAI Responses API client."""

    SUPPORTED_MODELS = ["gpt-5", "gpt-5.2"]

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 600.0,
        **kwargs
    ):
        """
        Initialize OpenAI client.

        The SDK client is created on first use so that a missing key does
        not stop the server from starting.

        Args:
            api_key: OpenAI API key
            base_url: Optional API base URL override
            timeout: Request timeout in seconds
            **kwargs: Additional configuration options
        """
        super().__init__(**kwargs)
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.client: Optional[AsyncOpenAI] = None

    def _get_client(self) -> AsyncOpenAI:
        if self.client is None:
            # Retries are handled by the retry policy, not the SDK
            self.client = AsyncOpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self.client

    async def create_response(self, request: ResponseRequest) -> Dict[str, Any]:
        """Call ``responses.create`` and return the raw payload as a dict."""
        if not self.api_key:
            raise ClassifiedError("OPENAI_API_KEY environment variable is not set", status=401)

        payload = request.to_payload()
        logger.debug(
            f"REQUEST: model={payload['model']} effort={payload['reasoning']['effort']} "
            f"tools={len(payload.get('tools', []))}"
        )

        try:
            response = await self._get_client().responses.create(**payload)
        except Exception as e:
            raise classify_error(e) from e

        if hasattr(response, "model_dump"):
            return response.model_dump()
        return response

    def get_supported_models(self) -> List[str]:
        """Get supported OpenAI models."""
        return self.SUPPORTED_MODELS.copy()
