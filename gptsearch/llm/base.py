from abc import ABC, abstractmethod
from typing import Any, Dict, List

from ..core.types import ResponseRequest


class BaseResponsesClient(ABC):
    """Abstract base class for remote completion API clients."""

    def __init__(self, **kwargs):
        """
        Initialize the client.

        Args:
            **kwargs: Provider-specific configuration options
        """
        self.config = kwargs

    @abstractmethod
    async def create_response(self, request: ResponseRequest) -> Dict[str, Any]:
        """
        Perform one remote call.

        Args:
            request: Outbound request for this attempt

        Returns:
            Dict[str, Any]: Raw, unvalidated response payload

        Raises:
            ClassifiedError: If the remote call fails
        """
        pass

    @abstractmethod
    def get_supported_models(self) -> List[str]:
        """
        Get list of models supported by this provider.

        Returns:
            List[str]: List of supported model names
        """
        pass
