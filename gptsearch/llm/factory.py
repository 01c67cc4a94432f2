from typing import Dict, Type
from .base import BaseResponsesClient
from .providers import OpenAIResponsesClient, MockResponsesClient


class ResponsesClientFactory:
    """Factory class for creating remote clients based on provider configuration."""

    _PROVIDERS: Dict[str, Type[BaseResponsesClient]] = {
        "openai": OpenAIResponsesClient,
        "mock": MockResponsesClient,  # For testing and development
    }

    @classmethod
    def create_client(cls, provider: str, **kwargs) -> BaseResponsesClient:
        """
        Create a remote client for the specified provider.

        Args:
            provider: The provider name (openai, mock)
            **kwargs: Provider-specific configuration parameters

        Returns:
            BaseResponsesClient: An instance of the appropriate client

        Raises:
            ValueError: If provider is not supported
        """
        provider_lower = provider.lower()

        if provider_lower not in cls._PROVIDERS:
            supported = ", ".join(cls._PROVIDERS.keys())
            raise ValueError(f"Unsupported provider '{provider}'. Supported providers: {supported}")

        return cls._PROVIDERS[provider_lower](**kwargs)

    @classmethod
    def get_supported_providers(cls) -> list:
        """Get list of supported provider names."""
        return list(cls._PROVIDERS.keys())

    @classmethod
    def register_provider(cls, name: str, client_class: Type[BaseResponsesClient]) -> None:
        """
        Register a new provider.

        Args:
            name: Provider name
            client_class: Client class that inherits from BaseResponsesClient
        """
        if not issubclass(client_class, BaseResponsesClient):
            raise TypeError("Client class must inherit from BaseResponsesClient")

        cls._PROVIDERS[name.lower()] = client_class
