"""
Factory functions for building the invocation pipeline from settings.
"""

import logging
from typing import Optional

from .pipeline import ToolInvocationPipeline
from ..config import GPTSearchConfig, get_config
from ..llm import BaseResponsesClient, ResponsesClientFactory
from ..resilience.retry import RetryPolicy
from ..tools.registry import build_tool_registry


def create_client(config: GPTSearchConfig) -> BaseResponsesClient:
    """
    Create the remote client selected by ``config.llm_provider``.

    Args:
        config: Settings

    Returns:
        BaseResponsesClient: Configured client
    """
    if config.llm_provider.lower() == "openai":
        return ResponsesClientFactory.create_client(
            "openai",
            api_key=config.openai_api_key,
            base_url=config.openai_base_url,
            timeout=config.request_timeout,
        )
    return ResponsesClientFactory.create_client(config.llm_provider)


def create_pipeline(
    config: Optional[GPTSearchConfig] = None,
    client: Optional[BaseResponsesClient] = None,
    logger: Optional[logging.Logger] = None,
) -> ToolInvocationPipeline:
    """
    Create a ToolInvocationPipeline wired from settings.

    Args:
        config: Settings; the global configuration if None
        client: Remote client; built from ``config.llm_provider`` if None
        logger: Optional logger instance

    Returns:
        ToolInvocationPipeline: Pipeline over the static tool registry

    Example:
        ```python
        pipeline = create_pipeline()
        text = await pipeline.invoke("gpt5-search", "What is new in Python?")
        ```
    """
    config = config or get_config()

    return ToolInvocationPipeline(
        client=client or create_client(config),
        registry=build_tool_registry(config),
        retry_policy=RetryPolicy(
            max_retries=config.max_retries,
            base_delay_ms=config.retry_base_delay_ms,
        ),
        logger=logger,
    )
