"""
Tool invocation pipeline.

One invocation: registry lookup, request construction, the remote call
under the retry policy, validation, text extraction. Every failure below
this point comes back as reply text; the caller always gets a reply.
"""

import logging
from typing import Any, Mapping, Optional

from ..core.types import (
    ReasoningSettings,
    ResponseRequest,
    SearchToolDescriptor,
    ToolConfig,
)
from ..llm.base import BaseResponsesClient
from ..resilience.errors import ClassifiedError, render_error_message
from ..resilience.retry import RetryPolicy, with_retry
from ..responses.extractor import extract_response_text, output_items
from ..responses.schema import validate_response


def build_request(config: ToolConfig, input: str) -> ResponseRequest:
    """
    Build the outbound request for a tool.

    Args:
        config: The tool's configuration
        input: Free-text input from the caller

    Returns:
        ResponseRequest: Request with a search descriptor only when the
        tool enables web search
    """
    tools = None
    if config.search_enabled:
        tools = [
            SearchToolDescriptor(
                type=config.web_search.tool_type,
                search_context_size=config.web_search.context_size,
            )
        ]

    return ResponseRequest(
        model=config.model,
        reasoning=ReasoningSettings(effort=config.reasoning_effort),
        input=input,
        tools=tools,
    )


class ToolInvocationPipeline:
    """Serves tool invocations against a remote completion API."""

    def __init__(
        self,
        client: BaseResponsesClient,
        registry: Mapping[str, ToolConfig],
        retry_policy: Optional[RetryPolicy] = None,
        service_name: str = "OpenAI",
        credential_name: str = "OPENAI_API_KEY",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            client: Remote client performing the calls
            registry: Read-only tool name -> ToolConfig table
            retry_policy: Retry policy; 2 retries, 300 ms base delay if None
            service_name: Remote service name used in error replies
            credential_name: Credential variable named in auth error replies
            logger: Optional logger instance
        """
        self.client = client
        self.registry = registry
        self.retry_policy = retry_policy or RetryPolicy()
        self.service_name = service_name
        self.credential_name = credential_name
        self.logger = logger or logging.getLogger(__name__)

    async def invoke(self, tool_name: str, input: str) -> str:
        """
        Run one invocation of a registered tool.

        Args:
            tool_name: Registered tool name
            input: Free-text input

        Returns:
            str: Extracted text, or a rendered error message
        """
        config = self.registry.get(tool_name)
        if config is None:
            available = ", ".join(self.registry.keys())
            self.logger.error(f"Unknown tool '{tool_name}'")
            return f"Error: Unknown tool '{tool_name}'. Available tools: {available}"

        return await self.invoke_config(tool_name, config, input)

    async def invoke_config(self, tool_name: str, config: ToolConfig, input: str) -> str:
        """Run one invocation with an explicit configuration."""
        request = build_request(config, input)

        try:
            raw = await with_retry(
                lambda: self.client.create_response(request),
                self.retry_policy,
            )
        except ClassifiedError as e:
            self.logger.error(f"Error in tool {tool_name}: {e!r}")
            return render_error_message(e, self.service_name, self.credential_name)
        except Exception as e:
            self.logger.exception(f"Error in tool {tool_name}: {e}")
            return f"Error: {e}"

        return self._response_text(tool_name, raw)

    def _response_text(self, tool_name: str, raw: Any) -> str:
        outcome = validate_response(raw)
        if not outcome.ok:
            self.logger.warning(
                f"Response validation failed for tool {tool_name}, "
                f"falling back to unvalidated extraction: {outcome.describe()}"
            )
            return extract_response_text(output_items(raw))

        return extract_response_text(outcome.response.output)
