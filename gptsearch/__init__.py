"""
gptsearch - MCP server exposing remote-model search tools.
"""

__version__ = "0.0.3"

from .core.types import (
    ReasoningEffort,
    SearchContextSize,
    WebSearchSettings,
    ToolConfig,
    ResponseRequest
)
from .responses import (
    UpstreamResponse,
    ValidationOutcome,
    validate_response,
    NO_TEXT_SENTINEL,
    extract_response_text
)
from .resilience import (
    ErrorKind,
    ClassifiedError,
    classify_error,
    render_error_message,
    RetryPolicy,
    with_retry
)
from .llm import (
    BaseResponsesClient,
    ResponsesClientFactory,
    OpenAIResponsesClient,
    MockResponsesClient
)
from .tools import DEFAULT_TOOL_NAME, build_tool_registry, ModelTool
from .orchestration import ToolInvocationPipeline, build_request, create_pipeline
from .config import get_config, GPTSearchConfig

__all__ = [
    "ReasoningEffort",
    "SearchContextSize",
    "WebSearchSettings",
    "ToolConfig",
    "ResponseRequest",
    "UpstreamResponse",
    "ValidationOutcome",
    "validate_response",
    "NO_TEXT_SENTINEL",
    "extract_response_text",
    "ErrorKind",
    "ClassifiedError",
    "classify_error",
    "render_error_message",
    "RetryPolicy",
    "with_retry",
    "BaseResponsesClient",
    "ResponsesClientFactory",
    "OpenAIResponsesClient",
    "MockResponsesClient",
    "DEFAULT_TOOL_NAME",
    "build_tool_registry",
    "ModelTool",
    "ToolInvocationPipeline",
    "build_request",
    "create_pipeline",
    "get_config",
    "GPTSearchConfig",
]
