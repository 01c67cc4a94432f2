"""
Static registry of the tools exposed by the server.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from ..config import GPTSearchConfig
from ..core.types import ReasoningEffort, SearchContextSize, ToolConfig, WebSearchSettings

DEFAULT_TOOL_NAME = "gpt5-search"

_NO_LOCAL_FILES = "NOTE: Cannot read local files - only accepts text prompts."


def build_tool_registry(config: Optional[GPTSearchConfig] = None) -> Mapping[str, ToolConfig]:
    """
    Build the read-only tool name -> ToolConfig table.

    The ``*-search`` tools take their effort and search context size from
    configuration; the ``*-high`` tools pin both to high.

    Args:
        config: Settings providing the defaults; environment settings if None

    Returns:
        Mapping[str, ToolConfig]: Immutable registry
    """
    config = config or GPTSearchConfig()
    default_search = WebSearchSettings(enabled=True, context_size=config.search_context_size)
    high_search = WebSearchSettings(enabled=True, context_size=SearchContextSize.HIGH)

    tools = {
        "gpt5-search": ToolConfig(
            model="gpt-5",
            reasoning_effort=config.reasoning_effort,
            web_search=default_search,
            description=(
                "An AI agent with advanced web search capabilities using GPT-5. Useful for finding "
                "the latest information, troubleshooting errors, and discussing ideas or design "
                f"challenges. {_NO_LOCAL_FILES}"
            ),
        ),
        "gpt5-high": ToolConfig(
            model="gpt-5",
            reasoning_effort=ReasoningEffort.HIGH,
            web_search=high_search,
            description=(
                "GPT-5 with high reasoning effort and web search capabilities. Best for complex "
                f"problems requiring deep analysis and current information. {_NO_LOCAL_FILES}"
            ),
        ),
        "gpt5.2-search": ToolConfig(
            model="gpt-5.2",
            reasoning_effort=config.reasoning_effort,
            web_search=default_search,
            description=(
                "GPT-5.2 with web search - the best model for coding and agentic tasks. "
                f"{_NO_LOCAL_FILES}"
            ),
        ),
        "gpt5.2-high": ToolConfig(
            model="gpt-5.2",
            reasoning_effort=ReasoningEffort.HIGH,
            web_search=high_search,
            description=(
                "GPT-5.2 with high reasoning effort and web search. Best for complex coding, "
                f"architecture, and agentic tasks requiring deep analysis. {_NO_LOCAL_FILES}"
            ),
        ),
    }
    return MappingProxyType(tools)
