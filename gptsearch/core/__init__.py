"""
Core data types for gptsearch.
"""

from .types import (
    ReasoningEffort,
    SearchContextSize,
    WebSearchSettings,
    ToolConfig,
    SearchToolDescriptor,
    ReasoningSettings,
    ResponseRequest
)

__all__ = [
    "ReasoningEffort",
    "SearchContextSize",
    "WebSearchSettings",
    "ToolConfig",
    "SearchToolDescriptor",
    "ReasoningSettings",
    "ResponseRequest",
]
