"""
Upstream response validation and text extraction.
"""

from .schema import (
    OutputTextContent,
    OpaqueContent,
    MessageOutput,
    ReasoningOutput,
    WebSearchCallOutput,
    UpstreamResponse,
    ValidationOutcome,
    validate_response
)
from .extractor import NO_TEXT_SENTINEL, extract_response_text, output_items

__all__ = [
    "OutputTextContent",
    "OpaqueContent",
    "MessageOutput",
    "ReasoningOutput",
    "WebSearchCallOutput",
    "UpstreamResponse",
    "ValidationOutcome",
    "validate_response",
    "NO_TEXT_SENTINEL",
    "extract_response_text",
    "output_items",
]
