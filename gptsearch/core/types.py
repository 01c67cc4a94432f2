# Library imports
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional
from enum import Enum

class ReasoningEffort(str, Enum):
    """Reasoning effort levels accepted by the remote model."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class SearchContextSize(str, Enum):
    """How much retrieved context the remote search may use."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class WebSearchSettings(BaseModel):
    """Web search capability attached to a tool."""
    enabled: bool = Field(default=True, description="Whether the search capability is sent")
    context_size: SearchContextSize = Field(
        default=SearchContextSize.MEDIUM,
        description="Search context size passed to the remote call"
    )
    tool_type: str = Field(
        default="web_search_preview",
        description="Type identifier of the remote search capability"
    )

    class Config:
        frozen = True

class ToolConfig(BaseModel):
    """Static configuration for one registered tool."""
    model: str = Field(..., description="Remote model identifier")
    reasoning_effort: ReasoningEffort = Field(
        default=ReasoningEffort.MEDIUM,
        description="Reasoning effort for the remote model"
    )
    web_search: Optional[WebSearchSettings] = Field(None, description="Optional web search settings")
    description: str = Field(..., description="Human-readable tool description")

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "model": "gpt-5",
                "reasoning_effort": "medium",
                "web_search": {"enabled": True, "context_size": "medium"},
                "description": "GPT-5 with web search."
            }
        }

    @property
    def search_enabled(self) -> bool:
        return self.web_search is not None and self.web_search.enabled

class SearchToolDescriptor(BaseModel):
    """Search capability descriptor sent with the outbound request."""
    type: str = "web_search_preview"
    search_context_size: SearchContextSize = SearchContextSize.MEDIUM

class ReasoningSettings(BaseModel):
    """Reasoning block of the outbound request."""
    effort: ReasoningEffort = ReasoningEffort.MEDIUM

class ResponseRequest(BaseModel):
    """Outbound request for one remote call attempt."""
    model: str = Field(..., description="Remote model identifier")
    reasoning: ReasoningSettings = Field(default_factory=ReasoningSettings)
    input: str = Field(..., description="Free-text input forwarded to the model")
    tools: Optional[List[SearchToolDescriptor]] = Field(None, description="Remote tools, search only")

    class Config:
        json_schema_extra = {
            "example": {
                "model": "gpt-5",
                "reasoning": {"effort": "medium"},
                "input": "What changed in the latest Python release?",
                "tools": [
                    {"type": "web_search_preview", "search_context_size": "medium"}
                ]
            }
        }

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation, omitting ``tools`` when search is off."""
        return self.model_dump(mode="json", exclude_none=True)
