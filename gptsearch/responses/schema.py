"""
Expected shape of an upstream response and conformance checking.

The output array is a closed tagged union on ``type``: ``message``,
``reasoning`` and ``web_search_call``. Any other kind fails validation;
callers treat that as recoverable and fall back to lenient extraction.
"""

from dataclasses import dataclass
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator
from typing_extensions import Annotated


class OutputTextContent(BaseModel):
    """Text content of a message item."""
    type: Literal["output_text"] = "output_text"
    text: str = Field(..., description="User-facing text")
    annotations: Optional[List[Any]] = None
    logprobs: Optional[List[Any]] = None

    class Config:
        extra = "allow"


class OpaqueContent(BaseModel):
    """Any non-text content kind (refusals, audio, ...). Never surfaced."""
    type: str

    class Config:
        extra = "allow"

    @field_validator("type")
    @classmethod
    def _not_output_text(cls, value: str) -> str:
        # output_text must go through OutputTextContent so a missing text is caught
        if value == "output_text":
            raise ValueError("output_text content requires a string 'text' field")
        return value


MessageContent = Union[OutputTextContent, OpaqueContent]


class MessageOutput(BaseModel):
    """Assistant message carrying ordered content items."""
    id: str
    type: Literal["message"] = "message"
    status: Optional[str] = None
    role: Optional[str] = None
    content: List[MessageContent] = Field(default_factory=list)

    class Config:
        extra = "allow"


class ReasoningOutput(BaseModel):
    """Reasoning trace. Opaque."""
    id: str
    type: Literal["reasoning"] = "reasoning"
    summary: List[Any] = Field(default_factory=list)

    class Config:
        extra = "allow"


class WebSearchCallOutput(BaseModel):
    """Search tool activity. Opaque."""
    id: str
    type: Literal["web_search_call"] = "web_search_call"
    status: Optional[str] = None
    action: Optional[Any] = None

    class Config:
        extra = "allow"


OutputItem = Annotated[
    Union[MessageOutput, ReasoningOutput, WebSearchCallOutput],
    Field(discriminator="type")
]


class Usage(BaseModel):
    input_tokens: int
    output_tokens: int
    total_tokens: int
    input_tokens_details: Optional[Any] = None
    output_tokens_details: Optional[Any] = None

    class Config:
        extra = "allow"


class UpstreamResponse(BaseModel):
    """A completed upstream response."""
    id: Optional[str] = None
    object: Optional[str] = None
    created_at: Optional[float] = None
    status: Optional[str] = None
    model: Optional[str] = None
    output: List[OutputItem]
    usage: Optional[Usage] = None

    class Config:
        extra = "allow"


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of validating a raw upstream response."""
    response: Optional[UpstreamResponse] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.response is not None

    def describe(self) -> str:
        """Short summary of the validation errors, for logging."""
        if self.error is None:
            return ""
        parts = []
        for err in self.error.errors():
            location = ".".join(str(p) for p in err.get("loc", ()))
            parts.append(f"{location}: {err.get('msg')}")
        return "; ".join(parts)


def as_plain(value: Any) -> Any:
    """Turn SDK model objects into plain dicts; leave everything else alone."""
    dump = getattr(value, "model_dump", None)
    if callable(dump) and not isinstance(value, type):
        return dump()
    return value


def validate_response(raw: Any) -> ValidationOutcome:
    """
    Check a raw remote result against the expected response shape.

    Args:
        raw: Untyped value returned by the remote call

    Returns:
        ValidationOutcome: Validated response, or the validation error.
        Shape mismatches are never raised.
    """
    try:
        return ValidationOutcome(response=UpstreamResponse.model_validate(as_plain(raw)))
    except ValidationError as e:
        return ValidationOutcome(error=e)
