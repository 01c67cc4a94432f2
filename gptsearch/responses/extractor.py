"""
Text extraction from upstream response output items.
"""

from typing import Any, Iterable, Iterator, List, Mapping

from .schema import (
    MessageOutput,
    OutputTextContent,
    ReasoningOutput,
    WebSearchCallOutput,
    as_plain,
)

NO_TEXT_SENTINEL = "No response text available."


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


def _message_texts(item: Any) -> Iterator[str]:
    """Yield the ``output_text`` texts of one output item, in content order."""
    if isinstance(item, MessageOutput):
        for content in item.content:
            if isinstance(content, OutputTextContent):
                yield content.text
        return
    if isinstance(item, (ReasoningOutput, WebSearchCallOutput)):
        return

    # Unvalidated item from the lenient path
    if _field(item, "type") != "message":
        return
    contents = _field(item, "content")
    if not isinstance(contents, (list, tuple)):
        return
    for content in contents:
        text = _field(content, "text")
        if _field(content, "type") == "output_text" and isinstance(text, str):
            yield text


def extract_response_text(output: Iterable[Any]) -> str:
    """
    Concatenate the user-facing text of a response.

    Only ``message`` items contribute, and within them only ``output_text``
    content. Texts are joined with a blank line in output order, then
    content order.

    Args:
        output: Output items, validated models or raw mappings

    Returns:
        str: The joined text, or ``NO_TEXT_SENTINEL`` when there is none
    """
    try:
        items = list(output or ())
    except TypeError:
        items = []

    messages = [item for item in items if _field(item, "type") == "message"]
    if not messages:
        return NO_TEXT_SENTINEL

    texts: List[str] = []
    for message in messages:
        texts.extend(_message_texts(message))

    return "\n\n".join(texts) or NO_TEXT_SENTINEL


def output_items(raw: Any) -> List[Any]:
    """Best-effort ``output`` list of a raw response; empty when absent."""
    output = _field(as_plain(raw), "output")
    if isinstance(output, (list, tuple)):
        return list(output)
    return []
