"""
Unit tests for response validation and text extraction.
"""

import pytest
from unittest.mock import Mock

from gptsearch.responses import (
    NO_TEXT_SENTINEL,
    MessageOutput,
    OpaqueContent,
    OutputTextContent,
    ReasoningOutput,
    WebSearchCallOutput,
    extract_response_text,
    output_items,
    validate_response,
)
from tests.conftest import message_item, reasoning_item, response_payload, web_search_item


class TestValidateResponse:
    """Test cases for validate_response."""

    def test_valid_response(self):
        """Test a well-formed response with all three item kinds."""
        outcome = validate_response(
            response_payload(reasoning_item(), web_search_item(), message_item("hello"))
        )

        assert outcome.ok is True
        assert outcome.error is None
        kinds = [type(item) for item in outcome.response.output]
        assert kinds == [ReasoningOutput, WebSearchCallOutput, MessageOutput]

    def test_content_kinds(self):
        """Test that output_text and other content kinds are told apart."""
        item = message_item("text")
        item["content"].append({"type": "refusal", "refusal": "I can't help with that."})

        outcome = validate_response(response_payload(item))

        assert outcome.ok is True
        content = outcome.response.output[0].content
        assert isinstance(content[0], OutputTextContent)
        assert isinstance(content[1], OpaqueContent)

    def test_unknown_output_kind_is_not_fatal(self):
        """Test that an unrecognized item kind yields a failure outcome, not an exception."""
        outcome = validate_response(
            response_payload({"id": "fs_1", "type": "file_search_call"}, message_item("hi"))
        )

        assert outcome.ok is False
        assert outcome.response is None
        assert outcome.error is not None
        assert outcome.describe() != ""

    def test_output_text_without_text(self):
        """Test that output_text content must carry a string text."""
        item = message_item()
        item["content"] = [{"type": "output_text"}]

        outcome = validate_response(response_payload(item))

        assert outcome.ok is False

    def test_output_text_with_non_string_text(self):
        item = message_item()
        item["content"] = [{"type": "output_text", "text": 42}]

        assert validate_response(response_payload(item)).ok is False

    def test_missing_output(self):
        outcome = validate_response({"id": "resp_1", "status": "completed"})
        assert outcome.ok is False

    @pytest.mark.parametrize("raw", [None, "not a response", 12, []])
    def test_garbage_input(self, raw):
        """Test that arbitrary values never raise."""
        outcome = validate_response(raw)
        assert outcome.ok is False

    def test_sdk_object_is_dumped(self):
        """Test that objects exposing model_dump are validated via their dict form."""
        sdk_response = Mock()
        sdk_response.model_dump.return_value = response_payload(message_item("from sdk"))

        outcome = validate_response(sdk_response)

        assert outcome.ok is True
        assert outcome.response.output[0].content[0].text == "from sdk"

    def test_valid_outcome_describe_is_empty(self):
        assert validate_response(response_payload()).describe() == ""


class TestExtractResponseText:
    """Test cases for extract_response_text."""

    def test_no_message_items_returns_sentinel(self):
        """Test that reasoning and search activity alone produce the sentinel."""
        outcome = validate_response(response_payload(reasoning_item(), web_search_item()))

        assert extract_response_text(outcome.response.output) == NO_TEXT_SENTINEL

    def test_two_messages_joined_with_blank_line(self):
        outcome = validate_response(
            response_payload(message_item("A", item_id="m1"), message_item("B", item_id="m2"))
        )

        assert extract_response_text(outcome.response.output) == "A\n\nB"

    def test_order_follows_output_then_content(self):
        outcome = validate_response(
            response_payload(
                message_item("1", "2", item_id="m1"),
                reasoning_item(),
                message_item("3", item_id="m2"),
            )
        )

        assert extract_response_text(outcome.response.output) == "1\n\n2\n\n3"

    def test_non_text_content_is_skipped(self):
        item = message_item("kept")
        item["content"].insert(0, {"type": "refusal", "refusal": "dropped"})
        outcome = validate_response(response_payload(item))

        assert extract_response_text(outcome.response.output) == "kept"

    def test_message_without_text_returns_sentinel(self):
        item = message_item()
        item["content"] = [{"type": "refusal", "refusal": "no"}]
        outcome = validate_response(response_payload(item))

        assert extract_response_text(outcome.response.output) == NO_TEXT_SENTINEL

    def test_empty_output(self):
        assert extract_response_text([]) == NO_TEXT_SENTINEL
        assert extract_response_text(None) == NO_TEXT_SENTINEL

    def test_idempotent(self):
        """Test that extraction is pure: same input, same text."""
        output = validate_response(
            response_payload(message_item("A", item_id="m1"), message_item("B", item_id="m2"))
        ).response.output

        assert extract_response_text(output) == extract_response_text(output)

    def test_raw_items(self):
        """Test extraction over unvalidated dict items."""
        items = [
            {"type": "reasoning"},
            {"type": "message", "content": [{"type": "output_text", "text": "raw"}]},
            {"type": "message", "content": "not a list"},
            {"type": "message", "content": [{"type": "output_text", "text": None}]},
            "garbage",
        ]

        assert extract_response_text(items) == "raw"

    def test_non_iterable_output(self):
        assert extract_response_text(5) == NO_TEXT_SENTINEL


class TestLenientExtraction:
    """Test that a response failing validation still yields its text."""

    def test_unknown_kind_still_yields_text(self):
        raw = response_payload(
            {"id": "fs_1", "type": "file_search_call"},
            message_item("recovered"),
        )

        assert validate_response(raw).ok is False
        assert extract_response_text(output_items(raw)) == "recovered"

    def test_message_missing_id_still_yields_text(self):
        item = message_item("no id")
        del item["id"]
        raw = response_payload(item)

        assert validate_response(raw).ok is False
        assert extract_response_text(output_items(raw)) == "no id"

    def test_output_items_of_garbage(self):
        assert output_items(None) == []
        assert output_items({"output": "nope"}) == []
        assert output_items("string") == []
