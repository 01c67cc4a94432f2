"""
Pytest configuration and shared fixtures for gptsearch tests.
"""

import pytest

import gptsearch.config
from gptsearch.llm import MockResponsesClient, build_text_response
from gptsearch.orchestration import ToolInvocationPipeline
from gptsearch.resilience import RetryPolicy
from gptsearch.tools import build_tool_registry
from gptsearch.config import GPTSearchConfig


ENV_VARS = [
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "LLM_PROVIDER",
    "REQUEST_TIMEOUT",
    "REASONING_EFFORT",
    "SEARCH_CONTEXT_SIZE",
    "MAX_RETRIES",
    "RETRY_BASE_DELAY_MS",
    "LOG_LEVEL",
    "DEBUG",
]


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """
    Keep tests independent of the developer's environment and ``.env`` file.
    This fixture is auto-used for all tests.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    gptsearch.config._config = None
    yield
    gptsearch.config._config = None


class SleepRecorder:
    """Stand-in for asyncio.sleep that records the requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, seconds):
        self.delays.append(seconds)


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()


def message_item(*texts, item_id="msg_1"):
    """A ``message`` output item with one output_text content per text."""
    return {
        "id": item_id,
        "type": "message",
        "status": "completed",
        "role": "assistant",
        "content": [{"type": "output_text", "text": text, "annotations": []} for text in texts],
    }


def reasoning_item(item_id="rs_1"):
    return {"id": item_id, "type": "reasoning", "summary": []}


def web_search_item(item_id="ws_1"):
    return {
        "id": item_id,
        "type": "web_search_call",
        "status": "completed",
        "action": {"type": "search", "query": "latest news"},
    }


def response_payload(*items):
    """A completed response payload wrapping the given output items."""
    return {
        "id": "resp_123",
        "object": "response",
        "created_at": 1735689600,
        "status": "completed",
        "model": "gpt-5",
        "output": list(items),
        "usage": {"input_tokens": 10, "output_tokens": 20, "total_tokens": 30},
    }


@pytest.fixture
def settings():
    """Settings with defaults only."""
    return GPTSearchConfig()


@pytest.fixture
def registry(settings):
    return build_tool_registry(settings)


@pytest.fixture
def mock_client():
    """A mock client answering every call with 'pong'."""
    return MockResponsesClient(responses=[build_text_response("pong")])


@pytest.fixture
def make_pipeline(registry):
    """Build a pipeline over the static registry without real backoff waits."""
    def _make(client, retry_policy=None):
        return ToolInvocationPipeline(
            client=client,
            registry=registry,
            retry_policy=retry_policy or RetryPolicy(max_retries=2, base_delay_ms=0),
        )
    return _make
