"""
MCP-facing adapter binding one registered tool to the invocation pipeline.
"""

from ..core.types import ToolConfig

INPUT_DESCRIPTION = "Ask questions, search for information, or consult about problems in English."


class ModelTool:
    """A registered remote-model tool with a single free-text ``input``."""

    def __init__(self, name: str, config: ToolConfig, pipeline):
        """
        Args:
            name: Registered tool name
            config: The tool's static configuration
            pipeline: ToolInvocationPipeline that serves the calls
        """
        self.name = name
        self.config = config
        self.description = config.description
        self.pipeline = pipeline

    async def execute(self, input: str) -> str:
        """Run one invocation and return its text reply."""
        return await self.pipeline.invoke(self.name, input)

    def __str__(self) -> str:
        return f"Tool({self.name}): {self.config.model}, effort={self.config.reasoning_effort.value}"
