"""
MCP stdio server exposing one tool per registry entry.
"""

import logging
import sys
from typing import List

from mcp.server.fastmcp import FastMCP
from pydantic import Field, ValidationError
from typing_extensions import Annotated

from . import __version__
from .config import get_config
from .orchestration import ToolInvocationPipeline, create_pipeline
from .tools import INPUT_DESCRIPTION, ModelTool

SERVER_NAME = "gpt5-search-mcp"

logger = logging.getLogger(__name__)


def _make_handler(tool: ModelTool):
    async def handler(input: Annotated[str, Field(description=INPUT_DESCRIPTION)]) -> str:
        return await tool.execute(input)

    handler.__name__ = tool.name.replace("-", "_").replace(".", "_")
    handler.__doc__ = tool.description
    return handler


def create_tools(pipeline: ToolInvocationPipeline) -> List[ModelTool]:
    """One ModelTool per registered tool name, in registry order."""
    return [ModelTool(name, config, pipeline) for name, config in pipeline.registry.items()]


def build_server(pipeline: ToolInvocationPipeline, name: str = SERVER_NAME) -> FastMCP:
    """
    Create the MCP server and register every tool.

    Args:
        pipeline: Pipeline serving the tool calls
        name: Server name announced to clients

    Returns:
        FastMCP: Server ready to run
    """
    server = FastMCP(name)

    for tool in create_tools(pipeline):
        server.add_tool(_make_handler(tool), name=tool.name, description=tool.description)
        logger.debug(f"Registered tool: {tool}")

    return server


def main() -> None:
    """Entry point for the ``gptsearch-mcp`` console script."""
    try:
        config = get_config()
    except ValidationError as e:
        logging.basicConfig(stream=sys.stderr)
        logger.critical(f"Fatal error: invalid configuration: {e}")
        sys.exit(1)

    if not config.has_api_key:
        logger.warning("OPENAI_API_KEY environment variable is not set. Tools will fail without it.")

    server = build_server(create_pipeline(config))
    logger.info(f"GPT-5/5.2 MCP Server running on stdio (v{__version__})")
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
