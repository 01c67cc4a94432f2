#!/usr/bin/env python3
"""
Smoke test for the gptsearch MCP server over stdio.

Spawns the server, initializes a client session, lists the tools and calls
one of them with a sample question.
"""

import argparse
import asyncio
import os
import sys
from contextlib import AsyncExitStack

from dotenv import load_dotenv
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def run(tool_name: str, question: str) -> None:
    server_params = StdioServerParameters(
        command=sys.executable,
        args=["-m", "gptsearch.server"],
        env=dict(os.environ),
    )

    async with AsyncExitStack() as stack:
        read, write = await stack.enter_async_context(stdio_client(server_params))
        session = await stack.enter_async_context(ClientSession(read, write))

        print("Sending initialization...")
        await session.initialize()

        tools = await session.list_tools()
        print(f"Server tools: {[tool.name for tool in tools.tools]}")

        print(f"Calling {tool_name}...")
        result = await session.call_tool(tool_name, {"input": question})
        for content in result.content:
            if getattr(content, "type", None) == "text":
                print(f"Server response:\n{content.text}")


def main():
    parser = argparse.ArgumentParser(description="Call a gptsearch tool through the MCP stdio server")
    parser.add_argument("--tool", "-t", default="gpt5-search", help="Tool to call")
    parser.add_argument("question", nargs="?", default="What is the current weather in San Francisco?")
    parser.add_argument("--env-file", default=".env", help="dotenv file with OPENAI_API_KEY")
    args = parser.parse_args()

    load_dotenv(args.env_file)
    asyncio.run(run(args.tool, args.question))


if __name__ == "__main__":
    main()
