"""
Standalone command-line client: one query, one reply on stdout.

Usage:
    gptsearch-cli "your query here"
    gptsearch-cli --model gpt-5.2 --effort high "your query"
    echo "your query" | gptsearch-cli --stdin
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import get_config
from .core.types import ReasoningEffort, SearchContextSize, ToolConfig, WebSearchSettings
from .orchestration import create_pipeline

MODELS = ["gpt-5", "gpt-5.2"]
LEVELS = [level.value for level in ReasoningEffort]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gptsearch-cli",
        description="Query GPT-5 or GPT-5.2 with web search from the terminal.",
        epilog="Environment: OPENAI_API_KEY (required)",
    )
    parser.add_argument("query", nargs="?", help="Question to ask")
    parser.add_argument("-m", "--model", choices=MODELS, default="gpt-5.2",
                        help="Model to use (default: gpt-5.2)")
    parser.add_argument("-e", "--effort", choices=LEVELS, default="medium",
                        help="Reasoning effort (default: medium)")
    parser.add_argument("-s", "--search-context", choices=LEVELS, default="medium",
                        help="Search context size (default: medium)")
    parser.add_argument("--no-search", action="store_true", help="Disable web search")
    parser.add_argument("--stdin", action="store_true", help="Read query from stdin")
    return parser


def tool_config_from_args(args: argparse.Namespace) -> ToolConfig:
    """Ad-hoc ToolConfig for one CLI query."""
    web_search = None
    if not args.no_search:
        web_search = WebSearchSettings(enabled=True, context_size=SearchContextSize(args.search_context))

    return ToolConfig(
        model=args.model,
        reasoning_effort=ReasoningEffort(args.effort),
        web_search=web_search,
        description="Command-line query",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``gptsearch-cli`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    query = sys.stdin.read() if args.stdin else args.query
    query = (query or "").strip()
    if not query:
        parser.print_usage(sys.stderr)
        print("Error: No query provided", file=sys.stderr)
        return 1

    try:
        config = get_config()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    if not config.has_api_key:
        print("Error: OPENAI_API_KEY environment variable is not set", file=sys.stderr)
        return 1

    pipeline = create_pipeline(config)
    reply = asyncio.run(pipeline.invoke_config("cli", tool_config_from_args(args), query))
    print(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())
