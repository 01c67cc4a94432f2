"""
Configuration management for gptsearch.
Settings are read once at process start from the environment and ``.env``.
"""

import logging
import sys
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings

from .core.types import ReasoningEffort, SearchContextSize


class GPTSearchConfig(BaseSettings):
    """gptsearch configuration with environment variable support."""

    # Remote API
    openai_api_key: Optional[str] = Field(default=None, description="Credential for the remote API")
    openai_base_url: Optional[str] = Field(default=None, description="Override for the remote API base URL")
    llm_provider: str = Field(default="openai", description="Remote client provider: openai or mock")
    request_timeout: float = Field(default=600.0, description="Remote call timeout in seconds")

    # Tool defaults, overridable per tool in the registry
    reasoning_effort: ReasoningEffort = Field(
        default=ReasoningEffort.MEDIUM,
        description="Default reasoning effort"
    )
    search_context_size: SearchContextSize = Field(
        default=SearchContextSize.MEDIUM,
        description="Default web search context size"
    )

    # Retry policy
    max_retries: int = Field(default=2, ge=0, description="Retries after the first failed attempt")
    retry_base_delay_ms: int = Field(default=300, ge=0, description="Base exponential backoff delay in ms")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    debug: bool = Field(default=False, description="Enable debug logging")

    class Config:
        env_file = ".env"
        env_prefix = ""
        case_sensitive = False
        extra = "ignore"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key)


# Global configuration instance
_config: Optional[GPTSearchConfig] = None


def get_config() -> GPTSearchConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = GPTSearchConfig()
        setup_logging(_config)
    return _config


def setup_logging(config: GPTSearchConfig) -> None:
    """Set up logging based on configuration.

    Logs go to stderr; stdout carries the MCP stdio protocol.
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=config.log_format,
        stream=sys.stderr
    )

    if config.debug:
        logging.getLogger("gptsearch").setLevel(logging.DEBUG)
    else:
        # Reduce noise from external libraries
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        logging.getLogger("openai").setLevel(logging.WARNING)


def reload_config() -> GPTSearchConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
