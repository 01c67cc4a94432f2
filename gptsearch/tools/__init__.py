from .registry import DEFAULT_TOOL_NAME, build_tool_registry
from .model_tool import INPUT_DESCRIPTION, ModelTool

__all__ = ["DEFAULT_TOOL_NAME", "build_tool_registry", "INPUT_DESCRIPTION", "ModelTool"]
