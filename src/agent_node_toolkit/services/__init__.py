# Services package
# Tool registry, schema conversion, built-in tools and prompt formatting

from .builtin_tools import BUILTIN_TOOLS, get_builtin_tool, register_builtin_tools
from .node_errors import AiErrorType, AiNodeError, create_error_handler
from .prompt_formatter import format_prompt_template, format_template
from .registry import (
    ToolRegistry,
    get_default_registry,
    init_default_registry,
    teardown_default_registry,
)
from .schema_converter import (
    parameter_to_json_schema,
    registry_to_json_schemas,
    tool_to_anthropic_tool,
    tool_to_json_schema,
    tool_to_openai_function,
)
from .tool_loader import load_tool_definitions, register_tools_from_file

__all__ = [
    "AiErrorType",
    "AiNodeError",
    "BUILTIN_TOOLS",
    "ToolRegistry",
    "create_error_handler",
    "format_prompt_template",
    "format_template",
    "get_builtin_tool",
    "get_default_registry",
    "init_default_registry",
    "load_tool_definitions",
    "parameter_to_json_schema",
    "register_builtin_tools",
    "register_tools_from_file",
    "registry_to_json_schemas",
    "teardown_default_registry",
    "tool_to_anthropic_tool",
    "tool_to_json_schema",
    "tool_to_openai_function",
]
