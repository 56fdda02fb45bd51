# Agent Node Toolkit
# Tool definitions, registry and JSON Schema conversion for AI agent nodes

from .errors import (
    DuplicateNameError,
    RegistryCorruptionError,
    RegistryNotInitializedError,
    ToolkitError,
    ValidationError,
)
from .models import Parameter, Tool, validate_parameter, validate_tool
from .services.builtin_tools import BUILTIN_TOOLS, get_builtin_tool, register_builtin_tools
from .services.registry import (
    ToolRegistry,
    get_all_tools,
    get_default_registry,
    get_tool,
    get_tools_by_tag,
    has_tool,
    init_default_registry,
    register_tool,
    register_tools,
    teardown_default_registry,
    unregister_tool,
)
from .services.schema_converter import parameter_to_json_schema, tool_to_json_schema

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_TOOLS",
    "DuplicateNameError",
    "Parameter",
    "RegistryCorruptionError",
    "RegistryNotInitializedError",
    "Tool",
    "ToolRegistry",
    "ToolkitError",
    "ValidationError",
    "get_all_tools",
    "get_builtin_tool",
    "get_default_registry",
    "get_tool",
    "get_tools_by_tag",
    "has_tool",
    "init_default_registry",
    "parameter_to_json_schema",
    "register_builtin_tools",
    "register_tool",
    "register_tools",
    "teardown_default_registry",
    "tool_to_json_schema",
    "unregister_tool",
    "validate_parameter",
    "validate_tool",
]
