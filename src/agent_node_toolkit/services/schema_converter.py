# Tool to JSON Schema conversion
# Produces the structure consumed by LLM tool-calling integrations

import copy
from collections.abc import Callable
from typing import Any

from ..models.parameter import (
    ArrayParameter,
    BooleanParameter,
    NumberParameter,
    ObjectParameter,
    Parameter,
    StringParameter,
)
from ..models.tool import Tool
from .registry import ToolRegistry


def _put(schema: dict[str, Any], key: str, value: Any) -> None:
    """Copy ``value`` into ``schema`` only when it is present."""
    if value is not None:
        schema[key] = copy.deepcopy(value)


def _string_schema(param: StringParameter, schema: dict[str, Any]) -> None:
    _put(schema, "format", param.format)
    _put(schema, "minLength", param.min_length)
    _put(schema, "maxLength", param.max_length)
    _put(schema, "pattern", param.pattern)
    _put(schema, "enum", param.enum)
    _put(schema, "default", param.default)


def _number_schema(param: NumberParameter, schema: dict[str, Any]) -> None:
    _put(schema, "minimum", param.minimum)
    _put(schema, "maximum", param.maximum)
    _put(schema, "multipleOf", param.multiple_of)
    _put(schema, "format", param.format)
    _put(schema, "default", param.default)


def _boolean_schema(param: BooleanParameter, schema: dict[str, Any]) -> None:
    _put(schema, "default", param.default)


def _array_schema(param: ArrayParameter, schema: dict[str, Any]) -> None:
    schema["items"] = parameter_to_json_schema(param.items)
    _put(schema, "minItems", param.min_items)
    _put(schema, "maxItems", param.max_items)
    _put(schema, "uniqueItems", param.unique_items)
    _put(schema, "default", param.default)


def _object_schema(param: ObjectParameter, schema: dict[str, Any]) -> None:
    schema["properties"] = {
        name: parameter_to_json_schema(prop)
        for name, prop in (param.properties or {}).items()
    }
    if isinstance(param.required, list):
        schema["required"] = list(param.required)
    _put(schema, "additionalProperties", param.additional_properties)
    _put(schema, "default", param.default)


_CONVERTERS: dict[str, Callable[[Any, dict[str, Any]], None]] = {
    "string": _string_schema,
    "number": _number_schema,
    "boolean": _boolean_schema,
    "array": _array_schema,
    "object": _object_schema,
}


def parameter_to_json_schema(param: Parameter) -> dict[str, Any]:
    """Convert one parameter (recursively) to a JSON Schema fragment.

    ``type`` and ``description`` are always emitted; optional constraints only
    when set on the source parameter.
    """
    schema: dict[str, Any] = {"type": param.type, "description": param.description}
    _CONVERTERS[param.type](param, schema)
    return schema


def tool_to_json_schema(tool: Tool) -> dict[str, Any]:
    """Convert a tool definition to a JSON Schema compatible structure.

    Shape: ``{name, description, parameters: {type, properties, required},
    returns?}``. ``required`` is ``required_parameters`` verbatim.
    """
    properties = {
        name: parameter_to_json_schema(param) for name, param in tool.parameters.items()
    }

    schema: dict[str, Any] = {
        "name": tool.name,
        "description": tool.description,
        "parameters": {
            "type": "object",
            "properties": properties,
            "required": list(tool.required_parameters),
        },
    }
    if tool.returns is not None:
        schema["returns"] = parameter_to_json_schema(tool.returns)
    return schema


def tool_to_openai_function(tool: Tool) -> dict[str, Any]:
    """OpenAI Chat Completions function-calling format."""
    schema = tool_to_json_schema(tool)
    return {
        "type": "function",
        "function": {
            "name": schema["name"],
            "description": schema["description"],
            "parameters": schema["parameters"],
        },
    }


def tool_to_anthropic_tool(tool: Tool) -> dict[str, Any]:
    """Anthropic Messages API tool format."""
    schema = tool_to_json_schema(tool)
    return {
        "name": schema["name"],
        "description": schema["description"],
        "input_schema": schema["parameters"],
    }


def registry_to_json_schemas(registry: ToolRegistry, tag: str | None = None) -> list[dict[str, Any]]:
    """Convert every registered tool, or only those carrying ``tag``."""
    tools = registry.get_by_tag(tag) if tag is not None else registry.get_all()
    return [tool_to_json_schema(tool) for tool in tools]
