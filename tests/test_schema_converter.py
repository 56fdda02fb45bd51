import pytest

from agent_node_toolkit.models.parameter import validate_parameter
from agent_node_toolkit.models.tool import validate_tool
from agent_node_toolkit.services.schema_converter import (
    parameter_to_json_schema,
    registry_to_json_schemas,
    tool_to_anthropic_tool,
    tool_to_json_schema,
    tool_to_openai_function,
)


def _walk(node):
    """Yield every dict in a nested schema"""
    if isinstance(node, dict):
        yield node
        for value in node.values():
            yield from _walk(value)
    elif isinstance(node, list):
        for value in node:
            yield from _walk(value)


class TestToolToJsonSchema:
    def test_http_request_scenario(self, registry, http_request_definition):
        tool = registry.register(http_request_definition)

        schema = tool_to_json_schema(tool)

        assert schema["name"] == "httpRequest"
        assert schema["description"] == "Make an HTTP request to an external API"
        assert schema["parameters"]["type"] == "object"
        assert schema["parameters"]["properties"]["url"]["type"] == "string"
        assert schema["parameters"]["properties"]["method"]["enum"] == ["GET", "POST"]
        assert schema["parameters"]["required"] == ["url", "method"]
        assert "returns" not in schema

    def test_absent_optional_fields_are_omitted(self, http_request_definition):
        schema = tool_to_json_schema(validate_tool(http_request_definition))

        assert schema["parameters"]["properties"]["url"] == {
            "type": "string",
            "description": "The URL to send the request to",
        }

    def test_nested_chain_preserves_constraints(self, nested_tool_definition):
        schema = tool_to_json_schema(validate_tool(nested_tool_definition))

        payload = schema["parameters"]["properties"]["payload"]
        assert payload["type"] == "object"
        assert payload["required"] == ["records"]
        assert payload["additionalProperties"] is False

        records = payload["properties"]["records"]
        assert records["type"] == "array"
        assert records["minItems"] == 1
        assert records["uniqueItems"] is True
        assert "maxItems" not in records
        assert "default" not in records

        record = records["items"]
        assert record["type"] == "object"
        assert record["required"] == ["id"]
        assert "additionalProperties" not in record

        assert record["properties"]["id"] == {
            "type": "string",
            "description": "Record id",
            "maxLength": 36,
            "pattern": "^[a-z0-9-]+$",
        }
        assert record["properties"]["score"] == {
            "type": "number",
            "description": "Relevance score",
            "minimum": 0,
            "maximum": 1,
        }
        assert record["properties"]["active"] == {
            "type": "boolean",
            "description": "Whether the record is active",
            "default": True,
        }

        assert all(value is not None for node in _walk(schema) for value in node.values())

    def test_required_parameters_copied_verbatim(self):
        tool = validate_tool({
            "name": "loose",
            "description": "Unchecked required list",
            "requiredParameters": ["ghost", "phantom"],
        })

        schema = tool_to_json_schema(tool)

        assert schema["parameters"] == {"type": "object", "properties": {}, "required": ["ghost", "phantom"]}

    def test_returns_is_converted(self):
        tool = validate_tool({
            "name": "stats",
            "description": "Compute statistics",
            "returns": {
                "name": "result",
                "description": "Statistics",
                "type": "object",
                "properties": {
                    "mean": {"name": "mean", "description": "Mean", "type": "number"},
                },
                "required": True,
            },
        })

        schema = tool_to_json_schema(tool)

        assert schema["returns"] == {
            "type": "object",
            "description": "Statistics",
            "properties": {"mean": {"type": "number", "description": "Mean"}},
        }

    def test_conversion_is_idempotent(self, nested_tool_definition):
        tool = validate_tool(nested_tool_definition)

        assert tool_to_json_schema(tool) == tool_to_json_schema(tool)

    def test_output_does_not_alias_input(self):
        tool = validate_tool({
            "name": "defaults",
            "description": "Tool with mutable defaults",
            "parameters": {
                "options": {
                    "name": "options",
                    "description": "Options",
                    "type": "object",
                    "default": {"retries": [1, 2]},
                },
                "mode": {
                    "name": "mode",
                    "description": "Mode",
                    "type": "string",
                    "enum": ["fast", "slow"],
                },
            },
            "requiredParameters": ["mode"],
        })

        schema = tool_to_json_schema(tool)
        schema["parameters"]["properties"]["options"]["default"]["retries"].append(3)
        schema["parameters"]["properties"]["mode"]["enum"].append("broken")
        schema["parameters"]["required"].append("options")

        assert tool.parameters["options"].default == {"retries": [1, 2]}
        assert tool.parameters["mode"].enum == ["fast", "slow"]
        assert tool.required_parameters == ["mode"]

    def test_property_order_is_preserved(self):
        tool = validate_tool({
            "name": "ordered",
            "description": "Ordered parameters",
            "parameters": {
                name: {"name": name, "description": "", "type": "string"}
                for name in ["zeta", "alpha", "mid"]
            },
        })

        assert list(tool_to_json_schema(tool)["parameters"]["properties"]) == ["zeta", "alpha", "mid"]


class TestParameterToJsonSchema:
    @pytest.mark.parametrize(
        "definition,expected_extra",
        [
            (
                {"type": "string", "format": "date-time", "minLength": 0, "default": ""},
                {"format": "date-time", "minLength": 0, "default": ""},
            ),
            (
                {"type": "number", "multipleOf": 0.5, "format": "double", "default": 0},
                {"multipleOf": 0.5, "format": "double", "default": 0},
            ),
            ({"type": "boolean", "default": False}, {"default": False}),
            (
                {
                    "type": "array",
                    "items": {"name": "n", "description": "Number", "type": "number"},
                    "maxItems": 3,
                    "default": [],
                },
                {"items": {"type": "number", "description": "Number"}, "maxItems": 3, "default": []},
            ),
        ],
    )
    def test_variant_fields(self, definition, expected_extra):
        param = validate_parameter({"name": "p", "description": "Param", **definition})

        assert parameter_to_json_schema(param) == {
            "type": definition["type"],
            "description": "Param",
            **expected_extra,
        }

    def test_falsy_present_values_are_kept(self):
        param = validate_parameter({
            "name": "flag",
            "description": "",
            "type": "object",
            "properties": {},
            "additionalProperties": False,
            "default": {},
        })

        assert parameter_to_json_schema(param) == {
            "type": "object",
            "description": "",
            "properties": {},
            "additionalProperties": False,
            "default": {},
        }


class TestProviderFormats:
    def test_openai_function(self, http_request_definition):
        tool = validate_tool(http_request_definition)

        result = tool_to_openai_function(tool)

        assert result["type"] == "function"
        assert result["function"]["name"] == "httpRequest"
        assert result["function"]["parameters"] == tool_to_json_schema(tool)["parameters"]

    def test_anthropic_tool(self, http_request_definition):
        tool = validate_tool(http_request_definition)

        result = tool_to_anthropic_tool(tool)

        assert set(result) == {"name", "description", "input_schema"}
        assert result["input_schema"]["required"] == ["url", "method"]

    def test_registry_to_json_schemas(self, registry, sample_tools):
        registry.register_many(sample_tools)

        assert [s["name"] for s in registry_to_json_schemas(registry)] == [
            "search", "fetch", "summarize", "translate", "classify"
        ]
        assert [s["name"] for s in registry_to_json_schemas(registry, tag="web")] == ["search", "fetch"]
        assert registry_to_json_schemas(registry, tag="unknown") == []
