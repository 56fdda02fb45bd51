from agent_node_toolkit.models.parameter import ObjectParameter
from agent_node_toolkit.services.builtin_tools import (
    BUILTIN_TOOLS,
    HTTP_REQUEST_TOOL,
    get_builtin_tool,
    register_builtin_tools,
)
from agent_node_toolkit.services.schema_converter import tool_to_json_schema


class TestBuiltinTools:
    def test_builtin_tool_names(self):
        assert [t.name for t in BUILTIN_TOOLS] == [
            "httpRequest", "databaseQuery", "fileOperation", "weatherInfo"
        ]

    def test_builtin_tags(self):
        tags = {t.name: t.tags for t in BUILTIN_TOOLS}

        assert tags["httpRequest"] == ["http", "api", "external"]
        assert tags["databaseQuery"] == ["database", "sql", "data"]
        assert tags["fileOperation"] == ["file", "filesystem", "io"]
        assert tags["weatherInfo"] == ["weather", "external", "api"]

    def test_required_parameters_are_declared(self):
        for tool in BUILTIN_TOOLS:
            assert tool.required_parameters
            assert all(name in tool.parameters for name in tool.required_parameters)

    def test_every_builtin_has_object_returns(self):
        for tool in BUILTIN_TOOLS:
            assert isinstance(tool.returns, ObjectParameter)
            assert tool.returns.required_properties

    def test_http_request_schema(self):
        schema = tool_to_json_schema(HTTP_REQUEST_TOOL)

        assert schema["parameters"]["required"] == ["url", "method"]
        assert schema["parameters"]["properties"]["url"]["format"] == "uri"
        assert "POST" in schema["parameters"]["properties"]["method"]["enum"]
        assert schema["returns"]["required"] == ["statusCode", "headers", "body"]

    def test_get_builtin_tool(self):
        assert get_builtin_tool("weatherInfo").name == "weatherInfo"
        assert get_builtin_tool("missing") is None

    def test_register_builtin_tools(self, registry):
        registered = register_builtin_tools(registry)

        assert len(registered) == 4
        assert registry.size == 4
        assert [t.name for t in registry.get_by_tag("external")] == ["httpRequest", "weatherInfo"]

    def test_register_builtin_tools_skips_existing(self, registry, tool_factory):
        registry.register(tool_factory("httpRequest", ["custom"]))

        registered = register_builtin_tools(registry)

        assert [t.name for t in registered] == ["databaseQuery", "fileOperation", "weatherInfo"]
        assert registry.get("httpRequest").tags == ["custom"]
        assert register_builtin_tools(registry) == []
