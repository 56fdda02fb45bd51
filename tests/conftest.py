"""
Test configuration and shared fixtures for Agent Node Toolkit tests.
"""

import pytest

from agent_node_toolkit.services.registry import ToolRegistry, teardown_default_registry


@pytest.fixture
def registry():
    """Clean, isolated tool registry"""
    return ToolRegistry()


@pytest.fixture(autouse=True)
def reset_default_registry():
    """Make sure no test leaks the process-wide default registry"""
    teardown_default_registry()
    yield
    teardown_default_registry()


@pytest.fixture
def http_request_definition():
    """Raw httpRequest tool definition as it would arrive from JSON"""
    return {
        "name": "httpRequest",
        "description": "Make an HTTP request to an external API",
        "parameters": {
            "url": {
                "name": "url",
                "description": "The URL to send the request to",
                "type": "string",
                "required": True,
            },
            "method": {
                "name": "method",
                "description": "The HTTP method to use",
                "type": "string",
                "required": True,
                "enum": ["GET", "POST"],
            },
        },
        "requiredParameters": ["url", "method"],
        "tags": ["http", "api"],
    }


def _make_tool(name, tags=None, **extra):
    definition = {
        "name": name,
        "description": f"{name} description",
        "parameters": {
            "input": {"name": "input", "description": "Input value", "type": "string"},
        },
        "tags": tags or [],
    }
    definition.update(extra)
    return definition


@pytest.fixture
def tool_factory():
    """Factory for minimal raw tool definitions"""
    return _make_tool


@pytest.fixture
def sample_tools():
    """Five tools spread across three tags"""
    return [
        _make_tool("search", ["query", "web"]),
        _make_tool("fetch", ["web"]),
        _make_tool("summarize", ["text"]),
        _make_tool("translate", ["text", "query"]),
        _make_tool("classify", ["text"]),
    ]


@pytest.fixture
def nested_tool_definition():
    """Tool with an object -> array -> object parameter chain"""
    return {
        "name": "bulkUpsert",
        "description": "Insert or update records in bulk",
        "parameters": {
            "payload": {
                "name": "payload",
                "description": "Upsert payload",
                "type": "object",
                "required": ["records"],
                "additionalProperties": False,
                "properties": {
                    "records": {
                        "name": "records",
                        "description": "Records to write",
                        "type": "array",
                        "minItems": 1,
                        "uniqueItems": True,
                        "items": {
                            "name": "record",
                            "description": "A single record",
                            "type": "object",
                            "properties": {
                                "id": {
                                    "name": "id",
                                    "description": "Record id",
                                    "type": "string",
                                    "pattern": "^[a-z0-9-]+$",
                                    "maxLength": 36,
                                },
                                "score": {
                                    "name": "score",
                                    "description": "Relevance score",
                                    "type": "number",
                                    "minimum": 0,
                                    "maximum": 1,
                                },
                                "active": {
                                    "name": "active",
                                    "description": "Whether the record is active",
                                    "type": "boolean",
                                    "default": True,
                                },
                            },
                            "required": ["id"],
                        },
                    },
                },
            },
        },
        "requiredParameters": ["payload"],
        "tags": ["data"],
    }
